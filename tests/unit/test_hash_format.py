from __future__ import annotations

import pytest

from password_guard.domain.hash_format import is_hash_format

KNOWN_HASH = "$2a$12$sWSdI13BJ5ipPca/f8KTF.k4eFKsUtobfWdTBoQdj9g9I8JfLmZty"


@pytest.mark.parametrize("variant", ["2a", "2b", "2y"])
def test_known_variants_are_recognized(variant: str) -> None:
    assert is_hash_format(f"${variant}$12$" + "A" * 53) is True


def test_real_hash_is_recognized() -> None:
    assert is_hash_format(KNOWN_HASH) is True


@pytest.mark.parametrize(
    "candidate",
    [
        "hello world",
        "",
        "hunter1",
        "$2x$12$" + "A" * 53,
        "$2a$1$" + "A" * 54,
        "$2a$123$" + "A" * 52,
        "$2a$12$" + "A" * 52,
        "$2a$12$" + "A" * 54,
        "$2a$12$" + "A" * 52 + "!",
        " " + KNOWN_HASH,
        KNOWN_HASH + "\n",
        "prefix" + KNOWN_HASH,
    ],
)
def test_non_hash_strings_are_rejected(candidate: str) -> None:
    assert is_hash_format(candidate) is False


@pytest.mark.parametrize("candidate", [None, 42, b"$2a$12$" + b"A" * 53])
def test_non_string_values_are_rejected(candidate: object) -> None:
    assert is_hash_format(candidate) is False
