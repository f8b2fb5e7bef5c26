from __future__ import annotations

import logging

import pytest

from password_guard.infrastructure.logging import configure_logging


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("", logging.INFO), ("nope", logging.INFO)],
)
def test_configure_logging_resolves_level(
    monkeypatch: pytest.MonkeyPatch,
    level: str,
    expected: int,
) -> None:
    captured: dict[str, object] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging(level=level)

    assert captured["level"] == expected
    assert captured["format"] == "%(asctime)s %(levelname)s [%(name)s] %(message)s"
