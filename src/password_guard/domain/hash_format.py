"""Structural recognizer for bcrypt hash strings."""

from __future__ import annotations

import re

BCRYPT_HASH_LENGTH = 60

_BCRYPT_HASH_PATTERN = re.compile(r"\$(2[aby])\$([0-9]{2})\$[A-Za-z0-9./]{53}")


def is_hash_format(candidate: object) -> bool:
    """Return whether the candidate is shaped exactly like a bcrypt hash."""

    if not isinstance(candidate, str) or len(candidate) != BCRYPT_HASH_LENGTH:
        return False
    return _BCRYPT_HASH_PATTERN.fullmatch(candidate) is not None
