"""Port for password hashing and verification."""

from __future__ import annotations

from typing import Protocol


class PasswordHasherPort(Protocol):
    """Salted password hashing/verification contract."""

    async def hash_password(self, password: str, *, rounds: int) -> str:
        """Hash plaintext password with a fresh salt at the given cost factor."""

    async def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against stored hash."""
