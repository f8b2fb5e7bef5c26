"""Bcrypt password hasher adapter."""

from __future__ import annotations

import asyncio

import bcrypt

from password_guard.application.ports.password_hasher_port import PasswordHasherPort


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt, run off the event loop thread."""

    async def hash_password(self, password: str, *, rounds: int) -> str:
        return await asyncio.to_thread(_hash, password, rounds)

    async def verify_password(self, *, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(_verify, password, password_hash)


def _hash(password: str, rounds: int) -> str:
    encoded = password.encode("utf-8")
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def _verify(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
