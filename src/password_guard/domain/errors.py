"""Errors raised while hashing a record's password field."""

from __future__ import annotations


class PasswordHookError(Exception):
    """Base error for password lifecycle hooks."""


class EmptyPasswordError(PasswordHookError, ValueError):
    """Raised when the password field is empty and empty passwords are not allowed."""

    def __init__(self, *, field: str) -> None:
        super().__init__(f"password must not be empty: {field}")
        self.field = field


class DoubleHashError(PasswordHookError, ValueError):
    """Raised when the password field already holds a bcrypt hash."""

    def __init__(self, *, field: str) -> None:
        super().__init__(f"refusing to hash an existing bcrypt hash: {field}")
        self.field = field
