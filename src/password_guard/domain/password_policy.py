"""Immutable policy describing how one record type stores its password."""

from __future__ import annotations

from dataclasses import dataclass

from password_guard.domain.record_fields import FieldAccessor

RECOMMENDED_ROUNDS = 12


@dataclass(frozen=True)
class PasswordPolicy:
    """Password field name, empty-password rule and bcrypt cost factor.

    ``rounds`` is not range-checked here; the hasher rejects values it cannot use.
    """

    allow_empty_password: bool = False
    password_field: str = "password"
    rounds: int = RECOMMENDED_ROUNDS

    @property
    def accessor(self) -> FieldAccessor:
        return FieldAccessor(name=self.password_field)
