"""Factories wiring password hooks to the bcrypt adapter."""

from __future__ import annotations

from password_guard.application.ports.password_hasher_port import PasswordHasherPort
from password_guard.application.services.password_hook_service import PasswordHookService
from password_guard.config.settings import Settings
from password_guard.domain.password_policy import RECOMMENDED_ROUNDS, PasswordPolicy
from password_guard.infrastructure.security.password_hasher import BcryptPasswordHasher


def build_password_hooks(
    *,
    allow_empty_password: bool = False,
    password_field: str = "password",
    rounds: int = RECOMMENDED_ROUNDS,
    password_hasher: PasswordHasherPort | None = None,
) -> PasswordHookService:
    """Build password hooks attachable to any record lifecycle."""

    policy = PasswordPolicy(
        allow_empty_password=allow_empty_password,
        password_field=password_field,
        rounds=rounds,
    )
    return PasswordHookService(
        policy=policy,
        password_hasher=password_hasher or BcryptPasswordHasher(),
    )


def build_password_hooks_from_settings(
    settings: Settings,
    *,
    password_hasher: PasswordHasherPort | None = None,
) -> PasswordHookService:
    """Build password hooks from environment-driven settings."""

    policy = settings.to_policy()
    return build_password_hooks(
        allow_empty_password=policy.allow_empty_password,
        password_field=policy.password_field,
        rounds=policy.rounds,
        password_hasher=password_hasher,
    )
