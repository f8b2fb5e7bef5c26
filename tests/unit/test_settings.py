from __future__ import annotations

import pytest
from pydantic import ValidationError

from password_guard.config.settings import Settings
from password_guard.domain.password_policy import PasswordPolicy
from password_guard.infrastructure.security.password_hooks import (
    build_password_hooks,
    build_password_hooks_from_settings,
)

ENV_KEYS = (
    "PASSWORD_FIELD",
    "ALLOW_EMPTY_PASSWORD",
    "PASSWORD_HASH_ROUNDS",
    "DATABASE_URL",
    "LOG_LEVEL",
)


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_are_deterministic(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)

    settings = Settings(_env_file=None)

    assert settings.password_field == "password"
    assert settings.allow_empty_password is False
    assert settings.password_hash_rounds == 12
    assert settings.database_url == "sqlite+aiosqlite:///./password_guard.db"
    assert settings.log_level == "INFO"
    assert settings.to_policy() == PasswordPolicy()


def test_env_overrides_build_matching_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PASSWORD_FIELD", "secret")
    monkeypatch.setenv("ALLOW_EMPTY_PASSWORD", "true")
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "13")

    settings = Settings(_env_file=None)

    assert settings.to_policy() == PasswordPolicy(
        allow_empty_password=True,
        password_field="secret",
        rounds=13,
    )


def test_blank_password_field_raises_validation_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PASSWORD_FIELD", "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.asyncio
async def test_build_password_hooks_defaults_to_bcrypt() -> None:
    service = build_password_hooks(rounds=4)
    record: dict[str, object] = {"password": "hunter1"}

    password_hash = await service.generate_hash(record)

    assert service.policy == PasswordPolicy(rounds=4)
    assert service.is_hash_format(password_hash) is True
    assert await service.verify_password(record, "hunter1") is True


def test_build_password_hooks_from_settings_uses_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")

    service = build_password_hooks_from_settings(Settings(_env_file=None))

    assert service.policy.rounds == 4
