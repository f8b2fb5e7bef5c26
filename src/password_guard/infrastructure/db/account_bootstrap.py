"""Wire the accounts table to password hooks from runtime settings."""

from __future__ import annotations

from dataclasses import dataclass

from password_guard.application.ports.password_hasher_port import PasswordHasherPort
from password_guard.application.services.password_hook_service import PasswordHookService
from password_guard.application.services.record_lifecycle import RecordLifecycle
from password_guard.config.settings import Settings, load_settings
from password_guard.infrastructure.db.metadata import accounts
from password_guard.infrastructure.db.record_repository import SqlAlchemyRecordRepository
from password_guard.infrastructure.db.session import create_session_factory
from password_guard.infrastructure.logging import configure_logging
from password_guard.infrastructure.security.password_hooks import (
    build_password_hooks_from_settings,
)


@dataclass(frozen=True)
class AccountRuntime:
    """Accounts repository plus the password hooks guarding its writes."""

    repository: SqlAlchemyRecordRepository
    password_hooks: PasswordHookService


def build_account_runtime(
    settings: Settings | None = None,
    *,
    password_hasher: PasswordHasherPort | None = None,
) -> AccountRuntime:
    """Configure logging and build the accounts repository from settings."""

    resolved_settings = settings or load_settings()
    configure_logging(level=resolved_settings.log_level)

    password_hooks = build_password_hooks_from_settings(
        resolved_settings,
        password_hasher=password_hasher,
    )
    lifecycle = RecordLifecycle(record_type=accounts.name).with_hook(password_hooks)
    repository = SqlAlchemyRecordRepository(
        create_session_factory(resolved_settings.database_url),
        table=accounts,
        lifecycle=lifecycle,
    )
    return AccountRuntime(repository=repository, password_hooks=password_hooks)
