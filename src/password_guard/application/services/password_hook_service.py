"""Lifecycle hooks that hash a record's password field before it is written."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from password_guard.application.ports.lifecycle_hook_port import HookContext, UpdateIntent
from password_guard.application.ports.password_hasher_port import PasswordHasherPort
from password_guard.domain.errors import DoubleHashError, EmptyPasswordError
from password_guard.domain.hash_format import is_hash_format
from password_guard.domain.password_policy import PasswordPolicy
from password_guard.domain.record_fields import Record

logger = logging.getLogger(__name__)


class PasswordHookService:
    """Hash plaintext passwords on insert/update and verify candidates later."""

    def __init__(self, *, policy: PasswordPolicy, password_hasher: PasswordHasherPort) -> None:
        self._policy = policy
        self._password_hasher = password_hasher
        self._field = policy.accessor

    @property
    def policy(self) -> PasswordPolicy:
        return self._policy

    async def before_insert(self, record: Record, context: HookContext) -> None:
        """Hash the password field of a record about to be inserted."""

        await self._generate_hash(record, record_type=context.record_type)

    async def before_update(
        self,
        record: Record,
        intent: UpdateIntent,
        context: HookContext,
    ) -> None:
        """Hash the password field unless a patch leaves it out of the payload."""

        if intent.is_patch and not self._field.is_present(intent.fields):
            logger.debug(
                "password_hash_skipped record_type=%s field=%s reason=not_in_patch",
                context.record_type,
                self._field.name,
            )
            return
        await self._generate_hash(record, record_type=context.record_type)

    async def generate_hash(self, record: Record) -> str | None:
        """Replace the plaintext password with its hash and return the hash.

        Returns None when the field is empty and empty passwords are allowed;
        the field is then left exactly as submitted.
        """

        return await self._generate_hash(record, record_type=None)

    async def verify_password(self, record: Mapping[str, object], candidate: str) -> bool:
        """Return whether the candidate matches the record's stored hash."""

        stored = self._field.get(record)
        if not isinstance(stored, str) or not stored:
            return False
        return await self._password_hasher.verify_password(
            password=candidate,
            password_hash=stored,
        )

    @staticmethod
    def is_hash_format(candidate: object) -> bool:
        """Return whether the candidate already looks like a bcrypt hash."""

        return is_hash_format(candidate)

    async def _generate_hash(self, record: Record, *, record_type: str | None) -> str | None:
        password = self._field.get(record)

        if password:
            if is_hash_format(password):
                logger.warning(
                    "password_double_hash_rejected record_type=%s field=%s",
                    record_type,
                    self._field.name,
                )
                raise DoubleHashError(field=self._field.name)

            password_hash = await self._password_hasher.hash_password(
                str(password),
                rounds=self._policy.rounds,
            )
            self._field.set(record, password_hash)
            logger.info(
                "password_hash_generated record_type=%s field=%s rounds=%s",
                record_type,
                self._field.name,
                self._policy.rounds,
            )
            return password_hash

        if not self._policy.allow_empty_password:
            raise EmptyPasswordError(field=self._field.name)

        return None
