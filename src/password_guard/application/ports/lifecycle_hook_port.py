"""Port for hooks invoked before a record is written."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, Protocol

from password_guard.domain.record_fields import Record

HookOperation = Literal["insert", "update"]


@dataclass(frozen=True)
class HookContext:
    """Execution context handed to every lifecycle hook."""

    record_type: str
    operation: HookOperation


@dataclass(frozen=True)
class UpdateIntent:
    """Describe one update: full replacement or patch, and the payload keys."""

    is_patch: bool
    fields: frozenset[str]

    @classmethod
    def patch(cls, fields: Iterable[str]) -> UpdateIntent:
        return cls(is_patch=True, fields=frozenset(fields))

    @classmethod
    def replace(cls, fields: Iterable[str]) -> UpdateIntent:
        return cls(is_patch=False, fields=frozenset(fields))


class LifecycleHookPort(Protocol):
    """Hook contract awaited by the host before insert/update statements."""

    async def before_insert(self, record: Record, context: HookContext) -> None:
        """Prepare record values before insertion."""

    async def before_update(
        self,
        record: Record,
        intent: UpdateIntent,
        context: HookContext,
    ) -> None:
        """Prepare record values before an update."""
