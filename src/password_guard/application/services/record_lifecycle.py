"""Ordered hook chain run before a record type's rows are written."""

from __future__ import annotations

from dataclasses import dataclass

from password_guard.application.ports.lifecycle_hook_port import (
    HookContext,
    LifecycleHookPort,
    UpdateIntent,
)
from password_guard.domain.record_fields import Record


@dataclass(frozen=True)
class RecordLifecycle:
    """Run registered hooks for one record type in registration order.

    Each hook is awaited before the next one starts, so a hook always sees the
    record as left by every hook registered before it.
    """

    record_type: str
    hooks: tuple[LifecycleHookPort, ...] = ()

    def with_hook(self, hook: LifecycleHookPort) -> RecordLifecycle:
        """Return a lifecycle with the hook appended after existing hooks."""

        return RecordLifecycle(record_type=self.record_type, hooks=(*self.hooks, hook))

    async def before_insert(self, record: Record) -> None:
        context = HookContext(record_type=self.record_type, operation="insert")
        for hook in self.hooks:
            await hook.before_insert(record, context)

    async def before_update(self, record: Record, intent: UpdateIntent) -> None:
        context = HookContext(record_type=self.record_type, operation="update")
        for hook in self.hooks:
            await hook.before_update(record, intent, context)
