"""SQLAlchemy adapter that runs lifecycle hooks before writing rows."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from password_guard.application.ports.lifecycle_hook_port import UpdateIntent
from password_guard.application.services.record_lifecycle import RecordLifecycle
from password_guard.domain.record_fields import Record

logger = logging.getLogger(__name__)


class SqlAlchemyRecordRepository:
    """Insert/update rows of one table after its lifecycle hooks have run.

    Hooks receive a copy of the caller's values; the statement is only built
    from that copy once every hook has returned, so a failing hook leaves the
    table untouched.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        table: sa.Table,
        lifecycle: RecordLifecycle,
        primary_key: str = "id",
    ) -> None:
        self._session_factory = session_factory
        self._table = table
        self._lifecycle = lifecycle
        self._primary_key = table.c[primary_key]

    async def get(self, *, record_id: object) -> dict[str, object] | None:
        """Return one row by primary key."""

        statement = sa.select(*self._table.c).where(self._primary_key == record_id).limit(1)

        async with self._session_factory() as session:
            result = await session.execute(statement)

        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def insert(self, values: Mapping[str, object]) -> dict[str, object]:
        """Run insert hooks, insert the row and return it as stored."""

        record: Record = dict(values)
        await self._lifecycle.before_insert(record)

        statement = sa.insert(self._table).values(**record).returning(*self._table.c)
        async with self._session_factory() as session:
            result = await session.execute(statement)
            row = result.mappings().one()
            await session.commit()

        logger.info(
            "record_inserted record_type=%s record_id=%s",
            self._lifecycle.record_type,
            row[self._primary_key.name],
        )
        return dict(row)

    async def patch(
        self,
        *,
        record_id: object,
        values: Mapping[str, object],
    ) -> dict[str, object] | None:
        """Update only the given columns of one row and return the refreshed row."""

        record: Record = dict(values)
        await self._lifecycle.before_update(record, UpdateIntent.patch(values.keys()))
        return await self._write_update(record_id=record_id, record=record)

    async def update(
        self,
        *,
        record_id: object,
        values: Mapping[str, object],
    ) -> dict[str, object] | None:
        """Replace every non-key column of one row; missing columns become NULL."""

        record: Record = dict(values)
        await self._lifecycle.before_update(record, UpdateIntent.replace(values.keys()))
        replacement = {
            column.name: record.get(column.name)
            for column in self._table.c
            if column is not self._primary_key
        }
        return await self._write_update(record_id=record_id, record=replacement)

    async def _write_update(
        self,
        *,
        record_id: object,
        record: Mapping[str, object],
    ) -> dict[str, object] | None:
        if not record:
            return await self.get(record_id=record_id)

        statement = (
            sa.update(self._table)
            .where(self._primary_key == record_id)
            .values(**record)
            .returning(*self._table.c)
        )
        async with self._session_factory() as session:
            result = await session.execute(statement)
            row = result.mappings().first()
            await session.commit()

        if row is None:
            return None
        logger.info(
            "record_updated record_type=%s record_id=%s columns=%s",
            self._lifecycle.record_type,
            record_id,
            ",".join(sorted(record)),
        )
        return dict(row)
