"""Accessor for one named value on a mutable record mapping."""

from __future__ import annotations

from collections.abc import Container, Mapping, MutableMapping
from dataclasses import dataclass

Record = MutableMapping[str, object]


@dataclass(frozen=True)
class FieldAccessor:
    """Getter/setter pair bound to a single record key."""

    name: str

    def get(self, record: Mapping[str, object]) -> object | None:
        return record.get(self.name)

    def set(self, record: Record, value: object) -> None:
        record[self.name] = value

    def is_present(self, fields: Container[str]) -> bool:
        return self.name in fields
