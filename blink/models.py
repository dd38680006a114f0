"""Core data types: severity levels, structured fields and log records."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Iterable, Mapping


class Level(enum.IntEnum):
    """Severity of a log record, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Field:
    """A key/value pair attached to a log record."""

    key: str
    value: Any


def string_field(key: str, val: str) -> Field:
    """Create a field holding a string."""
    return Field(key, val)


def int_field(key: str, val: int) -> Field:
    """Create a field holding an integer."""
    return Field(key, val)


def bool_field(key: str, val: bool) -> Field:
    """Create a field holding a boolean."""
    return Field(key, val)


def map_field(key: str, val: Mapping[str, Any]) -> Field:
    """Create a field holding a mapping."""
    return Field(key, val)


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class Record:
    """A single log event as passed to hooks, handlers and formatters."""

    level: Level = Level.DEBUG
    message: str = ""
    caller: str = ""
    reference_id: str = ""
    fields: tuple[Field, ...] = ()
    timestamp: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class RecordBuilder:
    """Immutable builder for records; every setter returns a new builder.

    A fresh builder stamps its record with the current local time.
    """

    _record: Record = field(default_factory=Record)

    def level(self, level: Level) -> RecordBuilder:
        return RecordBuilder(replace(self._record, level=level))

    def message(self, msg: str) -> RecordBuilder:
        return RecordBuilder(replace(self._record, message=msg))

    def reference_id(self, ref_id: str) -> RecordBuilder:
        return RecordBuilder(replace(self._record, reference_id=ref_id))

    def caller(self, caller: str) -> RecordBuilder:
        return RecordBuilder(replace(self._record, caller=caller))

    def fields(self, fields: Iterable[Field]) -> RecordBuilder:
        return RecordBuilder(replace(self._record, fields=tuple(fields)))

    def timestamp(self, ts: datetime) -> RecordBuilder:
        return RecordBuilder(replace(self._record, timestamp=ts))

    def build(self) -> Record:
        return self._record