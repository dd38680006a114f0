"""The logger and the options that configure it."""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field, replace
from typing import Any, Callable, Iterable

from blink.handlers import HandlerMux, HandlerMuxBuilder
from blink.hooks import HookMux, HookMuxBuilder
from blink.models import Field, Level, RecordBuilder
from blink.tooling import caller


@dataclass
class Logger:
    """Filters records by level and passes them to hooks, then handlers."""

    level: Level = Level.DEBUG
    fields: tuple[Field, ...] = ()
    hook_mux: HookMux = dc_field(default_factory=HookMux)
    handler_mux: HandlerMux = dc_field(default_factory=HandlerMux)

    def with_field(self, field: Field) -> Logger:
        """Return a copy of this logger carrying one more field."""
        return replace(self, fields=(*self.fields, field))

    def with_fields(self, fields: Iterable[Field]) -> Logger:
        """Return a copy of this logger carrying the extra fields."""
        return replace(self, fields=(*self.fields, *fields))

    def log(self, level: Level, message: str, *fields: Field) -> None:
        """Build a record and dispatch it, unless ``level`` is below the logger's."""
        if level < self.level:
            return
        record = (
            RecordBuilder()
            .level(level)
            .message(message)
            .fields((*self.fields, *fields))
            .caller(caller(3))
            .build()
        )
        self.hook_mux.apply(record)
        self.handler_mux.apply(record)

    def debug(self, message: str, *fields: Field) -> None:
        self.log(Level.DEBUG, message, *fields)

    def info(self, message: str, *fields: Field) -> None:
        self.log(Level.INFO, message, *fields)

    def warn(self, message: str, *fields: Field) -> None:
        self.log(Level.WARN, message, *fields)

    def error(self, message: str, *fields: Field) -> None:
        self.log(Level.ERROR, message, *fields)


Option = Callable[[Logger], None]


def new_logger(*options: Option) -> Logger:
    """Create a logger and apply each option to it in turn."""
    logger = Logger()
    for option in options:
        option(logger)
    return logger


def with_level(level: Level) -> Option:
    """Set the minimum level that gets logged."""

    def apply(logger: Logger) -> None:
        logger.level = level

    return apply


def with_field(field: Field) -> Option:
    """Replace the logger's fields with this single field."""

    def apply(logger: Logger) -> None:
        logger.fields = (field,)

    return apply


def with_fields(*fields: Field) -> Option:
    """Replace the logger's fields with these fields."""

    def apply(logger: Logger) -> None:
        logger.fields = tuple(fields)

    return apply


def with_handler(handler: Any) -> Option:
    """Replace the logger's handlers with this single handler."""

    def apply(logger: Logger) -> None:
        logger.handler_mux = HandlerMuxBuilder().with_handler(handler).build()

    return apply


def with_hook(hook: Any) -> Option:
    """Replace the logger's hooks with this single hook."""

    def apply(logger: Logger) -> None:
        logger.hook_mux = HookMuxBuilder().with_hook(hook).build()

    return apply