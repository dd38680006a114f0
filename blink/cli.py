"""Demonstration command that logs a couple of records to the console."""

from __future__ import annotations

from typing import Sequence

from blink.formatters import TextFormatter
from blink.handlers import ConsoleHandler
from blink.hooks import DefaultHook
from blink.logger import new_logger, with_field, with_handler, with_hook, with_level
from blink.models import Level, bool_field, int_field, string_field


def main(argv: Sequence[str] | None = None) -> int:
    """Log a debug and an info record through a text console handler."""
    logger = new_logger(
        with_level(Level.DEBUG),
        with_field(string_field("key", "value")),
        with_handler(ConsoleHandler(TextFormatter())),
        with_hook(DefaultHook()),
    )

    logger.debug("hello world", bool_field("bool", True), int_field("number", 1))
    logger.info("hello world", bool_field("bool", False), int_field("number", 2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())