"""Handlers that deliver formatted records to their destinations."""

from __future__ import annotations

import io
import sys
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TextIO, BinaryIO

from blink.formatters import Formatter
from blink.models import Record


class Handler(ABC):
    """Receives every record that passes the logger's level filter."""

    @abstractmethod
    def handle(self, record: Record) -> None:
        """Deliver ``record``."""


def _is_handler(obj: Any) -> bool:
    return callable(getattr(obj, "handle", None))


class ConsoleHandler(Handler):
    """Writes formatted records to a stream, standard output by default.

    Each record is written and flushed under a lock, so lines from
    concurrent threads never interleave.
    """

    def __init__(
        self, formatter: Formatter, stream: TextIO | BinaryIO | None = None
    ) -> None:
        self._formatter = formatter
        self._stream = stream if stream is not None else sys.stdout
        self._binary = isinstance(self._stream, (io.RawIOBase, io.BufferedIOBase))
        self._lock = threading.Lock()

    def handle(self, record: Record) -> None:
        data = self._formatter.format(record)
        with self._lock:
            if self._binary:
                self._stream.write(data)
            else:
                self._stream.write(data.decode("utf-8"))
            self._stream.flush()


@dataclass(frozen=True)
class HandlerMux:
    """Dispatches a record to each of its handlers in order."""

    handlers: tuple[Handler, ...] = ()

    def apply(self, record: Record) -> None:
        for handler in self.handlers:
            handler.handle(record)


class HandlerMuxBuilder:
    """Collects handlers for a :class:`HandlerMux`.

    Objects without a callable ``handle`` method are silently ignored.
    """

    def __init__(self) -> None:
        self._handlers: list[Handler] = []

    def with_handler(self, handler: Any) -> HandlerMuxBuilder:
        if _is_handler(handler):
            self._handlers.append(handler)
        return self

    def build(self) -> HandlerMux:
        return HandlerMux(tuple(self._handlers))