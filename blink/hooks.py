"""Hooks that observe records before handlers see them.

A hook is any object with one or more of the methods ``on_all``,
``on_debug``, ``on_info``, ``on_warn`` and ``on_error``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, TextIO

from blink.models import Level, Record

_HOOK_METHODS = ("on_all", "on_debug", "on_info", "on_warn", "on_error")

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _quote(text: str) -> str:
    parts = []
    for ch in text:
        code = ord(ch)
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif code < 0x80:
            parts.append(f"\\x{code:02x}")
        elif code < 0x10000:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'


def _level_name(level: int) -> str:
    try:
        return str(Level(level))
    except ValueError:
        return "unknown"


class DefaultHook:
    """Reports every hook invocation as a line on a stream.

    Without a stream, lines go to whatever standard output is at call time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _emit(self, name: str, record: Record) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(
            f"hook triggered: {name} | level={_level_name(record.level)}"
            f" | caller={record.caller} | ref={record.reference_id}"
            f" | msg={_quote(record.message)}\n"
        )

    def on_all(self, record: Record) -> None:
        self._emit("OnAll", record)

    def on_debug(self, record: Record) -> None:
        self._emit("OnDebug", record)

    def on_info(self, record: Record) -> None:
        self._emit("OnInfo", record)

    def on_warn(self, record: Record) -> None:
        self._emit("OnWarn", record)

    def on_error(self, record: Record) -> None:
        self._emit("OnError", record)


@dataclass(frozen=True)
class HookMux:
    """Runs the ``on_all`` hooks, then the hooks for the record's level."""

    all_hooks: tuple[Any, ...] = ()
    debug_hooks: tuple[Any, ...] = ()
    info_hooks: tuple[Any, ...] = ()
    warn_hooks: tuple[Any, ...] = ()
    error_hooks: tuple[Any, ...] = ()

    def apply(self, record: Record) -> None:
        for hook in self.all_hooks:
            hook.on_all(record)

        if record.level == Level.DEBUG:
            for hook in self.debug_hooks:
                hook.on_debug(record)
        elif record.level == Level.INFO:
            for hook in self.info_hooks:
                hook.on_info(record)
        elif record.level == Level.WARN:
            for hook in self.warn_hooks:
                hook.on_warn(record)
        elif record.level == Level.ERROR:
            for hook in self.error_hooks:
                hook.on_error(record)


class HookMuxBuilder:
    """Sorts hooks by the methods they provide and builds a :class:`HookMux`."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[Any]] = {name: [] for name in _HOOK_METHODS}

    def with_hook(self, hook: Any) -> HookMuxBuilder:
        for name, hooks in self._hooks.items():
            if callable(getattr(hook, name, None)):
                hooks.append(hook)
        return self

    def build(self) -> HookMux:
        return HookMux(
            all_hooks=tuple(self._hooks["on_all"]),
            debug_hooks=tuple(self._hooks["on_debug"]),
            info_hooks=tuple(self._hooks["on_info"]),
            warn_hooks=tuple(self._hooks["on_warn"]),
            error_hooks=tuple(self._hooks["on_error"]),
        )