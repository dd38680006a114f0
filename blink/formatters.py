"""Formatters that turn a record into the bytes a handler writes."""

from __future__ import annotations

import json
import math
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping

from blink.models import Level, Record

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _level_name(level: int) -> str:
    try:
        return str(Level(level))
    except ValueError:
        return "unknown"


def _rfc3339(ts: datetime) -> str:
    if ts.utcoffset() is None:
        ts = ts.astimezone()
    base = (
        f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"
        f"T{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
    )
    offset = ts.utcoffset()
    if not offset:
        return base + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, rest = divmod(abs(total), 3600)
    return f"{base}{sign}{hours:02d}:{rest // 60:02d}"


def _format_float(val: float) -> str:
    if math.isnan(val):
        return "NaN"
    if math.isinf(val):
        return "+Inf" if val > 0 else "-Inf"
    if val == 0:
        return "-0" if math.copysign(1.0, val) < 0 else "0"
    negative, digit_tuple, exponent = Decimal(repr(val)).as_tuple()
    digits = "".join(map(str, digit_tuple)).lstrip("0")
    point = len("".join(map(str, digit_tuple))) + exponent
    point -= len("".join(map(str, digit_tuple))) - len(digits)
    digits = digits.rstrip("0")
    exp = point - 1
    sign = "-" if negative else ""
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "+" if exp >= 0 else "-"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    return f"{sign}{digits[:point]}.{digits[point:]}"


def _format_value(val: Any) -> str:
    if isinstance(val, str):
        return val
    if isinstance(val, bool):
        return "true" if val else "false"
    if val is None:
        return "<nil>"
    if isinstance(val, float):
        return _format_float(val)
    if isinstance(val, Mapping):
        items = sorted(val.items(), key=lambda item: str(item[0]))
        inner = " ".join(f"{_format_value(k)}:{_format_value(v)}" for k, v in items)
        return f"map[{inner}]"
    if isinstance(val, (list, tuple)):
        return "[" + " ".join(_format_value(v) for v in val) + "]"
    return str(val)


class Formatter(ABC):
    """Turns a record into bytes."""

    @abstractmethod
    def format(self, record: Record) -> bytes:
        """Return the encoded form of ``record``."""


class JsonFormatter(Formatter):
    """Encodes a record as one compact JSON object per line, keys sorted.

    Returns empty bytes when a field value cannot be encoded.
    """

    def format(self, record: Record) -> bytes:
        payload: dict[str, Any] = {
            "timestamp": _rfc3339(record.timestamp),
            "level": _level_name(record.level),
            "referenceId": record.reference_id,
            "caller": record.caller,
            "message": record.message,
        }
        if record.fields:
            payload["fields"] = {f.key: f.value for f in record.fields}
        try:
            text = json.dumps(
                payload,
                sort_keys=True,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError):
            return b""
        return (text.translate(_JSON_ESCAPES) + "\n").encode("utf-8")


class TextFormatter(Formatter):
    """Encodes a record as a single human-readable line."""

    def format(self, record: Record) -> bytes:
        rendered_fields = "".join(
            f" {f.key}={_format_value(f.value)}" for f in record.fields
        )
        line = (
            f"{_rfc3339(record.timestamp)} {_level_name(record.level)} "
            f"{record.reference_id} {record.caller} [{rendered_fields} ]"
            f" - {record.message}\n"
        )
        return line.encode("utf-8")