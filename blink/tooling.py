"""Small helpers: call-site lookup and environment access."""

from __future__ import annotations

import os
import sys


def caller(skip: int) -> str:
    """Return ``"file:line"`` for the frame ``skip`` levels above this call.

    ``caller(1)`` names the line that called ``caller``. When the stack is
    not that deep, ``"unknown:0"`` is returned.
    """
    try:
        frame = sys._getframe(skip)
    except ValueError:
        return "unknown:0"
    return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"


def env_or_key(key: str) -> str:
    """Return the environment variable, or ``"$" + key`` if unset or empty."""
    value = os.environ.get(key)
    if value:
        return value
    return "$" + key


def env_or_default(key: str, default_value: str) -> str:
    """Return the environment variable, or ``default_value`` if unset or empty."""
    value = os.environ.get(key)
    if value:
        return value
    return default_value