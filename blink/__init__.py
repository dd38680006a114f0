"""Structured logging with pluggable formatters, handlers and level hooks."""

__version__ = "0.1.0"
__all__ = ["cli", "formatters", "handlers", "hooks", "logger", "models", "tooling"]