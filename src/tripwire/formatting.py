"""Rendering of values and exceptions for failure messages."""

from __future__ import annotations

from typing import Any


def format_value(value: Any) -> str:
    """Render a value for a failure message."""
    return repr(value)


def kind_name(kind: type[BaseException] | tuple[type[BaseException], ...]) -> str:
    """Name of an exception class, or of each class in a tuple joined by "or"."""
    if isinstance(kind, tuple):
        return " or ".join(kind_name(k) for k in kind)
    return getattr(kind, "__name__", None) or repr(kind)


def describe_exception(exc: BaseException) -> str:
    """Describe an exception as ``TypeName: message`` (just the name if empty)."""
    name = type(exc).__name__
    text = str(exc)
    return f"{name}: {text}" if text else name
