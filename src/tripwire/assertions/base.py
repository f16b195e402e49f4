"""Shared helpers for building and raising failures."""

from __future__ import annotations

from typing import Any, NoReturn, Sequence

from tripwire.callsite import CallSite
from tripwire.failure import TestFailure
from tripwire.formatting import format_value


def failure_at(site: CallSite, message: str) -> TestFailure:
    """Build a TestFailure located at ``site``."""
    return TestFailure(site.file_name, site.line_number, site.function_name, message)


def fail_at(site: CallSite, message: str) -> NoReturn:
    """Raise a TestFailure located at ``site``."""
    raise failure_at(site, message)


def expression_texts(
    site: CallSite,
    names: Sequence[str],
    values: Sequence[Any],
    exprs: Sequence[str] | None = None,
) -> list[str]:
    """Text to show for each argument of a failed check.

    Explicit ``exprs`` win, then the source text of the call, then the
    formatted value itself.
    """
    if exprs is not None:
        if len(exprs) != len(names):
            raise ValueError(
                f"exprs must name {len(names)} expression(s), got {len(exprs)}"
            )
        return list(exprs)

    recovered = site.argument_texts(names)
    return [
        text if text is not None else format_value(value)
        for text, value in zip(recovered, values)
    ]
