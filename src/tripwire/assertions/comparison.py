"""Value checks: equality, inequality, truth and ordering.

Every check receives its arguments already evaluated, so each argument
expression runs exactly once. Messages are only built when a check fails.
The optional ``exprs`` keyword replaces the argument texts recovered from
the call's source.
"""

from __future__ import annotations

from typing import Any, NoReturn, Sequence

from tripwire.assertions.base import expression_texts, fail_at
from tripwire.callsite import CallSite, capture
from tripwire.formatting import format_value

_PAIR = ("value1", "value2")
_BOUND = ("statement", "bound")


def _equal_failed(
    site: CallSite,
    value1: Any,
    value2: Any,
    texts: Sequence[str],
    note: str | None = None,
) -> NoReturn:
    text1, text2 = texts
    suffix = f" ({note})" if note is not None else ""
    fail_at(
        site,
        f"Equality test failed: {text1} != {text2}{suffix}\n"
        f"{text1} = {format_value(value1)}\n"
        f"{text2} = {format_value(value2)}",
    )


def check_equal(
    value1: Any, value2: Any, *, exprs: Sequence[str] | None = None
) -> None:
    """Check that the two values are equal."""
    site = capture(1)
    if value1 != value2:
        texts = expression_texts(site, _PAIR, (value1, value2), exprs)
        _equal_failed(site, value1, value2, texts)


def check_equal_msg(
    value1: Any, value2: Any, note: str, *, exprs: Sequence[str] | None = None
) -> None:
    """Check that the two values are equal, adding ``note`` to the failure message."""
    site = capture(1)
    if value1 != value2:
        texts = expression_texts(site, _PAIR, (value1, value2), exprs)
        _equal_failed(site, value1, value2, texts, note)


def check_not_equal(
    value1: Any, value2: Any, *, exprs: Sequence[str] | None = None
) -> None:
    """Check that the two values are not equal."""
    site = capture(1)
    if value1 == value2:
        text1, text2 = expression_texts(site, _PAIR, (value1, value2), exprs)
        fail_at(
            site,
            f"Inequality test failed: {text1} == {text2} (== {format_value(value1)})",
        )


def _truth(
    site: CallSite, value: Any, expected: bool, exprs: Sequence[str] | None
) -> None:
    # Plain equality: 1 passes check_true, and failures use the equality message.
    if value != expected:
        (text,) = expression_texts(site, ("value",), (value,), exprs)
        _equal_failed(site, value, expected, (text, format_value(expected)))


def check_true(value: Any, *, exprs: Sequence[str] | None = None) -> None:
    """Check that the value equals True."""
    _truth(capture(1), value, True, exprs)


def check_false(value: Any, *, exprs: Sequence[str] | None = None) -> None:
    """Check that the value equals False."""
    _truth(capture(1), value, False, exprs)


def _compare_failed(
    site: CallSite,
    operator: str,
    statement: Any,
    bound: Any,
    exprs: Sequence[str] | None,
) -> NoReturn:
    text1, text2 = expression_texts(site, _BOUND, (statement, bound), exprs)
    fail_at(
        site,
        f"Comparison failed: {text1} {operator} {text2}\n"
        f"{text1} = {format_value(statement)}\n"
        f"{text2} = {format_value(bound)}",
    )


def check_greater_than_or_equal(
    statement: Any, bound: Any, *, exprs: Sequence[str] | None = None
) -> None:
    """Check that the statement's value is greater than or equal to ``bound``."""
    site = capture(1)
    if statement < bound:
        _compare_failed(site, "<", statement, bound, exprs)


def check_less_than_or_equal(
    statement: Any, bound: Any, *, exprs: Sequence[str] | None = None
) -> None:
    """Check that the statement's value is less than or equal to ``bound``."""
    site = capture(1)
    if statement > bound:
        _compare_failed(site, ">", statement, bound, exprs)


def check_fail(message: str) -> NoReturn:
    """Fail unconditionally with ``message``."""
    fail_at(capture(1), message)
