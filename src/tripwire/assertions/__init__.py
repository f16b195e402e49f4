"""Checks that raise TestFailure when they are violated."""

from tripwire.assertions.comparison import (
    check_equal,
    check_equal_msg,
    check_fail,
    check_false,
    check_greater_than_or_equal,
    check_less_than_or_equal,
    check_not_equal,
    check_true,
)
from tripwire.assertions.exceptions import (
    ExpectedException,
    check_throws,
    check_throws_any,
    throws,
    throws_any,
)

__all__ = [
    "ExpectedException",
    "check_equal",
    "check_equal_msg",
    "check_fail",
    "check_false",
    "check_greater_than_or_equal",
    "check_less_than_or_equal",
    "check_not_equal",
    "check_throws",
    "check_throws_any",
    "check_true",
    "throws",
    "throws_any",
]
