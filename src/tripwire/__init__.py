"""Checks that abort a test at the first failure, and a driver that reports it."""

from tripwire.assertions import (
    ExpectedException,
    check_equal,
    check_equal_msg,
    check_fail,
    check_false,
    check_greater_than_or_equal,
    check_less_than_or_equal,
    check_not_equal,
    check_throws,
    check_throws_any,
    check_true,
    throws,
    throws_any,
)
from tripwire.driver import DriverState, SuiteDriver, run_main, run_tests
from tripwire.failure import TestFailure

__all__ = [
    "DriverState",
    "ExpectedException",
    "SuiteDriver",
    "TestFailure",
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
    "run_main",
    "run_tests",
    "throws",
    "throws_any",
]
