"""Checks that a statement throws.

A TestFailure raised inside the statement is never mistaken for the
exception under test: it is a BaseException, it is handled before any other
branch, and it propagates unchanged unless the caller explicitly expects a
TestFailure.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Callable

from tripwire.assertions.base import failure_at
from tripwire.callsite import CallSite, capture
from tripwire.failure import TestFailure
from tripwire.formatting import describe_exception, kind_name

logger = logging.getLogger("tripwire")

ExceptionKind = type[BaseException] | tuple[type[BaseException], ...]


def _validate_kind(kind: Any) -> None:
    kinds = kind if isinstance(kind, tuple) else (kind,)
    if not kinds or not all(
        isinstance(k, type) and issubclass(k, BaseException) for k in kinds
    ):
        raise TypeError(
            f"expected an exception class or a tuple of them, got {kind!r}"
        )


def _validate_statement(statement: Any) -> None:
    if not callable(statement):
        raise TypeError(
            f"statement must be a zero-argument callable, got {statement!r}"
        )


def _failure_expected(exc: TestFailure, kind: ExceptionKind) -> bool:
    kinds = kind if isinstance(kind, tuple) else (kind,)
    return any(issubclass(k, TestFailure) and isinstance(exc, k) for k in kinds)


def _mismatch(site: CallSite, exc: BaseException, kind: ExceptionKind) -> TestFailure:
    if isinstance(exc, Exception):
        return failure_at(
            site,
            f"An unexpected exception was thrown, was expecting type {kind_name(kind)}. "
            f"Exception is: {describe_exception(exc)}",
        )
    return failure_at(
        site,
        f"An unexpected unknown exception object was thrown, was expecting type "
        f"{kind_name(kind)} ({type(exc).__name__})",
    )


def _not_thrown(site: CallSite, kind: ExceptionKind | None) -> TestFailure:
    if kind is None:
        return failure_at(site, "Failed to throw an exception of any type")
    return failure_at(site, f"Failed to throw an exception of type {kind_name(kind)}")


def check_throws(
    statement: Callable[[], Any], kind: ExceptionKind
) -> BaseException:
    """Check that calling ``statement`` raises ``kind`` (or a subclass).

    Returns the caught exception. Any other exception is replaced by a
    TestFailure describing it.
    """
    site = capture(1)
    _validate_kind(kind)
    _validate_statement(statement)
    try:
        statement()
    except TestFailure as exc:
        if not _failure_expected(exc, kind):
            raise
        logger.debug(f"Caught expected {kind_name(kind)} at {site.file_name}:{site.line_number}")
        return exc
    except kind as exc:
        logger.debug(f"Caught expected {kind_name(kind)} at {site.file_name}:{site.line_number}")
        return exc
    except BaseException as exc:
        logger.debug(f"Caught {describe_exception(exc)}, was expecting {kind_name(kind)}")
        raise _mismatch(site, exc, kind) from exc
    raise _not_thrown(site, kind)


def check_throws_any(statement: Callable[[], Any]) -> BaseException:
    """Check that calling ``statement`` raises anything other than a TestFailure.

    Returns the caught exception. A TestFailure from a check inside
    ``statement`` propagates unchanged.
    """
    site = capture(1)
    _validate_statement(statement)
    try:
        statement()
    except TestFailure:
        raise
    except BaseException as exc:
        logger.debug(f"Caught {describe_exception(exc)} at {site.file_name}:{site.line_number}")
        return exc
    raise _not_thrown(site, None)


class ExpectedException:
    """Context manager behind ``throws`` and ``throws_any``.

    After the block, ``value`` holds the caught exception.
    """

    def __init__(self, site: CallSite, kind: ExceptionKind | None):
        self.site = site
        self.kind = kind
        self.value: BaseException | None = None

    def __enter__(self) -> ExpectedException:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None:
            raise _not_thrown(self.site, self.kind)

        if isinstance(exc, TestFailure) and (
            self.kind is None or not _failure_expected(exc, self.kind)
        ):
            return False

        if self.kind is None or isinstance(exc, self.kind):
            logger.debug(
                f"Caught {describe_exception(exc)} at {self.site.file_name}:{self.site.line_number}"
            )
            self.value = exc
            return True

        logger.debug(f"Caught {describe_exception(exc)}, was expecting {kind_name(self.kind)}")
        raise _mismatch(self.site, exc, self.kind) from exc


def throws(kind: ExceptionKind) -> ExpectedException:
    """Context-manager form of ``check_throws``::

        with throws(KeyError):
            lookup["missing"]
    """
    _validate_kind(kind)
    return ExpectedException(capture(1), kind)


def throws_any() -> ExpectedException:
    """Context-manager form of ``check_throws_any``."""
    return ExpectedException(capture(1), None)
