"""Runs a hand-listed sequence of test routines and turns the outcome into an exit status."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Callable, Iterable, NoReturn, TextIO

from tripwire.failure import TestFailure

LOGGER_NAME = "tripwire"

Routine = Callable[[], object]


class DriverState(str, Enum):
    STARTED = "started"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


class SuiteDriver:
    """Runs test routines in order under a single recovery boundary.

    The first escaping error ends the run. The driver can only run once.
    """

    def __init__(
        self,
        name: str,
        routines: Iterable[Routine],
        stream: TextIO | None = None,
        logger: logging.Logger | None = None,
    ):
        self.name = name
        self.routines = list(routines)
        for routine in self.routines:
            if not callable(routine):
                raise TypeError(f"test routine {routine!r} is not callable")
        self.stream = stream
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.state: DriverState | None = None

    def _emit(self, text: str) -> None:
        print(text, file=self.stream or sys.stdout, flush=True)

    def run(self) -> int:
        """Run every routine, report the outcome and return the exit status."""
        if self.state is not None:
            raise RuntimeError(f"test '{self.name}' has already been run")

        self.state = DriverState.STARTED
        self._emit(f"Test started: {self.name}")
        self.logger.debug(f"Starting test '{self.name}' with {len(self.routines)} routine(s)")

        self.state = DriverState.RUNNING
        try:
            for routine in self.routines:
                self.logger.debug(f"Running {_routine_name(routine)}")
                routine()
        except TestFailure as exc:
            self.state = DriverState.FAILED
            self.logger.debug(
                f"Check failed at {exc.file_name}:{exc.line_number} in {exc.function_name}"
            )
            self._emit(
                f"Test has failed:\n"
                f"File: {exc.file_name}\n"
                f"Line: {exc.line_number}\n"
                f"Function: {exc.function_name}\n"
                f"{exc.message}"
            )
            return 1
        except Exception as exc:
            self.state = DriverState.FAILED
            self.logger.debug("Unexpected exception escaped a test routine", exc_info=exc)
            self._emit(
                f"Test has failed, an exception was thrown: {str(exc) or type(exc).__name__}"
            )
            return 1
        except BaseException as exc:
            self.state = DriverState.FAILED
            self.logger.debug("Unhandled exception escaped a test routine", exc_info=exc)
            self._emit("Test has failed, an unhandled exception was thrown.")
            return 1

        self.state = DriverState.PASSED
        self.logger.debug(f"Test '{self.name}' passed")
        self._emit("Test finished")
        return 0


def _routine_name(routine: Routine) -> str:
    return getattr(routine, "__qualname__", None) or repr(routine)


def run_tests(
    name: str,
    routines: Iterable[Routine],
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> int:
    """Run ``routines`` as the test ``name`` and return 0 (passed) or 1 (failed)."""
    return SuiteDriver(name, routines, stream=stream, logger=logger).run()


def run_main(name: str, *routines: Routine) -> NoReturn:
    """Entry point for a test script::

        if __name__ == "__main__":
            run_main("Arithmetic", test_add, test_overflow)
    """
    sys.exit(run_tests(name, routines))
