"""The failure signal raised by every check in tripwire."""

from __future__ import annotations


class TestFailure(BaseException):
    """Raised when a check fails.

    It derives from ``BaseException`` rather than ``Exception`` so that a
    plain ``except Exception`` cannot swallow it by mistake. It has to be
    caught explicitly, which only the exception checks and the driver do.

    Attributes:
        file_name: Source file containing the failed check.
        line_number: Line of the failed check.
        function_name: Function (test routine) containing the failed check.
        message: Fully formatted explanation of the failure.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self, file_name: str, line_number: int, function_name: str, message: str
    ):
        super().__init__(message)
        object.__setattr__(self, "_file_name", file_name)
        object.__setattr__(self, "_line_number", line_number)
        object.__setattr__(self, "_function_name", function_name)
        object.__setattr__(self, "_message", message)

    def __setattr__(self, name: str, value: object) -> None:
        # Exception machinery (tracebacks, chaining, notes) still has to work.
        if name.startswith("__") and name.endswith("__"):
            super().__setattr__(name, value)
            return
        raise AttributeError(f"TestFailure is immutable, cannot set '{name}'")

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def function_name(self) -> str:
        return self._function_name

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return (
            f"TestFailure(file_name={self._file_name!r}, "
            f"line_number={self._line_number!r}, "
            f"function_name={self._function_name!r}, "
            f"message={self._message!r})"
        )
