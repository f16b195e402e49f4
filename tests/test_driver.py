"""Tests for the suite driver."""

import inspect
import io
import logging

import pytest

from tripwire.assertions.comparison import check_equal, check_fail
from tripwire.assertions.exceptions import check_throws
from tripwire.driver import DriverState, SuiteDriver, run_main, run_tests

FAIL_LINE = None


def equality_pass():
    check_equal(1, 1)


def equality_fail():
    global FAIL_LINE
    FAIL_LINE = inspect.currentframe().f_lineno + 1
    check_equal(1, 2)


def custom_failure():
    check_fail("custom message")


def wrong_kind():
    def statement():
        raise KeyError("other")

    check_throws(statement, ValueError)


def raises_runtime_error():
    raise RuntimeError("database unavailable")


def raises_empty_error():
    raise ValueError()


def raises_base_exception():
    raise KeyboardInterrupt()


def _run(routines, name="Sample"):
    out = io.StringIO()
    driver = SuiteDriver(name, routines, stream=out)
    status = driver.run()
    return driver, status, out.getvalue().splitlines()


# --- passing runs ---


def test_all_passing_routines():
    driver, status, lines = _run([equality_pass, equality_pass])
    assert status == 0
    assert driver.state is DriverState.PASSED
    assert lines == ["Test started: Sample", "Test finished"]


def test_empty_sequence_passes():
    driver, status, lines = _run([])
    assert status == 0
    assert lines == ["Test started: Sample", "Test finished"]


# --- failing runs ---


def test_check_failure_reported_with_location():
    driver, status, lines = _run([equality_pass, equality_fail])
    assert status == 1
    assert driver.state is DriverState.FAILED
    assert lines[0] == "Test started: Sample"
    assert lines[1] == "Test has failed:"
    assert lines[2].startswith("File: ") and lines[2].endswith("test_driver.py")
    assert lines[3] == f"Line: {FAIL_LINE}"
    assert lines[4] == "Function: equality_fail"
    report = "\n".join(lines[5:])
    assert "1" in report and "2" in report
    assert "Test finished" not in lines


def test_failure_aborts_remaining_routines():
    ran = []
    driver, status, _ = _run([equality_fail, lambda: ran.append("later")])
    assert status == 1
    assert ran == []


def test_custom_failure_message_is_verbatim():
    _, status, lines = _run([custom_failure])
    assert status == 1
    assert lines[-1] == "custom message"
    assert lines[4] == "Function: custom_failure"


def test_wrong_exception_kind_reported():
    _, status, lines = _run([wrong_kind])
    assert status == 1
    report = "\n".join(lines)
    assert "ValueError" in report
    assert "KeyError: 'other'" in report


def test_unexpected_exception_reports_its_message():
    _, status, lines = _run([raises_runtime_error])
    assert status == 1
    assert lines == [
        "Test started: Sample",
        "Test has failed, an exception was thrown: database unavailable",
    ]


def test_unexpected_exception_without_message_reports_type():
    _, status, lines = _run([raises_empty_error])
    assert status == 1
    assert lines[-1] == "Test has failed, an exception was thrown: ValueError"


def test_unknown_exception_reports_generic_notice():
    driver, status, lines = _run([raises_base_exception])
    assert status == 1
    assert driver.state is DriverState.FAILED
    assert lines[-1] == "Test has failed, an unhandled exception was thrown."


# --- driver contract ---


def test_driver_runs_only_once():
    driver, _, _ = _run([equality_pass])
    with pytest.raises(RuntimeError, match="already been run"):
        driver.run()


def test_non_callable_routine_rejected():
    out = io.StringIO()
    with pytest.raises(TypeError):
        SuiteDriver("Sample", [equality_pass, "not a routine"], stream=out)
    assert out.getvalue() == ""


def test_routines_run_in_order():
    order = []
    _run([lambda: order.append(1), lambda: order.append(2), lambda: order.append(3)])
    assert order == [1, 2, 3]


def test_default_stream_is_stdout(capsys):
    status = run_tests("Stdout", [equality_pass])
    assert status == 0
    assert capsys.readouterr().out == "Test started: Stdout\nTest finished\n"


def test_run_main_exits_with_status(capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main("Main", equality_pass, equality_fail)
    assert exc_info.value.code == 1
    assert "Function: equality_fail" in capsys.readouterr().out


def test_driver_logs_progress(caplog):
    with caplog.at_level(logging.DEBUG, logger="tripwire"):
        _run([equality_pass, raises_runtime_error])
    messages = [r.getMessage() for r in caplog.records]
    assert any("Starting test 'Sample'" in m for m in messages)
    assert any("equality_pass" in m for m in messages)
    assert any(r.exc_info for r in caplog.records)


def test_driver_uses_given_logger(mocker):
    logger = mocker.Mock(spec=logging.Logger)
    run_tests("Sample", [equality_pass], stream=io.StringIO(), logger=logger)
    assert logger.debug.called
