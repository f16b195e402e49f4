"""Tests for logger setup."""

import logging
from pathlib import Path

from tripwire.verbose import setup_logger


def test_logger_creates_debug_log(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_to_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    handler_types = [type(h).__name__ for h in logger.handlers]
    assert sorted(handler_types) == ["FileHandler", "StreamHandler"]


def test_verbose_without_file_logs_to_stderr(capsys):
    logger = setup_logger(verbose=True)
    logger.debug("to stderr")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "to stderr" in captured.err


def test_quiet_logger_without_file_has_null_handler():
    logger = setup_logger()
    assert [type(h).__name__ for h in logger.handlers] == ["NullHandler"]


def test_setup_replaces_previous_handlers(tmp_path: Path):
    setup_logger(debug_file=tmp_path / "one.log", verbose=True)
    logger = setup_logger(debug_file=tmp_path / "two.log", verbose=False)

    assert len(logger.handlers) == 1
    logger.debug("second only")
    assert "second only" in (tmp_path / "two.log").read_text()
    assert "second only" not in (tmp_path / "one.log").read_text()


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)

    assert debug_file.exists()


def test_separate_logger_names_are_isolated(tmp_path: Path):
    first = setup_logger(tmp_path / "a.log", logger_name="tripwire_a")
    second = setup_logger(tmp_path / "b.log", logger_name="tripwire_b")
    first.debug("from a")
    second.debug("from b")

    assert "from b" not in (tmp_path / "a.log").read_text()
    assert "from a" not in (tmp_path / "b.log").read_text()
