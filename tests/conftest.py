"""Pytest configuration and fixtures."""

import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset tripwire loggers after each test so handlers don't leak between tests."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("tripwire")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture()
def write_module(tmp_path, monkeypatch):
    """Write an importable module into tmp_path and return its path."""
    monkeypatch.syspath_prepend(str(tmp_path))

    def _write(name: str, content: str) -> Path:
        p = tmp_path / f"{name}.py"
        p.write_text(textwrap.dedent(content))
        return p

    return _write
