from __future__ import annotations

import importlib
import re
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

_ROUTINE_REF = re.compile(
    r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*"
    r":[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$"
)


class SuiteConfig(BaseModel):
    """A named, ordered list of test routines.

    Routines are referenced as ``package.module:function`` (the attribute
    part may be dotted, e.g. ``module:Class.method``). ``paths`` are extra
    import roots, relative to the suite file.
    """

    model_config = ConfigDict(extra="forbid")
    name: str
    routines: list[str]
    paths: list[str] = []

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("routines")
    @classmethod
    def routines_must_be_references(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("routines must not be empty")
        bad = [ref for ref in v if not _ROUTINE_REF.match(ref)]
        if bad:
            raise ValueError(
                f"routines must look like 'module:function', got: {', '.join(bad)}"
            )
        return v


def load_suite(path: Path) -> SuiteConfig:
    """Load and validate a suite file."""
    suite_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping with 'name' and 'routines'")

    suite = SuiteConfig(**raw)

    # Resolve relative import roots relative to the suite file location
    resolved = []
    for entry in suite.paths:
        entry_path = Path(entry)
        if not entry_path.is_absolute():
            entry_path = (suite_dir / entry_path).resolve()
        resolved.append(str(entry_path))
    suite.paths = resolved

    return suite


def resolve_routine(ref: str) -> Callable[[], object]:
    """Import the callable named by ``module:attribute``."""
    module_name, _, attr_path = ref.partition(":")
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"cannot import module '{module_name}' for '{ref}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ValueError(f"'{ref}' does not exist: {e}") from e

    if not callable(target):
        raise ValueError(f"'{ref}' is not callable")
    return target


@contextmanager
def import_paths(paths: list[str]) -> Iterator[None]:
    """Make the suite's import roots importable while the block runs."""
    added = [p for p in paths if p not in sys.path]
    sys.path[:0] = added
    try:
        yield
    finally:
        for p in added:
            if p in sys.path:
                sys.path.remove(p)


def resolve_suite(suite: SuiteConfig) -> list[Callable[[], object]]:
    """Resolve every routine of the suite, in order."""
    with import_paths(suite.paths):
        return [resolve_routine(ref) for ref in suite.routines]
