"""Capture where a check was called from, and the source text of its arguments.

Checks are plain functions, so the location they report is taken from the
calling frame. Capturing is cheap; reading and parsing source only happens
when a check fails and needs the argument expressions for its message.
"""

from __future__ import annotations

import ast
import itertools
import linecache
import sys
from dataclasses import dataclass, field
from types import CodeType
from typing import Any, Sequence


@dataclass(frozen=True)
class CallSite:
    """Location of a call to a check.

    Attributes:
        file_name: Source file of the calling frame.
        line_number: Line being executed in the calling frame.
        function_name: Name of the calling function ("<module>" at top level).
        code: Code object of the calling frame, used to locate the call.
        offset: Bytecode offset of the call instruction.
        module_globals: Globals of the calling frame, handed to linecache so
            that sources loaded through import hooks can still be read.
    """

    file_name: str
    line_number: int
    function_name: str
    code: CodeType | None = field(default=None, repr=False, compare=False)
    offset: int = field(default=-1, repr=False, compare=False)
    module_globals: dict[str, Any] | None = field(
        default=None, repr=False, compare=False
    )

    def argument_texts(self, names: Sequence[str]) -> list[str | None]:
        """Source text of the call's arguments.

        ``names`` lists the check's parameters in positional order; each one
        is looked up positionally first and then by keyword. Entries are
        None when the text cannot be recovered.
        """
        found = self._find_call()
        if found is None:
            return [None] * len(names)

        source, call = found
        texts: list[str | None] = []
        for index, name in enumerate(names):
            node: ast.AST | None = None
            if index < len(call.args) and not any(
                isinstance(a, ast.Starred) for a in call.args[: index + 1]
            ):
                node = call.args[index]
            else:
                for keyword in call.keywords:
                    if keyword.arg == name:
                        node = keyword.value
                        break
            texts.append(
                ast.get_source_segment(source, node) if node is not None else None
            )
        return texts

    def _find_call(self) -> tuple[str, ast.Call] | None:
        if self.code is None or self.offset < 0:
            return None

        position = next(
            itertools.islice(self.code.co_positions(), self.offset // 2, None), None
        )
        if position is None:
            return None
        _, end_line, _, end_col = position
        if end_line is None or end_col is None:
            return None

        lines = linecache.getlines(self.file_name, self.module_globals)
        if not lines:
            return None
        source = "".join(lines)
        try:
            tree = ast.parse(source, filename=self.file_name)
        except (SyntaxError, ValueError):
            return None

        # No two call expressions end at the same position.
        for node in ast.walk(tree):
            if (
                isinstance(node, ast.Call)
                and node.end_lineno == end_line
                and node.end_col_offset == end_col
            ):
                return source, node
        return None


def capture(depth: int = 1) -> CallSite:
    """Return the call site ``depth`` frames above the caller of ``capture``.

    ``capture(1)`` inside a check returns the location the check was called
    from.
    """
    frame = sys._getframe(depth + 1)
    try:
        return CallSite(
            file_name=frame.f_code.co_filename,
            line_number=frame.f_lineno,
            function_name=frame.f_code.co_name,
            code=frame.f_code,
            offset=frame.f_lasti,
            module_globals=frame.f_globals,
        )
    finally:
        del frame
