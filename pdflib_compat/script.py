"""Replay plain-text scripts of procedural calls against a :class:`PDF`.

One call per line, arguments separated by whitespace, shell-style quoting for
text containing spaces and ``#`` comments::

    set_info_title "Quarterly report"
    begin_page 595 842
    set_font helvetica-bold 18 winansi
    show_xy "Quarterly report" 50 800
    moveto 50 790
    lineto 545 790
    stroke
    end_page
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .exceptions import ScriptError
from .pdf import PDF
from .types import PathError

Converter = Callable[[str], Any]

# operation -> (argument converters, number of required arguments)
OPERATIONS: Dict[str, Tuple[Tuple[Converter, ...], int]] = {
    "set_info_author": ((str,), 1),
    "set_info_creator": ((str,), 1),
    "set_info_subject": ((str,), 1),
    "set_info_title": ((str,), 1),
    "set_info_keywords": ((str,), 1),
    "set_font": ((str, float, str), 2),
    "show_xy": ((str, float, float), 3),
    "setgray_fill": ((float,), 1),
    "stringwidth": ((str,), 1),
    "set_text_rendering": ((int,), 1),
    "rect": ((float, float, float, float), 4),
    "moveto": ((float, float), 2),
    "lineto": ((float, float), 2),
    "fill": ((), 0),
    "stroke": ((), 0),
    "clip": ((), 0),
    "save": ((), 0),
    "restore": ((), 0),
    "translate": ((float, float), 2),
    "begin_page": ((float, float), 2),
    "end_page": ((), 0),
    "add_outline": ((str,), 1),
}

PATH_OPERATIONS = frozenset({"rect", "moveto", "lineto", "fill", "stroke", "clip"})


@dataclass
class ScriptCommand:
    """A single parsed script line."""

    line_number: int
    operation: str
    args: Tuple[Any, ...]

    def __str__(self) -> str:
        return " ".join([self.operation, *(str(arg) for arg in self.args)])


@dataclass
class ScriptResult:
    """Outcome of replaying one command."""

    command: ScriptCommand
    success: bool
    value: Any = None
    error: Optional[PathError] = None


def parse_line(line: str, line_number: int) -> Optional[ScriptCommand]:
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as exc:
        raise ScriptError(f"line {line_number}: {exc}", line_number) from exc

    if not tokens:
        return None

    operation, raw_args = tokens[0].lower(), tokens[1:]
    if operation not in OPERATIONS:
        raise ScriptError(f"line {line_number}: unknown operation '{tokens[0]}'", line_number)

    converters, required = OPERATIONS[operation]
    if not required <= len(raw_args) <= len(converters):
        expected = str(required) if required == len(converters) else f"{required}-{len(converters)}"
        raise ScriptError(
            f"line {line_number}: {operation} expects {expected} arguments, got {len(raw_args)}",
            line_number,
        )

    try:
        args = tuple(convert(raw) for convert, raw in zip(converters, raw_args))
    except ValueError as exc:
        raise ScriptError(f"line {line_number}: invalid argument for {operation}: {exc}", line_number) from exc

    return ScriptCommand(line_number, operation, args)


def parse_script(text: str) -> List[ScriptCommand]:
    """Parse a whole script, raising :class:`ScriptError` on the first bad line."""

    commands: List[ScriptCommand] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        command = parse_line(line, line_number)
        if command is not None:
            commands.append(command)
    return commands


def run_script(pdf: PDF, commands: Sequence[ScriptCommand]) -> List[ScriptResult]:
    """Apply ``commands`` to ``pdf`` in order and collect their results."""

    results: List[ScriptResult] = []
    for command in commands:
        value = getattr(pdf, command.operation)(*command.args)
        # stringwidth returns the width itself
        success = value is not False
        error = pdf.last_error if not success and command.operation in PATH_OPERATIONS else None
        results.append(ScriptResult(command, success, value, error))
    return results


__all__ = ["OPERATIONS", "PATH_OPERATIONS", "ScriptCommand", "ScriptResult", "parse_line", "parse_script", "run_script"]
