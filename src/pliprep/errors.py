"""Line faults, fault formatting, and the exceptions raised at the I/O edge.

Faults are plain values returned alongside a line's tokens. They never abort
a run. Exceptions are reserved for problems with the input file itself and
with configuration, which are detected before any line is tokenized.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class UnterminatedStringLiteral:
    """A quote was opened but the line ended before it was closed."""

    started_at_column: int
    line_number: int = 1

    @property
    def column(self) -> int:
        return self.started_at_column

    @property
    def message(self) -> str:
        return "unterminated string literal"


@dataclass(frozen=True, slots=True)
class UnrecognizedDirective:
    """A ``%name`` that is not in the directive vocabulary."""

    name: str
    column: int = 1
    line_number: int = 1

    @property
    def message(self) -> str:
        return f"unrecognized directive '{self.name}'"


Fault = UnterminatedStringLiteral | UnrecognizedDirective


def format_fault(fault: Fault, line_text: str, filename: str = "input.pli") -> str:
    """Render a fault with its source line and a caret underline."""
    source_line = line_text.rstrip("\n").rstrip("\r")
    col = fault.column

    match fault:
        case UnterminatedStringLiteral():
            # Underline from the opening quote to end of line
            underline_len = max(1, len(source_line) - col + 1)
        case UnrecognizedDirective(name=name):
            underline_len = max(1, len(name))

    pad = " " * (col - 1)
    carets = "^" * underline_len

    line_num = str(fault.line_number)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {fault.message}\n"
        f"{' ' * gutter_width}--> {filename}:{fault.line_number}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class PliprepError(Exception):
    """Base class for errors that stop a run before tokenizing."""


class UnsupportedFileError(PliprepError):
    """Raised by the file gate for a path without a recognized extension."""

    def __init__(self, path: Path, extensions: tuple[str, ...]) -> None:
        self.path = path
        self.extensions = extensions
        allowed = ", ".join(extensions)
        super().__init__(f"unsupported input file extension: {path} (expected {allowed})")


class SourceFileError(PliprepError):
    """Raised when an accepted input file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")


class ConfigError(PliprepError):
    """Raised for a malformed pliprep.toml or invalid option value."""
