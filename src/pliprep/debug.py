"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from pliprep.errors import UnrecognizedDirective, UnterminatedStringLiteral
from pliprep.report import LineReport


def dump_tokens(report: LineReport, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable token listing for one line to *file*."""
    file.write(f"Line {report.line_number} {report.verdict.name}\n")
    for token in report.tokens:
        file.write(f"  {token.column:>4}  {token.category.name:<17} {token.text!r}\n")
    match report.fault:
        case UnterminatedStringLiteral(started_at_column=col):
            file.write(f"  fault: unterminated string literal at column {col}\n")
        case UnrecognizedDirective(name=name, column=col):
            file.write(f"  fault: unrecognized directive {name!r} at column {col}\n")
        case None:
            pass
