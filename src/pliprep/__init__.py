"""PL/I preprocessor front end: line tokenizer and classifier."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pliprep.report import LineReport

__version__ = "0.1.0"


def scan(source: str) -> list[LineReport]:
    """Tokenize and classify every line of ``source``."""
    from pliprep.report import process_lines, split_lines

    return list(process_lines(split_lines(source)))
