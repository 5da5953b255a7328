"""Per-line verdicts."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from pliprep.errors import Fault
from pliprep.tokens import DIRECTIVE_SIGIL, Token, TokenCategory


class LineVerdict(Enum):
    BLANK = "blank"
    PLAIN_LINE = "plain"
    VALID_DIRECTIVE_LINE = "directive"
    MALFORMED_DIRECTIVE_LINE = "malformed"


def classify_line(tokens: Sequence[Token], fault: Fault | None = None) -> LineVerdict:
    """Decide the verdict for a tokenized line.

    A fault always wins, even when no token was produced before it
    (an unterminated literal at the start of a line).
    """
    if fault is not None:
        return LineVerdict.MALFORMED_DIRECTIVE_LINE
    if not tokens:
        return LineVerdict.BLANK

    first = tokens[0]
    if first.category is TokenCategory.DIRECTIVE:
        return LineVerdict.VALID_DIRECTIVE_LINE
    if first.text.startswith(DIRECTIVE_SIGIL):
        return LineVerdict.MALFORMED_DIRECTIVE_LINE
    return LineVerdict.PLAIN_LINE
