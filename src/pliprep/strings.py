"""Quoted string literal scanning."""

from __future__ import annotations

from pliprep.errors import UnterminatedStringLiteral
from pliprep.logger import get_logger
from pliprep.tokens import QUOTE_CHARS, Token, TokenCategory

log = get_logger(__name__)


def scan_string_literal(
    line: str, start: int, line_number: int = 1
) -> tuple[Token, int] | UnterminatedStringLiteral:
    """Scan a quoted literal whose opening quote is at ``line[start]``.

    The literal closes at the next occurrence of the same quote character.
    There is no escape convention: a doubled quote closes the literal and
    opens a new one.

    Returns ``(token, next_index)`` on success, where ``next_index`` is the
    index just past the closing quote. Returns an
    ``UnterminatedStringLiteral`` fault when the line ends first.
    """
    quote = line[start]
    if quote not in QUOTE_CHARS:
        raise ValueError(f"string literal must start with a quote, got {quote!r}")

    log.debug("string literal opened at column %d: %s", start + 1, quote)
    end = line.find(quote, start + 1)
    if end == -1:
        log.debug("unterminated string literal: %s", line[start:])
        return UnterminatedStringLiteral(started_at_column=start + 1, line_number=line_number)

    text = line[start : end + 1]
    log.debug("string literal closed: %s", text)
    token = Token(TokenCategory.STRING_LITERAL, text, line_number, start + 1)
    return token, end + 1
