"""Token categories, token values, and the character classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

DIRECTIVE_SIGIL = "%"


class CharClass(Enum):
    LETTER = auto()  # alphabetic, _ $ @
    DIGIT = auto()  # 0-9 and other Unicode decimal digits
    WHITESPACE = auto()
    QUOTE = auto()  # ' or "
    DIRECTIVE_SIGIL = auto()  # %
    SPECIAL_PUNCTUATION = auto()  # operators and delimiters, see below
    OTHER = auto()


class TokenCategory(Enum):
    DIRECTIVE = auto()  # recognized %KEYWORD
    IDENTIFIER = auto()  # letter/digit run
    STRING_LITERAL = auto()  # quoted text, quotes included
    OPERATOR = auto()  # = + - * / < > & | ¬ ^ #
    SPECIAL_CHARACTER = auto()  # ; , . : ( )
    UNKNOWN = auto()  # anything else, and unrecognized directives


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of one source line.

    ``column`` is the 1-based column of the first character of ``text``.
    """

    category: TokenCategory
    text: str
    line_number: int
    column: int = 1


# Single-character operators and delimiters. No multi-character fusion.
OPERATOR_CHARS = frozenset("=+-*/<>&|¬^#")
DELIMITER_CHARS = frozenset(";,.:()")
QUOTE_CHARS = frozenset("'\"")
_LETTER_EXTRA = frozenset("_$@")


def classify_char(ch: str) -> CharClass:
    """Return the coarse class of a single character."""
    if ch == DIRECTIVE_SIGIL:
        return CharClass.DIRECTIVE_SIGIL
    if ch in QUOTE_CHARS:
        return CharClass.QUOTE
    if ch.isspace():
        return CharClass.WHITESPACE
    if ch.isdecimal():
        return CharClass.DIGIT
    if ch.isalpha() or ch in _LETTER_EXTRA:
        return CharClass.LETTER
    if ch in OPERATOR_CHARS or ch in DELIMITER_CHARS:
        return CharClass.SPECIAL_PUNCTUATION
    return CharClass.OTHER


def punctuation_category(ch: str) -> TokenCategory:
    """Return OPERATOR or SPECIAL_CHARACTER for a special punctuation char."""
    if ch in OPERATOR_CHARS:
        return TokenCategory.OPERATOR
    return TokenCategory.SPECIAL_CHARACTER
