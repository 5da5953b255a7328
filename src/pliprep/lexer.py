"""pliprep line tokenizer: turns one source line into classified tokens."""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple

from pliprep.directives import recognize_directive
from pliprep.errors import Fault, UnrecognizedDirective
from pliprep.logger import get_logger
from pliprep.strings import scan_string_literal
from pliprep.tokens import (
    DIRECTIVE_SIGIL,
    CharClass,
    Token,
    TokenCategory,
    classify_char,
    punctuation_category,
)

log = get_logger(__name__)


class _State(Enum):
    SCANNING = auto()
    IN_STRING_LITERAL = auto()
    DONE = auto()
    FAULTED = auto()


class LineResult(NamedTuple):
    """Tokens of one line and the fault that stopped scanning, if any."""

    tokens: tuple[Token, ...]
    fault: Fault | None = None


class _Accumulator:
    """Buffer for the identifier or directive candidate being built."""

    def __init__(self, line_number: int) -> None:
        self._line_number = line_number
        self._chars: list[str] = []
        self._column = 0
        self._directive = False

    @property
    def pending(self) -> bool:
        return bool(self._chars)

    def start(self, ch: str, column: int, *, directive: bool = False) -> None:
        self._chars = [ch]
        self._column = column
        self._directive = directive

    def push(self, ch: str) -> None:
        self._chars.append(ch)

    def finalize(self) -> tuple[Token | None, Fault | None]:
        """Turn the buffer into a token and reset.

        A directive candidate that is not in the vocabulary still yields a
        token, as UNKNOWN, together with an UnrecognizedDirective fault.
        """
        if not self._chars:
            return None, None

        text = "".join(self._chars)
        column = self._column
        directive = self._directive
        self._chars = []
        self._directive = False

        if not directive:
            return Token(TokenCategory.IDENTIFIER, text, self._line_number, column), None

        if recognize_directive(text) is not None:
            log.debug("directive recognized: %s", text)
            return Token(TokenCategory.DIRECTIVE, text, self._line_number, column), None

        log.debug("unrecognized directive: %s", text)
        token = Token(TokenCategory.UNKNOWN, text, self._line_number, column)
        fault = UnrecognizedDirective(name=text, column=column, line_number=self._line_number)
        return token, fault


class LineTokenizer:
    """Tokenize a single source line.

    The tokenizer holds no state beyond the line it was given, so the
    result depends only on ``(text, line_number)``.
    """

    def __init__(self, text: str, line_number: int = 1) -> None:
        if text.endswith("\n"):
            text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
        self._text = text
        self._line_number = line_number
        self._pos = 0
        self._state = _State.SCANNING
        self._tokens: list[Token] = []
        self._fault: Fault | None = None
        self._acc = _Accumulator(line_number)

    def tokenize(self) -> LineResult:
        """Scan the whole line and return its tokens and fault."""
        while True:
            match self._state:
                case _State.SCANNING:
                    self._scan()
                case _State.IN_STRING_LITERAL:
                    self._scan_string()
                case _State.DONE | _State.FAULTED:
                    break
        return LineResult(tuple(self._tokens), self._fault)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _column(self) -> int:
        return self._pos + 1

    def _emit(self, category: TokenCategory, text: str, column: int) -> None:
        self._tokens.append(Token(category, text, self._line_number, column))

    def _flush(self) -> bool:
        """Finalize any pending token. Returns False if that faulted."""
        token, fault = self._acc.finalize()
        if token is not None:
            self._tokens.append(token)
        if fault is not None:
            self._fault = fault
            self._state = _State.FAULTED
            return False
        return True

    # ------------------------------------------------------------------
    # Scanning state
    # ------------------------------------------------------------------

    def _scan(self) -> None:
        if self._pos >= len(self._text):
            if self._flush():
                self._state = _State.DONE
            return

        ch = self._text[self._pos]
        column = self._column()

        match classify_char(ch):
            case CharClass.LETTER | CharClass.DIGIT:
                if self._acc.pending:
                    self._acc.push(ch)
                else:
                    self._acc.start(ch, column)
                self._pos += 1
            case CharClass.DIRECTIVE_SIGIL:
                if not self._flush():
                    return
                self._acc.start(DIRECTIVE_SIGIL, column, directive=True)
                self._pos += 1
            case CharClass.WHITESPACE:
                if not self._flush():
                    return
                self._pos += 1
            case CharClass.QUOTE:
                if not self._flush():
                    return
                self._state = _State.IN_STRING_LITERAL
            case CharClass.SPECIAL_PUNCTUATION:
                if not self._flush():
                    return
                self._emit(punctuation_category(ch), ch, column)
                self._pos += 1
            case CharClass.OTHER:
                if not self._flush():
                    return
                self._emit(TokenCategory.UNKNOWN, ch, column)
                self._pos += 1

    # ------------------------------------------------------------------
    # String literal state
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        result = scan_string_literal(self._text, self._pos, self._line_number)
        if isinstance(result, tuple):
            token, self._pos = result
            self._tokens.append(token)
            self._state = _State.SCANNING
        else:
            self._fault = result
            self._pos = len(self._text)
            self._state = _State.FAULTED


def tokenize_line(text: str, line_number: int = 1) -> LineResult:
    """Convenience function: tokenize one line and return its result."""
    return LineTokenizer(text, line_number).tokenize()
