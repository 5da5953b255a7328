"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from pliprep.classify import LineVerdict, classify_line
from pliprep.lexer import LineResult, tokenize_line
from pliprep.tokens import Token, TokenCategory


@pytest.fixture
def tok():
    """Return a helper that tokenizes one line and returns its LineResult."""

    def _tok(line: str, line_number: int = 1) -> LineResult:
        return tokenize_line(line, line_number)

    return _tok


@pytest.fixture
def verdict():
    """Return a helper that tokenizes and classifies one line."""

    def _verdict(line: str) -> LineVerdict:
        tokens, fault = tokenize_line(line)
        return classify_line(tokens, fault)

    return _verdict


def assert_categories(tokens: tuple[Token, ...], expected: list[TokenCategory]) -> None:
    """Assert that the token categories match the expected list."""
    actual = [t.category for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: tuple[Token, ...], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def non_whitespace(line: str) -> str:
    return "".join(ch for ch in line if not ch.isspace())
