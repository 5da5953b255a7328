"""Test directive recognition and directive tokens."""

import pytest

from pliprep.directives import DIRECTIVES, DirectiveKind, recognize_directive
from pliprep.errors import UnrecognizedDirective
from pliprep.tokens import TokenCategory

from .conftest import assert_categories, assert_texts


class TestRecognizeDirective:
    @pytest.mark.parametrize("name", ["%IF", "%THEN", "%ELSE", "%ENDIF"])
    def test_control_flow(self, name):
        assert recognize_directive(name) == DirectiveKind.CONTROL_FLOW

    def test_comment(self):
        assert recognize_directive("%COMMENT") == DirectiveKind.COMMENT

    @pytest.mark.parametrize("name", ["%if", "%If", "%iF", "%endif", "%Comment"])
    def test_case_insensitive(self, name):
        assert recognize_directive(name) is not None

    @pytest.mark.parametrize("name", ["%IFX", "%EN", "%FOO", "%", "%INCLUDE", "IF"])
    def test_unrecognized(self, name):
        assert recognize_directive(name) is None

    def test_vocabulary(self):
        assert set(DIRECTIVES) == {"%IF", "%THEN", "%ELSE", "%ENDIF", "%COMMENT"}


class TestDirectiveTokens:
    def test_directive_alone(self, tok):
        tokens, fault = tok("%IF")
        assert fault is None
        assert_categories(tokens, [TokenCategory.DIRECTIVE])

    @pytest.mark.parametrize("line", ["%if", "%If", "%IF"])
    def test_original_casing_preserved(self, tok, line):
        tokens, _ = tok(line)
        assert tokens[0].category == TokenCategory.DIRECTIVE
        assert tokens[0].text == line

    def test_directive_with_trailing_content(self, tok):
        tokens, fault = tok("%IF DEBUG = 1")
        assert fault is None
        assert_categories(
            tokens,
            [
                TokenCategory.DIRECTIVE,
                TokenCategory.IDENTIFIER,
                TokenCategory.OPERATOR,
                TokenCategory.IDENTIFIER,
            ],
        )
        assert_texts(tokens, ["%IF", "DEBUG", "=", "1"])

    def test_directive_ends_at_punctuation(self, tok):
        tokens, fault = tok("%THEN;")
        assert fault is None
        assert_texts(tokens, ["%THEN", ";"])
        assert tokens[0].category == TokenCategory.DIRECTIVE

    def test_directive_ends_at_quote(self, tok):
        tokens, _ = tok("%COMMENT'note'")
        assert_categories(tokens, [TokenCategory.DIRECTIVE, TokenCategory.STRING_LITERAL])

    def test_directive_after_leading_whitespace(self, tok):
        tokens, _ = tok("   %ENDIF;")
        assert tokens[0].category == TokenCategory.DIRECTIVE
        assert tokens[0].column == 4

    def test_directive_mid_line(self, tok):
        tokens, fault = tok("X %ELSE")
        assert fault is None
        assert_categories(tokens, [TokenCategory.IDENTIFIER, TokenCategory.DIRECTIVE])


class TestUnrecognizedDirectives:
    def test_unknown_name(self, tok):
        tokens, fault = tok("%FOO")
        assert fault == UnrecognizedDirective(name="%FOO", column=1, line_number=1)
        assert_categories(tokens, [TokenCategory.UNKNOWN])
        assert_texts(tokens, ["%FOO"])

    def test_no_prefix_matching(self, tok):
        tokens, fault = tok("%IFX = 1")
        assert isinstance(fault, UnrecognizedDirective)
        assert fault.name == "%IFX"

    def test_scanning_stops_after_fault(self, tok):
        tokens, fault = tok("%FOO X = 1;")
        assert_texts(tokens, ["%FOO"])
        assert fault is not None

    def test_lone_sigil(self, tok):
        tokens, fault = tok("% IF")
        assert fault == UnrecognizedDirective(name="%", column=1, line_number=1)
        assert_texts(tokens, ["%"])

    def test_sigil_at_end_of_line(self, tok):
        tokens, fault = tok("X = %")
        assert_texts(tokens, ["X", "=", "%"])
        assert isinstance(fault, UnrecognizedDirective)
        assert fault.column == 5

    def test_sigil_splits_identifier(self, tok):
        tokens, fault = tok("A%B")
        assert_texts(tokens, ["A", "%B"])
        assert fault.name == "%B"

    def test_mixed_case_name_preserved(self, tok):
        _, fault = tok("%Foo")
        assert fault.name == "%Foo"
