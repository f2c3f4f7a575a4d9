"""Tests for the raw scanning pass.

The scanner picks the longest match at each position, prefers keywords on
equal-length ties, skips horizontal whitespace and turns unmatched input
into one-character error entries without stopping.
"""

import pytest

from pyrsc import LexError, LexErrorKind, Span, Token, TokenType, scan
from pyrsc.tokens import INT64_MAX


def kinds(entries: list) -> list:
    return [e.kind if isinstance(e, LexError) else e.type for e in entries]


class TestKeywordsAndIdentifiers:
    """Keyword literals versus the open-ended identifier pattern."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("def", TokenType.DEFINITION),
            ("return", TokenType.RETURN),
        ],
    )
    def test_exact_keyword(self, source: str, expected: TokenType) -> None:
        [token] = scan(source)
        assert token.type == expected
        assert token.value is None
        assert token.span == Span(0, len(source))

    @pytest.mark.parametrize("word", ["define", "returns", "de", "Def", "deff"])
    def test_longer_or_different_word_is_identifier(self, word: str) -> None:
        [token] = scan(word)
        assert token.type == TokenType.IDENTIFIER
        assert token.value == word

    def test_letters_then_digits_split(self) -> None:
        """Identifiers are letters only; trailing digits are an integer."""
        ident, number = scan("abc123")
        assert ident == Token(TokenType.IDENTIFIER, Span(0, 3), "abc")
        assert number == Token(TokenType.INTEGER, Span(3, 6), 123)

    def test_keyword_followed_by_digits(self) -> None:
        assert kinds(scan("return1")) == [TokenType.RETURN, TokenType.INTEGER]


class TestPunctuation:
    """Fixed punctuation literals."""

    def test_signature(self) -> None:
        assert kinds(scan("f(x) -> y:")) == [
            TokenType.IDENTIFIER,
            TokenType.LEFT_PAREN,
            TokenType.IDENTIFIER,
            TokenType.RIGHT_PAREN,
            TokenType.ARROW,
            TokenType.IDENTIFIER,
            TokenType.COLON,
        ]

    def test_arrow_span(self) -> None:
        [arrow] = scan("->")
        assert arrow.span == Span(0, 2)

    def test_lone_dash_is_error(self) -> None:
        [error] = scan("-")
        assert error == LexError(LexErrorKind.UNRECOGNIZED_TOKEN, Span(0, 1), "-")

    def test_separated_dash_and_angle(self) -> None:
        """``- >`` is two unrecognized characters, not an arrow."""
        assert kinds(scan("- >")) == [
            LexErrorKind.UNRECOGNIZED_TOKEN,
            LexErrorKind.UNRECOGNIZED_TOKEN,
        ]


class TestIntegers:
    """Integer literals and the 64-bit limit."""

    def test_simple(self) -> None:
        [token] = scan("42")
        assert token.type == TokenType.INTEGER
        assert token.value == 42

    def test_max_fits(self) -> None:
        [token] = scan(str(INT64_MAX))
        assert token.value == INT64_MAX

    def test_one_past_max_overflows(self) -> None:
        source = str(INT64_MAX + 1)
        [error] = scan(source)
        assert error.kind == LexErrorKind.INTEGER_OVERFLOW
        assert error.span == Span(0, len(source))
        assert error.text == source

    def test_leading_zeros_do_not_overflow(self) -> None:
        [token] = scan("0" * 30 + "42")
        assert token.value == 42

    def test_very_long_literal(self) -> None:
        """Digit strings too long for int() still become one error entry."""
        [error] = scan("1" * 5000)
        assert error.kind == LexErrorKind.INTEGER_OVERFLOW

    def test_scanning_resumes_after_overflow(self) -> None:
        entries = scan("99999999999999999999 x")
        assert kinds(entries) == [LexErrorKind.INTEGER_OVERFLOW, TokenType.IDENTIFIER]


class TestWhitespace:
    """Horizontal whitespace and newline runs."""

    def test_spaces_and_tabs_skipped(self) -> None:
        first, second = scan("  a \t b")
        assert first.span == Span(2, 3)
        assert second.span == Span(6, 7)

    def test_only_whitespace(self) -> None:
        assert scan(" \t  ") == []

    def test_newline_run_spans_blank_lines_and_indent(self) -> None:
        source = "a\n\n  \n    b"
        ident, newline, last = scan(source)
        assert newline.type == TokenType.NEWLINE
        assert newline.span == Span(1, 10)
        assert newline.value == "\n\n  \n    "
        assert last.span == Span(10, 11)

    def test_trailing_spaces_before_newline_skipped(self) -> None:
        _, newline, _ = scan("a  \nb")
        assert newline.span == Span(3, 4)

    def test_carriage_return_is_unrecognized(self) -> None:
        assert kinds(scan("a\r\nb")) == [
            TokenType.IDENTIFIER,
            LexErrorKind.UNRECOGNIZED_TOKEN,
            TokenType.NEWLINE,
            TokenType.IDENTIFIER,
        ]

    def test_no_synthetic_tokens(self) -> None:
        assert kinds(scan("a\n  b\n")) == [
            TokenType.IDENTIFIER,
            TokenType.NEWLINE,
            TokenType.IDENTIFIER,
            TokenType.NEWLINE,
        ]


class TestUnrecognizedInput:
    """Resynchronization after input that matches nothing."""

    def test_single_character_error_then_resume(self) -> None:
        ident, error, after = scan("a#b")
        assert ident == Token(TokenType.IDENTIFIER, Span(0, 1), "a")
        assert error == LexError(LexErrorKind.UNRECOGNIZED_TOKEN, Span(1, 2), "#")
        assert after == Token(TokenType.IDENTIFIER, Span(2, 3), "b")

    def test_each_character_reported(self) -> None:
        entries = scan("#$%")
        assert [e.span for e in entries] == [Span(0, 1), Span(1, 2), Span(2, 3)]
        assert all(e.is_error for e in entries)

    def test_non_ascii_letter(self) -> None:
        """Only ASCII letters form identifiers."""
        assert kinds(scan("é")) == [LexErrorKind.UNRECOGNIZED_TOKEN]
        assert kinds(scan("aéb")) == [
            TokenType.IDENTIFIER,
            LexErrorKind.UNRECOGNIZED_TOKEN,
            TokenType.IDENTIFIER,
        ]

    def test_non_ascii_digit(self) -> None:
        assert kinds(scan("٣")) == [LexErrorKind.UNRECOGNIZED_TOKEN]
