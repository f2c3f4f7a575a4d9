"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pyrsc import LexErrorKind, Token, TokenType, lex, scan
from pyrsc.lexer import Lexer

# Mostly grammar characters, plus a few that match nothing
PROGRAM_ALPHABET = "defrtunxy()->:019 \t\n#"

programs = st.text(alphabet=PROGRAM_ALPHABET, max_size=300)


def _indented_lines() -> st.SearchStrategy[str]:
    """Lines of identifiers with arbitrary leading indentation."""
    line = st.tuples(st.integers(min_value=0, max_value=8), st.sampled_from(["a", "b:", "f()"]))
    return st.lists(line, max_size=30).map(
        lambda lines: "\n".join(" " * width + text for width, text in lines)
    )


def _is_synthetic(entry) -> bool:
    if isinstance(entry, Token):
        return entry.is_synthetic
    return entry.kind == LexErrorKind.INCONSISTENT_DEDENT


class TestSpanInvariants:
    """Spans stay in bounds and in order."""

    @given(programs)
    @settings(max_examples=200)
    def test_spans_within_source(self, source: str) -> None:
        for entry in lex(source):
            assert 0 <= entry.span.start <= entry.span.end <= len(source)

    @given(programs)
    @settings(max_examples=200)
    def test_spans_ordered_and_disjoint(self, source: str) -> None:
        entries = lex(source)
        for prev, cur in zip(entries, entries[1:]):
            assert cur.span.start >= prev.span.end

    @given(programs)
    @settings(max_examples=100)
    def test_synthetic_entries_are_zero_width(self, source: str) -> None:
        for entry in lex(source):
            if _is_synthetic(entry):
                assert entry.span.is_empty

    @given(programs)
    @settings(max_examples=100)
    def test_gaps_are_horizontal_whitespace(self, source: str) -> None:
        """The raw scan covers every character except skipped spaces and tabs."""
        pos = 0
        for entry in scan(source):
            assert source[pos : entry.span.start].strip(" \t") == ""
            pos = entry.span.end
        assert source[pos:].strip(" \t") == ""


class TestIndentationBalance:
    """Block tokens always pair up."""

    @given(st.one_of(programs, _indented_lines()))
    @settings(max_examples=200)
    def test_running_balance_never_negative(self, source: str) -> None:
        depth = 0
        for entry in lex(source):
            if isinstance(entry, Token) and entry.type == TokenType.INDENTATION:
                depth += 1
            elif isinstance(entry, Token) and entry.type == TokenType.DEINDENTATION:
                depth -= 1
            assert depth >= 0
        assert depth == 0

    @given(st.one_of(programs, _indented_lines()))
    @settings(max_examples=100)
    def test_stack_ends_at_base(self, source: str) -> None:
        lexer = Lexer(source)
        list(lexer.tokenize())
        assert lexer.depth == 0

    @given(_indented_lines())
    @settings(max_examples=100)
    def test_indentation_pass_only_adds(self, source: str) -> None:
        """Dropping synthetic entries gives back the raw scan."""
        final = [e for e in lex(source) if not _is_synthetic(e)]
        assert final == scan(source)


class TestUnicodeSpans:
    """Spans are UTF-8 byte ranges for any text."""

    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_spans_within_encoded_source(self, source: str) -> None:
        size = len(source.encode("utf-8"))
        for entry in lex(source):
            assert 0 <= entry.span.start <= entry.span.end <= size

    @given(st.text(alphabet=st.sampled_from("ab é€𝄞\n:"), max_size=100))
    @settings(max_examples=200)
    def test_span_slice_matches_payload(self, source: str) -> None:
        for entry in scan(source):
            if isinstance(entry, Token) and entry.type in (
                TokenType.IDENTIFIER,
                TokenType.NEWLINE,
            ):
                assert entry.span.slice(source) == entry.value
            elif not isinstance(entry, Token):
                assert entry.span.slice(source) == entry.text


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(programs)
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        assert lex(source) == lex(source)

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_arbitrary_text_never_raises(self, source: str) -> None:
        """Any text lexes to a stream; bad input becomes error entries."""
        lex(source)


class TestBoundaryConditions:
    """Test boundary conditions and edge cases."""

    @pytest.mark.parametrize("length", [0, 1, 2, 10, 100, 1000])
    def test_various_identifier_lengths(self, length: int) -> None:
        entries = lex("a" * length)
        assert len(entries) == (1 if length else 0)

    @pytest.mark.parametrize("depth", [1, 5, 50])
    def test_deep_nesting(self, depth: int) -> None:
        source = "\n".join(" " * level + "x" for level in range(depth + 1))
        entries = lex(source)
        opens = [e for e in entries if isinstance(e, Token) and e.type == TokenType.INDENTATION]
        closes = [e for e in entries if isinstance(e, Token) and e.type == TokenType.DEINDENTATION]
        assert len(opens) == depth
        assert len(closes) == depth
