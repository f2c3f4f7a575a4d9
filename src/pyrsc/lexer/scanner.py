"""Raw token scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from pyrsc.lexer.charsets import (
    DIGITS,
    HORIZONTAL_WHITESPACE,
    KEYWORDS,
    LETTERS,
    PUNCTUATION,
)
from pyrsc.tokens import INT64_MAX, Entry, LexError, LexErrorKind, Span, Token, TokenType
from pyrsc.utils.logger import get_logger

logger = get_logger(__name__)

_INT64_DIGITS = len(str(INT64_MAX))


class ScannerMixin:
    """Mixin providing the raw scanning pass.

    Scans with maximal munch: at each position the character class picks the
    only pattern family that can match, the run is consumed in full, and the
    position always advances. Unmatched input becomes a one-character error
    entry and scanning resumes right after it.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _distinguish_overflow: bool

    def _span(self, start: int, end: int) -> Span:
        """Build a byte span from character indices."""
        raise NotImplementedError

    def _scan(self) -> Iterator[Entry]:
        """Yield raw entries in source order, without synthetic tokens."""
        source = self._source
        source_len = self._source_len
        while self._pos < source_len:
            char = source[self._pos]
            if char in HORIZONTAL_WHITESPACE:
                self._pos += 1
                continue

            start = self._pos
            if char == "\n":
                end = self._find_newline_run_end(start)
                entry: Entry = Token(
                    TokenType.NEWLINE, self._span(start, end), source[start:end]
                )
            elif char in LETTERS:
                end = self._find_run_end(start, LETTERS)
                entry = self._classify_word(source[start:end], self._span(start, end))
            elif char in DIGITS:
                end = self._find_run_end(start, DIGITS)
                entry = self._classify_integer(source[start:end], self._span(start, end))
            else:
                entry, end = self._classify_punctuation(start)

            if entry.is_error:
                logger.debug("%r at %s", entry, entry.span)
            self._pos = end
            yield entry

    def _find_run_end(self, start: int, charset: frozenset[str]) -> int:
        """Find the end of the run of charset characters beginning at start."""
        source = self._source
        end = start + 1
        while end < self._source_len and source[end] in charset:
            end += 1
        return end

    def _find_newline_run_end(self, start: int) -> int:
        """Find the end of a newline run beginning at start.

        A run is a newline, any number of blank (or whitespace-only) lines,
        and the leading whitespace of the next non-blank line.
        """
        source = self._source
        source_len = self._source_len
        end = start + 1
        while True:
            while end < source_len and source[end] in HORIZONTAL_WHITESPACE:
                end += 1
            if end < source_len and source[end] == "\n":
                end += 1
                continue
            return end

    def _classify_word(self, text: str, span: Span) -> Token:
        """Keyword if the whole run is one, identifier otherwise."""
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            return Token(keyword, span)
        return Token(TokenType.IDENTIFIER, span, text)

    def _classify_integer(self, text: str, span: Span) -> Entry:
        # Length check first: int() refuses very long digit strings
        if len(text.lstrip("0")) <= _INT64_DIGITS:
            value = int(text)
            if value <= INT64_MAX:
                return Token(TokenType.INTEGER, span, value)
        kind = (
            LexErrorKind.INTEGER_OVERFLOW
            if self._distinguish_overflow
            else LexErrorKind.UNRECOGNIZED_TOKEN
        )
        return LexError(kind, span, text)

    def _classify_punctuation(self, start: int) -> tuple[Entry, int]:
        """Match a punctuation literal at start, or flag one character.

        Returns the entry and the character index just past it.
        """
        source = self._source
        for literal, token_type in PUNCTUATION:
            if source.startswith(literal, start):
                end = start + len(literal)
                return Token(token_type, self._span(start, end)), end
        error = LexError(
            LexErrorKind.UNRECOGNIZED_TOKEN, self._span(start, start + 1), source[start]
        )
        return error, start + 1
