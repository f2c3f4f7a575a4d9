"""Two-pass lexer for the pyrsc toy language.

Pass one scans raw tokens with maximal munch. Pass two rewrites each
newline run's indentation into INDENTATION/DEINDENTATION tokens. Both
passes are generators chained together, so the stream is produced lazily
in the same order an eager pass would produce it.

Scanning walks the str by character; spans are UTF-8 byte offsets, mapped
through a per-source offset table that is skipped entirely for ASCII input.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from pyrsc.config import get_lex_config
from pyrsc.lexer.indentation import IndentationMixin
from pyrsc.lexer.scanner import ScannerMixin
from pyrsc.tokens import Entry, Span


def _utf8_offsets(source: str) -> list[int] | None:
    """UTF-8 byte offset of every character index, plus the total length.

    Returns None for ASCII sources, where character and byte offsets agree.
    """
    if source.isascii():
        return None
    offsets = [0]
    total = 0
    for char in source:
        total += len(char.encode("utf-8", "surrogatepass"))
        offsets.append(total)
    return offsets


class Lexer(
    ScannerMixin,
    IndentationMixin,
):
    """Lexer turning source text into a stream of tokens and error entries.

    Usage:
            >>> lexer = Lexer("def f():\\n    return 1\\n")
            >>> for entry in lexer.tokenize():
            ...     print(entry, entry.span)
        Token(DEFINITION) 0..3
        Token(IDENTIFIER, 'f') 4..5
        Token(LEFT_PAREN) 5..6
        Token(RIGHT_PAREN) 6..7
        Token(COLON) 7..8
        Token(NEWLINE) 8..13
        Token(INDENTATION) 13..13
        Token(RETURN) 13..19
        Token(INTEGER, 1) 20..21
        Token(NEWLINE) 21..22
        Token(DEINDENTATION) 22..22

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_source_file",
        "_indent_stack",  # Open indentation widths, bottom is always 0
        "_distinguish_overflow",
        "_byte_offsets",  # UTF-8 offset of each character index; None if ASCII
        "_byte_len",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Program source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file
        self._indent_stack: list[int] = [0]
        self._byte_offsets = _utf8_offsets(source)
        self._byte_len = (
            self._source_len if self._byte_offsets is None else self._byte_offsets[-1]
        )

        config = get_lex_config()
        self._distinguish_overflow = config.distinguish_overflow

    def _span(self, start: int, end: int) -> Span:
        """Build a byte span from character indices into the source."""
        offsets = self._byte_offsets
        if offsets is None:
            return Span(start, end)
        return Span(offsets[start], offsets[end])

    @property
    def source(self) -> str:
        return self._source

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def depth(self) -> int:
        """Number of indented blocks currently open."""
        return len(self._indent_stack) - 1

    def tokenize(self) -> Iterator[Entry]:
        """Tokenize source into the final entry stream.

        Yields:
            Token and LexError entries in source order

        Complexity: O(n) where n = len(source)
        """
        return self._apply_indentation(self._scan())

    def scan(self) -> Iterator[Entry]:
        """Yield raw entries only, without indentation processing."""
        return self._scan()
