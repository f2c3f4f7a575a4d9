"""Source location tracking for error messages and debugging.

Spans locate entries by offset; SourceLocation turns an offset into the
1-indexed line and column a human expects in a diagnostic.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyrsc.tokens import Span


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5)
            >>> str(loc)
            '2:5'

            >>> loc = SourceLocation(1, 1, source_file="prog.py")
            >>> str(loc)
            'prog.py:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "prog.py:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute the location of a single UTF-8 byte offset.

        Lines are counted with bytes.count/rfind over the prefix; the column
        counts characters, not bytes, since the line prefix is decoded.
        """
        data = source.encode("utf-8", "surrogatepass")
        lineno = data.count(b"\n", 0, offset) + 1
        line_start = data.rfind(b"\n", 0, offset) + 1
        column = len(data[line_start:offset].decode("utf-8", "replace")) + 1
        return cls(
            lineno=lineno,
            col_offset=column,
            offset=offset,
            end_offset=offset,
            source_file=source_file,
        )

    @classmethod
    def from_span(
        cls, source: str, span: Span, source_file: str | None = None
    ) -> SourceLocation:
        """Compute the location of the start of span."""
        loc = cls.from_offset(source, span.start, source_file)
        return cls(
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            offset=span.start,
            end_offset=span.end,
            source_file=source_file,
        )
