"""Exception classes for pyrsc.

The lexer itself never raises for bad input; it records LexError entries in
the stream. These exceptions are for callers that choose to treat an error
entry as fatal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyrsc.tokens import LexError


class PyrscError(Exception):
    """Base exception for all pyrsc errors."""

    pass


class LexFailure(PyrscError):
    """An error entry was found by a caller running in strict mode.

    Carries the offending entry and formats its location like
    ``file:line:col message``.
    """

    def __init__(
        self,
        error: LexError,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex failure with optional location.

        Args:
            error: The error entry that triggered the failure
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.error = error
        self.message = error.message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{self.message}")

    @classmethod
    def from_entry(
        cls, error: LexError, source: str, source_file: str | None = None
    ) -> LexFailure:
        """Build a failure with line/column resolved against source."""
        loc = error.location(source, source_file)
        return cls(error, lineno=loc.lineno, col_offset=loc.col_offset, source_file=source_file)
