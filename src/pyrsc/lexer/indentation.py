"""Indentation post-processing mixin (the off-side rule)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pyrsc.tokens import Entry, LexError, LexErrorKind, Span, Token, TokenType
from pyrsc.utils.logger import get_logger

logger = get_logger(__name__)


class IndentationMixin:
    """Mixin rewriting newline runs into block open/close tokens.

    Keeps a stack of open indentation widths, strictly increasing from the
    implicit top-level block at 0. Transitions fire only on NEWLINE tokens
    and at end of input; after the final flush the stack is back at [0].

    """

    # These will be set by the Lexer class
    _byte_len: int
    _indent_stack: list[int]

    def _apply_indentation(self, entries: Iterable[Entry]) -> Iterator[Entry]:
        """Re-emit entries, following each NEWLINE with its synthetic tokens."""
        for entry in entries:
            yield entry
            if isinstance(entry, Token) and entry.type is TokenType.NEWLINE:
                yield from self._track_indent(entry)
        yield from self._close_open_blocks()

    @staticmethod
    def _measure_indent(run: str) -> int:
        """Characters after the last newline; a tab counts as one."""
        return len(run) - run.rfind("\n") - 1

    def _track_indent(self, newline: Token) -> Iterator[Entry]:
        """Compare the upcoming line's width against the innermost block.

        Synthetic entries sit at the end of the newline run, where the
        upcoming line's content begins.
        """
        width = self._measure_indent(str(newline.value))
        stack = self._indent_stack
        at = Span.at(newline.span.end)

        if width > stack[-1]:
            stack.append(width)
            yield Token(TokenType.INDENTATION, at)
        elif width < stack[-1]:
            # The bottom 0 is never popped: no width is below it
            while stack[-1] > width:
                stack.pop()
                yield Token(TokenType.DEINDENTATION, at)
            if stack[-1] != width:
                logger.debug(
                    "inconsistent dedent to width %d at %s, open levels %s",
                    width,
                    at,
                    stack,
                )
                yield LexError(LexErrorKind.INCONSISTENT_DEDENT, at)

    def _close_open_blocks(self) -> Iterator[Token]:
        """Close every block still open at end of input."""
        eof = Span.at(self._byte_len)
        stack = self._indent_stack
        while len(stack) > 1:
            stack.pop()
            yield Token(TokenType.DEINDENTATION, eof)
