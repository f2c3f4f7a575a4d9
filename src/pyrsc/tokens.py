"""Token, Span and error-entry definitions for the pyrsc lexer.

The lexer produces a stream of entries. Each entry is either a Token or a
LexError standing in for a token that could not be produced. Both carry a
Span locating them in the source.

Thread Safety:
Token, Span and LexError are frozen (immutable) and safe to share across threads.
TokenType and LexErrorKind are enums (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyrsc.location import SourceLocation

# Largest value an INTEGER token may carry (signed 64-bit)
INT64_MAX = 2**63 - 1


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Keywords (def, return)
    - Names and literals
    - Punctuation
    - Layout (newline runs and the synthetic block tokens)

    """

    # Keywords
    DEFINITION = auto()  # def
    RETURN = auto()  # return

    # Names and literals
    IDENTIFIER = auto()  # [A-Za-z]+
    INTEGER = auto()  # [0-9]+

    # Punctuation
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    ARROW = auto()  # ->
    COLON = auto()  # :

    # Layout
    NEWLINE = auto()  # \n, blank lines, next line's indent
    INDENTATION = auto()  # synthetic, block opens
    DEINDENTATION = auto()  # synthetic, block closes


class LexErrorKind(Enum):
    """Reasons an error entry appears in the stream."""

    UNRECOGNIZED_TOKEN = auto()  # input matches no lexical pattern
    INTEGER_OVERFLOW = auto()  # digits do not fit in 64 bits
    INCONSISTENT_DEDENT = auto()  # dedent to a width never opened


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range ``[start, end)`` of UTF-8 byte offsets into the source.

    Synthetic tokens use a zero-width span (``start == end``).
    """

    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """True for zero-width spans."""
        return self.start == self.end

    @classmethod
    def at(cls, offset: int) -> Span:
        """Zero-width span at offset."""
        return cls(offset, offset)

    def slice(self, source: str) -> str:
        """Return the source text covered by this span."""
        if source.isascii():
            return source[self.start : self.end]
        data = source.encode("utf-8", "surrogatepass")
        return data[self.start : self.end].decode("utf-8", "surrogatepass")


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        span: Where the token sits in the source
        value: Payload; identifier text for IDENTIFIER, the parsed int
            for INTEGER, the matched run for NEWLINE, None otherwise

    """

    type: TokenType
    span: Span
    value: str | int | None = None

    is_error = False

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type in (TokenType.IDENTIFIER, TokenType.INTEGER):
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"

    @property
    def is_synthetic(self) -> bool:
        """True for tokens inserted by the indentation pass."""
        return self.type in (TokenType.INDENTATION, TokenType.DEINDENTATION)

    def location(self, source: str, source_file: str | None = None) -> SourceLocation:
        """Line/column location of this token within source."""
        from pyrsc.location import SourceLocation

        return SourceLocation.from_span(source, self.span, source_file)


@dataclass(frozen=True, slots=True)
class LexError:
    """An error entry standing in place of a token.

    Errors are data: the lexer records them in the stream and keeps going.
    Whether an error is fatal is up to the caller.

    Attributes:
        kind: What went wrong
        span: The offending source range (zero-width for dedent errors)
        text: The offending source text, if any

    """

    kind: LexErrorKind
    span: Span
    text: str = ""

    is_error = True

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.text:
            return f"LexError({self.kind.name}, {self.text!r})"
        return f"LexError({self.kind.name})"

    @property
    def message(self) -> str:
        """Human-readable description for diagnostics."""
        if self.kind is LexErrorKind.INTEGER_OVERFLOW:
            return f"integer literal {self.text} does not fit in 64 bits"
        if self.kind is LexErrorKind.INCONSISTENT_DEDENT:
            return "unindent does not match any outer indentation level"
        return f"unrecognized input {self.text!r}"

    def location(self, source: str, source_file: str | None = None) -> SourceLocation:
        """Line/column location of this error within source."""
        from pyrsc.location import SourceLocation

        return SourceLocation.from_span(source, self.span, source_file)


# A single stream entry
Entry = Token | LexError
