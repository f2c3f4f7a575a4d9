"""
pyrsc: lexer for a small indentation-sensitive, Python-like language.

Turns source text into a stream of tokens with source spans. Blocks are
delimited by indentation; the lexer inserts INDENTATION and DEINDENTATION
tokens where blocks open and close. Bad input never stops the lexer: it
shows up as LexError entries in the stream.

Quick Start:
    >>> from pyrsc import lex
    >>> for entry in lex("def f():\\n    return 1\\n"):
    ...     print(entry)
    Token(DEFINITION)
    Token(IDENTIFIER, 'f')
    ...

    >>> # Strict callers stop at the first error entry
    >>> from pyrsc import LexConfig, lex_config_context
    >>> with lex_config_context(LexConfig(strict=True)):
    ...     lex("x # y")
    Traceback (most recent call last):
    pyrsc.errors.LexFailure: 1:3 unrecognized input '#'

Installation:
    pip install pyrsc              # Core lexer (zero deps)
"""

from collections.abc import Iterable

from pyrsc.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from pyrsc.errors import LexFailure, PyrscError
from pyrsc.lexer import Lexer
from pyrsc.location import SourceLocation
from pyrsc.serialization import from_dict, from_json, to_dict, to_json
from pyrsc.tokens import Entry, LexError, LexErrorKind, Span, Token, TokenType

__version__ = "0.1.0"


def lex(source: str, *, source_file: str | None = None) -> list[Entry]:
    """Lex source into the full entry stream.

    Args:
        source: Program source text
        source_file: Optional source file path for error messages

    Returns:
        Tokens and error entries in source order

    Raises:
        LexFailure: Only when the active LexConfig is strict, at the first
            error entry

    Example:
        >>> [e.type.name for e in lex("f()")]
        ['IDENTIFIER', 'LEFT_PAREN', 'RIGHT_PAREN']
    """
    strict = get_lex_config().strict
    entries: list[Entry] = []
    for entry in Lexer(source, source_file=source_file).tokenize():
        if strict and isinstance(entry, LexError):
            raise LexFailure.from_entry(entry, source, source_file)
        entries.append(entry)
    return entries


def scan(source: str) -> list[Entry]:
    """Raw scanner output, before indentation processing.

    Newline runs are kept as NEWLINE tokens; no INDENTATION or
    DEINDENTATION tokens and no dedent errors appear.
    """
    return list(Lexer(source).scan())


def errors_in(entries: Iterable[Entry]) -> list[LexError]:
    """Return the error entries of a stream, in order."""
    return [e for e in entries if isinstance(e, LexError)]


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "lex",
    "scan",
    "errors_in",
    "Lexer",
    # Entries
    "Entry",
    "Token",
    "TokenType",
    "LexError",
    "LexErrorKind",
    "Span",
    # Location
    "SourceLocation",
    # Errors
    "PyrscError",
    "LexFailure",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
