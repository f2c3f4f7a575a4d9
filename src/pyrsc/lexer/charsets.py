"""Character sets and literal tables for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from pyrsc.lexer.charsets import LETTERS

    if char in LETTERS:  # O(1) lookup
        ...
"""

from pyrsc.tokens import TokenType

# Skipped between tokens; also the indentation characters of a newline run
HORIZONTAL_WHITESPACE: frozenset[str] = frozenset(" \t")

# ASCII only; unicode letters and digits are unrecognized input
LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
DIGITS: frozenset[str] = frozenset("0123456789")

# Letter runs that are keywords rather than identifiers
KEYWORDS: dict[str, TokenType] = {
    "def": TokenType.DEFINITION,
    "return": TokenType.RETURN,
}

# Longest first so that a longer literal wins over its prefix
PUNCTUATION: tuple[tuple[str, TokenType], ...] = (
    ("->", TokenType.ARROW),
    ("(", TokenType.LEFT_PAREN),
    (")", TokenType.RIGHT_PAREN),
    (":", TokenType.COLON),
)
