"""Two-pass lexer for the pyrsc toy language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + public API)
├── charsets.py          # Character classes, keywords, punctuation table
├── scanner.py           # Raw scanning pass (maximal munch)
└── indentation.py       # Off-side rule pass (indent stack)

Usage:
    >>> from pyrsc.lexer import Lexer
    >>> for entry in Lexer("x\\n  y").tokenize():
    ...     print(entry)
Token(IDENTIFIER, 'x')
Token(NEWLINE)
Token(INDENTATION)
Token(IDENTIFIER, 'y')
Token(DEINDENTATION)

"""

from pyrsc.lexer.core import Lexer

__all__ = ["Lexer"]
