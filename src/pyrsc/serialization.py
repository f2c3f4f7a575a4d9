"""Entry serialization: JSON round-trip for lexer output.

Converts Token and LexError entries to/from JSON-compatible dicts. Useful for:
- Feeding the token stream to tools written in other languages
- Golden-file tests
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from pyrsc import lex
    from pyrsc.serialization import to_json, from_json

    entries = lex("def f():\\n    return 1\\n")
    restored = from_json(to_json(entries))
    assert restored == entries

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from pyrsc.tokens import Entry, LexError, LexErrorKind, Span, Token, TokenType


def to_dict(entry: Entry) -> dict[str, Any]:
    """Convert an entry to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        entry: A Token or LexError.

    Returns:
        Dict with ``_type``, the kind, the span and the payload.

    """
    span = {"start": entry.span.start, "end": entry.span.end}
    if isinstance(entry, LexError):
        return {
            "_type": "LexError",
            "kind": entry.kind.name,
            "span": span,
            "text": entry.text,
        }
    return {
        "_type": "Token",
        "type": entry.type.name,
        "span": span,
        "value": entry.value,
    }


def from_dict(data: dict[str, Any]) -> Entry:
    """Reconstruct an entry from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        Token or LexError.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized entry"
        raise ValueError(msg)

    span = Span(data["span"]["start"], data["span"]["end"])
    if type_name == "Token":
        return Token(TokenType[data["type"]], span, data.get("value"))
    if type_name == "LexError":
        return LexError(LexErrorKind[data["kind"]], span, data.get("text", ""))

    msg = f"Unknown entry type: {type_name!r}"
    raise ValueError(msg)


def to_json(entries: Iterable[Entry], *, indent: int | None = None) -> str:
    """Serialize an entry stream to a JSON array.

    Args:
        entries: Entries to serialize, in stream order.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(e) for e in entries], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Entry]:
    """Deserialize an entry stream from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Entries in stream order.

    """
    return [from_dict(item) for item in json.loads(data)]
