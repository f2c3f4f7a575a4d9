"""Command-line driver: lex one file and print its entry stream.

Usage:
    pyrsc prog.py            # print every entry, report errors, keep going
    pyrsc --strict prog.py   # stop at the first error entry
    pyrsc --json prog.py     # print the stream as a JSON array

Exit status is 0 when the stream has no error entries, 1 otherwise. A
missing filename prints usage and exits 0.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pyrsc import errors_in, lex
from pyrsc.config import LexConfig, lex_config_context
from pyrsc.errors import LexFailure
from pyrsc.serialization import to_json
from pyrsc.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the pyrsc command.

    The filename is optional so that a missing argument can be reported
    with a usage message instead of argparse's error exit.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="pyrsc", description="Print the token stream of a source file"
    )
    parser.add_argument("input", nargs="?", help="Source file to lex")
    parser.add_argument(
        "--strict", action="store_true", help="Stop at the first error entry"
    )
    parser.add_argument("--json", action="store_true", help="Print the stream as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the driver.

    Args:
        argv: Command-line arguments, without the program name
            (defaults to sys.argv[1:])

    Returns:
        Exit status: 1 if any error entry was found, else 0

    Raises:
        OSError: If the input file cannot be read
        UnicodeDecodeError: If the input file is not valid UTF-8
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input is None:
        print("Invalid usage", file=sys.stderr)
        print(parser.format_usage().rstrip(), file=sys.stderr)
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path = args.input
    # No newline translation: spans must match the file on disk.
    # Read and decode failures propagate.
    source = Path(path).read_bytes().decode("utf-8")
    logger.debug("read %d characters from %s", len(source), path)

    with lex_config_context(LexConfig(strict=args.strict)):
        try:
            entries = lex(source, source_file=path)
        except LexFailure as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    if args.json:
        print(to_json(entries))
    else:
        for entry in entries:
            print(f"{entry!r}: {entry.span}")

    errors = errors_in(entries)
    for error in errors:
        print(f"{error.location(source, path)}: {error.message}", file=sys.stderr)
    logger.debug("lexed %d entries, %d errors", len(entries), len(errors))
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
