"""Logger lookup for pyrsc modules.

Every module logs through a child of the ``pyrsc`` logger, so one
``logging.getLogger("pyrsc").setLevel(...)`` call controls the package.
pyrsc adds no handlers; the driver's ``--verbose`` flag or the embedding
application configures output.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for name, under the ``pyrsc`` namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        logging.Logger named ``name`` if it is already ``pyrsc`` or below it,
        else ``pyrsc.<name>``

    Example:
        >>> get_logger("pyrsc.lexer.scanner").name
        'pyrsc.lexer.scanner'
        >>> get_logger("driver").name
        'pyrsc.driver'
    """
    if name != "pyrsc" and not name.startswith("pyrsc."):
        name = f"pyrsc.{name}"
    return logging.getLogger(name)
