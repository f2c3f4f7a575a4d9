"""Utility modules for pyrsc.

Provides:
- logger: get_logger for logging
"""

from pyrsc.utils.logger import get_logger

__all__ = [
    "get_logger",
]
