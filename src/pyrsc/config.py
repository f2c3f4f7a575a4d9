"""ContextVar-based lexing configuration for pyrsc.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Lexer instances read the active config once, when they are created.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from pyrsc.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(strict=True)):
        entries = lex(source)  # raises LexFailure on the first error entry

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexing configuration.

    Note: source_file is per-call state, not configuration. It stays on the
    Lexer instance.

    Attributes:
        strict: lex() raises LexFailure at the first error entry instead of
            returning the full stream
        distinguish_overflow: Report out-of-range integer literals as
            INTEGER_OVERFLOW; when False they are UNRECOGNIZED_TOKEN

    """

    strict: bool = False
    distinguish_overflow: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> LexConfig.from_dict({"strict": True, "color": "never"}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexing configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexing configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(distinguish_overflow=False)):
        ...     entries = lex("99999999999999999999")
        >>> entries[0].kind
        <LexErrorKind.UNRECOGNIZED_TOKEN: 1>

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
