"""Tokenizer configuration for hueline.

A SyntaxConfig carries the keyword and identifier sets plus the
case-sensitivity flag. Each Syntax engine takes one at construction; when
none is given, the engine reads the context default through a ContextVar
(PEP 567).

Thread Safety:
    SyntaxConfig is frozen and safe to share with background scans.
    The ContextVar default is thread-local by design.

Usage:
    config = SyntaxConfig(keywords=frozenset({"if", "else"}))
    engine = Syntax(buffer, config)

    # Or install a default for engines built in this context
    with syntax_config_context(SyntaxConfig.from_dict({"keywords": ["if"]})):
        engine = Syntax(buffer)

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SyntaxConfig:
    """Immutable tokenizer configuration.

    When case_insensitive is set, both sets are stored lower-cased so the
    tokenizer can compare lower-cased tokens directly.

    Attributes:
        keywords: Tokens classified as KEYWORD
        identifiers: Tokens classified as IDENTIFIER
        case_insensitive: Lower-case tokens before the set lookups

    """

    keywords: frozenset[str] = frozenset()
    identifiers: frozenset[str] = frozenset()
    case_insensitive: bool = False

    def __post_init__(self) -> None:
        keywords = frozenset(self.keywords)
        identifiers = frozenset(self.identifiers)
        if self.case_insensitive:
            keywords = frozenset(k.lower() for k in keywords)
            identifiers = frozenset(i.lower() for i in identifiers)
        # Frozen dataclass: bypass __setattr__ for normalization
        object.__setattr__(self, "keywords", keywords)
        object.__setattr__(self, "identifiers", identifiers)

    @classmethod
    def from_dict(cls, config_dict: dict) -> SyntaxConfig:
        """Create SyntaxConfig from dictionary.

        Useful when keyword lists come from JSON or YAML. Unknown keys are
        silently ignored; any iterable of strings is accepted for the sets.

        Args:
            config_dict: Dictionary with config values. Keys should match
                SyntaxConfig attribute names.

        Returns:
            New SyntaxConfig instance with values from dict.

        Example:
            >>> config = SyntaxConfig.from_dict({
            ...     "keywords": ["if", "else"],
            ...     "case_insensitive": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> "if" in config.keywords
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for key in ("keywords", "identifiers"):
            if key in filtered:
                filtered[key] = _as_frozenset(filtered[key])
        if "case_insensitive" in filtered:
            filtered["case_insensitive"] = bool(filtered["case_insensitive"])
        return cls(**filtered)


def _as_frozenset(values: Iterable[str] | str) -> frozenset[str]:
    # A bare string would otherwise be split into characters
    if isinstance(values, str):
        return frozenset({values})
    return frozenset(values)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: SyntaxConfig = SyntaxConfig()

_syntax_config: ContextVar[SyntaxConfig] = ContextVar(
    "syntax_config",
    default=_DEFAULT_CONFIG,
)


def get_syntax_config() -> SyntaxConfig:
    """Get the context default configuration (thread-local)."""
    return _syntax_config.get()


def set_syntax_config(config: SyntaxConfig) -> None:
    """Set the default configuration for the current context.

    Args:
        config: SyntaxConfig used by engines built without one.

    """
    _syntax_config.set(config)


def reset_syntax_config() -> None:
    """Reset to the empty default configuration."""
    _syntax_config.set(_DEFAULT_CONFIG)


@contextmanager
def syntax_config_context(config: SyntaxConfig) -> Iterator[None]:
    """Context manager for temporary default config changes.

    Restores the previous default even if an exception is raised.

    Args:
        config: SyntaxConfig to use within the context.

    Example:
        >>> with syntax_config_context(SyntaxConfig(case_insensitive=True)):
        ...     get_syntax_config().case_insensitive
        True

    """
    previous = _syntax_config.get()
    _syntax_config.set(config)
    try:
        yield
    finally:
        _syntax_config.set(previous)


__all__ = [
    "SyntaxConfig",
    "get_syntax_config",
    "reset_syntax_config",
    "set_syntax_config",
    "syntax_config_context",
]
