"""ContextVar-based parse configuration for Tinta.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The default configuration reproduces the core grammar exactly; every field
is an opt-in extension or a default a host application may want to change.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Explicit config for one call
    blocks = segment_blocks(text, config=ParseConfig(merge_blockquotes=True))

    # Or for everything inside a block
    with parse_config_context(ParseConfig(image_blocks_enabled=True)):
        doc = parse(text)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        image_blocks_enabled: Recognize lines of the form ``![alt](src)`` as
            Image blocks instead of paragraph text
        merge_blockquotes: Join consecutive ``> `` lines into one BlockQuote
        opaque_kinds: Sentinel kinds accepted as Opaque blocks (None accepts
            every kind)
        default_language: Language tag for fences without an info string

    """

    image_blocks_enabled: bool = False
    merge_blockquotes: bool = False
    opaque_kinds: frozenset[str] | None = None
    default_language: str = "text"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from a dictionary.

        Unknown keys are ignored. ``opaque_kinds`` may be any iterable of
        strings (a YAML or JSON list, typically).

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "merge_blockquotes": True,
            ...     "opaque_kinds": ["ad"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.opaque_kinds
            frozenset({'ad'})

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        kinds = filtered.get("opaque_kinds")
        if kinds is not None and not isinstance(kinds, frozenset):
            filtered["opaque_kinds"] = frozenset(kinds)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the active parse configuration for this thread/context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context.

    Only affects the current thread's context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(merge_blockquotes=True)):
        ...     blocks = segment_blocks("> a\\n> b")
        >>> len(blocks)
        1

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
