"""ContextVar-based tokenizer configuration for wikilex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The tokenizer reads the active config once per tokenize() call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from wikilex import tokenize
    from wikilex.config import TokenizeConfig, tokenize_config_context

    # A wiki without the Cite extension, with a site-specific parser hook
    config = TokenizeConfig(extension_tags_enabled=False, extra_tags=frozenset({"ref"}))
    with tokenize_config_context(config):
        tokens = tokenize(source)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from wikilex.errors import ConfigError


def _coerce_tag_names(raw: Any) -> frozenset[str]:
    """Validate a collection of tag names and freeze it.

    Raises:
        ConfigError: If raw is a bare string or not iterable, or holds a
            name that is not a string or is blank.
    """
    if isinstance(raw, str) or not hasattr(raw, "__iter__"):
        raise ConfigError("extra_tags", f"expected a collection of names, got {raw!r}")
    names = list(raw)
    for name in names:
        if not isinstance(name, str):
            raise ConfigError("extra_tags", f"tag names must be strings, got {name!r}")
        if not name.strip():
            raise ConfigError("extra_tags", f"tag names must not be blank, got {name!r}")
    return frozenset(names)


@dataclass(frozen=True, slots=True)
class TokenizeConfig:
    """Immutable tokenizer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Note: source_file is intentionally excluded. It's per-call state,
    passed to tokenize() directly.

    Attributes:
        extension_tags_enabled: Recognize wiki extension tags (``<ref>``,
            ``<nowiki>``, ...). When False only HTML tags are recognized.
        extra_tags: Additional extension tag names registered by the site.
            Always recognized, regardless of extension_tags_enabled.
            Any collection of strings is accepted and stored as a frozenset.

    """

    extension_tags_enabled: bool = True
    extra_tags: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        # Accept any collection of names; the stored value must stay hashable.
        object.__setattr__(self, "extra_tags", _coerce_tag_names(self.extra_tags))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "TokenizeConfig":
        """Create TokenizeConfig from a mapping.

        Unknown keys are silently ignored. ``extra_tags`` accepts any
        iterable of strings (a YAML or JSON list, typically).

        Args:
            config_dict: Mapping with config values. Keys should match
                TokenizeConfig attribute names.

        Returns:
            New TokenizeConfig instance with values from the mapping.

        Raises:
            ConfigError: If a known key has a value of the wrong type, or
                extra_tags holds a blank name.

        Example:
            >>> config = TokenizeConfig.from_dict({
            ...     "extra_tags": ["quiz", "rss"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.extra_tags)
            ['quiz', 'rss']

        """
        kwargs: dict[str, Any] = {}

        if "extension_tags_enabled" in config_dict:
            enabled = config_dict["extension_tags_enabled"]
            if not isinstance(enabled, bool):
                raise ConfigError("extension_tags_enabled", f"expected bool, got {enabled!r}")
            kwargs["extension_tags_enabled"] = enabled

        if "extra_tags" in config_dict:
            kwargs["extra_tags"] = config_dict["extra_tags"]

        return cls(**kwargs)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizeConfig = TokenizeConfig()

# Thread-local configuration via ContextVar
_tokenize_config: ContextVar[TokenizeConfig] = ContextVar(
    "tokenize_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenize_config() -> TokenizeConfig:
    """Get current tokenizer configuration (thread-local)."""
    return _tokenize_config.get()


def set_tokenize_config(config: TokenizeConfig) -> None:
    """Set tokenizer configuration for current context.

    Args:
        config: TokenizeConfig instance to use for this context.

    """
    _tokenize_config.set(config)


def reset_tokenize_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _tokenize_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenize_config_context(config: TokenizeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TokenizeConfig to use within the context.

    Yields:
        None

    Example:
        >>> with tokenize_config_context(TokenizeConfig(extension_tags_enabled=False)):
        ...     tokens = tokenize("<ref>x</ref>")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _tokenize_config.get()
    _tokenize_config.set(config)
    try:
        yield
    finally:
        _tokenize_config.set(previous)


__all__ = [
    "TokenizeConfig",
    "get_tokenize_config",
    "set_tokenize_config",
    "reset_tokenize_config",
    "tokenize_config_context",
]
