"""Environment-driven settings for the bundled behaviors."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_SLUG_MAX_LENGTH = 45
DEFAULT_SLUG_SEPARATOR = "__"


@dataclass(frozen=True)
class Settings:
    slug_max_length: int = DEFAULT_SLUG_MAX_LENGTH
    slug_separator: str = DEFAULT_SLUG_SEPARATOR


def _normalize_int(value: str | None, default: int) -> int:
    """Return a positive integer parsed from an environment-style value."""
    if value is None:
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings sourced from the environment."""
    separator = os.getenv("BEHAVIORABLE_SLUG_SEPARATOR") or DEFAULT_SLUG_SEPARATOR
    return Settings(
        slug_max_length=_normalize_int(
            os.getenv("BEHAVIORABLE_SLUG_MAX_LENGTH"), DEFAULT_SLUG_MAX_LENGTH
        ),
        slug_separator=separator,
    )


def refresh_settings() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
