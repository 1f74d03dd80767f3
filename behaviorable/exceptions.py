"""Domain-level exceptions raised by businesses.

Interceptor stops and storage failures are reported as boolean outcomes by
the dispatcher; only programming or configuration mistakes surface as
exceptions.
"""

from __future__ import annotations

from typing import Iterable, Optional


class BehaviorableError(Exception):
    """Base class for errors raised by businesses and behaviors."""


class UnknownFinderError(BehaviorableError, LookupError):
    """Raised when ``find`` is called with a name no finder was registered under."""

    def __init__(self, name: str, available: Optional[Iterable[str]] = None):
        self.name = name
        self.available = sorted(available or [])
        super().__init__(
            f"Attempted to use undefined finder '{name}'"
            f" (available: {', '.join(self.available) or 'none'})"
        )


class DuplicateFinderError(BehaviorableError, ValueError):
    """Raised when a single owner declares two finders with the same name."""

    def __init__(self, owner: object, name: str):
        self.owner = owner
        self.name = name
        super().__init__(
            f"{type(owner).__name__} declares finder '{name}' more than once"
        )


__all__ = [
    "BehaviorableError",
    "UnknownFinderError",
    "DuplicateFinderError",
]
