"""Record capabilities required by the bundled behaviors."""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    # ``None`` marks a record that has not been persisted yet.
    id: Optional[int]


@runtime_checkable
class Sluggable(Identifiable, Protocol):
    slug: Optional[str]


@runtime_checkable
class SoftDeletable(Identifiable, Protocol):
    deleted_at: Optional[datetime]


@runtime_checkable
class TimeStampable(Identifiable, Protocol):
    created_at: Optional[datetime]
    modified_at: Optional[datetime]


def required_fields(capability: type) -> list[str]:
    """Return the attribute names a capability protocol requires, base first."""
    fields: list[str] = []
    for klass in reversed(capability.__mro__):
        if klass is object or klass.__module__ == "typing":
            continue
        for name in getattr(klass, "__annotations__", {}):
            if name not in fields:
                fields.append(name)
    return fields


def missing_fields(model: type, capability: type) -> list[str]:
    return [name for name in required_fields(capability) if not hasattr(model, name)]
