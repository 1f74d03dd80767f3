"""
Hierarchical parameter map passed through every business operation.

``BusinessParameters`` is a plain ``dict`` with helpers for dotted-path
access, so behaviors can share namespaced options without agreeing on a
schema up front::

    params = set_deep_value(None, "soft-deletable.mode", "all")
    params.get_deep_value("soft-deletable.mode")  # -> "all"
    params.get_deep_value("soft-deletable.disable")  # -> None
"""
from __future__ import annotations

from typing import Any, Optional

SEPARATOR = "."


def get_deep_value(parameters: Optional[dict], key: str, default: Any = None) -> Any:
    """Return the value stored under a dotted ``key``.

    Returns ``default`` when ``parameters`` is ``None``, when any segment is
    missing, when an intermediate value is not a map, or when the stored
    value is ``None``.
    """
    current: Any = parameters
    for part in key.split(SEPARATOR):
        if not isinstance(current, dict):
            return default
        current = current.get(part)
        if current is None:
            return default
    return current


def set_deep_value(parameters: Optional[dict], key: str, value: Any) -> dict:
    """Store ``value`` under a dotted ``key`` and return the root map.

    A new :class:`BusinessParameters` root is created when ``parameters`` is
    ``None``. Missing or non-map intermediate segments are replaced by empty
    nested maps; the last segment is overwritten whatever it held.
    """
    if parameters is None:
        parameters = BusinessParameters()
    root = parameters
    *parents, last = key.split(SEPARATOR)
    for part in parents:
        child = parameters.get(part)
        if not isinstance(child, dict):
            child = BusinessParameters()
            parameters[part] = child
        parameters = child
    parameters[last] = value
    return root


class BusinessParameters(dict):
    """Ordered string-keyed map whose values may be nested maps."""

    def get_deep_value(self, key: str, default: Any = None) -> Any:
        return get_deep_value(self, key, default)

    def set_deep_value(self, key: str, value: Any) -> "BusinessParameters":
        set_deep_value(self, key, value)
        return self
