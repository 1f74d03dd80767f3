"""
Finder and interceptor registries owned by every business.

Finders are named query-producing callables. Businesses and behaviors
declare them with the :func:`finder` decorator; :meth:`Registry.register_finders`
collects the decorated methods of one owner. Behaviors attached through
:meth:`Registry.register_behavior` contribute one entry to each of the six
interceptor chains, in attachment order, plus their own finders.
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from behaviorable.exceptions import DuplicateFinderError, UnknownFinderError

logger = logging.getLogger(__name__)

FINDER_ATTRIBUTE = "__business_finder__"

FinderFn = Callable[[Optional[dict]], Iterable[Any]]
FindInterceptor = Callable[..., Iterable[Any]]
RecordInterceptor = Callable[[Any, Optional[dict]], Any]


def finder(name: str):
    """Declare a business or behavior method as the finder called ``name``."""

    def decorator(fn):
        setattr(fn, FINDER_ATTRIBUTE, name)
        return fn

    return decorator


def _finder_name(cls: type, attr: str) -> Optional[str]:
    """Finder name declared for ``attr`` by the nearest class in ``cls.__mro__``.

    An override without the decorator keeps the name its base declared.
    """
    for klass in cls.__mro__:
        member = klass.__dict__.get(attr)
        if member is None:
            continue
        name = getattr(member, FINDER_ATTRIBUTE, None)
        if name is not None:
            return name
    return None


def declared_finders(owner: object) -> Dict[str, Callable]:
    """Return ``{name: bound_method}`` for every finder declared on ``owner``.

    Methods are bound on ``owner`` so the most-derived override is called.
    """
    found: Dict[str, Callable] = {}
    for attr, _ in inspect.getmembers(type(owner), inspect.isfunction):
        name = _finder_name(type(owner), attr)
        if name is None:
            continue
        if name in found:
            raise DuplicateFinderError(owner, name)
        found[name] = getattr(owner, attr)
    return found


@dataclass
class InterceptorChains:
    before_find: List[FindInterceptor] = field(default_factory=list)
    after_find: List[FindInterceptor] = field(default_factory=list)
    before_save: List[RecordInterceptor] = field(default_factory=list)
    after_save: List[RecordInterceptor] = field(default_factory=list)
    before_delete: List[RecordInterceptor] = field(default_factory=list)
    after_delete: List[RecordInterceptor] = field(default_factory=list)

    HOOKS = (
        "before_find",
        "after_find",
        "before_save",
        "after_save",
        "before_delete",
        "after_delete",
    )

    def append(self, behavior: object) -> None:
        for hook in self.HOOKS:
            getattr(self, hook).append(getattr(behavior, hook))


class Registry:
    """Finder map and interceptor chains for one business instance."""

    def __init__(self):
        self._finders: Dict[str, FinderFn] = {}
        self.chains = InterceptorChains()
        self.behaviors: List[object] = []

    def add_finder(self, name: str, fn: FinderFn) -> bool:
        """Register ``fn`` under ``name`` unless the name is taken.

        Returns ``True`` when the finder was registered.
        """
        if name in self._finders:
            logger.debug(f"Finder '{name}' already registered; ignoring {fn!r}")
            return False
        self._finders[name] = fn
        return True

    def register_finders(self, owner: object) -> List[str]:
        """Register every finder declared on ``owner``; return the names added."""
        return [
            name
            for name, fn in declared_finders(owner).items()
            if self.add_finder(name, fn)
        ]

    def register_behavior(self, behavior: object) -> None:
        self.chains.append(behavior)
        self.behaviors.append(behavior)
        added = self.register_finders(behavior)
        logger.debug(
            f"Attached {type(behavior).__name__} (position {len(self.behaviors)}, finders: {added})"
        )

    def get_finder(self, name: str) -> FinderFn:
        try:
            return self._finders[name]
        except KeyError:
            raise UnknownFinderError(name, self._finders) from None

    def has_finder(self, name: str) -> bool:
        return name in self._finders

    @property
    def finder_names(self) -> List[str]:
        return list(self._finders)
