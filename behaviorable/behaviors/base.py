"""
Behavior base classes.

A behavior plugs into a business by exposing six interceptors. Inheriting
from :class:`BaseBehavior` provides no-op defaults so subclasses only
override the callbacks they need.
"""
from __future__ import annotations

from typing import Any, Generic, Iterable, Optional, TypeVar

from behaviorable.behaviors.capabilities import missing_fields
from behaviorable.businesses.signals import Signal, SignalLike

T = TypeVar("T")


class BaseBehavior(Generic[T]):
    def before_find(
        self, name: str, parameters: Optional[dict], results: Optional[Iterable[T]] = None
    ) -> Optional[Iterable[T]]:
        return results

    def after_find(
        self, name: str, parameters: Optional[dict], results: Optional[Iterable[T]] = None
    ) -> Optional[Iterable[T]]:
        return results

    def before_save(self, record: T, parameters: Optional[dict] = None) -> SignalLike:
        return Signal.CONTINUE

    def after_save(self, record: T, parameters: Optional[dict] = None) -> SignalLike:
        return Signal.CONTINUE

    def before_delete(self, record: T, parameters: Optional[dict] = None) -> SignalLike:
        return Signal.CONTINUE

    def after_delete(self, record: T, parameters: Optional[dict] = None) -> SignalLike:
        return Signal.CONTINUE


class BusinessBehavior(BaseBehavior[T]):
    """Behavior holding a back-reference to the business it is attached to.

    The business owns the behavior; the behavior only borrows the business
    to run queries or nested saves. Subclasses set ``capability`` to the
    protocol the business model must satisfy.
    """

    capability: Optional[type] = None

    def __init__(self, business: Any):
        self.business = business
        model = getattr(business, "model", None)
        if self.capability is not None and model is not None:
            missing = missing_fields(model, self.capability)
            if missing:
                raise TypeError(
                    f"{type(self).__name__} requires {model.__name__} to define: {', '.join(missing)}"
                )

    @property
    def model(self):
        return self.business.model
