"""
Generic business: the CRUD dispatcher shared by every storage backend.

A business owns a :class:`~behaviorable.businesses.registry.Registry` holding
its finders and the interceptor chains of its attached behaviors. ``find``,
``save`` and ``delete`` run the matching before-chain, perform the core
operation and run the after-chain. Save/delete interceptors return a
:class:`~behaviorable.businesses.signals.Signal`:

- ``CONTINUE``: proceed normally.
- ``ABORT``: stop immediately, the operation returns ``False``.
- ``SOFT_STOP``: keep running the chain but skip persistence (before-chain)
  and make the operation return ``False``.

Subclasses implement ``save_helper`` and ``delete_helper`` against their
storage and declare finders with :func:`~behaviorable.businesses.registry.finder`.
"""
from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, List, Optional, TypeVar

from behaviorable.businesses.parameters import BusinessParameters
from behaviorable.businesses.registry import Registry, RecordInterceptor
from behaviorable.businesses.signals import Signal

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_or_none(results: Optional[Iterable[T]]) -> Optional[T]:
    """Return the first element of a lazy result sequence, or ``None``."""
    if results is None:
        return None
    first = getattr(results, "first", None)
    if callable(first):
        return first()
    return next(iter(results), None)


class GenericBusiness(Generic[T]):
    """Storage-agnostic business running behaviors around find/save/delete."""

    def __init__(self):
        self.registry = Registry()
        self.registry.register_finders(self)

    # ------------------------------------------------------------------
    # Behaviors
    # ------------------------------------------------------------------
    def attach(self, behavior):
        """Attach ``behavior``; attachment order is interceptor order.

        Returns the behavior so constructors can keep a reference::

            self.sluggable = self.attach(SluggableBehavior(self))
        """
        self.registry.register_behavior(behavior)
        return behavior

    @property
    def behaviors(self) -> List[object]:
        return list(self.registry.behaviors)

    # ------------------------------------------------------------------
    # Find
    # ------------------------------------------------------------------
    def find(self, name: str = "all", parameters: Optional[dict] = None):
        """Run the finder called ``name`` through the find interceptors.

        Raises:
            UnknownFinderError: no finder is registered under ``name``.
        """
        chains = self.registry.chains
        for before_find in chains.before_find:
            before_find(name, parameters)

        results = self.registry.get_finder(name)(parameters)

        for after_find in chains.after_find:
            results = after_find(name, parameters, results)
        return results

    def find_first(self, name: str, parameters: Optional[dict] = None) -> Optional[T]:
        return first_or_none(self.find(name, parameters))

    def find_by_id(self, record_id: Any, parameters: Optional[dict] = None) -> Optional[T]:
        """Return the record the ``id`` finder yields for ``record_id``, or ``None``."""
        parameters = self.parameters(parameters)
        parameters["id"] = record_id
        return self.find_first("id", parameters)

    # ------------------------------------------------------------------
    # Save / delete
    # ------------------------------------------------------------------
    def save(self, record: T, parameters: Optional[dict] = None) -> bool:
        chains = self.registry.chains
        return self._run_pipeline(
            "save",
            record,
            parameters,
            chains.before_save,
            self.save_helper,
            chains.after_save,
        )

    def delete(self, record, parameters: Optional[dict] = None) -> bool:
        """Delete ``record``, which may also be an integer identity.

        An identity that does not resolve through the ``id`` finder returns
        ``False`` without running any delete interceptor.
        """
        if isinstance(record, int) and not isinstance(record, bool):
            found = self.find_by_id(record)
            if found is None:
                logger.debug(f"No record with id {record} to delete")
                return False
            record = found

        chains = self.registry.chains
        return self._run_pipeline(
            "delete",
            record,
            parameters,
            chains.before_delete,
            self.delete_helper,
            chains.after_delete,
        )

    def _run_pipeline(
        self,
        operation: str,
        record: T,
        parameters: Optional[dict],
        before: List[RecordInterceptor],
        helper,
        after: List[RecordInterceptor],
    ) -> bool:
        suppressed = self._run_chain(f"before_{operation}", before, record, parameters)
        if suppressed is None:
            return False

        if suppressed:
            logger.debug(f"{operation} of {record!r} suppressed by a before-{operation} interceptor")
        elif not helper(record, parameters):
            logger.warning(f"Storage refused to {operation} {record!r}")
            return False

        soft_stopped = self._run_chain(f"after_{operation}", after, record, parameters)
        if soft_stopped is None:
            return False
        return not (suppressed or soft_stopped)

    @staticmethod
    def _run_chain(
        chain_name: str,
        chain: List[RecordInterceptor],
        record: Any,
        parameters: Optional[dict],
    ) -> Optional[bool]:
        """Run ``chain`` in order.

        Returns ``None`` on ``ABORT``; otherwise whether any interceptor
        soft-stopped.
        """
        soft_stopped = False
        for interceptor in chain:
            signal = Signal.coerce(interceptor(record, parameters))
            if signal is Signal.ABORT:
                logger.debug(f"{chain_name} aborted by {interceptor!r}")
                return None
            if signal is Signal.SOFT_STOP:
                logger.debug(f"{chain_name} soft-stopped by {interceptor!r}")
                soft_stopped = True
        return soft_stopped

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    def save_helper(self, record: T, parameters: Optional[dict] = None) -> bool:
        raise NotImplementedError

    def delete_helper(self, record: T, parameters: Optional[dict] = None) -> bool:
        raise NotImplementedError

    @staticmethod
    def parameters(parameters: Optional[dict] = None) -> dict:
        """Return ``parameters`` or a fresh :class:`BusinessParameters`."""
        return BusinessParameters() if parameters is None else parameters
