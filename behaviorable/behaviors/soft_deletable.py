"""
SoftDeletable behavior.

Deleting a record only stamps ``deleted_at``; finds hide stamped rows by
default. Options live under the ``soft-deletable`` namespace of the
business parameters:

- ``soft-deletable.disable``: ``True`` deletes the row for real.
- ``soft-deletable.mode``: ``"not-deleted"`` (default), ``"only-deleted"``,
  or anything else (``"all"`` by convention) to return every row.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm import Query

from behaviorable.behaviors.base import BusinessBehavior
from behaviorable.behaviors.capabilities import SoftDeletable
from behaviorable.businesses.parameters import get_deep_value, set_deep_value
from behaviorable.businesses.signals import Signal
from behaviorable.db.models.base import now_utc

logger = logging.getLogger(__name__)

NAMESPACE = "soft-deletable"
DISABLE_KEY = f"{NAMESPACE}.disable"
MODE_KEY = f"{NAMESPACE}.mode"

MODE_NOT_DELETED = "not-deleted"
MODE_ONLY_DELETED = "only-deleted"
MODE_ALL = "all"


class SoftDeletableBehavior(BusinessBehavior):
    capability = SoftDeletable

    def before_delete(self, record, parameters: Optional[dict] = None):
        if get_deep_value(parameters, DISABLE_KEY) is True:
            return Signal.CONTINUE

        record.deleted_at = now_utc()
        if not self.business.save(record):
            return Signal.ABORT
        logger.info(f"Soft-deleted {type(record).__name__} {self.business.identity_of(record)}")
        return Signal.SOFT_STOP

    def after_find(self, name: str, parameters: Optional[dict], results: Optional[Iterable] = None):
        mode = get_deep_value(parameters, MODE_KEY) or MODE_NOT_DELETED
        if results is None or mode not in (MODE_NOT_DELETED, MODE_ONLY_DELETED):
            return results

        column = self.model.deleted_at
        if isinstance(results, Query):
            criterion = column.is_(None) if mode == MODE_NOT_DELETED else column.isnot(None)
            try:
                return results.filter(criterion)
            except InvalidRequestError:
                # LIMIT/OFFSET already applied: narrow the fetched page instead
                logger.debug(f"Filtering paged '{name}' results in memory")

        deleted = mode == MODE_ONLY_DELETED
        return [r for r in results if (r.deleted_at is not None) == deleted]

    def force_delete(self, record, parameters: Optional[dict] = None) -> bool:
        """Physically delete ``record`` (a row or an integer identity)."""
        if isinstance(record, int) and not isinstance(record, bool):
            parameters = set_deep_value(parameters, MODE_KEY, MODE_ALL)
            record = self.business.find_by_id(record, parameters)
            if record is None:
                return False
        parameters = set_deep_value(parameters, DISABLE_KEY, True)
        logger.info(f"Force-deleting {type(record).__name__} {self.business.identity_of(record)}")
        return self.business.delete(record, parameters)

    def restore(self, record, parameters: Optional[dict] = None) -> bool:
        record.deleted_at = None
        return self.business.save(record, parameters)
