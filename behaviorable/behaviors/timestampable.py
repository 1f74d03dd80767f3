"""TimeStampable behavior: maintains ``created_at`` / ``modified_at`` on save."""
from __future__ import annotations

from typing import Optional

from behaviorable.behaviors.base import BusinessBehavior
from behaviorable.behaviors.capabilities import TimeStampable
from behaviorable.businesses.signals import Signal
from behaviorable.db.models.base import now_utc


class TimeStampableBehavior(BusinessBehavior):
    capability = TimeStampable

    def before_save(self, record, parameters: Optional[dict] = None):
        record_id = self.business.identity_of(record)
        if record_id is None:
            record.modified_at = None
            record.created_at = now_utc()
            return Signal.CONTINUE

        if record.created_at is None:
            # Callers sometimes rebuild a record from a form; keep the stored value.
            record.created_at = (
                self.business.db.query(self.model.created_at)
                .filter(self.business.identity_column == record_id)
                .scalar()
            )
        record.modified_at = now_utc()
        return Signal.CONTINUE
