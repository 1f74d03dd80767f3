"""
Sluggable behavior.

Before every save, builds a URL-safe slug from one or more record fields and
stores it on the record. Slugs are kept unique: when another row already
uses the candidate, a counter is appended (``the-matrix``, ``the-matrix__2``,
``the-matrix__3``...).

The collision check reads then writes, so two concurrent saves of the same
base slug can still both succeed; a unique index on the slug column is the
place to close that gap.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import false
from sqlalchemy.orm import Query

from behaviorable.behaviors.base import BusinessBehavior
from behaviorable.behaviors.capabilities import Sluggable
from behaviorable.businesses.registry import finder
from behaviorable.businesses.signals import Signal
from behaviorable.utils import slugs
from behaviorable.utils.settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_SLUGGED_PROPERTIES = ("title",)


class SluggableBehavior(BusinessBehavior):
    capability = Sluggable

    def __init__(self, business, slugged_properties: Optional[Sequence[str]] = None):
        super().__init__(business)
        self.slugged_properties = tuple(slugged_properties or DEFAULT_SLUGGED_PROPERTIES)

    # Exposed for callers that want the normalization without a business.
    generate_slug = staticmethod(slugs.generate_slug)
    remove_diacritics = staticmethod(slugs.remove_diacritics)

    def build_slug(self, record) -> str:
        return slugs.join_slug(getattr(record, prop) for prop in self.slugged_properties)

    def find_used_slug(self, record, candidate: str) -> Optional[str]:
        """Return the slug of another row already using ``candidate``, if any."""
        model = self.model
        query = self.business.db.query(model.slug).filter(model.slug == candidate)
        record_id = self.business.identity_of(record)
        if record_id is not None:
            query = query.filter(self.business.identity_column != record_id)
        row = query.first()
        return row.slug if row is not None else None

    def unique_slug(self, record, base: str) -> str:
        separator = get_settings().slug_separator
        candidate = base
        used = self.find_used_slug(record, candidate)
        while used:
            counter = slugs.split_counter(used, separator) + 1
            candidate = f"{base}{separator}{counter}"
            logger.debug(f"Slug '{used}' taken; trying '{candidate}'")
            used = self.find_used_slug(record, candidate)
        return candidate

    def before_save(self, record, parameters: Optional[dict] = None):
        record.slug = self.unique_slug(record, self.build_slug(record))
        return Signal.CONTINUE

    @finder("slug")
    def slug_find(self, parameters: Optional[dict] = None) -> Query:
        """Rows whose slug equals ``parameters["slug"]``; empty when the key is absent."""
        slug = (parameters or {}).get("slug")
        if slug is None:
            return self.business.table.filter(false())
        return self.business.table.filter(self.model.slug == slug)

    def find_by_slug(self, slug: str, parameters: Optional[dict] = None):
        parameters = self.business.parameters(parameters)
        parameters["slug"] = slug
        return self.business.find_first("slug", parameters)
