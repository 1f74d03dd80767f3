"""
Movie business: the worked example wiring every bundled behavior.

Behaviors are attached in order: timestamps first so the slug sees the
final field values, then the slug, then soft deletion.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Query, Session

from behaviorable.behaviors import (
    SluggableBehavior,
    SoftDeletableBehavior,
    TimeStampableBehavior,
)
from behaviorable.businesses.orm import SQLAlchemyBusiness
from behaviorable.businesses.registry import finder
from behaviorable.db import models

MOVIE_SLUG_PROPERTIES = ("title", "release_date", "genre", "price")


class MovieBusiness(SQLAlchemyBusiness[models.Movie]):
    def __init__(self, db: Session):
        super().__init__(db, models.Movie)
        self.timestampable = self.attach(TimeStampableBehavior(self))
        self.sluggable = self.attach(SluggableBehavior(self, MOVIE_SLUG_PROPERTIES))
        self.soft_deletable = self.attach(SoftDeletableBehavior(self))

    @finder("search")
    def search_find(self, parameters: Optional[dict] = None) -> Query:
        text = (parameters or {}).get("searchstring") or ""
        return self.table.filter(models.Movie.title.contains(text, autoescape=True))

    def search(self, text: str, parameters: Optional[dict] = None):
        parameters = self.parameters(parameters)
        parameters["searchstring"] = text
        return self.find("search", parameters)

    def find_by_slug(self, slug: str, parameters: Optional[dict] = None):
        return self.sluggable.find_by_slug(slug, parameters)
