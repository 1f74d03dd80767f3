"""
SQLAlchemy-backed business.

Binds a :class:`GenericBusiness` to one mapped model and a ``Session``.
Finders return lazy ``Query`` objects so after-find interceptors can keep
narrowing them before anything hits the database.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Type, Union

from sqlalchemy import false, inspect as sa_inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from behaviorable.businesses.base import GenericBusiness, T
from behaviorable.businesses.registry import finder

logger = logging.getLogger(__name__)


@dataclass
class BusinessQuery:
    """Criteria applied by the ``all`` finder when passed as ``parameters["query"]``."""

    where: Union[Any, Sequence[Any], None] = None
    order_by: Union[Any, Sequence[Any], None] = None


def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class SQLAlchemyBusiness(GenericBusiness[T]):
    """Business persisting ``model`` rows through ``db``."""

    identity_field = "id"

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model
        super().__init__()

    @property
    def table(self) -> Query:
        return self.db.query(self.model)

    @property
    def identity_column(self):
        return getattr(self.model, self.identity_field)

    def identity_of(self, record: T) -> Optional[int]:
        return getattr(record, self.identity_field, None)

    # ------------------------------------------------------------------
    # Finders
    # ------------------------------------------------------------------
    @finder("all")
    def default_find(self, parameters: Optional[dict] = None) -> Query:
        target = self.table
        query = (parameters or {}).get("query")
        if query is not None:
            criteria = _as_list(query.where)
            if criteria:
                target = target.filter(*criteria)
            ordering = _as_list(query.order_by)
            if ordering:
                target = target.order_by(*ordering)
        return target

    @finder("id")
    def id_find(self, parameters: Optional[dict] = None) -> Query:
        record_id = (parameters or {}).get("id")
        if record_id is None:
            return self.table.filter(false())
        return self.table.filter(self.identity_column == record_id)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    def save_helper(self, record: T, parameters: Optional[dict] = None) -> bool:
        identity = self.identity_of(record)
        try:
            if identity is None:
                self.db.add(record)
                self.db.commit()
                self.db.refresh(record)
            elif record in self.db:
                self.db.commit()
                self.db.refresh(record)
            else:
                self.db.merge(record)
                self.db.commit()
            return True
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to save {self.model.__name__} {identity}")
            return False

    def delete_helper(self, record: T, parameters: Optional[dict] = None) -> bool:
        identity = self.identity_of(record)
        try:
            if sa_inspect(record).detached:
                record = self.db.merge(record)
            self.db.delete(record)
            self.db.commit()
            return True
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to delete {self.model.__name__} {identity}")
            return False
