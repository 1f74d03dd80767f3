"""
SQLAlchemy models.

Exposes `Base`, `now_utc`, and the example ORM classes.
"""

from .base import Base, now_utc  # re-export

from .movies import Movie

__all__ = [
    "Base",
    "now_utc",
    "Movie",
]
