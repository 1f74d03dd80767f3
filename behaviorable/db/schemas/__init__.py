"""
Pydantic schemas for the example models.
"""

from .movies import MovieBase, MovieCreate, MovieUpdate, Movie

__all__ = [
    "MovieBase",
    "MovieCreate",
    "MovieUpdate",
    "Movie",
]
