"""
Shared FastAPI dependencies.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from behaviorable.businesses.movies import MovieBusiness
from behaviorable.db.database import get_db


def get_movie_business(db: Session = Depends(get_db)) -> MovieBusiness:
    return MovieBusiness(db)
