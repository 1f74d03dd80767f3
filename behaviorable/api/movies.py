"""
Movies API endpoints.

Thin HTTP surface over :class:`MovieBusiness`; every write goes through
the business so timestamps, slugs and soft deletion apply.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from behaviorable.api.deps import get_movie_business
from behaviorable.behaviors.soft_deletable import MODE_KEY, MODE_NOT_DELETED
from behaviorable.businesses.movies import MovieBusiness
from behaviorable.businesses.parameters import set_deep_value
from behaviorable.db import models, schemas

router = APIRouter(prefix="/movies", tags=["movies"])


def _get_movie_or_404(business: MovieBusiness, movie_id: int, mode: Optional[str] = None) -> models.Movie:
    parameters = set_deep_value(None, MODE_KEY, mode) if mode else None
    movie = business.find_by_id(movie_id, parameters)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@router.get("/", response_model=List[schemas.Movie])
def list_movies(
    search: Optional[str] = None,
    mode: str = Query(MODE_NOT_DELETED, pattern="^(not-deleted|only-deleted|all)$"),
    business: MovieBusiness = Depends(get_movie_business),
):
    parameters = set_deep_value(None, MODE_KEY, mode)
    if search:
        results = business.search(search, parameters)
    else:
        results = business.find("all", parameters)
    return list(results)


@router.get("/{slug}", response_model=schemas.Movie)
def get_movie_by_slug(slug: str, business: MovieBusiness = Depends(get_movie_business)):
    movie = business.find_by_slug(slug)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@router.post("/", response_model=schemas.Movie, status_code=status.HTTP_201_CREATED)
def create_movie(movie: schemas.MovieCreate, business: MovieBusiness = Depends(get_movie_business)):
    db_movie = models.Movie(**movie.model_dump())
    if not business.save(db_movie):
        raise HTTPException(status_code=400, detail="Movie could not be saved")
    return db_movie


@router.put("/{movie_id}", response_model=schemas.Movie)
def update_movie(
    movie_id: int,
    movie: schemas.MovieUpdate,
    business: MovieBusiness = Depends(get_movie_business),
):
    db_movie = _get_movie_or_404(business, movie_id)
    for key, value in movie.model_dump(exclude_unset=True).items():
        setattr(db_movie, key, value)
    if not business.save(db_movie):
        raise HTTPException(status_code=400, detail="Movie could not be saved")
    return db_movie


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(
    movie_id: int,
    force: bool = False,
    business: MovieBusiness = Depends(get_movie_business),
):
    if force:
        db_movie = _get_movie_or_404(business, movie_id, mode="all")
        if not business.soft_deletable.force_delete(db_movie):
            raise HTTPException(status_code=400, detail="Movie could not be deleted")
        return None

    db_movie = _get_movie_or_404(business, movie_id)
    # Soft deletion reports False; the marker tells whether it happened.
    business.delete(db_movie)
    if db_movie.deleted_at is None:
        raise HTTPException(status_code=400, detail="Movie could not be deleted")
    return None


@router.post("/{movie_id}/restore", response_model=schemas.Movie)
def restore_movie(movie_id: int, business: MovieBusiness = Depends(get_movie_business)):
    db_movie = _get_movie_or_404(business, movie_id, mode="only-deleted")
    if not business.soft_deletable.restore(db_movie):
        raise HTTPException(status_code=400, detail="Movie could not be restored")
    return db_movie
