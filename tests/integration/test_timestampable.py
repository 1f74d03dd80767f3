from behaviorable.db import models


def test_new_record_gets_created_at_only(movies):
    movie = models.Movie(title="Alien", modified_at=models.now_utc())
    assert movies.save(movie) is True
    assert movie.created_at is not None
    assert movie.modified_at is None


def test_update_sets_modified_at_and_keeps_created_at(movies):
    movie = models.Movie(title="Alien")
    movies.save(movie)
    created_at = movie.created_at

    movie.genre = "Horror"
    assert movies.save(movie) is True
    assert movie.created_at == created_at
    assert movie.modified_at is not None


def test_missing_created_at_is_backfilled_from_storage(movies, db_session):
    movie = models.Movie(title="Alien")
    movies.save(movie)
    movie_id = movie.id
    created_at = movie.created_at
    db_session.expunge(movie)

    rebuilt = models.Movie(id=movie_id, title="Alien", created_at=None)
    assert movies.save(rebuilt) is True
    assert rebuilt.created_at == created_at
    assert rebuilt.modified_at is not None
