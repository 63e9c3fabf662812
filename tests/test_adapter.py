"""
Tests for MovieAdapter: data handling against in-memory SQLite,
error handling with mocked failing sessions.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from movie_api.adapter import MovieAdapter
from movie_api.models import Movie

from conftest import make_movie


def _db_down() -> OperationalError:
    return OperationalError("SELECT", {}, Exception("database is unavailable"))


@pytest.fixture
def adapter(db_session: Session) -> MovieAdapter:
    return MovieAdapter(db_session)


@pytest.fixture
def failing_session() -> MagicMock:
    session = MagicMock(spec=Session)
    session.query.side_effect = _db_down()
    return session


def _insert(db_session: Session, **fields) -> Movie:
    movie = Movie(**make_movie(**fields))
    db_session.add(movie)
    db_session.commit()
    db_session.refresh(movie)
    return movie


# -----------------------------
# list_movies
# -----------------------------
def test_list_movies_on_empty_store(adapter: MovieAdapter) -> None:
    assert adapter.list_movies() == {"status": 200, "data": [], "error": None}


def test_list_movies_returns_serialized_records(adapter: MovieAdapter, db_session: Session) -> None:
    first = _insert(db_session, name="Alien", year=1979, rating=8.5)
    second = _insert(db_session, name="Aliens", year=1986, rating=8.4)

    result = adapter.list_movies()

    assert result["status"] == 200
    assert result["data"] == [
        {"id": first.id, "name": "Alien", "year": 1979, "rating": 8.5},
        {"id": second.id, "name": "Aliens", "year": 1986, "rating": 8.4},
    ]


def test_list_movies_store_failure(failing_session: MagicMock) -> None:
    result = MovieAdapter(failing_session).list_movies()

    assert result == {"status": 500, "data": None, "error": "Failed to retrieve movies"}
    failing_session.rollback.assert_called_once()


# -----------------------------
# get_movie_by_id / get_movie_by_name
# -----------------------------
def test_get_movie_by_id(adapter: MovieAdapter, db_session: Session) -> None:
    movie = _insert(db_session, name="Heat", year=1995, rating=8.3)

    result = adapter.get_movie_by_id(movie.id)

    assert result == {
        "status": 200,
        "data": {"id": movie.id, "name": "Heat", "year": 1995, "rating": 8.3},
        "error": None,
    }


def test_get_movie_by_id_is_repeatable(adapter: MovieAdapter, db_session: Session) -> None:
    movie = _insert(db_session)

    assert adapter.get_movie_by_id(movie.id) == adapter.get_movie_by_id(movie.id)


def test_get_movie_by_id_not_found(adapter: MovieAdapter) -> None:
    assert adapter.get_movie_by_id(999) == {"status": 404, "data": None, "error": "Movie with 999 not found"}


def test_get_movie_by_id_store_failure(failing_session: MagicMock) -> None:
    result = MovieAdapter(failing_session).get_movie_by_id(1)

    assert result == {"status": 500, "data": None, "error": "Internal server error"}


def test_get_movie_by_name(adapter: MovieAdapter, db_session: Session) -> None:
    movie = _insert(db_session, name="Ran")

    result = adapter.get_movie_by_name("Ran")

    assert result["status"] == 200
    assert result["data"]["id"] == movie.id


def test_get_movie_by_name_not_found(adapter: MovieAdapter) -> None:
    result = adapter.get_movie_by_name("Nonexistent Movie")

    assert result == {"status": 404, "data": None, "error": "Movie with name Nonexistent Movie not found"}


def test_get_movie_by_name_store_failure(failing_session: MagicMock) -> None:
    assert MovieAdapter(failing_session).get_movie_by_name("Ran")["status"] == 500


# -----------------------------
# add_movie
# -----------------------------
def test_add_movie_assigns_id(adapter: MovieAdapter) -> None:
    result = adapter.add_movie({"name": "Inception", "year": 2010, "rating": 8.8})

    assert result["status"] == 200
    assert result["data"]["name"] == "Inception"
    assert isinstance(result["data"]["id"], int)
    assert "error" not in result


def test_add_movie_with_client_id(adapter: MovieAdapter, db_session: Session) -> None:
    result = adapter.add_movie({"name": "Inception", "year": 2010, "rating": 8.8}, 42)

    assert result["data"]["id"] == 42
    assert db_session.get(Movie, 42).name == "Inception"


def test_add_movie_duplicate_name_does_not_insert(adapter: MovieAdapter, db_session: Session) -> None:
    _insert(db_session, name="Inception")

    with patch.object(db_session, "add") as add:
        result = adapter.add_movie({"name": "Inception", "year": 2010, "rating": 8.8})

    assert result == {"status": 409, "error": "Movie Inception already exists"}
    add.assert_not_called()


def test_add_movie_taken_id_does_not_insert(adapter: MovieAdapter, db_session: Session) -> None:
    existing = _insert(db_session, name="Heat")

    with patch.object(db_session, "add") as add:
        result = adapter.add_movie({"name": "Ronin", "year": 1998, "rating": 7.2}, existing.id)

    assert result == {"status": 409, "error": f"Movie with id {existing.id} already exists"}
    add.assert_not_called()


def test_add_movie_unique_violation_on_insert_is_conflict() -> None:
    session = MagicMock(spec=Session)
    session.query.return_value.filter.return_value.first.return_value = None
    session.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: movies.name"))

    result = MovieAdapter(session).add_movie({"name": "Inception", "year": 2010, "rating": 8.8})

    assert result == {"status": 409, "error": "Movie Inception already exists"}
    session.rollback.assert_called_once()


def test_add_movie_store_failure(failing_session: MagicMock) -> None:
    result = MovieAdapter(failing_session).add_movie({"name": "Inception", "year": 2010, "rating": 8.8})

    assert result == {"status": 500, "error": "Internal server error"}


def test_add_movie_non_unique_integrity_error_is_500() -> None:
    session = MagicMock(spec=Session)
    session.query.return_value.filter.return_value.first.return_value = None
    session.commit.side_effect = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed: movies.rating"))

    result = MovieAdapter(session).add_movie({"name": "Inception", "year": 2010, "rating": 8.8})

    assert result == {"status": 500, "error": "Internal server error"}
    session.rollback.assert_called_once()


# -----------------------------
# update_movie
# -----------------------------
def test_update_movie_changes_only_supplied_fields(adapter: MovieAdapter, db_session: Session) -> None:
    movie = _insert(db_session, name="Heat", year=1995, rating=8.0)

    result = adapter.update_movie({"rating": 8.3}, movie.id)

    assert result == {"status": 200, "data": {"id": movie.id, "name": "Heat", "year": 1995, "rating": 8.3}}


def test_update_movie_ignores_body_id(adapter: MovieAdapter, db_session: Session) -> None:
    movie = _insert(db_session, name="Heat")

    result = adapter.update_movie({"id": 555, "year": 1996}, movie.id)

    assert result["data"]["id"] == movie.id
    assert db_session.get(Movie, 555) is None


def test_update_movie_not_found_does_not_update(adapter: MovieAdapter, db_session: Session) -> None:
    with patch.object(db_session, "commit") as commit:
        result = adapter.update_movie({"rating": 1.0}, 999)

    assert result == {"status": 404, "error": "Movie with id 999 not found"}
    commit.assert_not_called()


def test_update_movie_to_taken_name_is_conflict(adapter: MovieAdapter, db_session: Session) -> None:
    _insert(db_session, name="Alien")
    other = _insert(db_session, name="Aliens")

    result = adapter.update_movie({"name": "Alien"}, other.id)

    assert result == {"status": 409, "error": "Movie Alien already exists"}
    assert adapter.get_movie_by_id(other.id)["data"]["name"] == "Aliens"


def test_update_movie_store_failure(failing_session: MagicMock) -> None:
    assert MovieAdapter(failing_session).update_movie({"rating": 1.0}, 1) == {
        "status": 500,
        "error": "Internal server error",
    }


# -----------------------------
# delete_movie_by_id
# -----------------------------
def test_delete_movie(adapter: MovieAdapter, db_session: Session) -> None:
    movie = _insert(db_session)

    result = adapter.delete_movie_by_id(movie.id)

    assert result == {"status": 200, "message": f"Movie {movie.id} has been deleted"}
    assert adapter.get_movie_by_id(movie.id)["status"] == 404


def test_delete_missing_movie_is_not_an_exception(adapter: MovieAdapter) -> None:
    assert adapter.delete_movie_by_id(999) == {"status": 404, "message": "Movie with id 999 not found"}


def test_delete_unexpected_failure_is_reraised(failing_session: MagicMock) -> None:
    with pytest.raises(OperationalError):
        MovieAdapter(failing_session).delete_movie_by_id(1)

    failing_session.rollback.assert_called_once()
