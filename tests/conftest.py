"""
Shared fixtures: in-memory SQLite database, sessions, HTTP client and tokens.
"""

from __future__ import annotations

import itertools
import os

# must be set before movie_api is imported (settings are read at import time)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from movie_api.db import SessionLocal
from movie_api.guards import issue_token
from movie_api.main import app
from movie_api.models import Movie

_counter = itertools.count(1)


def make_movie(**overrides) -> dict:
    """Valid create payload with a unique name."""
    n = next(_counter)
    movie = {"name": f"Test Movie {n}", "year": 1990 + n % 30, "rating": 7.5}
    movie.update(overrides)
    return movie


@pytest.fixture(autouse=True)
def empty_movies_table():
    yield
    db = SessionLocal()
    try:
        db.query(Movie).delete()
        db.commit()
    finally:
        db.close()


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {issue_token()}"}
