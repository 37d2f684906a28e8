"""
Shared test fixtures and utilities for the ElaineDiet test suite.

Tests run against an in-memory SQLite database; the application's get_db
dependency is overridden so no PostgreSQL server is needed.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from main import app
from api.dependencies import get_db
from domain.models import create_session_factory, init_database


# Realistic meal payloads
REALISTIC_MEALS = {
    "breakfast": {
        "meal": "Breakfast",
        "whole_grains": 2,
        "protein_med": 1,
        "note": "oatmeal and eggs",
    },
    "lunch": {
        "meal": "Lunch",
        "whole_grains": 1,
        "vegetables": 3,
        "protein_low": 1,
        "note": "chicken salad",
    },
    "dinner": {
        "meal": "Dinner",
        "vegetables": 2,
        "protein_high": 2,
        "junk_food": 1,
    },
}


def make_record_payload(date="2025-10-25", kind="lunch", **overrides) -> dict:
    """
    Build a POST /records body.

    Args:
        date: Date string (either separator)
        kind: Key into REALISTIC_MEALS
        **overrides: Fields replacing the defaults

    Example:
        >>> make_record_payload("2025/10/25", vegetables=5)["vegetables"]
        5
    """
    payload = {"date": date, **REALISTIC_MEALS[kind]}
    payload.update(overrides)
    return payload


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine shared across threads, schema created"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    init_database(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a database session for repository and service tests.

    Each test gets a fresh in-memory database through the engine fixture.
    """
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(engine) -> Generator[TestClient, None, None]:
    """TestClient whose requests use the in-memory engine"""
    factory = create_session_factory(engine)

    def override_get_db():
        db = factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
