import os

# Point the app at a throwaway SQLite file before db.py builds its engine
os.environ.setdefault("DATABASE_PATH", "./test_remember_her.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlmodel import Session  # noqa: E402

from app import app  # noqa: E402
from db import create_db_and_tables, engine, get_session  # noqa: E402
from models import Entry  # noqa: E402


@pytest.fixture(scope="function")
def test_session():
    """Create a test database session."""
    create_db_and_tables()
    with Session(engine) as session:
        yield session
        # Clean up all test data after test
        session.rollback()
        session.execute(delete(Entry))
        session.commit()


@pytest.fixture(scope="function")
def client(test_session):
    """Create a test client with dependency override."""

    def get_test_session():
        yield test_session

    app.dependency_overrides[get_session] = get_test_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
