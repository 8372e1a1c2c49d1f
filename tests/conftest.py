"""
Shared fixtures: point the app at a throwaway SQLite database.
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="food_map_tests_")
os.environ["FOODMAP_DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine
from logic.timers import ManualScheduler


@pytest.fixture
def db():
    """Fresh, empty tables for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    """TestClient with the startup lifespan (tables + seed) applied."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def scheduler():
    return ManualScheduler()
