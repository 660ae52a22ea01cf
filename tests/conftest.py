"""
Pytest configuration and shared fixtures for all tests.

The application reads DATABASE_URL when it is first imported, so the
in-memory SQLite URL is set here before anything from the project loads.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from main import app
from internship_portal.database.database import Base, engine, SessionLocal


@pytest.fixture(autouse=True)
def reset_database():
    """Every test starts with an empty internship_applications table."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """A session bound to the same in-memory database the app uses."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def test_client():
    """FastAPI TestClient for making HTTP requests against the app."""
    return TestClient(app)


@pytest.fixture
def valid_payload():
    """A submission with every required field filled in."""
    return {
        "name": "Asha Verma",
        "email": "asha@example.com",
        "phoneNumber": "+91 98765 43210",
        "educationYear": "3rd Year",
        "collegeName": "City Engineering College",
        "courseDegreeName": "B.Tech Computer Science",
        "gender": "Female",
        "officeCommuteTime": "30 minutes",
        "englishFluencyRating": "8",
    }
