"""Pytest configuration and fixtures."""
import os

# Must be set before any application module is imported
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ["RECORD_SOURCE"] = "seed"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401 - registers the advocates table
import schemas
from database import Base
from main import app
from records import load_seed_advocates


@pytest.fixture
def make_advocate():
    """Factory for Advocate records with overridable wire-name fields."""
    def _make(**overrides):
        data = {
            "firstName": "Test",
            "lastName": "Advocate",
            "city": "Tucson",
            "degree": "MD",
            "specialties": ["Bipolar"],
            "yearsOfExperience": 5,
            "phoneNumber": 5550000000,
        }
        data.update(overrides)
        return schemas.Advocate.model_validate(data)
    return _make


@pytest.fixture
def seed_advocates():
    return load_seed_advocates()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine shared across sessions of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()
