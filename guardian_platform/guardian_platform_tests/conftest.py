"""
Shared fixtures: a clean database for every test, a session and an API client.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from guardian_platform.guardian_platform.guardian_service.db import Base, engine
from guardian_platform.guardian_platform.guardian_service.main import app
from guardian_platform.guardian_platform.guardian_service import models  # noqa: F401


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def db_session():
    """Create a database session for testing."""
    session = Session(bind=engine)
    yield session
    session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
