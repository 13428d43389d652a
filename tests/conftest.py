"""Pytest fixtures for testing."""
import os
from collections.abc import Callable, Generator

# Must be set before the app modules read their configuration
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from database import get_session
from main import app


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient]:
    """Test client whose requests share the test session."""

    def override_get_session():
        return db_session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register(client: TestClient) -> Callable[..., dict]:
    """Register a user and return bearer auth headers for it."""

    def _register(email: str = "alice@example.com", password: str = "secret", username: str = "alice") -> dict:
        response = client.post(
            "/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201
        response = client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 201
        return {"Authorization": f"Bearer {response.json()['jwtToken']}"}

    return _register


@pytest.fixture
def auth_headers(register) -> dict:
    return register()
