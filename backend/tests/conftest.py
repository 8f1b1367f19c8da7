"""Shared test fixtures: in-memory database, app client and auth helpers."""

import os

# Must be set before tickerfolio.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import tickerfolio.models  # noqa: E402, F401
from tickerfolio.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from tickerfolio.main import app  # noqa: E402
from tickerfolio.rate_limiter import limiter  # noqa: E402

DEFAULT_PASSWORD = "password123"


def register_user(test_client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> dict:
    """Helper to register a user and return the response body (token + user)."""
    response = test_client.post(
        "/accounts/register/",
        json={"email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def create_asset(test_client: TestClient, token: str, **fields) -> dict:
    """Helper to create an asset through the API and return its view."""
    payload = {"ticker": "PETR4", "quantity": 100, "average_price": 30.5, "current_price": 32.0}
    payload.update(fields)
    response = test_client.post("/manager/create/", json=payload, headers=auth_headers(token))
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads, with FK enforcement on."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session_maker(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture
def db(db_session_maker):
    """Database session for service and repository tests."""
    session = db_session_maker()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session_maker):
    """Create test client with in-memory database.

    Yields a tuple of (TestClient, SessionMaker) for use in tests.
    """
    # Clear rate limiter storage between tests
    limiter.reset()

    def override_get_db():
        db = db_session_maker()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client, db_session_maker

    app.dependency_overrides.clear()


@pytest.fixture
def user_token(client):
    """Token of a freshly registered user."""
    test_client, _ = client
    return register_user(test_client, "manager@example.com")["token"]
