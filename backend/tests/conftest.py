"""
Pytest configuration and fixtures for backend tests.

The provider is initialized once with an in-memory SQLite database (static
pool, so the app and the fixtures share one connection). Tables are emptied
after every test.
"""

import os

# Settings are read once at import time, so the environment must be set
# before anything from ranch_shared is imported.
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_TYPE"] = "sqlite"
os.environ["SQLITE_FILE"] = ":memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENABLE_REQUEST_LOGGING"] = "false"
os.environ["AUTH_JWT_SECRET"] = "test-secret-for-ranch-manager-suite-0123456789"
os.environ.pop("DATABASE_URL", None)
os.environ.pop("AUTH_ISSUER", None)
os.environ.pop("AUTH_AUDIENCE", None)

import pytest
from fastapi.testclient import TestClient

from ranch_api.main import app
from ranch_api.models import Base, User
from ranch_shared.config.settings import settings
from ranch_shared.infrastructure.providers import DatabaseConfig, DatabaseProvider
from ranch_shared.security.auth import sign_jwt


OWNER_ID = "owner-0001"
OTHER_ID = "other-0002"
ADMIN_ID = "admin-0003"


adapter = DatabaseProvider.initialize(DatabaseConfig.from_settings(settings))
Base.metadata.create_all(bind=adapter.engine)


@pytest.fixture(autouse=True)
def clean_tables():
    """Empty every table after each test."""
    yield
    with adapter.transaction() as session:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())


@pytest.fixture
def db_session():
    """Session on the shared test database."""
    session = adapter.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    """Test client; runs the app lifespan against the already initialized provider."""
    with TestClient(app) as test_client:
        yield test_client


def make_token(user_id: str, **claims) -> str:
    """Bearer token for user_id signed with the test secret."""
    return sign_jwt({"sub": user_id, **claims})


def bearer(user_id: str, **claims) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id, **claims)}"}


@pytest.fixture
def auth_headers():
    """Authentication headers for the primary test user."""
    return bearer(OWNER_ID, email="owner@ranch.test")


@pytest.fixture
def other_auth_headers():
    """Authentication headers for a second, unrelated user."""
    return bearer(OTHER_ID, email="other@ranch.test")


@pytest.fixture
def seed_admin_user(db_session):
    """Create an admin user row."""
    user = User(id=ADMIN_ID, email="admin@ranch.test", role="admin", is_active=True)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_headers(seed_admin_user):
    return bearer(ADMIN_ID, email="admin@ranch.test")


@pytest.fixture
def animal_payload():
    """Minimal valid animal body."""
    return {"tag_id": "COW001", "species": "Cattle", "gender": "female", "name": "Bessie"}
