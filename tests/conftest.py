"""Pytest configuration and shared fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from loguru import logger
from mongomock_motor import AsyncMongoMockClient

from streamify.api.main import create_app
from streamify.config import Settings
from streamify.core.security import create_access_token, hash_password
from streamify.database import ensure_indexes
from streamify.repositories import UserRepository

TEST_SECRET = "test_secret_key_12345"
FRONTEND_URL = "http://localhost:5173"


# ============================================================================
# Settings and Database
# ============================================================================

def make_settings(tmp_path, **overrides) -> Settings:
    """Settings isolated from the environment and any .env file."""
    values = {
        "NODE_ENV": "development",
        "FRONTEND_URL": FRONTEND_URL,
        "JWT_SECRET_KEY": TEST_SECRET,
        "FRONTEND_DIST_DIR": tmp_path / "dist",
        "STREAM_API_KEY": None,
        "STREAM_API_SECRET": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def settings_factory(tmp_path):
    """Build settings with overrides, sharing the test tmp_path."""
    def _factory(**overrides) -> Settings:
        return make_settings(tmp_path, **overrides)
    return _factory


@pytest.fixture
async def database():
    """Fresh in-memory MongoDB per test."""
    db = AsyncMongoMockClient()["streamify_test"]
    await ensure_indexes(db)
    return db


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture
async def client(app):
    """Create an async HTTP client for testing."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================================================
# Users
# ============================================================================

@pytest.fixture
def user_factory(database):
    """Insert users directly and return (user, cookie header)."""
    repo = UserRepository(database)

    async def _factory(
        email: str,
        full_name: str = "Test User",
        password: str = "password123",
        onboarded: bool = False,
        **fields,
    ):
        user = await repo.create_user(
            email=email,
            full_name=full_name,
            password_hash=hash_password(password),
        )
        if onboarded:
            fields.setdefault("nativeLanguage", "english")
            fields.setdefault("learningLanguage", "spanish")
            fields["isOnboarded"] = True
        if fields:
            user = await repo.update(user["_id"], **fields)
        token = create_access_token(str(user["_id"]), TEST_SECRET)
        return user, {"Cookie": f"jwt={token}"}

    return _factory


# ============================================================================
# Logging
# ============================================================================

@pytest.fixture
def log_messages():
    """Capture loguru output as a list of strings."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
