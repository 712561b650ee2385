"""
Global test fixtures for the Travel Diary API.

This module provides shared fixtures for all tests including:
- Test environment (JWT secret, cheap bcrypt rounds)
- Mock MongoDB (mongomock-motor)
- Hashing/signing primitives and services wired to the mock database
- FastAPI test client backed by the mock database
"""

import os
import sys
from pathlib import Path
from typing import Generator

# Settings are read at import time, so the environment must be ready first
TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"
os.environ.setdefault("JWT_SECRET_KEY", TEST_JWT_SECRET)
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async in-memory MongoDB client with the app's indexes.
    """
    from diary_api.database.registry import create_indexes

    client = AsyncMongoMockClient()
    await create_indexes(client)
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database."""
    from diary_api.database.databases import auth_db

    yield mock_async_mongo_client[auth_db.DB_NAME]


@pytest_asyncio.fixture
async def mock_diary_db(mock_async_mongo_client):
    """Provide mock diary_db database."""
    from diary_api.database.databases import diary_db

    yield mock_async_mongo_client[diary_db.DB_NAME]


# =============================================================================
# Security Fixtures
# =============================================================================

@pytest.fixture
def password_hasher():
    """bcrypt hasher with the minimum work factor to keep tests fast."""
    from diary_api.core.security import PasswordHasher

    return PasswordHasher(rounds=4)


@pytest.fixture
def jwt_secret() -> str:
    """The signing secret the app is configured with during tests."""
    return os.environ["JWT_SECRET_KEY"]


@pytest.fixture
def token_codec(jwt_secret):
    """Token codec signing with the test secret."""
    from diary_api.core.security import TokenCodec

    return TokenCodec(secret_key=jwt_secret, algorithm="HS256", expire_minutes=60)


@pytest.fixture
def other_token_codec():
    """Token codec signing with a different secret."""
    from diary_api.core.security import TokenCodec

    return TokenCodec(
        secret_key="another-secret-key-nobody-configured-here",
        algorithm="HS256",
        expire_minutes=60,
    )


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def credential_store(mock_auth_db):
    """CredentialStore over the mock auth database."""
    from diary_api.services.credential_store import CredentialStore

    return CredentialStore(mock_auth_db)


@pytest_asyncio.fixture
async def auth_service(credential_store, password_hasher, token_codec):
    """AuthService over the mock auth database."""
    from diary_api.services.auth_service import AuthService

    return AuthService(credential_store, password_hasher, token_codec)


@pytest_asyncio.fixture
async def entry_service(mock_diary_db):
    """EntryService over the mock diary database."""
    from diary_api.services.entry_service import EntryService

    return EntryService(mock_diary_db)


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "alice",
        "password": "pw123",
        "email": "a@x.com",
    }


@pytest.fixture
def second_user_data() -> dict:
    """Another user, for cross-user access tests."""
    return {
        "username": "bob",
        "password": "hunter2",
        "email": "b@x.com",
    }


@pytest.fixture
def test_entry_data() -> dict:
    """A diary entry request body."""
    return {
        "title": "Hampi",
        "content": "Boulders everywhere, sunset at Matanga hill.",
        "date": "2024-01-15",
        "location": "Hampi, Karnataka",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    This imports the actual app; use ``client`` to get it wired to the
    mock database.
    """
    from diary_api.main import app
    return app


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app backed by an in-memory MongoDB.

    The app's lifespan creates the indexes on the mock client. The mock is
    exposed as ``client.mongo`` for tests that inspect stored documents.
    """
    import diary_api.database.connections as conn_module

    mongo = AsyncMongoMockClient()
    conn_module._mongo_client = mongo
    with TestClient(app) as c:
        c.mongo = mongo
        yield c
    conn_module._mongo_client = None
