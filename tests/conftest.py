# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Key features:
# - Sets up mock environment variables before any imports
# - Builds the app from explicit test settings
# - Mocks the Supabase client so no test touches a real database
# =============================================================================

import os
import time
from unittest.mock import MagicMock
from uuid import uuid4

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-unit-tests")

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.config import Settings
from app.main import create_app
from lib.supabase_client import SupabaseClient

TEST_JWT_SECRET = "test-jwt-secret-for-unit-tests"
TEST_USER_ID = "3f1c2b7e-9a4d-4c1e-8b2f-6d5e4a3b2c1d"


def make_token(
    sub: str | None = TEST_USER_ID,
    email: str = "manager@example.com",
    audience: str = "authenticated",
    expires_in: int = 3600,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """Build a Supabase-style HS256 access token."""
    now = int(time.time())
    claims = {
        "email": email,
        "aud": audience,
        "role": "authenticated",
        "iat": now,
        "exp": now + expires_in,
    }
    if sub is not None:
        claims["sub"] = sub
    return jwt.encode(claims, secret, algorithm="HS256")


def make_query_mock(data=None) -> MagicMock:
    """
    Mock of a Supabase query builder.

    Every builder method returns the same mock, so any chain ends in
    execute() returning `data`.
    """
    query = MagicMock(name="query")
    for method in ("select", "eq", "order", "range", "limit", "insert", "update", "delete"):
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=data if data is not None else [])
    return query


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Explicit settings, independent of the developer's .env file."""
    return Settings(
        _env_file=None,
        SUPABASE_URL="https://test-project.supabase.co",
        SUPABASE_SERVICE_KEY="test-service-key",
        SUPABASE_JWT_SECRET=TEST_JWT_SECRET,
        CORS_ORIGIN="http://localhost:5173, https://hr.example.com",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def mock_supabase():
    """Install a mocked client as the process-wide Supabase client."""
    client = MagicMock(name="supabase")
    client.table.return_value = make_query_mock()
    SupabaseClient._instance = client
    yield client
    SupabaseClient.reset()


@pytest.fixture
def sample_employee():
    return {
        "id": str(uuid4()),
        "full_name": "Nguyen Van An",
        "email": "an.nguyen@example.com",
        "department": "Engineering",
        "position": "Backend Developer",
        "hired_on": "2022-03-01",
        "created_at": "2024-01-15T10:00:00Z",
    }
