"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for driving the
FastAPI routes: registering users, logging in, and building auth headers.
"""

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Request Helpers
# =============================================================================

@pytest.fixture
def auth_header() -> Callable[[str], dict]:
    """Build the Authorization header for a bearer token."""
    def _header(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _header


@pytest.fixture
def register_and_login(client) -> Callable[[dict], tuple[int, str]]:
    """
    Register a user through the API and log in.

    Usage:
        user_id, token = register_and_login(test_user_data)
    """
    def _register_and_login(user: dict) -> tuple[int, str]:
        response = client.post("/users/", json=user)
        assert response.status_code == 200, response.text
        user_id = response.json()["user_id"]

        response = client.post(
            "/login/",
            json={"username": user["username"], "password": user["password"]},
        )
        assert response.status_code == 200, response.text
        return user_id, response.json()["jwtToken"]

    return _register_and_login


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
