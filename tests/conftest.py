"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
from unittest.mock import patch
from jose import jwt

from api.dependencies import reset_container
from shared.config import Settings


# Test session-token key (HS256 shared secret, only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

ADMIN_EMAIL = "moderator@codedetails.io"


def create_test_token(
    user_id: str = "user_test123",
    email: Optional[str] = "test@example.com",
    expired: bool = False,
    session_id: str = "sess_test123",
    metadata: Optional[dict] = None,
) -> str:
    """
    Create a Clerk-style session token for authentication.

    Args:
        user_id: Clerk user ID (``sub`` claim)
        email: Email claim; None omits it
        expired: If True, creates an expired token
        session_id: Session ID (``sid`` claim)
        metadata: Public metadata claim (role, tier)

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "sid": session_id,
        "iss": "https://clerk.codedetails.test",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    if email is not None:
        payload["email"] = email
    if metadata is not None:
        payload["metadata"] = metadata
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def make_settings(**overrides) -> Settings:
    """Settings that ignore the local environment file."""
    values = {
        "clerk_jwt_key": TEST_JWT_SECRET,
        "clerk_jwt_algorithms": ["HS256"],
        "admin_dashboard_moderator": ADMIN_EMAIL,
        "clerk_webhook_signing_secret": "whsec_dGVzdC1zZWNyZXQ=",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known session-token key and admin email."""
    return make_settings()


@pytest.fixture
def auth_settings(test_settings: Settings):
    """Patch every settings lookup on the authentication path."""
    with patch("api.middleware.auth.get_settings", return_value=test_settings), \
            patch("modules.auth.admin.get_settings", return_value=test_settings):
        yield test_settings


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "user_test123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization headers for the configured moderator."""
    token = create_test_token(user_id="user_admin", email=ADMIN_EMAIL)
    return {"Authorization": f"Bearer {token}"}
