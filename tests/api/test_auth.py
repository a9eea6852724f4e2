"""
Tests for session token authentication middleware.
"""

import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient

from api import app
from api.middleware.auth import (
    AuthError,
    SESSION_COOKIE,
    decode_token,
    extract_token,
    get_user_from_claims,
)
from modules.auth.models import SessionClaims
from tests.conftest import ADMIN_EMAIL, create_test_token, make_settings

client = TestClient(app)


class TestDecodeToken:

    def test_valid_token(self, auth_settings):
        """Valid token should decode successfully."""
        claims = decode_token(create_test_token())
        assert claims.sub == "user_test123"
        assert claims.sid == "sess_test123"
        assert claims.email == "test@example.com"

    def test_expired_token(self, auth_settings):
        """Expired token should raise AuthError."""
        with pytest.raises(AuthError) as exc_info:
            decode_token(create_test_token(expired=True))
        assert "expired" in exc_info.value.detail.lower()

    def test_invalid_token(self, auth_settings):
        """Garbage token should raise AuthError."""
        with pytest.raises(AuthError) as exc_info:
            decode_token("invalid-token")
        assert "Invalid token" in exc_info.value.detail

    def test_wrong_key(self):
        """Token signed with another key should be rejected."""
        settings = make_settings(clerk_jwt_key="some-other-secret")
        with patch("api.middleware.auth.get_settings", return_value=settings):
            with pytest.raises(AuthError):
                decode_token(create_test_token())

    def test_missing_key(self):
        """Missing verification key should be reported as not configured."""
        settings = make_settings(clerk_jwt_key="")
        with patch("api.middleware.auth.get_settings", return_value=settings):
            with pytest.raises(AuthError) as exc_info:
                decode_token(create_test_token())
        assert "not configured" in exc_info.value.detail.lower()


class TestClaimsConversion:

    def test_get_user_from_claims(self):
        """Should convert claims to AuthenticatedUser."""
        claims = SessionClaims(
            sub="user_123",
            sid="sess_456",
            email="test@example.com",
            exp=1_900_000_000,
            iat=1_700_000_000,
            metadata={"role": "admin", "tier": "pro"},
        )
        user = get_user_from_claims(claims)

        assert user.id == "user_123"
        assert user.session_id == "sess_456"
        assert user.email == "test@example.com"
        assert user.role == "admin"
        assert user.tier == "pro"
        assert user.last_sign_in.year == 2023

    def test_defaults_without_metadata(self):
        """Missing metadata should fall back to default role and tier."""
        claims = SessionClaims(sub="user_123", exp=1_900_000_000, iat=1_700_000_000)
        user = get_user_from_claims(claims)

        assert user.email is None
        assert user.role == "authenticated"
        assert user.tier == "free"


class TestExtractToken:

    def test_prefers_bearer_header(self):
        request = MagicMock()
        request.cookies = {SESSION_COOKIE: "cookie-token"}
        credentials = MagicMock(credentials="header-token")

        assert extract_token(request, credentials) == "header-token"

    def test_falls_back_to_session_cookie(self):
        request = MagicMock()
        request.cookies = {SESSION_COOKIE: "cookie-token"}

        assert extract_token(request, None) == "cookie-token"

    def test_no_token(self):
        request = MagicMock()
        request.cookies = {}

        assert extract_token(request, None) is None


class TestCurrentUserEndpoint:

    def test_missing_auth_header(self):
        """Request without credentials should return 401."""
        response = client.get("/api/users/me")
        assert response.status_code == 401
        assert response.json()["detail"] == "Missing authorization header"

    def test_valid_bearer_token(self, auth_settings, auth_headers):
        """Protected route should work with a valid token."""
        response = client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "user_test123"
        assert data["email"] == "test@example.com"
        assert data["tier"] == "free"
        assert data["is_admin"] is False

    def test_session_cookie(self, auth_settings):
        """Browser requests authenticate through the Clerk session cookie."""
        cookie_client = TestClient(app, cookies={SESSION_COOKIE: create_test_token()})
        response = cookie_client.get("/api/users/me")

        assert response.status_code == 200
        assert response.json()["id"] == "user_test123"

    def test_admin_flag(self, auth_settings, admin_headers):
        """The moderator account is reported as admin."""
        response = client.get("/api/users/me", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["email"] == ADMIN_EMAIL
        assert response.json()["is_admin"] is True

    def test_expired_token(self, auth_settings):
        """Protected route should return 401 with expired token."""
        token = create_test_token(expired=True)
        response = client.get(
            "/api/users/me",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 401
        assert "expired" in response.json()["detail"].lower()


class TestRequireAdmin:

    def test_non_admin_forbidden(self, auth_settings, auth_headers):
        """Admin endpoints should return 403 for regular users."""
        response = client.get("/api/admin/tag-submissions", headers=auth_headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "Unauthorized: Admin access required"

    def test_unauthenticated(self):
        """Admin endpoints should return 401 without credentials."""
        response = client.get("/api/admin/tag-submissions")
        assert response.status_code == 401
