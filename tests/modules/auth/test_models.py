"""Tests for auth models."""

import pytest
from pydantic import ValidationError

from modules.auth.models import (
    ClerkSessionData,
    ClerkUserData,
    ClerkWebhookEvent,
    SessionClaims,
)


class TestClerkUserData:

    def test_minimal(self):
        user = ClerkUserData(id="user_abc")
        assert user.primary_email is None
        assert user.image is None

    def test_primary_email_is_first(self):
        user = ClerkUserData.model_validate({
            "id": "user_abc",
            "email_addresses": [
                {"email_address": "first@example.com", "id": "idn_1"},
                {"email_address": "second@example.com", "id": "idn_2"},
            ],
        })
        assert user.primary_email == "first@example.com"

    def test_image_prefers_profile_image_url(self):
        user = ClerkUserData(id="u", profile_image_url="https://a/old.png", image_url="https://a/new.png")
        assert user.image == "https://a/old.png"
        assert ClerkUserData(id="u", image_url="https://a/new.png").image == "https://a/new.png"

    def test_ignores_unknown_fields(self):
        user = ClerkUserData.model_validate({"id": "u", "two_factor_enabled": True})
        assert user.id == "u"

    def test_id_required(self):
        with pytest.raises(ValidationError):
            ClerkUserData.model_validate({"first_name": "Ada"})


class TestClerkSessionData:

    def test_requires_user_id(self):
        with pytest.raises(ValidationError):
            ClerkSessionData.model_validate({"id": "sess_1"})


class TestClerkWebhookEvent:

    def test_envelope(self):
        event = ClerkWebhookEvent.model_validate({
            "type": "user.created",
            "object": "event",
            "data": {"id": "user_abc"},
        })
        assert event.type == "user.created"
        assert event.data["id"] == "user_abc"


class TestSessionClaims:

    def test_metadata_defaults_empty(self):
        claims = SessionClaims(sub="user_abc", exp=2, iat=1)
        assert claims.metadata == {}
        assert claims.email is None
