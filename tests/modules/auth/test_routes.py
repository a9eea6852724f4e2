"""Tests for the Clerk webhook endpoint."""

import json
from datetime import datetime, timezone

import pytest
from unittest.mock import AsyncMock, patch
from fastapi.testclient import TestClient
from svix.webhooks import Webhook as SvixWebhook

from api.app import create_app
from api.dependencies import get_user_sync_service
from modules.auth.exceptions import ClerkAPIError, UserNotFoundError
from modules.auth.models import SyncResult, SyncStatus
from tests.conftest import make_settings

SVIX_HEADERS = {
    "svix-id": "msg_1",
    "svix-timestamp": "1700000000",
    "svix-signature": "v1,signature",
}


@pytest.fixture
def app():
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def sync(app):
    mock = AsyncMock()
    app.dependency_overrides[get_user_sync_service] = lambda: mock
    return mock


@pytest.fixture
def configured():
    with patch("modules.auth.routes.get_settings", return_value=make_settings()):
        yield


@pytest.fixture
def webhook():
    """Accept any signature; the route parses the posted body."""
    with patch("modules.auth.webhooks.Webhook") as mock_cls:
        yield mock_cls.return_value


def post(app, payload: dict, headers: dict = SVIX_HEADERS):
    return TestClient(app).post("/api/webhook/clerk", content=json.dumps(payload), headers=headers)


class TestClerkWebhookRoute:

    def test_user_created(self, app, sync, configured, webhook):
        payload = {"type": "user.created", "data": {"id": "user_1", "username": "ada_lovelace"}}
        webhook.verify.return_value = payload
        sync.create_or_update_profile.return_value = SyncResult(
            status=SyncStatus.CREATED, user_id="user_1", message="User user_1 profile created successfully"
        )

        response = post(app, payload)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "created"

    def test_session_removed(self, app, sync, configured, webhook):
        payload = {"type": "session.removed", "data": {"id": "sess_1", "user_id": "user_1"}}
        webhook.verify.return_value = payload

        response = post(app, payload)

        assert response.status_code == 200
        assert response.json()["data"] == {"message": "Session removal processed"}

    def test_not_configured(self, app, sync):
        with patch("modules.auth.routes.get_settings", return_value=make_settings(clerk_webhook_signing_secret="")):
            response = post(app, {"type": "user.created", "data": {}})

        assert response.status_code == 500
        assert response.json()["detail"] == "Webhook secret not configured"

    def test_missing_svix_headers(self, app, sync, configured):
        response = post(app, {"type": "user.created", "data": {}}, headers={})
        assert response.status_code == 400

    def test_bad_signature(self, app, sync, configured):
        response = post(app, {"type": "user.created", "data": {"id": "user_1"}})

        assert response.status_code == 400
        assert response.json()["detail"] == "Error verifying webhook signature"
        sync.create_or_update_profile.assert_not_called()

    def test_unhandled_event(self, app, sync, configured, webhook):
        payload = {"type": "email.created", "data": {"id": "ema_1"}}
        webhook.verify.return_value = payload

        response = post(app, payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Unhandled event type: email.created"

    def test_malformed_user(self, app, sync, configured, webhook):
        payload = {"type": "user.created", "data": {"first_name": "no id"}}
        webhook.verify.return_value = payload

        response = post(app, payload)

        assert response.status_code == 400

    def test_session_for_unknown_user(self, app, sync, configured, webhook):
        payload = {"type": "session.created", "data": {"id": "sess_1", "user_id": "user_gone"}}
        webhook.verify.return_value = payload
        sync.verify_session_user.side_effect = UserNotFoundError("user_gone")

        response = post(app, payload)

        assert response.status_code == 404

    def test_clerk_unavailable(self, app, sync, configured, webhook):
        payload = {"type": "session.created", "data": {"id": "sess_1", "user_id": "user_1"}}
        webhook.verify.return_value = payload
        sync.verify_session_user.side_effect = ClerkAPIError("timeout")

        response = post(app, payload)

        assert response.status_code == 502

    def test_unexpected_error(self, app, sync, configured, webhook):
        payload = {"type": "user.deleted", "data": {"id": "user_1"}}
        webhook.verify.return_value = payload
        sync.delete_profile.side_effect = RuntimeError("db down")

        response = post(app, payload)

        assert response.status_code == 500
        assert response.json()["detail"] == "Error processing webhook"


def signed_post(app, payload: dict):
    """Post a body signed with the configured secret, as Clerk would."""
    body = json.dumps(payload)
    msg_id = "msg_signed"
    now = datetime.now(timezone.utc)
    headers = {
        "svix-id": msg_id,
        "svix-timestamp": str(int(now.timestamp())),
        "svix-signature": SvixWebhook(make_settings().clerk_webhook_signing_secret).sign(msg_id, now, body),
        "content-type": "application/json",
    }
    return TestClient(app).post("/api/webhook/clerk", content=body, headers=headers)


class TestSignedClerkWebhook:

    def test_user_deleted(self, app, sync, configured):
        sync.delete_profile.return_value = SyncResult(
            status=SyncStatus.DELETED, user_id="user_1", message="User user_1 profile deleted"
        )

        response = signed_post(app, {"type": "user.deleted", "object": "event", "data": {"id": "user_1", "deleted": True}})

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "deleted"
        sync.delete_profile.assert_awaited_once_with("user_1")

    def test_user_created(self, app, sync, configured):
        sync.create_or_update_profile.return_value = SyncResult(
            status=SyncStatus.CREATED, user_id="user_1", message="User user_1 profile created successfully"
        )

        response = signed_post(app, {
            "type": "user.created",
            "data": {"id": "user_1", "username": "ada_lovelace", "first_name": "Ada"},
        })

        assert response.status_code == 200
        user = sync.create_or_update_profile.await_args.args[0]
        assert user.id == "user_1"
        assert user.first_name == "Ada"

    def test_session_removed(self, app, sync, configured):
        response = signed_post(app, {"type": "session.removed", "data": {"id": "sess_1", "user_id": "user_1"}})

        assert response.status_code == 200
        sync.forget_session_user.assert_awaited_once_with("user_1")

    def test_signed_non_event_body(self, app, sync, configured):
        response = signed_post(app, {"unexpected": True})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid webhook payload"
