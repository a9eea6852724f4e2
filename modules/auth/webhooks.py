"""
Clerk webhook verification and dispatch.

Clerk delivers webhooks through Svix; every request carries svix-id,
svix-timestamp and svix-signature headers that must verify against the
signing secret before the payload is trusted.
"""

import logging
from typing import Mapping, Union

import pydantic
from svix.webhooks import Webhook, WebhookVerificationError as SvixVerificationError

from shared.exceptions import ValidationError

from .interfaces import IUserSyncService
from .models import ClerkSessionData, ClerkUserData, ClerkWebhookEvent, SyncResult
from .exceptions import (
    UnhandledWebhookEventError,
    WebhookNotConfiguredError,
    WebhookVerificationError,
)

logger = logging.getLogger(__name__)

SVIX_HEADERS = ("svix-id", "svix-timestamp", "svix-signature")


def verify_webhook(
    body: Union[bytes, str],
    headers: Mapping[str, str],
    secret: str,
) -> ClerkWebhookEvent:
    """
    Verify a webhook signature and parse the event envelope.

    Args:
        body: Raw request body, exactly as received
        headers: Request headers (any mapping with case-insensitive lookup)
        secret: Signing secret (whsec_...)

    Raises:
        WebhookNotConfiguredError: If no secret is configured
        WebhookVerificationError: If headers are missing or the signature is invalid,
            or the verified body is not a Clerk event envelope
    """
    if not secret:
        raise WebhookNotConfiguredError()

    svix_headers = {name: headers.get(name) for name in SVIX_HEADERS}
    if not all(svix_headers.values()):
        raise WebhookVerificationError("Missing svix headers")

    try:
        Webhook(secret).verify(body, svix_headers)
    except SvixVerificationError:
        raise WebhookVerificationError()

    # verify() only checks the signature; parse the signed body ourselves
    try:
        return ClerkWebhookEvent.model_validate_json(body)
    except pydantic.ValidationError:
        raise WebhookVerificationError("Invalid webhook payload")


class ClerkWebhookHandler:
    """
    Routes verified Clerk events to the user sync service.

    Handled events: user.created, user.updated, user.deleted,
    session.created, session.removed.
    """

    def __init__(self, sync: IUserSyncService):
        self._sync = sync

    async def handle(self, event: ClerkWebhookEvent) -> SyncResult | dict:
        """
        Process one event.

        Raises:
            UnhandledWebhookEventError: For any other event type
            pydantic.ValidationError: If the event data is malformed
        """
        logger.debug(f"Received Clerk {event.type} event")

        if event.type in ("user.created", "user.updated"):
            user = ClerkUserData.model_validate(event.data)
            logger.info(f"Syncing user {user.id} from {event.type}")
            return await self._sync.create_or_update_profile(user)

        if event.type == "user.deleted":
            user_id = event.data.get("id")
            if not user_id:
                raise ValidationError("No user ID found in user.deleted event", code="INVALID_WEBHOOK_PAYLOAD")
            return await self._sync.delete_profile(user_id)

        if event.type == "session.created":
            session = ClerkSessionData.model_validate(event.data)
            return await self._sync.verify_session_user(session.user_id)

        if event.type == "session.removed":
            session = ClerkSessionData.model_validate(event.data)
            logger.info(f"Session {session.id} removed for user {session.user_id}")
            await self._sync.forget_session_user(session.user_id)
            return {"message": "Session removal processed"}

        raise UnhandledWebhookEventError(event.type)
