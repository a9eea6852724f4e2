"""
Clerk webhook endpoint.

Verifies the Svix signature, then hands the event to ClerkWebhookHandler.
"""

import logging

import pydantic
from fastapi import APIRouter, Depends, HTTPException, Request

from api.dependencies import get_user_sync_service
from shared.config import get_settings
from shared.exceptions import ValidationError

from .interfaces import IUserSyncService
from .webhooks import ClerkWebhookHandler, verify_webhook
from .exceptions import (
    ClerkAPIError,
    UserNotFoundError,
    WebhookNotConfiguredError,
    WebhookVerificationError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/clerk")
async def clerk_webhook(
    request: Request,
    sync: IUserSyncService = Depends(get_user_sync_service),
) -> dict:
    """
    Receive Clerk user and session events.

    Returns 400 for unverifiable or unsupported events, 404 when a
    session belongs to a user Clerk no longer knows, 500 otherwise.
    """
    body = await request.body()

    try:
        event = verify_webhook(body, request.headers, get_settings().clerk_webhook_signing_secret)
    except WebhookNotConfiguredError as e:
        logger.error(e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except WebhookVerificationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    handler = ClerkWebhookHandler(sync)
    try:
        result = await handler.handle(event)
    except ValidationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except pydantic.ValidationError:
        raise HTTPException(status_code=400, detail="Invalid event payload")
    except UserNotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except ClerkAPIError as e:
        logger.error(f"Clerk lookup failed while handling {event.type}: {e.message}")
        raise HTTPException(status_code=e.status_code, detail="Error synchronizing user profile")
    except Exception:
        logger.exception(f"Error processing Clerk {event.type} webhook")
        raise HTTPException(status_code=500, detail="Error processing webhook")

    data = result.model_dump(mode="json") if isinstance(result, pydantic.BaseModel) else result
    return {"success": True, "data": data}
