"""
Clerk Backend API client.

Used when we only have a user ID (e.g. a session.created webhook for a
user whose profile is missing) and need the full user object.
"""

import logging
from typing import Optional

import httpx

from shared.config import get_settings

from .models import ClerkUserData
from .exceptions import ClerkAPIError

logger = logging.getLogger(__name__)


class ClerkClient:
    """Minimal async client for the Clerk Backend API."""

    TIMEOUT_SECONDS = 10.0

    def __init__(self, secret_key: str, api_url: str = "https://api.clerk.com/v1"):
        self._secret_key = secret_key
        self._api_url = api_url.rstrip("/")

    @property
    def is_configured(self) -> bool:
        """Check if a secret key is available."""
        return bool(self._secret_key)

    async def get_user(self, user_id: str) -> Optional[ClerkUserData]:
        """
        Fetch a user by ID.

        Returns:
            The user, or None if Clerk answers 404

        Raises:
            ClerkAPIError: If the key is missing or Clerk returns another error
        """
        if not self.is_configured:
            raise ClerkAPIError("CLERK_SECRET_KEY is not set")

        try:
            async with httpx.AsyncClient(timeout=self.TIMEOUT_SECONDS) as client:
                response = await client.get(
                    f"{self._api_url}/users/{user_id}",
                    headers={
                        "Authorization": f"Bearer {self._secret_key}",
                        "Content-Type": "application/json",
                    },
                )
        except httpx.RequestError as e:
            raise ClerkAPIError(f"Clerk API request failed: {e}")

        if response.status_code == 404:
            logger.debug(f"Clerk user {user_id} not found")
            return None

        if response.is_error:
            raise ClerkAPIError(
                f"Clerk API error ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        return ClerkUserData.model_validate(response.json())


def get_clerk_client() -> ClerkClient:
    """Build a client from settings."""
    settings = get_settings()
    return ClerkClient(settings.clerk_secret_key, settings.clerk_api_url)
