"""
Authentication module data models.

These models mirror the payloads Clerk sends us (webhook events, Backend
API user objects, session token claims) and the normalized profile data
we store in Supabase.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


MIN_USERNAME_LENGTH = 5
MAX_USERNAME_LENGTH = 64


# -----------------------------------------------------------------------------
# Clerk payloads
# -----------------------------------------------------------------------------


class ClerkEmailAddress(BaseModel):
    """One entry of a Clerk user's email_addresses list."""

    model_config = ConfigDict(extra="ignore")

    email_address: str


class ClerkPublicMetadata(BaseModel):
    """The subset of public_metadata we read."""

    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    tier: Optional[str] = None


class ClerkUserData(BaseModel):
    """
    Clerk user object as delivered by webhooks and the Backend API.

    Every field except ``id`` is optional. Clerk sends the profile image
    as ``image_url`` on current API versions and ``profile_image_url`` on
    older ones, so both are accepted.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    email_addresses: Optional[list[ClerkEmailAddress]] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    username: Optional[str] = None
    profile_image_url: Optional[str] = None
    image_url: Optional[str] = None
    public_metadata: Optional[ClerkPublicMetadata] = None

    @property
    def primary_email(self) -> Optional[str]:
        """First email address on the account, if any."""
        if self.email_addresses:
            return self.email_addresses[0].email_address
        return None

    @property
    def image(self) -> Optional[str]:
        return self.profile_image_url or self.image_url


class ClerkSessionData(BaseModel):
    """Clerk session object from session.* webhook events."""

    model_config = ConfigDict(extra="ignore")

    id: str
    user_id: str
    status: Optional[str] = None
    object: Optional[str] = None
    client_id: Optional[str] = None
    # Unix timestamps in milliseconds
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    expire_at: Optional[int] = None
    last_active_at: Optional[int] = None
    abandon_at: Optional[int] = None


class ClerkWebhookEvent(BaseModel):
    """Envelope of a verified Clerk webhook event."""

    model_config = ConfigDict(extra="ignore")

    type: str
    object: str = "event"
    data: dict[str, Any] = Field(default_factory=dict)


class SessionClaims(BaseModel):
    """
    Decoded Clerk session token.

    ``email`` and ``metadata`` only appear when the Clerk session token is
    customized to include them.
    """

    model_config = ConfigDict(extra="ignore")

    sub: str = Field(..., description="Subject (Clerk user ID)")
    sid: Optional[str] = Field(None, description="Session ID")
    iss: Optional[str] = None
    azp: Optional[str] = Field(None, description="Authorized party (frontend origin)")
    exp: int
    iat: int
    email: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


# -----------------------------------------------------------------------------
# Normalized profile data
# -----------------------------------------------------------------------------


class ProfileData(BaseModel):
    """Profile columns derived from a Clerk user."""

    user_id: str
    email_address: str = ""
    first_name: str
    last_name: str
    full_name: str
    username: str
    profile_image_url: Optional[str] = None
    role: str = "authenticated"
    tier: str = "free"


class SyncStatus(str, Enum):
    """What a profile sync did."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    VERIFIED = "verified"


class SyncResult(BaseModel):
    """Outcome of a profile sync."""

    status: SyncStatus
    user_id: str
    message: str
    username_changed: bool = False
    old_username: Optional[str] = None
    new_username: Optional[str] = None
