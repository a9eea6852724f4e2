"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from Clerk session token claims and made
    available to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (Clerk user id, e.g. user_2abc...)")
    email: Optional[str] = Field(None, description="Primary email address, if present in the token")
    session_id: Optional[str] = Field(None, description="Clerk session id (sid claim)")

    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")

    role: str = Field(default="authenticated", description="Role from public metadata")
    tier: str = Field(default="free", description="Tier from public metadata")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
