"""
User-related endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.auth.admin import is_admin
from shared.models import AuthenticatedUser
from ..middleware.auth import get_current_user

router = APIRouter()


class UserProfileResponse(BaseModel):
    """User profile response model."""

    id: str
    email: Optional[str] = None
    tier: str
    role: str
    is_admin: bool = False


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
) -> UserProfileResponse:
    """
    Get the current user's session identity.

    Requires authentication.
    """
    return UserProfileResponse(
        id=user.id,
        email=user.email,
        tier=user.tier,
        role=user.role,
        is_admin=is_admin(user.email),
    )
