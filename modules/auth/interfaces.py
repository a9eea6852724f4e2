"""
Authentication module interface.

The webhook layer depends on IUserSyncService, not the concrete
implementation, so tests can swap in mocks.
"""

from typing import Protocol, runtime_checkable

from .models import ClerkUserData, SyncResult


@runtime_checkable
class IUserSyncService(Protocol):
    """
    Interface for keeping local profiles in sync with Clerk.
    """

    async def create_or_update_profile(self, data: ClerkUserData) -> SyncResult:
        """
        Create or update the profile for a Clerk user.

        Args:
            data: Clerk user object

        Returns:
            SyncResult with status CREATED or UPDATED

        Raises:
            InvalidUsernameError: If the derived username violates length limits
        """
        ...

    async def delete_profile(self, user_id: str) -> SyncResult:
        """
        Delete a user's profile.

        Args:
            user_id: Clerk user ID

        Returns:
            SyncResult with status DELETED
        """
        ...

    async def verify_session_user(self, user_id: str) -> SyncResult:
        """
        Ensure the user behind a new session has a profile.

        Raises:
            UserNotFoundError: If the profile is missing and Clerk has no such user
            ClerkAPIError: If the Clerk lookup fails
        """
        ...

    async def forget_session_user(self, user_id: str) -> bool:
        """
        Forget cached verification state for a user whose session ended.

        Returns:
            True if a cache entry was removed
        """
        ...
