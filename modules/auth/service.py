"""
User sync service implementation.

Keeps the Supabase ``profiles`` table in step with Clerk. Used by the
Clerk webhook handler for user and session events.
"""

import logging
import time
from typing import Optional

from .clerk_client import ClerkClient
from .exceptions import InvalidUsernameError, UserNotFoundError
from .interfaces import IUserSyncService
from .models import (
    MAX_USERNAME_LENGTH,
    MIN_USERNAME_LENGTH,
    ClerkUserData,
    ProfileData,
    SyncResult,
    SyncStatus,
)
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


def extract_profile_data(data: ClerkUserData) -> ProfileData:
    """
    Normalize a Clerk user into profile columns.

    Missing names fall back to "Code" / "Minion"; a missing full name or
    username is generated from whatever the user does have.
    """
    email = data.primary_email or ""
    first_name = data.first_name or "Code"
    last_name = data.last_name or "Minion"

    if data.full_name:
        full_name = data.full_name
    elif data.first_name or data.last_name:
        full_name = f"{data.first_name or ''} {data.last_name or ''}".strip()
    else:
        local_part = email.split("@")[0] if email else ""
        full_name = f"_{local_part or 'FN_user-' + data.id[5:15]}"

    username = (
        data.username
        or email
        or f"Code_User-{(data.first_name or '')[:3]}_{data.last_name or data.id[5:10]}"
    )

    metadata = data.public_metadata
    return ProfileData(
        user_id=data.id,
        email_address=email,
        first_name=first_name,
        last_name=last_name,
        full_name=full_name,
        username=username,
        profile_image_url=data.image,
        role=(metadata.role if metadata and metadata.role else "authenticated"),
        tier=(metadata.tier if metadata and metadata.tier else "free"),
    )


def validate_username(username: str) -> None:
    """
    Enforce Clerk's username length limits.

    Raises:
        InvalidUsernameError: If the username is too short or too long
    """
    if len(username) < MIN_USERNAME_LENGTH:
        raise InvalidUsernameError(
            username, f"Username must be at least {MIN_USERNAME_LENGTH} characters"
        )
    if len(username) > MAX_USERNAME_LENGTH:
        raise InvalidUsernameError(
            username, f"Username must be at most {MAX_USERNAME_LENGTH} characters"
        )


class VerifiedUserCache:
    """
    Remembers users whose profile was recently confirmed to exist.

    Process-local and best-effort: it only saves database round trips on
    repeated session.created events.
    """

    TTL_SECONDS = 5 * 60
    MAX_ENTRIES = 100

    def __init__(self, ttl_seconds: float = TTL_SECONDS, max_entries: int = MAX_ENTRIES):
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._entries: dict[str, float] = {}

    def __contains__(self, user_id: str) -> bool:
        return user_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def is_fresh(self, user_id: str, now: Optional[float] = None) -> bool:
        """True if the user was verified within the TTL."""
        verified_at = self._entries.get(user_id)
        if verified_at is None:
            return False
        now = time.monotonic() if now is None else now
        return now - verified_at < self._ttl

    def mark(self, user_id: str, now: Optional[float] = None) -> None:
        """Record a successful verification, pruning stale entries when large."""
        self._entries[user_id] = time.monotonic() if now is None else now
        if len(self._entries) > self._max_entries:
            self.cleanup(now)

    def discard(self, user_id: str) -> bool:
        """Forget a user. Returns True if an entry was removed."""
        return self._entries.pop(user_id, None) is not None

    def cleanup(self, now: Optional[float] = None) -> None:
        """Drop entries older than the TTL."""
        now = time.monotonic() if now is None else now
        stale = [uid for uid, ts in self._entries.items() if now - ts > self._ttl]
        for uid in stale:
            del self._entries[uid]


class UserSyncService(IUserSyncService):
    """
    Syncs Clerk users into Supabase profiles.
    """

    def __init__(
        self,
        repository: ProfileRepository,
        clerk: ClerkClient,
        cache: Optional[VerifiedUserCache] = None,
    ):
        self._repo = repository
        self._clerk = clerk
        self._cache = cache if cache is not None else VerifiedUserCache()

    async def create_or_update_profile(self, data: ClerkUserData) -> SyncResult:
        """Create the profile if missing, otherwise update it."""
        profile = extract_profile_data(data)
        validate_username(profile.username)
        user_id = profile.user_id

        existing = self._repo.get_by_user_id(user_id)
        if existing is None:
            logger.info(f"Creating new profile for user {user_id}")
            self._repo.create(profile)
            return SyncResult(
                status=SyncStatus.CREATED,
                user_id=user_id,
                message=f"User {user_id} profile created successfully",
            )

        old_username = existing.get("username")
        new_username = profile.username
        username_changed = bool(old_username and new_username and old_username != new_username)

        if username_changed:
            logger.info(f'Username changed from "{old_username}" to "{new_username}"')
            try:
                self._repo.record_username_change(user_id, old_username, new_username)
            except Exception:
                # History is best-effort
                logger.exception(f"Failed to record username history for user {user_id}")

        update = profile.model_dump(exclude={"user_id", "tier"})
        # Keep the stored tier unless Clerk explicitly sends one
        if data.public_metadata and data.public_metadata.tier:
            update["tier"] = profile.tier

        self._repo.update(user_id, update)
        logger.info(f"Updated profile for user {user_id}")

        return SyncResult(
            status=SyncStatus.UPDATED,
            user_id=user_id,
            message=f"User {user_id} profile updated successfully",
            username_changed=username_changed,
            old_username=old_username if username_changed else None,
            new_username=new_username if username_changed else None,
        )

    async def delete_profile(self, user_id: str) -> SyncResult:
        """Hard-delete a user's profile."""
        logger.warning(f"Deleting profile for user {user_id}")
        self._repo.delete(user_id)
        self._cache.discard(user_id)
        return SyncResult(
            status=SyncStatus.DELETED,
            user_id=user_id,
            message="User deleted successfully",
        )

    async def verify_session_user(self, user_id: str) -> SyncResult:
        """Make sure a signed-in user has a profile, fetching from Clerk if needed."""
        if self._cache.is_fresh(user_id):
            logger.debug(f"User {user_id} was recently verified, skipping DB check")
            return SyncResult(
                status=SyncStatus.VERIFIED,
                user_id=user_id,
                message="User recently verified, profile in sync",
            )

        if self._repo.exists(user_id):
            self._cache.mark(user_id)
            return SyncResult(
                status=SyncStatus.VERIFIED,
                user_id=user_id,
                message="User profile verified and in sync",
            )

        logger.info(f"User {user_id} has no profile, syncing from Clerk")
        clerk_user = await self._clerk.get_user(user_id)
        if clerk_user is None:
            raise UserNotFoundError(user_id)

        result = await self.create_or_update_profile(clerk_user)
        self._cache.mark(user_id)
        return result

    async def forget_session_user(self, user_id: str) -> bool:
        """Drop a user from the verification cache when their session ends."""
        removed = self._cache.discard(user_id)
        if removed:
            logger.debug(f"Cleaned up verification cache entry for user {user_id}")
        return removed
