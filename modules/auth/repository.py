"""
Profile repository for database access.

Encapsulates Supabase queries for:
- profiles
- username_history
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import ProfileData


class ProfileRepository(BaseRepository[dict]):
    """
    Repository for user profiles keyed by Clerk user ID.

    Rows are returned as plain dicts; the sync service only needs a few
    columns from them.
    """

    def get_by_user_id(self, user_id: str) -> Optional[dict[str, Any]]:
        """Get a profile row, or None if the user has no profile."""
        result = self._db.table("profiles").select("*").eq("user_id", user_id).limit(1).execute()

        if not result.data:
            return None

        return result.data[0]

    def exists(self, user_id: str) -> bool:
        """Check whether a profile row exists for the user."""
        result = self._db.table("profiles").select("user_id").eq("user_id", user_id).limit(1).execute()
        return bool(result.data)

    def create(self, profile: ProfileData) -> dict[str, Any]:
        """Insert a profile and return the stored row."""
        result = self._db.table("profiles").insert(profile.model_dump()).execute()
        return result.data[0]

    def update(self, user_id: str, data: dict[str, Any]) -> None:
        """Update profile columns for a user."""
        data = {**data, "updated_at": self._now()}
        self._db.table("profiles").update(data).eq("user_id", user_id).execute()

    def delete(self, user_id: str) -> None:
        """Hard-delete a user's profile."""
        self._db.table("profiles").delete().eq("user_id", user_id).execute()

    def record_username_change(self, user_id: str, old_username: str, new_username: str) -> None:
        """
        Remember a previous username so old profile URLs can redirect.

        Keyed on old_username: reusing a name overwrites its history entry.
        """
        self._db.table("username_history").upsert(
            {
                "old_username": old_username,
                "user_id": user_id,
                "new_username": new_username,
                "changed_at": self._now(),
            },
            on_conflict="old_username",
        ).execute()
