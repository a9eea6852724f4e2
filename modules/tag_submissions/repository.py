"""
Tag submission repository for database access.

Encapsulates all Supabase queries for the moderation workflow:
- tag_submissions
- tags
- project_tags
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import TagSubmission, TagSubmissionStatus


class TagSubmissionRepository(BaseRepository[TagSubmission]):
    """
    Repository for tag submission data access.

    Note: This repository does NOT perform authorization checks.
    The admin guard lives in the route layer.
    """

    # -------------------------------------------------------------------------
    # Submission queries
    # -------------------------------------------------------------------------

    def get_by_id(self, submission_id: str) -> Optional[TagSubmission]:
        """Get a submission by ID, or None if it does not exist."""
        result = self._db.table("tag_submissions").select("*").eq("id", submission_id).execute()

        if not result.data:
            return None

        return self._map_to_submission(result.data[0])

    def list_by_status(self, status: TagSubmissionStatus) -> list[TagSubmission]:
        """List all submissions in a status, oldest first."""
        result = self._db.table("tag_submissions").select("*").eq(
            "status", status.value
        ).order("created_at").execute()

        return [self._map_to_submission(row) for row in result.data]

    def list_for_project(
        self,
        project_id: str,
        submitter_email: str,
        status: TagSubmissionStatus,
    ) -> list[TagSubmission]:
        """List one submitter's submissions for a project, oldest first."""
        result = (
            self._db.table("tag_submissions")
            .select("*")
            .eq("project_id", project_id)
            .eq("status", status.value)
            .eq("submitter_email", submitter_email)
            .order("created_at")
            .execute()
        )

        return [self._map_to_submission(row) for row in result.data]

    def find_pending(
        self,
        project_id: str,
        tag_name: str,
        submitter_email: str,
    ) -> Optional[TagSubmission]:
        """Find an existing pending submission for the same project, tag and submitter."""
        result = (
            self._db.table("tag_submissions")
            .select("*")
            .eq("project_id", project_id)
            .eq("tag_name", tag_name)
            .eq("submitter_email", submitter_email)
            .eq("status", TagSubmissionStatus.PENDING.value)
            .limit(1)
            .execute()
        )

        if not result.data:
            return None

        return self._map_to_submission(result.data[0])

    def list_pending_for_tag(self, tag_name: str, exclude_id: str) -> list[TagSubmission]:
        """List other pending submissions proposing the same tag name."""
        result = (
            self._db.table("tag_submissions")
            .select("*")
            .eq("tag_name", tag_name)
            .eq("status", TagSubmissionStatus.PENDING.value)
            .neq("id", exclude_id)
            .execute()
        )

        return [self._map_to_submission(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Submission writes
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any]) -> TagSubmission:
        """
        Insert a new submission.

        Args:
            data: Column values (tag_name, project_id, submitter_email, description)

        Returns:
            Created submission with generated ID and timestamps.
        """
        result = self._db.table("tag_submissions").insert(data).execute()
        return self._map_to_submission(result.data[0])

    def set_review(
        self,
        submission_id: str,
        status: TagSubmissionStatus,
        admin_notes: Optional[str],
    ) -> Optional[TagSubmission]:
        """
        Record a review decision.

        Returns:
            The updated submission, or None if no row matched.
        """
        now = self._now()
        data = {
            "status": status.value,
            "admin_notes": admin_notes,
            "reviewed_at": now,
            "updated_at": now,
        }
        result = self._db.table("tag_submissions").update(data).eq("id", submission_id).execute()

        if not result.data:
            return None

        return self._map_to_submission(result.data[0])

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_submission(self, data: dict[str, Any]) -> TagSubmission:
        """Map database row to TagSubmission model."""
        project_id = data.get("project_id")
        return TagSubmission(
            id=str(data["id"]),
            project_id=str(project_id) if project_id else None,
            tag_name=data["tag_name"],
            submitter_email=data["submitter_email"],
            description=data.get("description"),
            status=TagSubmissionStatus(data.get("status") or "pending"),
            admin_notes=data.get("admin_notes"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            reviewed_at=data.get("reviewed_at"),
        )


class TagRepository(BaseRepository[dict]):
    """Repository for the tags catalogue and project-tag associations."""

    def get_id_by_name(self, name: str) -> Optional[str]:
        """Return the ID of the tag with this exact name, if any."""
        result = self._db.table("tags").select("id").eq("name", name).limit(1).execute()

        if not result.data:
            return None

        return str(result.data[0]["id"])

    def create(self, name: str) -> str:
        """Insert a tag and return its ID."""
        result = self._db.table("tags").insert({"name": name}).execute()
        return str(result.data[0]["id"])

    def get_or_create(self, name: str) -> str:
        """Return the ID of the named tag, creating it if needed."""
        return self.get_id_by_name(name) or self.create(name)

    def project_has_tag(self, project_id: str, tag_id: str) -> bool:
        """Whether the project is already associated with the tag."""
        result = (
            self._db.table("project_tags")
            .select("project_id")
            .eq("project_id", project_id)
            .eq("tag_id", tag_id)
            .limit(1)
            .execute()
        )
        return bool(result.data)

    def add_to_project(self, project_id: str, tag_id: str) -> bool:
        """
        Associate a tag with a project.

        Returns:
            True if an association was inserted, False if it already existed.
        """
        if self.project_has_tag(project_id, tag_id):
            return False

        self._db.table("project_tags").insert(
            {"project_id": project_id, "tag_id": tag_id}
        ).execute()
        return True
