"""
Project repository for database access.

Encapsulates the Supabase queries for the projects table and the
project_tags -> tags join used to resolve tag names.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Project


class ProjectRepository(BaseRepository[Project]):
    """
    Repository for project data access.

    Note: This repository does NOT perform authorization checks.
    """

    def get_by_slug(self, slug: str) -> Optional[Project]:
        """
        Get a project by its unique slug, including tag names.

        Args:
            slug: The project slug.

        Returns:
            Project with tags, or None if no row matches.
        """
        result = self._db.table("projects").select("*").eq("slug", slug).execute()

        if not result.data:
            return None

        project_data = result.data[0]
        tags = self.get_tag_names(str(project_data["id"]))
        return self._map_to_project(project_data, tags)

    def get_by_id(self, project_id: str) -> Optional[Project]:
        """Get a project by ID, including tag names."""
        result = self._db.table("projects").select("*").eq("id", project_id).execute()

        if not result.data:
            return None

        return self._map_to_project(result.data[0], self.get_tag_names(project_id))

    def get_tag_names(self, project_id: str) -> list[str]:
        """Resolve the names of all tags attached to a project."""
        result = self._db.table("project_tags").select(
            "tag_id, tags(name)"
        ).eq("project_id", project_id).execute()

        names = []
        for row in result.data or []:
            tag = row.get("tags")
            if tag and tag.get("name"):
                names.append(tag["name"])
        return names

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_project(self, data: dict[str, Any], tags: Optional[list[str]] = None) -> Project:
        """Map database row to Project model."""
        return Project(
            id=str(data["id"]),
            user_id=data.get("user_id"),
            title=data["title"],
            slug=data["slug"],
            description=data.get("description"),
            difficulty=data.get("difficulty") or "beginner",
            tags=tags or [],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            deleted_at=data.get("deleted_at"),
        )
