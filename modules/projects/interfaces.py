"""
Projects module interface.

The API layer depends on IProjectService, not the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Project


@runtime_checkable
class IProjectService(Protocol):
    """Interface for project read operations."""

    async def get_project_by_slug(self, slug: str) -> Optional[Project]:
        """
        Get a project by its slug.

        Args:
            slug: Unique project slug

        Returns:
            Project with tag names if found, None otherwise
        """
        ...
