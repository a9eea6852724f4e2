"""
Projects service implementation.

Thin pass-through over ProjectRepository: no caching, no retries.
Failures raised by the data layer propagate to the caller.
"""

import logging
from typing import Optional

from .interfaces import IProjectService
from .models import Project
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService(IProjectService):
    """Project service backed by Supabase."""

    def __init__(self, repository: ProjectRepository):
        self._repo = repository

    async def get_project_by_slug(self, slug: str) -> Optional[Project]:
        """Look up a project by slug."""
        project = self._repo.get_by_slug(slug)
        if project is None:
            logger.debug(f"No project with slug '{slug}'")
        return project
