"""
Projects module.

Read access to projects and their tags.

Public API:
- IProjectService: Interface for project lookups
- Project: Project with resolved tag names
- ProjectNotFoundError
"""

from .interfaces import IProjectService
from .models import Project, ProjectDifficulty
from .exceptions import ProjectNotFoundError

__all__ = [
    # Interface
    "IProjectService",
    # Models
    "Project",
    "ProjectDifficulty",
    # Exceptions
    "ProjectNotFoundError",
]
