"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IUserSyncService
    from modules.projects.interfaces import IProjectService
    from modules.projects.repository import ProjectRepository
    from modules.tag_submissions.interfaces import ITagSubmissionService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._project_repository: "ProjectRepository | None" = None
        self._project_service: "IProjectService | None" = None
        self._tag_submission_service: "ITagSubmissionService | None" = None
        self._user_sync_service: "IUserSyncService | None" = None

    @property
    def project_repository(self) -> "ProjectRepository":
        """Get the project repository instance."""
        if self._project_repository is None:
            from modules.projects.repository import ProjectRepository
            from shared.database import get_supabase_client
            self._project_repository = ProjectRepository(get_supabase_client())
        return self._project_repository

    @property
    def projects(self) -> "IProjectService":
        """Get the project service instance."""
        if self._project_service is None:
            from modules.projects.service import ProjectService
            self._project_service = ProjectService(self.project_repository)
        return self._project_service

    @property
    def tag_submissions(self) -> "ITagSubmissionService":
        """Get the tag submission service instance."""
        if self._tag_submission_service is None:
            from modules.tag_submissions.repository import TagRepository, TagSubmissionRepository
            from modules.tag_submissions.service import TagSubmissionService
            from shared.database import get_supabase_client
            db = get_supabase_client()
            self._tag_submission_service = TagSubmissionService(
                submissions=TagSubmissionRepository(db),
                tags=TagRepository(db),
                projects=self.project_repository,
            )
        return self._tag_submission_service

    @property
    def user_sync(self) -> "IUserSyncService":
        """Get the user sync service instance."""
        if self._user_sync_service is None:
            from modules.auth.clerk_client import get_clerk_client
            from modules.auth.repository import ProfileRepository
            from modules.auth.service import UserSyncService
            from shared.database import get_supabase_client
            self._user_sync_service = UserSyncService(
                repository=ProfileRepository(get_supabase_client()),
                clerk=get_clerk_client(),
            )
        return self._user_sync_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._project_repository = None
        self._project_service = None
        self._tag_submission_service = None
        self._user_sync_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_project_service() -> "IProjectService":
    """FastAPI dependency for project service."""
    return get_container().projects


def get_tag_submission_service() -> "ITagSubmissionService":
    """FastAPI dependency for tag submission service."""
    return get_container().tag_submissions


def get_user_sync_service() -> "IUserSyncService":
    """FastAPI dependency for user sync service."""
    return get_container().user_sync
