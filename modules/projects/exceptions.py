"""
Projects module exceptions.
"""

from shared.exceptions import NotFoundError


class ProjectNotFoundError(NotFoundError):
    """Raised when no project matches the given identifier."""

    def __init__(self, identifier: str):
        super().__init__(
            f"Project not found: {identifier}",
            code="PROJECT_NOT_FOUND",
            details={"identifier": identifier},
        )
