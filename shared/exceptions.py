"""
Error hierarchy shared by every CodeDetails module.

Modules subclass these bases for their own failures. Each class carries the
HTTP status its routes answer with, so handlers map an exception with
``HTTPException(status_code=e.status_code, detail=e.message)`` instead of
repeating numbers.
"""

from typing import Any, ClassVar, Optional


class CodeDetailsError(Exception):
    """
    Root of the hierarchy.

    ``code`` is a stable machine-readable identifier (class name unless
    given); ``details`` holds structured context for logs and clients.
    """

    status_code: ClassVar[int] = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).__name__
        self.details = dict(details) if details else {}

    def to_dict(self) -> dict[str, Any]:
        """Serializable error body."""
        return {"error": self.code, "message": self.message, "details": self.details}


class ValidationError(CodeDetailsError):
    """Request data failed a business rule."""

    status_code = 400


class AuthenticationError(CodeDetailsError):
    """Missing, invalid or unverifiable credentials."""

    status_code = 401


class AuthorizationError(CodeDetailsError):
    """Caller is known but not allowed."""

    status_code = 403


class NotFoundError(CodeDetailsError):
    """Referenced record does not exist."""

    status_code = 404


class ConflictError(CodeDetailsError):
    """Request clashes with the current state of a record."""

    status_code = 409


class ExternalServiceError(CodeDetailsError):
    """A third-party API (Clerk, ...) failed or was unreachable."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
