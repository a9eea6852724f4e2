"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the route
layer to return appropriate HTTP responses.
"""

from shared.exceptions import (
    CodeDetailsError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class UserNotFoundError(NotFoundError):
    """Raised when a Clerk user cannot be found."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, message: str = "Unauthorized: Admin access required"):
        super().__init__(message, code="INSUFFICIENT_PERMISSIONS")


class InvalidUsernameError(ValidationError):
    """Raised when a username falls outside Clerk's length limits."""

    def __init__(self, username: str, reason: str):
        super().__init__(
            reason,
            code="INVALID_USERNAME",
            details={"username": username},
        )


class WebhookVerificationError(AuthenticationError):
    """Raised when a webhook payload fails signature verification."""

    status_code = 400

    def __init__(self, message: str = "Error verifying webhook signature"):
        super().__init__(message, code="WEBHOOK_VERIFICATION_FAILED")


class WebhookNotConfiguredError(CodeDetailsError):
    """Raised when no webhook signing secret is configured."""

    def __init__(self):
        super().__init__("Webhook secret not configured", code="WEBHOOK_NOT_CONFIGURED")


class UnhandledWebhookEventError(ValidationError):
    """Raised for webhook event types we do not process."""

    def __init__(self, event_type: str):
        super().__init__(
            f"Unhandled event type: {event_type}",
            code="UNHANDLED_WEBHOOK_EVENT",
            details={"event_type": event_type},
        )


class ClerkAPIError(ExternalServiceError):
    """Raised when the Clerk Backend API returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message,
            service="clerk",
            code="CLERK_API_ERROR",
            details={"status_code": status_code},
        )
