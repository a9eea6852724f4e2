"""
Authentication module.

Clerk integration: payload models, admin checks, profile sync and the
Clerk webhook.

Public API:
- IUserSyncService: Interface for profile sync
- ClerkUserData / ClerkSessionData: Clerk payload shapes
- is_admin / require_admin: Admin checks
- Auth exceptions: WebhookVerificationError, ClerkAPIError, etc.
"""

from .interfaces import IUserSyncService
from .admin import is_admin, require_admin
from .models import (
    ClerkEmailAddress,
    ClerkPublicMetadata,
    ClerkUserData,
    ClerkSessionData,
    ClerkWebhookEvent,
    SessionClaims,
    ProfileData,
    SyncResult,
    SyncStatus,
)
from .exceptions import (
    UserNotFoundError,
    InsufficientPermissionsError,
    InvalidUsernameError,
    WebhookVerificationError,
    WebhookNotConfiguredError,
    UnhandledWebhookEventError,
    ClerkAPIError,
)

__all__ = [
    # Interface
    "IUserSyncService",
    # Admin checks
    "is_admin",
    "require_admin",
    # Models
    "ClerkEmailAddress",
    "ClerkPublicMetadata",
    "ClerkUserData",
    "ClerkSessionData",
    "ClerkWebhookEvent",
    "SessionClaims",
    "ProfileData",
    "SyncResult",
    "SyncStatus",
    # Exceptions
    "UserNotFoundError",
    "InsufficientPermissionsError",
    "InvalidUsernameError",
    "WebhookVerificationError",
    "WebhookNotConfiguredError",
    "UnhandledWebhookEventError",
    "ClerkAPIError",
]
