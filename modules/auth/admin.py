"""
Admin permission checks.

An administrator is identified by email: the single address configured in
ADMIN_DASHBOARD_MODERATOR.
"""

import logging
from typing import Optional

from shared.config import get_settings

from .exceptions import InsufficientPermissionsError

logger = logging.getLogger(__name__)


def is_admin(user_email: Optional[str]) -> bool:
    """
    Check if a user is an admin based on their email address.

    Comparison is trimmed and case-insensitive. When the moderator email
    is not configured, nobody is an admin.
    """
    if not user_email:
        return False

    admin_email = get_settings().admin_dashboard_moderator
    if not admin_email:
        logger.warning("ADMIN_DASHBOARD_MODERATOR environment variable not set")
        return False

    return user_email.strip().lower() == admin_email.strip().lower()


def require_admin(user_email: Optional[str]) -> None:
    """
    Raise unless the email belongs to the admin.

    Raises:
        InsufficientPermissionsError: If the user is not an admin
    """
    if not is_admin(user_email):
        raise InsufficientPermissionsError()
