"""
Session token authentication.

Validates Clerk session JWTs and extracts user information. The token is
read from the Authorization header (API clients) or from the ``__session``
cookie Clerk sets for same-site browser requests (server-rendered pages).
"""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from datetime import datetime, timezone

from shared.config import get_settings
from shared.models import AuthenticatedUser
from modules.auth.admin import require_admin as ensure_admin
from modules.auth.exceptions import InsufficientPermissionsError
from modules.auth.models import SessionClaims

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)

SESSION_COOKIE = "__session"


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(HTTPException):
    """Authenticated, but not allowed."""
    def __init__(self, detail: str = "Unauthorized: Admin access required"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def decode_token(token: str) -> SessionClaims:
    """
    Decode and validate a Clerk session token.

    Args:
        token: The JWT token string

    Returns:
        SessionClaims with decoded claims

    Raises:
        AuthError: If token is invalid or expired
    """
    settings = get_settings()

    if not settings.clerk_jwt_key:
        raise AuthError("Server authentication not configured")

    try:
        payload = jwt.decode(
            token,
            settings.clerk_jwt_key,
            algorithms=settings.clerk_jwt_algorithms,
            options={"verify_aud": False},
        )
        return SessionClaims(**payload)
    except jwt.ExpiredSignatureError:
        raise AuthError("Token has expired")
    except JWTError as e:
        raise AuthError(f"Invalid token: {str(e)}")


def get_user_from_claims(claims: SessionClaims) -> AuthenticatedUser:
    """
    Convert session claims to AuthenticatedUser model.

    Args:
        claims: Decoded session token

    Returns:
        AuthenticatedUser instance
    """
    metadata = claims.metadata or {}
    return AuthenticatedUser(
        id=claims.sub,
        email=claims.email,
        session_id=claims.sid,
        last_sign_in=datetime.fromtimestamp(claims.iat, tz=timezone.utc),
        role=metadata.get("role") or "authenticated",
        tier=metadata.get("tier") or "free",
    )


def extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Prefer the Authorization header, fall back to the session cookie."""
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(SESSION_COOKIE)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = extract_token(request, credentials)
    if not token:
        raise AuthError("Missing authorization header")

    claims = decode_token(token)
    return get_user_from_claims(claims)


async def require_admin(
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """
    Dependency that requires the admin moderator account.

    Usage:
        @router.get("/admin-only")
        async def admin_route(admin: AuthenticatedUser = Depends(require_admin)):
            ...
    """
    try:
        ensure_admin(user.email)
    except InsufficientPermissionsError as e:
        logger.info(f"Rejected admin access for user {user.id}")
        raise ForbiddenError(e.message)
    return user

