"""API dependencies for authentication and authorization"""

from typing import Optional
from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from portfolio_cms.api.errors import forbidden_error, unauthorized_error
from portfolio_cms.database import get_db
from portfolio_cms.models import User
from portfolio_cms.services.auth_service import AuthService
from portfolio_cms.services.redis_service import RedisService


def bearer_token(authorization: Optional[str]) -> str:
    """
    Extract the token from an "Authorization: Bearer <token>" header.

    Raises:
        HTTPException: 401 if the header is missing or malformed
    """
    if not authorization:
        raise unauthorized_error("Authorization header missing")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise unauthorized_error("Invalid authorization header format")

    return parts[1]


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Get current authenticated user from JWT token.

    Args:
        authorization: Authorization header with Bearer token
        db: Database session

    Returns:
        User object

    Raises:
        HTTPException: 401 if token is missing, revoked or invalid, or the user no longer exists
    """
    instance = request.url.path
    token = bearer_token(authorization)

    # Logged-out tokens stay on the blacklist until they expire
    redis_service = RedisService()
    if await redis_service.is_token_blacklisted(token):
        raise unauthorized_error("Token has been revoked", instance)

    payload = AuthService.validate_token(token, token_type="access")
    if not payload:
        raise unauthorized_error("Invalid or expired token", instance)

    try:
        user_id = UUID(payload.get("sub") or "")
    except ValueError:
        raise unauthorized_error("Invalid user ID in token", instance)

    user = await db.get(User, user_id)
    if not user:
        raise unauthorized_error("User not found", instance)

    return user


async def require_admin(
    request: Request,
    current_user: User = Depends(get_current_user),
) -> User:
    """
    Allow only admin users through.

    Signed-in non-admins get a 403 problem with a sign_out link instead of
    being bounced back to login.
    """
    if not current_user.is_admin:
        raise forbidden_error(
            f"User {current_user.email} does not have admin access",
            request.url.path,
        )
    return current_user
