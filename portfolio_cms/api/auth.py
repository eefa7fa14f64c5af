"""Authentication endpoints"""

import logging
from fastapi import APIRouter, Depends, Header, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID

from portfolio_cms.api.dependencies import bearer_token, get_current_user
from portfolio_cms.api.errors import problem_exception, unauthorized_error
from portfolio_cms.config import settings
from portfolio_cms.database import get_db
from portfolio_cms.models import User
from portfolio_cms.schemas.auth import (
    LoginRequest,
    RefreshTokenResponse,
    TokenResponse,
    UserInfo,
    UserResponse,
)
from portfolio_cms.services.auth_service import AuthService
from portfolio_cms.services.redis_service import RedisService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])

MAX_LOGIN_ATTEMPTS = 5


def _parse_uuid(value: Optional[str]) -> Optional[UUID]:
    try:
        return UUID(value or "")
    except ValueError:
        return None


@router.post("/login", response_model=TokenResponse, status_code=status.HTTP_200_OK)
async def login(
    login_data: LoginRequest,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """
    Authenticate user and return JWT tokens

    - **email**: User email address
    - **password**: User password

    Returns access token and refresh token with user information
    """
    redis_service = RedisService()
    client_ip = request.client.host if request.client else "unknown"

    # Max 5 failed attempts per IP per 15 minutes
    attempts = await redis_service.get_login_attempts(client_ip)
    if attempts >= MAX_LOGIN_ATTEMPTS:
        raise problem_exception(
            status.HTTP_429_TOO_MANY_REQUESTS,
            "Too Many Requests",
            "Maximum login attempts exceeded. Please try again in 15 minutes.",
            instance=request.url.path,
        )

    result = await db.execute(select(User).where(User.email == login_data.email))
    user = result.scalar_one_or_none()

    if not user or not AuthService.verify_password(login_data.password, user.password_hash):
        await redis_service.increment_login_attempts(client_ip)
        logger.info(f"Failed login for {login_data.email} from {client_ip}")
        # Same message whichever field was wrong
        raise unauthorized_error("Invalid email or password", request.url.path)

    await redis_service.reset_login_attempts(client_ip)

    access_token = AuthService.create_access_token(
        user_id=str(user.id),
        email=user.email,
        role=user.role
    )
    refresh_token = AuthService.create_refresh_token(user_id=str(user.id))

    logger.info(f"User {user.id} logged in")
    return TokenResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        token_type="Bearer",
        expires_in=settings.jwt_expiration_hours * 3600,
        user=UserInfo.model_validate(user)
    )


@router.post("/refresh", response_model=RefreshTokenResponse, status_code=status.HTTP_200_OK)
async def refresh_token(
    request: Request,
    authorization: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db)
):
    """
    Refresh access token using refresh token

    - **Authorization**: Bearer {refresh_token}
    """
    token = bearer_token(authorization)

    payload = AuthService.validate_token(token, token_type="refresh")
    if not payload:
        raise unauthorized_error("Invalid or expired refresh token", request.url.path)

    result = await db.execute(select(User).where(User.id == _parse_uuid(payload.get("sub"))))
    user = result.scalar_one_or_none()
    if not user:
        raise unauthorized_error("User not found", request.url.path)

    access_token = AuthService.create_access_token(
        user_id=str(user.id),
        email=user.email,
        role=user.role
    )

    return RefreshTokenResponse(
        access_token=access_token,
        token_type="Bearer",
        expires_in=settings.jwt_expiration_hours * 3600
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(authorization: Optional[str] = Header(None)):
    """
    Logout by blacklisting the access token until it expires

    - **Authorization**: Bearer {access_token}

    Idempotent: invalid or expired tokens also return 204
    """
    token = bearer_token(authorization)

    payload = AuthService.decode_token(token)
    if not payload:
        return

    redis_service = RedisService()
    await redis_service.blacklist_token(token, AuthService.seconds_until_expiry(payload))
    logger.info(f"User {payload.get('sub')} logged out")


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)):
    """Current user; is_admin tells the client whether to show the admin area"""
    return UserResponse(
        id=current_user.id,
        email=current_user.email,
        full_name=current_user.full_name,
        role=current_user.role,
        is_admin=current_user.is_admin,
        created_at=current_user.created_at,
    )
