"""Authentication service for JWT token management and password hashing"""

from datetime import datetime, timedelta
from typing import Optional, Dict, Any
from jose import JWTError, jwt
import bcrypt
from portfolio_cms.config import settings

TOKEN_ISSUER = "portfolio-cms-api"
REFRESH_TOKEN_HOURS = 168


class AuthService:
    """Service for handling admin authentication, JWT tokens, and password hashing"""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password using bcrypt with 12 salt rounds

        Args:
            password: Plain text password

        Returns:
            Hashed password string
        """
        salt = bcrypt.gensalt(rounds=12)
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash

        Returns:
            True if password matches, False otherwise (including malformed hashes)
        """
        try:
            return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError:
            return False

    @staticmethod
    def generate_token(
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None,
        token_type: str = "access"
    ) -> str:
        """
        Generate a signed JWT carrying the provided claims

        Args:
            data: Claims to include in the token
            expires_delta: Optional lifetime (defaults to jwt_expiration_hours for
                access tokens, 7 days for refresh tokens)
            token_type: 'access' or 'refresh'

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()

        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            hours = settings.jwt_expiration_hours if token_type == "access" else REFRESH_TOKEN_HOURS
            expire = datetime.utcnow() + timedelta(hours=hours)

        to_encode.update({
            "exp": expire,
            "iat": datetime.utcnow(),
            "iss": TOKEN_ISSUER,
            "type": token_type
        })

        # jwt_secret if configured, otherwise secret_key
        secret = settings.jwt_secret or settings.secret_key
        return jwt.encode(to_encode, secret, algorithm=settings.jwt_algorithm)

    @staticmethod
    def decode_token(token: str) -> Optional[Dict[str, Any]]:
        """Decode a JWT; returns its claims, or None if the signature or expiry is invalid"""
        try:
            secret = settings.jwt_secret or settings.secret_key
            return jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
        except JWTError:
            return None

    @staticmethod
    def validate_token(token: str, token_type: str = "access") -> Optional[Dict[str, Any]]:
        """
        Validate a JWT token including signature, expiration, and type

        Args:
            token: JWT token string to validate
            token_type: Expected token type ('access' or 'refresh')

        Returns:
            Dictionary of token claims if valid, None otherwise
        """
        payload = AuthService.decode_token(token)

        if not payload:
            return None

        if payload.get("type") != token_type:
            return None

        return payload

    @staticmethod
    def create_access_token(user_id: str, email: str, role: str) -> str:
        """Create an access token carrying the user's id, email and role"""
        data = {
            "sub": user_id,
            "email": email,
            "role": role
        }
        return AuthService.generate_token(data, token_type="access")

    @staticmethod
    def create_refresh_token(user_id: str) -> str:
        """Create a refresh token for a user"""
        return AuthService.generate_token({"sub": user_id}, token_type="refresh")

    @staticmethod
    def seconds_until_expiry(payload: Dict[str, Any]) -> int:
        """Remaining lifetime of a decoded token in seconds (0 if already expired)"""
        exp = payload.get("exp")
        if not exp:
            return 0
        remaining = datetime.utcfromtimestamp(exp) - datetime.utcnow()
        return max(0, int(remaining.total_seconds()))
