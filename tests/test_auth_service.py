"""Tests for authentication service"""

from datetime import timedelta

from portfolio_cms.services.auth_service import AuthService

USER_ID = "123e4567-e89b-12d3-a456-426614174000"


class TestPasswordHashing:
    """Test password hashing and verification"""

    def test_hash_password(self):
        password = "TestPassword123!"
        hashed = AuthService.hash_password(password)

        assert hashed != password
        assert hashed.startswith("$2b$12$")

    def test_verify_password_correct(self):
        hashed = AuthService.hash_password("TestPassword123!")

        assert AuthService.verify_password("TestPassword123!", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = AuthService.hash_password("TestPassword123!")

        assert AuthService.verify_password("WrongPassword", hashed) is False

    def test_verify_password_malformed_hash(self):
        assert AuthService.verify_password("TestPassword123!", "not-a-bcrypt-hash") is False

    def test_hash_same_password_different_hashes(self):
        """Salted hashes differ but both verify"""
        hash1 = AuthService.hash_password("TestPassword123!")
        hash2 = AuthService.hash_password("TestPassword123!")

        assert hash1 != hash2
        assert AuthService.verify_password("TestPassword123!", hash1) is True
        assert AuthService.verify_password("TestPassword123!", hash2) is True


class TestJWTTokens:
    """Test JWT token generation and validation"""

    def test_access_token_claims(self):
        token = AuthService.create_access_token(USER_ID, "admin@galreforms.com", "admin")
        payload = AuthService.decode_token(token)

        assert payload["sub"] == USER_ID
        assert payload["email"] == "admin@galreforms.com"
        assert payload["role"] == "admin"
        assert payload["type"] == "access"
        assert payload["iss"] == "portfolio-cms-api"

    def test_refresh_token_claims(self):
        payload = AuthService.decode_token(AuthService.create_refresh_token(USER_ID))

        assert payload["sub"] == USER_ID
        assert payload["type"] == "refresh"
        assert "email" not in payload

    def test_validate_token_type(self):
        access = AuthService.create_access_token(USER_ID, "admin@galreforms.com", "admin")
        refresh = AuthService.create_refresh_token(USER_ID)

        assert AuthService.validate_token(access, "access") is not None
        assert AuthService.validate_token(access, "refresh") is None
        assert AuthService.validate_token(refresh, "refresh") is not None
        assert AuthService.validate_token(refresh, "access") is None

    def test_expired_token(self):
        token = AuthService.generate_token({"sub": USER_ID}, expires_delta=timedelta(seconds=-10))

        assert AuthService.decode_token(token) is None
        assert AuthService.validate_token(token) is None

    def test_tampered_token(self):
        token = AuthService.create_access_token(USER_ID, "admin@galreforms.com", "admin")

        assert AuthService.decode_token(token[:-4] + "abcd") is None
        assert AuthService.decode_token("not.a.token") is None

    def test_seconds_until_expiry(self):
        token = AuthService.generate_token({"sub": USER_ID}, expires_delta=timedelta(minutes=10))
        payload = AuthService.decode_token(token)

        remaining = AuthService.seconds_until_expiry(payload)

        assert 590 <= remaining <= 600

    def test_seconds_until_expiry_past(self):
        assert AuthService.seconds_until_expiry({"exp": 1_000_000}) == 0
        assert AuthService.seconds_until_expiry({}) == 0
