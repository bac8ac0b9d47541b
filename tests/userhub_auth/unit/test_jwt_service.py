"""Unit tests for JWTService."""

from datetime import timedelta

import jwt
import pytest

from userhub_auth import InvalidTokenError, JWTService

SECRET = "unit-test-secret-key-with-enough-length"


class TestJWTService:
    def setup_method(self):
        self.service = JWTService(secret_key=SECRET, access_token_expire_hours=2)

    def test_round_trip_claims(self):
        token = self.service.create_access_token(42, "alice@example.com")

        payload = self.service.verify_token(token)

        assert payload.user_id == 42
        assert payload.email == "alice@example.com"
        assert payload.is_access_token()
        assert len(payload.jti) == 32

    def test_each_token_gets_a_unique_jti(self):
        first = self.service.verify_token(self.service.create_access_token(1, "a@example.com"))
        second = self.service.verify_token(self.service.create_access_token(1, "a@example.com"))

        assert first.jti != second.jti

    def test_expiry_seconds(self):
        assert self.service.access_token_expire_seconds == 7200

    def test_expired_token(self):
        token = self.service.create_access_token(
            1,
            "a@example.com",
            expires_delta=timedelta(seconds=-10),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_token_signed_with_other_key(self):
        other = JWTService(secret_key="another-secret-key-with-enough-length")
        token = other.create_access_token(1, "a@example.com")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_garbage_token(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not.a.jwt")

    def test_missing_claims(self):
        token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="")
