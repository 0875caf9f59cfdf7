"""Tests for bearer token verification."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
import pytest

from lanyard.infrastructure.security import InvalidTokenError, JWTVerifier

TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def verifier() -> JWTVerifier:
    return JWTVerifier(SECRET, audience="authenticated")


class TestJWTVerifier:
    """Tests for JWTVerifier."""

    def test_empty_secret_rejected(self):
        """A verifier needs a secret."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTVerifier("")

    def test_issued_token_verifies(self, verifier):
        """Tokens issued with the same secret round-trip the identity."""
        token = verifier.issue(TEST_USER_ID, "jane@example.com")

        identity = verifier.verify(token)

        assert identity.user_id == TEST_USER_ID
        assert identity.email == "jane@example.com"

    def test_expired_token(self, verifier):
        """Expired tokens are rejected."""
        token = verifier.issue(TEST_USER_ID, expires_delta=timedelta(seconds=-1))

        with pytest.raises(InvalidTokenError, match="expired"):
            verifier.verify(token)

    def test_wrong_secret(self, verifier):
        """Tokens signed with another secret are rejected."""
        token = JWTVerifier("another-secret-key-long-enough-for-hs256").issue(
            TEST_USER_ID,
        )

        with pytest.raises(InvalidTokenError):
            verifier.verify(token)

    def test_wrong_audience(self, verifier):
        """The audience is checked when configured."""
        token = JWTVerifier(SECRET, audience="someone-else").issue(TEST_USER_ID)

        with pytest.raises(InvalidTokenError):
            verifier.verify(token)

    def test_audience_not_required_when_unset(self):
        """Without a configured audience any aud claim is accepted."""
        token = JWTVerifier(SECRET, audience="authenticated").issue(TEST_USER_ID)

        identity = JWTVerifier(SECRET).verify(token)

        assert identity.user_id == TEST_USER_ID

    def test_non_uuid_subject(self, verifier):
        """The subject must be a UUID."""
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "aud": "authenticated",
                "iat": now,
                "exp": now + timedelta(hours=1),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            verifier.verify(token)

    def test_garbage_token(self, verifier):
        """Non-JWT strings are rejected."""
        with pytest.raises(InvalidTokenError):
            verifier.verify("not.a.token")
