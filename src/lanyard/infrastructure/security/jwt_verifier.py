"""Verification of bearer tokens issued by the identity provider.

Sign-up and login happen elsewhere; this service only checks the HS256
access tokens the provider hands out and extracts the caller's identity.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import jwt


class InvalidTokenError(Exception):
    """Raised when a bearer token is invalid, expired or malformed."""


@dataclass(frozen=True)
class VerifiedIdentity:
    user_id: UUID
    email: Optional[str] = None


class JWTVerifier:
    """Verifies identity provider tokens.

    Examples
    --------
    >>> verifier = JWTVerifier(secret_key="shared-secret")
    >>> identity = verifier.verify(token)
    >>> print(identity.user_id)
    """

    ALGORITHM = "HS256"

    def __init__(self, secret_key: str, audience: Optional[str] = None):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._audience = audience or None

    def verify(self, token: str) -> VerifiedIdentity:
        """Verify and decode a bearer token.

        Raises
        ------
        InvalidTokenError
            If the token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                options={"verify_aud": self._audience is not None},
            )
            return VerifiedIdentity(
                user_id=UUID(payload["sub"]),
                email=payload.get("email"),
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    def issue(
        self,
        user_id: UUID,
        email: Optional[str] = None,
        expires_delta: timedelta = timedelta(hours=1),
    ) -> str:
        """Create a token the way the identity provider does (local tooling)."""
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": now + expires_delta,
        }
        if self._audience:
            payload["aud"] = self._audience
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
