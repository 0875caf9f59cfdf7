from lanyard.infrastructure.security.jwt_verifier import (
    InvalidTokenError,
    JWTVerifier,
    VerifiedIdentity,
)

__all__ = ["InvalidTokenError", "JWTVerifier", "VerifiedIdentity"]
