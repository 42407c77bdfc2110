"""Access token encoding and decoding.

Tokens are issued by the identity provider in front of Remark, signed with
the shared secret from ``AuthSettings``. Besides the caller's id and handle
they carry the permissions granted to the caller.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, Field

from remark.config import AuthSettings

# Claims a token must carry to identify its holder
REQUIRED_CLAIMS = ["exp", "user_id", "handle"]


class TokenPayload(BaseModel):
    """Claims read from a verified token."""

    user_id: str
    handle: str
    permissions: list[str] = Field(default_factory=list)
    exp: datetime


class JWTError(Exception):
    """Token is malformed, badly signed, incomplete or expired."""


def create_token(
    user_id: str,
    handle: str,
    settings: AuthSettings,
    permissions: list[str] | None = None,
) -> str:
    """Sign a token for a user.

    Remark only verifies tokens in production; issuing them here serves local
    tooling and tests.

    Args:
        user_id: User ID
        handle: User handle
        settings: Authentication settings
        permissions: Permissions granted to the holder

    Returns:
        Encoded token
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "handle": handle,
        "permissions": sorted(set(permissions or [])),
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e

    return TokenPayload.model_validate(claims)
