"""Caller identification from access tokens."""

from uuid import UUID

import logfire

from remark.config import AuthSettings
from remark.domain.value import Handle, Principal, UserId
from remark.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Turns access tokens into principals."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, handle: str, permissions: list[str] | None = None
    ) -> str:
        """Issue a token for a user.

        Args:
            user_id: User ID
            handle: User handle
            permissions: Permissions granted to the holder

        Returns:
            Encoded token
        """
        return create_token(
            user_id, handle, self.auth_settings, permissions=permissions
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        return verify_token(token, self.auth_settings)

    def get_principal_from_token(self, token: str | None) -> Principal | None:
        """Resolve the caller, treating any unusable token as anonymous.

        Routes resolve the principal up front; the comment service decides
        whether an operation needs one.

        Args:
            token: Token from the auth cookie, if any

        Returns:
            Principal with the token's permissions, or None
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            logfire.debug("Auth token rejected, caller is anonymous", error=str(e))
            return None

        try:
            return Principal(
                user_id=UserId(UUID(payload.user_id)),
                handle=Handle(payload.handle),
                permissions=frozenset(payload.permissions),
            )
        except ValueError as e:
            logfire.warn(
                "Auth token claims are malformed",
                user_id=payload.user_id,
                error=str(e),
            )
            return None
