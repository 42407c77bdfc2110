"""Authorization domain service."""

import logfire

from remark.domain.value import Permission, Principal

from .base import Service


class AuthorizationService(Service):
    """Answers capability queries for a principal.

    Permissions are granted by the identity provider and travel inside the
    principal's token; this service only reads them.
    """

    def is_granted(self, principal: Principal, permission: Permission) -> bool:
        """Check whether the principal holds a permission.

        Args:
            principal: Authenticated principal
            permission: Permission to check

        Returns:
            True if the permission was granted to the principal
        """
        granted = permission.value in principal.permissions
        logfire.debug(
            "Permission checked",
            user_id=str(principal.user_id),
            permission=permission.value,
            granted=granted,
        )
        return granted
