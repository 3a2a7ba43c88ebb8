"""Administrator-only operations."""

import logging
from dataclasses import dataclass

from qsolog_client.adapters.api_gateway import ApiGateway
from qsolog_client.adapters.api_models import UserResponse
from qsolog_client.domain.auth import User
from qsolog_client.domain.errors import AccessDenied, AuthorizationExpired
from qsolog_client.services.sessions import SessionManager

_logger = logging.getLogger(__name__)


@dataclass
class AdminService:
    """User management gated on the administrator role."""

    gateway: ApiGateway
    session_manager: SessionManager

    async def can_access(self) -> bool:
        """Return whether the current session may use admin operations."""
        try:
            await self.ensure_admin()
        except (AccessDenied, AuthorizationExpired):
            return False
        return True

    async def ensure_admin(self) -> User:
        """Return the current user, raising unless it is an administrator."""
        if not self.session_manager.is_authenticated():
            raise AuthorizationExpired("Not authenticated")
        user = self.session_manager.current_user
        if user is None:
            user = await self.session_manager.restore()
        if user is None:
            raise AuthorizationExpired("Session could not be restored")
        if not user.is_admin:
            _logger.info("Admin access denied for %s", user.username)
            raise AccessDenied(f"User {user.username} is not an administrator")
        return user

    async def list_users(self) -> list[User]:
        """Return all registered accounts."""
        await self.ensure_admin()
        credential = self.session_manager.store.get()
        rows = await self.gateway.list_users(
            credential.access_token if credential else None
        )
        return [UserResponse.model_validate(row).to_user() for row in rows]
