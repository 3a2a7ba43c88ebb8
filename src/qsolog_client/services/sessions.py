"""Authentication state and identity lifecycle."""

import asyncio
import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from qsolog_client.adapters.api_gateway import ApiGateway
from qsolog_client.adapters.api_models import LoginResponse, UserResponse
from qsolog_client.domain.auth import (
    Credential,
    LoginRequest,
    RegisterRequest,
    Session,
    User,
)
from qsolog_client.domain.errors import ApiError, QsoLogError
from qsolog_client.services.channels import StateChannel
from qsolog_client.services.credentials import CredentialStore

_logger = logging.getLogger(__name__)


@dataclass
class SessionManager:
    """Owns the session and publishes credential and user changes.

    A token found in the durable tier at construction is revalidated in the
    background when an event loop is running; otherwise call ``restore()``.
    """

    gateway: ApiGateway
    store: CredentialStore
    credential_changes: StateChannel[Credential | None] = field(init=False)
    user_changes: StateChannel[User | None] = field(init=False)
    _refresh_tasks: set[asyncio.Task] = field(
        default_factory=set, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.credential_changes = StateChannel(self.store.get(), name="credential")
        self.user_changes = StateChannel(None, name="current_user")
        self.start()

    @property
    def current_user(self) -> User | None:
        return self.user_changes.value

    @property
    def session(self) -> Session:
        return Session(credential=self.store.get(), current_user=self.current_user)

    def start(self) -> bool:
        """Schedule a session restore if a durable token exists."""
        if not self.store.has_durable():
            return False
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            _logger.debug("No running event loop, session restore deferred")
            return False
        self._schedule_refresh()
        return True

    async def restore(self) -> User | None:
        """Revalidate a stored credential, if any.

        Joins a refresh already scheduled instead of fetching the identity twice.
        """
        if self._refresh_tasks:
            await self.wait_for_refresh()
            return self.current_user
        if self.store.get() is None:
            return None
        return await self.refresh_current_user()

    async def register(self, request: RegisterRequest) -> User | None:
        """Register an account without changing the session."""
        payload = await self.gateway.register(request.to_payload())
        if not payload:
            return None
        try:
            return UserResponse.model_validate(payload).to_user()
        except ValidationError:
            _logger.info("Registration response carried no user projection")
            return None

    async def login(self, request: LoginRequest) -> Credential:
        """Authenticate and store the issued credential.

        The identity fetch runs in the background; await
        ``wait_for_refresh()`` to observe it.
        """
        payload = await self.gateway.login(request.to_payload())
        try:
            credential = LoginResponse.model_validate(payload).to_credential()
        except ValidationError as exc:
            raise ApiError("Malformed login response") from exc
        self.store.set(credential)
        self.credential_changes.publish(credential)
        _logger.info("Logged in as %s", request.username_or_email)
        self._schedule_refresh()
        return credential

    async def refresh_current_user(self) -> User | None:
        """Fetch the identity for the current credential.

        Any failure purges the credential. A response that arrives after the
        credential changed is discarded.
        """
        credential = self.store.get()
        if credential is None:
            self.user_changes.publish(None)
            return None

        try:
            payload = await self.gateway.me(credential.access_token)
            user = UserResponse.model_validate(payload).to_user()
        except (QsoLogError, ValidationError) as exc:
            if not self._is_current(credential):
                _logger.debug("Discarding identity failure for a replaced credential")
                return None
            _logger.info(
                "Identity refresh failed, clearing session: %s", type(exc).__name__
            )
            self._clear()
            return None

        if not self._is_current(credential):
            _logger.debug("Discarding identity for a replaced credential")
            return None
        self.user_changes.publish(user)
        return user

    def logout(self) -> None:
        """Drop the local session. The server is not contacted."""
        self._clear()
        _logger.info("Logged out")

    def is_authenticated(self) -> bool:
        return self.store.get() is not None

    async def wait_for_refresh(self) -> None:
        """Wait for scheduled identity refreshes to finish."""
        while self._refresh_tasks:
            await asyncio.gather(*list(self._refresh_tasks))

    async def close(self) -> None:
        """Cancel scheduled identity refreshes."""
        tasks = list(self._refresh_tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    def _schedule_refresh(self) -> None:
        task = asyncio.get_running_loop().create_task(self.refresh_current_user())
        self._refresh_tasks.add(task)
        task.add_done_callback(self._refresh_tasks.discard)

    def _is_current(self, credential: Credential) -> bool:
        current = self.store.get()
        return current is not None and current.access_token == credential.access_token

    def _clear(self) -> None:
        self.store.clear()
        self.credential_changes.publish(None)
        self.user_changes.publish(None)
