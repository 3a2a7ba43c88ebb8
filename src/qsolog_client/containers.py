"""Dependency container wiring for the client."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from qsolog_client.adapters.api_gateway import HttpxApiGateway
from qsolog_client.adapters.session_storage import (
    FileSessionStorage,
    InMemorySessionStorage,
    SessionStorage,
)
from qsolog_client.app_logging import configure_logging
from qsolog_client.config import Settings
from qsolog_client.services.admin import AdminService
from qsolog_client.services.ai import AiService
from qsolog_client.services.credentials import CredentialStore
from qsolog_client.services.logbook import LogbookService
from qsolog_client.services.qso_writer import ConflictAwareWriter
from qsolog_client.services.sessions import SessionManager
from qsolog_client.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds client-wide dependencies."""

    settings: Settings
    gateway: HttpxApiGateway
    credential_store: CredentialStore
    session_manager: SessionManager
    qso_writer: ConflictAwareWriter
    logbook_service: LogbookService
    stats_service: StatsService
    admin_service: AdminService
    ai_service: AiService
    start_resources: Callable[[], Awaitable[None]]
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, gateway: HttpxApiGateway | None = None
) -> AppContainer:
    """Create the default dependency container.

    Await ``start_resources()`` once a loop is running to restore a stored
    session.
    """
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    storage: SessionStorage
    if resolved_settings.session_storage_path is not None:
        storage = FileSessionStorage(resolved_settings.session_storage_path)
    else:
        storage = InMemorySessionStorage()
    api_gateway = gateway or HttpxApiGateway.create(
        base_url=resolved_settings.api_base_url,
        timeout=resolved_settings.request_timeout_seconds,
    )
    credential_store = CredentialStore(storage)
    session_manager = SessionManager(gateway=api_gateway, store=credential_store)
    qso_writer = ConflictAwareWriter(gateway=api_gateway, credentials=credential_store)
    logbook_service = LogbookService(gateway=api_gateway, credentials=credential_store)
    stats_service = StatsService(gateway=api_gateway, credentials=credential_store)
    admin_service = AdminService(gateway=api_gateway, session_manager=session_manager)
    ai_service = AiService(gateway=api_gateway, credentials=credential_store)

    async def start_resources() -> None:
        await session_manager.restore()

    async def close_resources() -> None:
        await session_manager.close()
        await api_gateway.close()

    return AppContainer(
        settings=resolved_settings,
        gateway=api_gateway,
        credential_store=credential_store,
        session_manager=session_manager,
        qso_writer=qso_writer,
        logbook_service=logbook_service,
        stats_service=stats_service,
        admin_service=admin_service,
        ai_service=ai_service,
        start_resources=start_resources,
        close_resources=close_resources,
    )
