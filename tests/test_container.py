"""Tests for container wiring."""

import asyncio
from pathlib import Path

import httpx

from qsolog_client.adapters.api_gateway import HttpxApiGateway
from qsolog_client.adapters.session_storage import FileSessionStorage
from qsolog_client.config import Settings
from qsolog_client.containers import build_container
from tests.conftest import USER_PAYLOAD


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.gateway.base_url == "https://logbook.test/api/v1"
    assert container.qso_writer.credentials is container.credential_store
    assert container.session_manager.is_authenticated() is False
    asyncio.run(container.close_resources())


def test_build_container_uses_file_storage(tmp_path: Path) -> None:
    settings = Settings(session_storage_path=tmp_path / "session.json")

    container = build_container(settings)

    assert isinstance(container.credential_store.durable, FileSessionStorage)
    asyncio.run(container.close_resources())


def test_start_resources_restores_stored_session(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    FileSessionStorage(path).set_item("access_token", "tok1")
    seen: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json=USER_PAYLOAD)

    gateway = HttpxApiGateway(
        base_url="https://logbook.test/api/v1",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    container = build_container(Settings(session_storage_path=path), gateway=gateway)
    assert container.session_manager.current_user is None

    async def scenario() -> None:
        await container.start_resources()
        await container.close_resources()

    asyncio.run(scenario())

    assert container.session_manager.current_user is not None
    assert container.session_manager.current_user.username == "alice"
    assert seen == ["Bearer tok1"]
