"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from qsolog_client.adapters.api_gateway import ApiGateway
from qsolog_client.adapters.session_storage import InMemorySessionStorage
from qsolog_client.config import Settings
from qsolog_client.domain.errors import QsoLogError
from qsolog_client.services.credentials import CredentialStore

USER_PAYLOAD = {
    "id": "u1",
    "email": "a@x.com",
    "username": "alice",
    "role": "USER",
}

LOGIN_PAYLOAD = {
    "accessToken": "tok1",
    "tokenType": "Bearer",
    "expiresInSeconds": 3600,
}


def qso_payload(qso_id: str = "q-new", **overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": qso_id,
        "theirCallsign": "SP5XYZ",
        "qsoDate": "2026-05-01",
        "timeOn": "14:30:00",
        "band": "20m",
        "mode": "MFSK",
        "submode": "FT8",
        "rstSent": "-10",
        "rstRecv": "-12",
        "createdAt": "2026-05-01T14:31:00Z",
        "updatedAt": "2026-05-01T14:31:00Z",
    }
    payload.update(overrides)
    return payload


@dataclass
class FakeApiGateway(ApiGateway):
    """Scripted gateway that records calls.

    Each queue holds results to return in order; an exception instance is
    raised instead of returned.
    """

    login_results: list[object] = field(default_factory=list)
    me_results: list[object] = field(default_factory=list)
    write_results: list[object] = field(default_factory=list)
    register_result: object = None
    list_result: list[dict[str, object]] = field(default_factory=list)
    get_result: object = None
    suggestion_result: object = None
    stats_result: object = None
    users_result: object = None
    ai_results: list[object] = field(default_factory=list)
    reports_result: list[dict[str, object]] = field(default_factory=list)
    calls: list[tuple[str, object, str | None]] = field(default_factory=list)

    async def register(self, payload: dict[str, object]) -> dict[str, object] | None:
        self.calls.append(("register", payload, None))
        return _resolve(self.register_result)

    async def login(self, payload: dict[str, object]) -> dict[str, object]:
        self.calls.append(("login", payload, None))
        return _resolve(self.login_results.pop(0))

    async def me(self, token: str) -> dict[str, object]:
        self.calls.append(("me", None, token))
        return _resolve(self.me_results.pop(0))

    async def create_qso(
        self, payload: dict[str, object], token: str | None
    ) -> dict[str, object]:
        self.calls.append(("create_qso", payload, token))
        return _resolve(self.write_results.pop(0))

    async def update_qso(
        self, qso_id: str, payload: dict[str, object], token: str | None
    ) -> dict[str, object]:
        self.calls.append((f"update_qso:{qso_id}", payload, token))
        return _resolve(self.write_results.pop(0))

    async def list_qsos(
        self, params: dict[str, str], token: str | None
    ) -> list[dict[str, object]]:
        self.calls.append(("list_qsos", params, token))
        return self.list_result

    async def get_qso(self, qso_id: str, token: str | None) -> dict[str, object]:
        self.calls.append((f"get_qso:{qso_id}", None, token))
        return _resolve(self.get_result)

    async def delete_qso(self, qso_id: str, token: str | None) -> None:
        self.calls.append((f"delete_qso:{qso_id}", None, token))

    async def callsign_suggestion(
        self, callsign: str, token: str | None
    ) -> dict[str, object]:
        self.calls.append((f"suggestion:{callsign}", None, token))
        return _resolve(self.suggestion_result)

    async def stats_summary(
        self, params: dict[str, str], token: str | None
    ) -> dict[str, object]:
        self.calls.append(("stats_summary", params, token))
        return _resolve(self.stats_result)

    async def list_users(self, token: str | None) -> list[dict[str, object]]:
        self.calls.append(("list_users", None, token))
        return _resolve(self.users_result)

    async def ai_qso_description(
        self, payload: dict[str, object], token: str | None
    ) -> dict[str, object]:
        self.calls.append(("ai_qso_description", payload, token))
        return _resolve(self.ai_results.pop(0))

    async def ai_period_report(
        self, params: dict[str, str], token: str | None
    ) -> dict[str, object]:
        self.calls.append(("ai_period_report", params, token))
        return _resolve(self.ai_results.pop(0))

    async def ai_reports(
        self, params: dict[str, str], token: str | None
    ) -> list[dict[str, object]]:
        self.calls.append(("ai_reports", params, token))
        return self.reports_result

    async def ai_report(self, report_id: str, token: str | None) -> dict[str, object]:
        self.calls.append((f"ai_report:{report_id}", None, token))
        return _resolve(self.ai_results.pop(0))

    def calls_named(self, name: str) -> list[tuple[str, object, str | None]]:
        return [call for call in self.calls if call[0] == name]


def _resolve(result: object):  # type: ignore[no-untyped-def]
    if isinstance(result, QsoLogError):
        raise result
    return result


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url="https://logbook.test/api/v1")


@pytest.fixture
def storage() -> InMemorySessionStorage:
    return InMemorySessionStorage()


@pytest.fixture
def credential_store(storage: InMemorySessionStorage) -> CredentialStore:
    return CredentialStore(storage)


@pytest.fixture
def gateway() -> FakeApiGateway:
    return FakeApiGateway()
