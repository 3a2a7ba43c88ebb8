"""Logbook REST API client adapter."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from qsolog_client.adapters.api_models import DuplicateWarning
from qsolog_client.domain.errors import (
    ApiError,
    AuthenticationFailure,
    AuthorizationExpired,
    ConflictDetected,
    NotFound,
    QsoLogError,
    TransportFailure,
    ValidationFailure,
)

_logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, type[QsoLogError]] = {
    400: ValidationFailure,
    401: AuthorizationExpired,
    403: AuthorizationExpired,
    404: NotFound,
    422: ValidationFailure,
}


class ApiGateway(Protocol):
    """Interface for logbook API interactions."""

    async def register(self, payload: dict[str, object]) -> dict[str, object] | None:
        """Register a new account."""

    async def login(self, payload: dict[str, object]) -> dict[str, object]:
        """Exchange credentials for an access token."""

    async def me(self, token: str) -> dict[str, object]:
        """Return the identity bound to a token."""

    async def create_qso(
        self, payload: dict[str, object], token: str | None
    ) -> dict[str, object]:
        """Create a QSO and return the persisted entry."""

    async def update_qso(
        self, qso_id: str, payload: dict[str, object], token: str | None
    ) -> dict[str, object]:
        """Update a QSO and return the persisted entry."""

    async def list_qsos(
        self, params: dict[str, str], token: str | None
    ) -> list[dict[str, object]]:
        """List QSOs matching the query parameters."""

    async def get_qso(self, qso_id: str, token: str | None) -> dict[str, object]:
        """Fetch a single QSO."""

    async def delete_qso(self, qso_id: str, token: str | None) -> None:
        """Delete a QSO."""

    async def callsign_suggestion(
        self, callsign: str, token: str | None
    ) -> dict[str, object]:
        """Fetch suggestions derived from previous contacts."""

    async def stats_summary(
        self, params: dict[str, str], token: str | None
    ) -> dict[str, object]:
        """Fetch contact counts by band, mode and day."""

    async def list_users(self, token: str | None) -> list[dict[str, object]]:
        """List all accounts (administrators only)."""

    async def ai_qso_description(
        self, payload: dict[str, object], token: str | None
    ) -> dict[str, object]:
        """Generate a narrative description of a contact."""

    async def ai_period_report(
        self, params: dict[str, str], token: str | None
    ) -> dict[str, object]:
        """Generate and store a report for a date range."""

    async def ai_reports(
        self, params: dict[str, str], token: str | None
    ) -> list[dict[str, object]]:
        """List stored reports."""

    async def ai_report(self, report_id: str, token: str | None) -> dict[str, object]:
        """Fetch a stored report."""


@dataclass
class HttpxApiGateway(ApiGateway):
    """HTTPX-backed logbook API client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(cls, base_url: str, timeout: float = 10) -> "HttpxApiGateway":
        """Create a gateway with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def register(self, payload: dict[str, object]) -> dict[str, object] | None:
        """Register a new account."""
        response = await self._send("POST", "/auth/register", json=payload)
        return _decode(response) if response.content else None

    async def login(self, payload: dict[str, object]) -> dict[str, object]:
        """Exchange credentials for an access token."""
        try:
            response = await self._send("POST", "/auth/login", json=payload)
        except AuthorizationExpired as exc:
            raise AuthenticationFailure(exc.detail, status_code=exc.status_code) from exc
        return _decode(response)

    async def me(self, token: str) -> dict[str, object]:
        """Return the identity bound to a token."""
        response = await self._send("GET", "/auth/me", token=token)
        return _decode(response)

    async def create_qso(
        self, payload: dict[str, object], token: str | None
    ) -> dict[str, object]:
        """Create a QSO."""
        response = await self._send("POST", "/qso", json=payload, token=token)
        return _decode(response)

    async def update_qso(
        self, qso_id: str, payload: dict[str, object], token: str | None
    ) -> dict[str, object]:
        """Update a QSO."""
        response = await self._send("PUT", f"/qso/{qso_id}", json=payload, token=token)
        return _decode(response)

    async def list_qsos(
        self, params: dict[str, str], token: str | None
    ) -> list[dict[str, object]]:
        """List QSOs."""
        response = await self._send("GET", "/qso", params=params, token=token)
        return _decode(response)

    async def get_qso(self, qso_id: str, token: str | None) -> dict[str, object]:
        """Fetch a single QSO."""
        response = await self._send("GET", f"/qso/{qso_id}", token=token)
        return _decode(response)

    async def delete_qso(self, qso_id: str, token: str | None) -> None:
        """Delete a QSO."""
        await self._send("DELETE", f"/qso/{qso_id}", token=token)

    async def callsign_suggestion(
        self, callsign: str, token: str | None
    ) -> dict[str, object]:
        """Fetch suggestions for a callsign."""
        response = await self._send(
            "GET", f"/suggestions/callsign/{callsign}", token=token
        )
        return _decode(response)

    async def stats_summary(
        self, params: dict[str, str], token: str | None
    ) -> dict[str, object]:
        """Fetch contact statistics."""
        response = await self._send(
            "GET", "/stats/summary", params=params, token=token
        )
        return _decode(response)

    async def list_users(self, token: str | None) -> list[dict[str, object]]:
        """List all accounts."""
        response = await self._send("GET", "/admin/users", token=token)
        return _decode(response)

    async def ai_qso_description(
        self, payload: dict[str, object], token: str | None
    ) -> dict[str, object]:
        """Generate a contact description."""
        response = await self._send(
            "POST", "/ai/qso-description", json=payload, token=token
        )
        return _decode(response)

    async def ai_period_report(
        self, params: dict[str, str], token: str | None
    ) -> dict[str, object]:
        """Generate a period report."""
        response = await self._send(
            "POST", "/ai/period-report", params=params, token=token
        )
        return _decode(response)

    async def ai_reports(
        self, params: dict[str, str], token: str | None
    ) -> list[dict[str, object]]:
        """List stored reports."""
        response = await self._send("GET", "/ai/reports", params=params, token=token)
        return _decode(response)

    async def ai_report(self, report_id: str, token: str | None) -> dict[str, object]:
        """Fetch a stored report."""
        response = await self._send("GET", f"/ai/reports/{report_id}", token=token)
        return _decode(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, object] | None = None,
        params: dict[str, str] | None = None,
        token: str | None = None,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            response = await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                json=json,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.TransportError as exc:
            _logger.warning("Logbook API %s %s unreachable: %s", method, path, exc)
            raise TransportFailure(str(exc) or type(exc).__name__) from exc
        if response.is_error:
            _logger.info(
                "Logbook API %s %s failed: status=%s",
                method,
                path,
                response.status_code,
            )
            raise _error_from_response(response)
        return response


def _error_from_response(response: httpx.Response) -> QsoLogError:
    """Translate an error response into the client error taxonomy."""
    body = _json_body(response)
    status_code = response.status_code
    if status_code == httpx.codes.CONFLICT:
        try:
            warning = DuplicateWarning.model_validate(body)
        except ValidationError:
            warning = DuplicateWarning()
        return ConflictDetected(warning.message, warning.ids(), status_code=status_code)
    error_cls = _STATUS_ERRORS.get(status_code, ApiError)
    return error_cls(_error_detail(body, response), status_code=status_code)


def _decode(response: httpx.Response) -> Any:
    """Parse a success body, treating non-JSON content as a malformed response."""
    try:
        return response.json()
    except ValueError as exc:
        _logger.warning(
            "Logbook API returned a non-JSON body: status=%s content-type=%s",
            response.status_code,
            response.headers.get("content-type"),
        )
        raise ApiError(
            "Malformed response body", status_code=response.status_code
        ) from exc


def _json_body(response: httpx.Response) -> dict[str, object]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_detail(body: dict[str, object], response: httpx.Response) -> str:
    for key in ("detail", "message", "title"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return response.reason_phrase or f"HTTP {response.status_code}"
