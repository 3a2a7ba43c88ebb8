"""Logbook statistics."""

from dataclasses import dataclass
from datetime import date

from qsolog_client.adapters.api_gateway import ApiGateway
from qsolog_client.adapters.api_models import StatsResponse
from qsolog_client.domain.errors import ValidationFailure
from qsolog_client.domain.stats import StatsSummary
from qsolog_client.services.credentials import CredentialStore


@dataclass
class StatsService:
    """Contact counts grouped by band, mode and day."""

    gateway: ApiGateway
    credentials: CredentialStore

    async def get_summary(
        self, date_from: date | None = None, date_to: date | None = None
    ) -> StatsSummary:
        """Return statistics for an optional date range."""
        params = date_range_params(date_from, date_to)
        credential = self.credentials.get()
        payload = await self.gateway.stats_summary(
            params, credential.access_token if credential else None
        )
        return StatsResponse.model_validate(payload).to_summary(date_from, date_to)


def date_range_params(
    date_from: date | None, date_to: date | None
) -> dict[str, str]:
    """Build ``from``/``to`` query parameters, omitting open ends."""
    if date_from and date_to and date_from > date_to:
        raise ValidationFailure(f"Range start {date_from} is after end {date_to}")
    params: dict[str, str] = {}
    if date_from:
        params["from"] = date_from.isoformat()
    if date_to:
        params["to"] = date_to.isoformat()
    return params
