"""Generated QSO descriptions and period reports."""

import logging
from dataclasses import dataclass
from datetime import date

from qsolog_client.adapters.api_gateway import ApiGateway
from qsolog_client.adapters.api_models import AiReportResponse, AiTextResponse
from qsolog_client.domain.ai import (
    GeneratedText,
    PeriodReport,
    ReportLanguage,
    description_payload,
)
from qsolog_client.domain.qso import QsoDraft
from qsolog_client.services.credentials import CredentialStore
from qsolog_client.services.stats import date_range_params

_logger = logging.getLogger(__name__)


@dataclass
class AiService:
    """Text generation backed by the logbook service."""

    gateway: ApiGateway
    credentials: CredentialStore

    async def describe_qso(
        self, draft: QsoDraft, language: ReportLanguage = ReportLanguage.EN
    ) -> GeneratedText:
        """Generate a narrative description for a contact."""
        payload = await self.gateway.ai_qso_description(
            description_payload(draft, language), self._token()
        )
        return AiTextResponse.model_validate(payload).to_text()

    async def generate_period_report(
        self,
        date_from: date | None = None,
        date_to: date | None = None,
        language: ReportLanguage = ReportLanguage.EN,
    ) -> PeriodReport:
        """Generate and store a report for a date range."""
        params = {"lang": str(language), **date_range_params(date_from, date_to)}
        payload = await self.gateway.ai_period_report(params, self._token())
        report = AiReportResponse.model_validate(payload).to_report()
        _logger.info("Period report %s generated", report.id)
        return report

    async def list_reports(
        self, date_from: date | None = None, date_to: date | None = None
    ) -> list[PeriodReport]:
        rows = await self.gateway.ai_reports(
            date_range_params(date_from, date_to), self._token()
        )
        return [AiReportResponse.model_validate(row).to_report() for row in rows]

    async def get_report(self, report_id: str) -> PeriodReport:
        payload = await self.gateway.ai_report(report_id, self._token())
        return AiReportResponse.model_validate(payload).to_report()

    def _token(self) -> str | None:
        credential = self.credentials.get()
        return credential.access_token if credential else None
