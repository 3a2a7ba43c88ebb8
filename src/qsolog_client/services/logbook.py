"""Read-side logbook operations."""

import logging
from dataclasses import dataclass

from qsolog_client.adapters.api_gateway import ApiGateway
from qsolog_client.adapters.api_models import CallsignSuggestionResponse, QsoResponse
from qsolog_client.domain.errors import NotFound
from qsolog_client.domain.qso import (
    CallsignSuggestion,
    QsoFilters,
    QsoFormValues,
    QsoPage,
    QsoRecord,
)
from qsolog_client.services.credentials import CredentialStore

MIN_SUGGESTION_LENGTH = 3

_logger = logging.getLogger(__name__)


@dataclass
class LogbookService:
    """Listing, lookup and deletion of logged contacts."""

    gateway: ApiGateway
    credentials: CredentialStore

    async def list_qsos(self, filters: QsoFilters | None = None) -> QsoPage:
        """Return one page of QSOs."""
        resolved = filters or QsoFilters()
        rows = await self.gateway.list_qsos(resolved.to_params(), self._token())
        items = [QsoResponse.model_validate(row).to_record() for row in rows]
        return QsoPage(items=items, page=resolved.page, size=resolved.size)

    async def get_qso(self, qso_id: str) -> QsoRecord:
        """Fetch a single QSO by id."""
        payload = await self.gateway.get_qso(qso_id, self._token())
        return QsoResponse.model_validate(payload).to_record()

    async def delete_qso(self, qso_id: str) -> None:
        await self.gateway.delete_qso(qso_id, self._token())
        _logger.info("QSO %s deleted", qso_id)

    async def callsign_suggestion(self, callsign: str) -> CallsignSuggestion | None:
        """Return hints from earlier contacts with a callsign."""
        cleaned = callsign.strip().upper()
        if len(cleaned) < MIN_SUGGESTION_LENGTH:
            return None
        try:
            payload = await self.gateway.callsign_suggestion(cleaned, self._token())
        except NotFound:
            return None
        return CallsignSuggestionResponse.model_validate(payload).to_suggestion()

    def _token(self) -> str | None:
        credential = self.credentials.get()
        return credential.access_token if credential else None


def apply_suggestion(
    values: QsoFormValues, suggestion: CallsignSuggestion
) -> QsoFormValues:
    """Fill empty qth, notes and band fields from a suggestion."""
    if suggestion.last_known_qth and not values.qth:
        values.qth = suggestion.last_known_qth
    if suggestion.last_notes_snippet and not values.notes:
        values.notes = suggestion.last_notes_snippet
    if suggestion.most_common_band and not values.band:
        values.band = suggestion.most_common_band
    return values
