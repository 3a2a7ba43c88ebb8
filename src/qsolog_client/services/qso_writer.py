"""Conflict-aware create/update of QSO log entries."""

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pydantic import ValidationError

from qsolog_client.adapters.api_gateway import ApiGateway
from qsolog_client.adapters.api_models import QsoResponse
from qsolog_client.domain.errors import (
    ApiError,
    ConflictDetected,
    QsoLogError,
    ValidationFailure,
)
from qsolog_client.domain.qso import QsoDraft
from qsolog_client.domain.results import (
    ConflictSignal,
    WriteFailure,
    WriteResult,
    WriteSuccess,
)
from qsolog_client.services.credentials import CredentialStore

_logger = logging.getLogger(__name__)

ConfirmOverride = Callable[[ConflictSignal], bool | Awaitable[bool]]


@dataclass
class ConflictAwareWriter:
    """Submits drafts and reports duplicate conflicts as a result variant.

    Duplicate detection happens on the server; the writer only carries the
    override flag and never retries on its own.
    """

    gateway: ApiGateway
    credentials: CredentialStore

    async def submit(
        self,
        draft: QsoDraft,
        is_update: bool = False,
        existing_id: str | None = None,
        confirm_duplicate: bool | None = None,
    ) -> WriteResult:
        """Create or update an entry."""
        if confirm_duplicate is not None:
            draft = draft.with_override(confirm_duplicate)
        if is_update and not existing_id:
            return WriteFailure(ValidationFailure("An update requires an entry id"))

        credential = self.credentials.get()
        token = credential.access_token if credential else None
        payload = draft.to_payload()
        try:
            if is_update:
                body = await self.gateway.update_qso(str(existing_id), payload, token)
            else:
                body = await self.gateway.create_qso(payload, token)
            record = QsoResponse.model_validate(body).to_record()
        except ConflictDetected as exc:
            _logger.info(
                "Duplicate QSO reported for %s: %s existing",
                draft.their_callsign,
                len(exc.existing_ids),
            )
            return ConflictSignal(message=exc.detail, existing_ids=exc.existing_ids)
        except QsoLogError as exc:
            _logger.warning("QSO save failed for %s: %s", draft.their_callsign, exc)
            return WriteFailure(exc)
        except ValidationError as exc:
            _logger.warning("Malformed QSO response for %s", draft.their_callsign)
            return WriteFailure(ApiError(f"Malformed QSO response: {exc}"))

        _logger.info(
            "QSO %s %s (override=%s)",
            record.id,
            "updated" if is_update else "created",
            draft.confirm_duplicate,
        )
        return WriteSuccess(record)

    async def resolve(
        self,
        draft: QsoDraft,
        conflict: ConflictSignal,
        confirm: ConfirmOverride,
        is_update: bool = False,
        existing_id: str | None = None,
    ) -> WriteResult:
        """Resubmit with the override flag if the caller confirms."""
        decision = confirm(conflict)
        if inspect.isawaitable(decision):
            decision = await decision
        if not decision:
            return conflict
        return await self.submit(
            draft, is_update=is_update, existing_id=existing_id, confirm_duplicate=True
        )

    async def submit_interactive(
        self,
        draft: QsoDraft,
        confirm: ConfirmOverride,
        is_update: bool = False,
        existing_id: str | None = None,
    ) -> WriteResult:
        """Submit once and hand any conflict to ``confirm`` for a decision."""
        result = await self.submit(draft, is_update=is_update, existing_id=existing_id)
        if isinstance(result, ConflictSignal) and not draft.confirm_duplicate:
            return await self.resolve(
                draft, result, confirm, is_update=is_update, existing_id=existing_id
            )
        return result
