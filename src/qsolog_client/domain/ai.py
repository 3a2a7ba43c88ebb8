"""Domain models for generated texts and reports."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from qsolog_client.domain.qso import QsoDraft


class ReportLanguage(StrEnum):
    """Languages supported by the text generator."""

    EN = "EN"
    PL = "PL"


@dataclass(frozen=True)
class GeneratedText:
    """A generated contact description."""

    language: str
    text: str


@dataclass(frozen=True)
class PeriodReport:
    """A stored report covering a date range."""

    id: str
    language: str
    content: str
    date_from: date | None = None
    date_to: date | None = None
    created_at: datetime | None = None


def description_payload(
    draft: QsoDraft, language: ReportLanguage = ReportLanguage.EN
) -> dict[str, object]:
    """Build the description request body from a draft."""
    return {
        "theirCallsign": draft.their_callsign,
        "qsoDate": draft.qso_date.isoformat(),
        "timeOn": draft.time_on.strftime("%H:%M:%S"),
        "band": draft.band,
        "mode": draft.mode,
        "rstSent": draft.rst_sent,
        "rstRecv": draft.rst_recv,
        "qth": draft.qth,
        "notes": draft.notes,
        "language": str(language),
    }


def append_to_notes(notes: str | None, generated: GeneratedText) -> str:
    """Append generated text to existing notes, separated by a blank line."""
    if not notes:
        return generated.text
    return f"{notes}\n\n{generated.text}"
