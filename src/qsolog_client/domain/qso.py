"""Domain models for QSO log entries."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import date, datetime, time

from qsolog_client.domain.errors import ValidationFailure
from qsolog_client.domain.modes import CUSTOM_MODE, reselect_mode, select_mode

DEFAULT_RST = "59"


@dataclass(frozen=True)
class QsoDraft:
    """Unpersisted log entry submitted on create or update."""

    their_callsign: str
    qso_date: date
    time_on: time
    band: str
    mode: str
    submode: str | None = None
    custom_mode: str | None = None
    frequency_khz: float | None = None
    rst_sent: str | None = DEFAULT_RST
    rst_recv: str | None = DEFAULT_RST
    qth: str | None = None
    grid_square: str | None = None
    notes: str | None = None
    confirm_duplicate: bool = False

    def __post_init__(self) -> None:
        if self.custom_mode and (self.mode != CUSTOM_MODE or self.submode):
            raise ValidationFailure(
                f"Custom mode requires mode {CUSTOM_MODE} and no submode"
            )

    def with_override(self, confirm_duplicate: bool) -> "QsoDraft":
        """Return a copy with the duplicate override flag replaced."""
        return replace(self, confirm_duplicate=confirm_duplicate)

    def to_payload(self) -> dict[str, object]:
        """Serialize to the API request body."""
        return {
            "theirCallsign": self.their_callsign,
            "qsoDate": self.qso_date.isoformat(),
            "timeOn": self.time_on.strftime("%H:%M:%S"),
            "band": self.band,
            "frequencyKhz": self.frequency_khz,
            "mode": self.mode,
            "submode": self.submode,
            "customMode": self.custom_mode,
            "rstSent": self.rst_sent,
            "rstRecv": self.rst_recv,
            "qth": self.qth,
            "gridSquare": self.grid_square,
            "notes": self.notes,
            "confirmDuplicate": self.confirm_duplicate,
        }


@dataclass(frozen=True)
class QsoRecord:
    """Persisted log entry as returned by the API."""

    id: str
    their_callsign: str
    qso_date: date
    time_on: time
    band: str
    mode: str
    submode: str | None = None
    custom_mode: str | None = None
    frequency_khz: float | None = None
    rst_sent: str | None = None
    rst_recv: str | None = None
    qth: str | None = None
    grid_square: str | None = None
    notes: str | None = None
    qsl_status: str | None = None
    lotw_status: str | None = None
    eqsl_status: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class QsoFilters:
    """Query parameters for listing QSOs."""

    callsign: str | None = None
    band: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    page: int = 0
    size: int = 20

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {"page": str(self.page), "size": str(self.size)}
        if self.callsign:
            params["callsign"] = self.callsign
        if self.band:
            params["band"] = self.band
        if self.date_from:
            params["from"] = self.date_from.isoformat()
        if self.date_to:
            params["to"] = self.date_to.isoformat()
        return params


@dataclass(frozen=True)
class QsoPage:
    """One page of QSOs.

    The list endpoint does not report a total count, so ``total`` stays
    ``None`` and ``has_next`` is inferred from a full page.
    """

    items: list[QsoRecord]
    page: int
    size: int
    total: int | None = None

    @property
    def has_next(self) -> bool:
        return len(self.items) >= self.size > 0


@dataclass(frozen=True)
class CallsignSuggestion:
    """Hints derived from previous contacts with a callsign."""

    callsign: str
    last_known_name: str | None = None
    last_known_qth: str | None = None
    last_notes_snippet: str | None = None
    most_common_band: str | None = None
    most_common_mode: str | None = None


@dataclass
class QsoFormValues:
    """Editable form state for a log entry."""

    their_callsign: str = ""
    qso_date: date | str | None = None
    time_on: time | str | None = None
    band: str = ""
    mode_selection: str = ""
    custom_mode: str = ""
    frequency_khz: float | None = None
    rst_sent: str = DEFAULT_RST
    rst_recv: str = DEFAULT_RST
    qth: str = ""
    grid_square: str = ""
    notes: str = ""
    extra: dict[str, object] = field(default_factory=dict)


def build_draft(
    values: QsoFormValues | Mapping[str, object], *, confirm_duplicate: bool = False
) -> QsoDraft:
    """Build a draft from form values."""
    form = _as_form(values)
    callsign = form.their_callsign.strip().upper()
    if not callsign:
        raise ValidationFailure("Callsign is required")
    if not form.band:
        raise ValidationFailure("Band is required")
    selection = select_mode(form.mode_selection, form.custom_mode)
    return QsoDraft(
        their_callsign=callsign,
        qso_date=_parse_date(form.qso_date),
        time_on=_parse_time(form.time_on),
        band=form.band,
        mode=selection.mode,
        submode=selection.submode,
        custom_mode=selection.custom_mode,
        frequency_khz=form.frequency_khz,
        rst_sent=_blank_to_none(form.rst_sent),
        rst_recv=_blank_to_none(form.rst_recv),
        qth=_blank_to_none(form.qth),
        grid_square=_blank_to_none(form.grid_square),
        notes=_blank_to_none(form.notes),
        confirm_duplicate=confirm_duplicate,
    )


def form_from_record(record: QsoRecord) -> QsoFormValues:
    """Rebuild editable form values from a persisted record."""
    return QsoFormValues(
        their_callsign=record.their_callsign,
        qso_date=record.qso_date,
        time_on=record.time_on,
        band=record.band,
        mode_selection=reselect_mode(record) or "",
        custom_mode=record.custom_mode or "",
        frequency_khz=record.frequency_khz,
        rst_sent=record.rst_sent or "",
        rst_recv=record.rst_recv or "",
        qth=record.qth or "",
        grid_square=record.grid_square or "",
        notes=record.notes or "",
    )


def _as_form(values: QsoFormValues | Mapping[str, object]) -> QsoFormValues:
    if isinstance(values, QsoFormValues):
        return values
    known = QsoFormValues.__dataclass_fields__.keys() - {"extra"}
    kwargs = {key: value for key, value in values.items() if key in known}
    extra = {key: value for key, value in values.items() if key not in known}
    return QsoFormValues(**kwargs, extra=extra)  # type: ignore[arg-type]


def _parse_date(value: date | str | None) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise ValidationFailure("QSO date is required")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationFailure(f"Invalid QSO date: {value!r}") from exc


def _parse_time(value: time | str | None) -> time:
    if isinstance(value, time):
        return value
    if not value:
        raise ValidationFailure("Time on is required")
    try:
        return time.fromisoformat(value)
    except ValueError as exc:
        raise ValidationFailure(f"Invalid time on: {value!r}") from exc


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None
