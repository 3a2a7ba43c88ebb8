"""Pydantic models for logbook API payloads."""

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field

from qsolog_client.domain.ai import GeneratedText, PeriodReport
from qsolog_client.domain.auth import Credential, Role, User
from qsolog_client.domain.qso import CallsignSuggestion, QsoRecord
from qsolog_client.domain.stats import CountBucket, StatsSummary


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LoginResponse(_ApiModel):
    """Login endpoint payload."""

    access_token: str = Field(alias="accessToken")
    token_type: str = Field(default="Bearer", alias="tokenType")
    expires_in_seconds: int | None = Field(default=None, alias="expiresInSeconds")

    def to_credential(self) -> Credential:
        return Credential(
            access_token=self.access_token,
            token_type=self.token_type,
            expires_in_seconds=self.expires_in_seconds,
        )


class UserResponse(_ApiModel):
    """Identity endpoint payload."""

    id: str
    email: str
    username: str
    role: Role

    def to_user(self) -> User:
        return User(id=self.id, email=self.email, username=self.username, role=self.role)


class QsoResponse(_ApiModel):
    """Persisted QSO payload."""

    id: str
    their_callsign: str = Field(alias="theirCallsign")
    qso_date: date = Field(alias="qsoDate")
    time_on: time = Field(alias="timeOn")
    band: str
    mode: str
    submode: str | None = None
    custom_mode: str | None = Field(default=None, alias="customMode")
    frequency_khz: float | None = Field(default=None, alias="frequencyKhz")
    rst_sent: str | None = Field(default=None, alias="rstSent")
    rst_recv: str | None = Field(default=None, alias="rstRecv")
    qth: str | None = None
    grid_square: str | None = Field(default=None, alias="gridSquare")
    notes: str | None = None
    qsl_status: str | None = Field(default=None, alias="qslStatus")
    lotw_status: str | None = Field(default=None, alias="lotwStatus")
    eqsl_status: str | None = Field(default=None, alias="eqslStatus")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    def to_record(self) -> QsoRecord:
        return QsoRecord(**self.model_dump())


class DuplicateWarning(_ApiModel):
    """Body of a 409 response."""

    message: str = "Potential duplicate QSO detected"
    existing_qso_ids: list[str] = Field(default_factory=list, alias="existingQsoIds")
    existing_ids: list[str] = Field(default_factory=list, alias="existingIds")

    def ids(self) -> tuple[str, ...]:
        return tuple(self.existing_qso_ids or self.existing_ids)


class CallsignSuggestionResponse(_ApiModel):
    """Suggestions endpoint payload."""

    callsign: str
    last_known_name: str | None = Field(default=None, alias="lastKnownName")
    last_known_qth: str | None = Field(default=None, alias="lastKnownQth")
    last_notes_snippet: str | None = Field(default=None, alias="lastNotesSnippet")
    most_common_band: str | None = Field(default=None, alias="mostCommonBand")
    most_common_mode: str | None = Field(default=None, alias="mostCommonMode")

    def to_suggestion(self) -> CallsignSuggestion:
        return CallsignSuggestion(**self.model_dump())


class _CountRow(_ApiModel):
    count_all: int = Field(default=0, alias="countAll")
    count_confirmed: int = Field(default=0, alias="countConfirmed")


class BandStatsRow(_CountRow):
    band: str


class ModeStatsRow(_CountRow):
    mode: str


class DayStatsRow(_CountRow):
    day: date = Field(alias="date")


class StatsTotals(_ApiModel):
    all: int = 0
    confirmed: int = 0


class StatsResponse(_ApiModel):
    """Statistics endpoint payload."""

    counts_by_band: list[BandStatsRow] = Field(
        default_factory=list, alias="countsByBand"
    )
    counts_by_mode: list[ModeStatsRow] = Field(
        default_factory=list, alias="countsByMode"
    )
    counts_by_day: list[DayStatsRow] = Field(
        default_factory=list, alias="countsByDay"
    )
    totals: StatsTotals = Field(default_factory=StatsTotals)

    def to_summary(
        self, date_from: date | None = None, date_to: date | None = None
    ) -> StatsSummary:
        return StatsSummary(
            by_band=[
                CountBucket(row.band, row.count_all, row.count_confirmed)
                for row in self.counts_by_band
            ],
            by_mode=[
                CountBucket(row.mode, row.count_all, row.count_confirmed)
                for row in self.counts_by_mode
            ],
            by_day=[
                CountBucket(row.day.isoformat(), row.count_all, row.count_confirmed)
                for row in self.counts_by_day
            ],
            total=self.totals.all,
            confirmed=self.totals.confirmed,
            date_from=date_from,
            date_to=date_to,
        )


class AiTextResponse(_ApiModel):
    """Generated description payload."""

    language: str
    text: str

    def to_text(self) -> GeneratedText:
        return GeneratedText(language=self.language, text=self.text)


class AiReportResponse(_ApiModel):
    """Stored report payload."""

    id: str
    language: str
    content: str
    date_from: date | None = Field(default=None, alias="dateFrom")
    date_to: date | None = Field(default=None, alias="dateTo")
    created_at: datetime | None = Field(default=None, alias="createdAt")

    def to_report(self) -> PeriodReport:
        return PeriodReport(**self.model_dump())
