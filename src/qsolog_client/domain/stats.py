"""Domain models for logbook statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CountBucket:
    """Contact counts for one band, mode or day."""

    key: str
    count_all: int
    count_confirmed: int


@dataclass(frozen=True)
class StatsSummary:
    """Aggregated contact counts for a date range."""

    by_band: list[CountBucket]
    by_mode: list[CountBucket]
    by_day: list[CountBucket]
    total: int
    confirmed: int
    date_from: date | None = None
    date_to: date | None = None

    @property
    def confirmation_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.confirmed / self.total
