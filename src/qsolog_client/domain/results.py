"""Tagged outcomes of a QSO write."""

from dataclasses import dataclass
from typing import Literal

from qsolog_client.domain.qso import QsoRecord


@dataclass(frozen=True)
class WriteSuccess:
    """The entry was persisted."""

    record: QsoRecord
    outcome: Literal["success"] = "success"


@dataclass(frozen=True)
class ConflictSignal:
    """The server reported existing entries colliding with the draft."""

    message: str
    existing_ids: tuple[str, ...]
    outcome: Literal["conflict"] = "conflict"


@dataclass(frozen=True)
class WriteFailure:
    """Any failure other than a duplicate conflict."""

    error: Exception
    outcome: Literal["failure"] = "failure"

    def raise_error(self) -> None:
        """Re-raise the underlying error."""
        raise self.error


WriteResult = WriteSuccess | ConflictSignal | WriteFailure
