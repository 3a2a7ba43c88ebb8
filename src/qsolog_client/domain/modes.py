"""Mode selection policy for QSO drafts."""

from dataclasses import dataclass
from typing import Protocol

from qsolog_client.domain.errors import ValidationFailure

CUSTOM_MODE = "DATA"
CUSTOM_LABEL = "Other (Custom)"


@dataclass(frozen=True)
class ModeOption:
    """A selectable mode entry."""

    label: str
    mode: str
    submode: str | None = None
    is_custom: bool = False


@dataclass(frozen=True)
class ModeSelection:
    """Mode fields written to a draft."""

    mode: str
    submode: str | None
    custom_mode: str | None


class ModeFields(Protocol):
    """Anything carrying persisted mode fields."""

    mode: str
    submode: str | None
    custom_mode: str | None


MODE_OPTIONS: tuple[ModeOption, ...] = (
    ModeOption("CW", "CW"),
    ModeOption("SSB", "SSB"),
    ModeOption("AM", "AM"),
    ModeOption("FM", "FM"),
    ModeOption("RTTY", "RTTY"),
    ModeOption("PSK31", "PSK", "PSK31"),
    ModeOption("FT8", "MFSK", "FT8"),
    ModeOption("FT4", "MFSK", "FT4"),
    ModeOption("JS8", "MFSK", "JS8"),
    ModeOption(CUSTOM_LABEL, CUSTOM_MODE, is_custom=True),
)

BAND_OPTIONS: tuple[str, ...] = (
    "160m",
    "80m",
    "60m",
    "40m",
    "30m",
    "20m",
    "17m",
    "15m",
    "12m",
    "10m",
    "6m",
    "4m",
    "2m",
    "1.25m",
    "70cm",
    "33cm",
    "23cm",
)


def find_option(label: str) -> ModeOption | None:
    """Return the option with the given label, if any."""
    for option in MODE_OPTIONS:
        if option.label == label:
            return option
    return None


def select_mode(label: str, custom_text: str | None = None) -> ModeSelection:
    """Map a selected option label to draft mode fields."""
    option = find_option(label)
    if option is None:
        raise ValidationFailure(f"Unknown mode option: {label!r}")
    if not option.is_custom:
        return ModeSelection(mode=option.mode, submode=option.submode, custom_mode=None)

    cleaned = (custom_text or "").strip()
    if not cleaned:
        raise ValidationFailure("A custom mode name is required for the custom option")
    return ModeSelection(mode=CUSTOM_MODE, submode=None, custom_mode=cleaned)


def reselect_mode(record: ModeFields) -> str | None:
    """Return the option label that reproduces a persisted record's mode."""
    if record.custom_mode:
        return CUSTOM_LABEL
    for option in MODE_OPTIONS:
        if option.is_custom:
            continue
        if option.mode == record.mode and option.submode == (record.submode or None):
            return option.label
    return None
