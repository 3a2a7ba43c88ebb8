"""Tests for mode selection policy."""

from dataclasses import replace
from datetime import date, time

import pytest

from qsolog_client.domain.errors import ValidationFailure
from qsolog_client.domain.modes import (
    BAND_OPTIONS,
    CUSTOM_LABEL,
    MODE_OPTIONS,
    ModeSelection,
    reselect_mode,
    select_mode,
)
from qsolog_client.domain.qso import QsoRecord


def _record(
    mode: str, submode: str | None = None, custom_mode: str | None = None
) -> QsoRecord:
    return QsoRecord(
        id="q1",
        their_callsign="SP5XYZ",
        qso_date=date(2026, 5, 1),
        time_on=time(14, 30),
        band="20m",
        mode=mode,
        submode=submode,
        custom_mode=custom_mode,
    )


def test_ft8_maps_to_mfsk_submode() -> None:
    assert select_mode("FT8") == ModeSelection(
        mode="MFSK", submode="FT8", custom_mode=None
    )


def test_plain_modes_have_no_submode() -> None:
    assert select_mode("CW", custom_text="ignored") == ModeSelection("CW", None, None)


def test_custom_option_forces_data_mode() -> None:
    selection = select_mode(CUSTOM_LABEL, custom_text="  VARA HF ")

    assert selection == ModeSelection(mode="DATA", submode=None, custom_mode="VARA HF")


def test_custom_option_requires_text() -> None:
    with pytest.raises(ValidationFailure):
        select_mode(CUSTOM_LABEL, custom_text="   ")


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ValidationFailure):
        select_mode("Olivia")


def test_reselect_standard_option() -> None:
    assert reselect_mode(_record("MFSK", "FT8")) == "FT8"
    assert reselect_mode(_record("PSK", "PSK31")) == "PSK31"
    assert reselect_mode(_record("SSB")) == "SSB"


def test_custom_mode_wins_over_matching_standard_option() -> None:
    record = _record("DATA", custom_mode="VARA")
    # Inconsistent legacy rows still pick the custom option.
    legacy = replace(record, mode="MFSK", submode="FT8")

    assert reselect_mode(record) == CUSTOM_LABEL
    assert reselect_mode(legacy) == CUSTOM_LABEL


def test_reselect_unmatched_returns_none() -> None:
    assert reselect_mode(_record("MFSK", "JT65")) is None
    assert reselect_mode(_record("DATA")) is None


def test_every_standard_option_round_trips() -> None:
    for option in MODE_OPTIONS:
        if option.is_custom:
            continue
        selection = select_mode(option.label)
        assert reselect_mode(_record(selection.mode, selection.submode)) == option.label


def test_band_options_span_hf_to_microwave() -> None:
    assert BAND_OPTIONS[0] == "160m"
    assert BAND_OPTIONS[-1] == "23cm"
    assert "20m" in BAND_OPTIONS
