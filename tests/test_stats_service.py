"""Tests for logbook statistics."""

import asyncio
from datetime import date

import pytest

from qsolog_client.domain.auth import Credential
from qsolog_client.domain.errors import ValidationFailure
from qsolog_client.domain.stats import CountBucket
from qsolog_client.services.credentials import CredentialStore
from qsolog_client.services.stats import StatsService
from tests.conftest import FakeApiGateway

STATS_PAYLOAD = {
    "countsByBand": [{"band": "20m", "countAll": 3, "countConfirmed": 1}],
    "countsByMode": [{"mode": "SSB", "countAll": 3, "countConfirmed": 1}],
    "countsByDay": [{"date": "2026-05-01", "countAll": 3, "countConfirmed": 1}],
    "totals": {"all": 4, "confirmed": 1},
}


@pytest.fixture
def service(
    gateway: FakeApiGateway, credential_store: CredentialStore
) -> StatsService:
    credential_store.set(Credential("tok1"))
    return StatsService(gateway=gateway, credentials=credential_store)


def test_summary_maps_buckets_and_range(
    service: StatsService, gateway: FakeApiGateway
) -> None:
    gateway.stats_result = STATS_PAYLOAD

    summary = asyncio.run(service.get_summary(date(2026, 5, 1), date(2026, 5, 31)))

    assert summary.by_band == [CountBucket("20m", 3, 1)]
    assert summary.by_mode == [CountBucket("SSB", 3, 1)]
    assert summary.by_day == [CountBucket("2026-05-01", 3, 1)]
    assert summary.total == 4
    assert summary.confirmation_rate == 0.25
    assert summary.date_from == date(2026, 5, 1)
    assert gateway.calls_named("stats_summary") == [
        ("stats_summary", {"from": "2026-05-01", "to": "2026-05-31"}, "tok1")
    ]


def test_open_range_sends_no_params(
    service: StatsService, gateway: FakeApiGateway
) -> None:
    gateway.stats_result = {}

    summary = asyncio.run(service.get_summary())

    assert summary.total == 0
    assert summary.confirmation_rate == 0.0
    assert gateway.calls_named("stats_summary")[0][1] == {}


def test_inverted_range_is_rejected(
    service: StatsService, gateway: FakeApiGateway
) -> None:
    with pytest.raises(ValidationFailure):
        asyncio.run(service.get_summary(date(2026, 6, 1), date(2026, 5, 1)))

    assert gateway.calls == []
