"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from smhicast.models.forecast import ForecastInstant, ForecastSeries, NamedParameter

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def _make_instant(valid_time: str = "2026-02-11T11:00:00Z", **params: float) -> ForecastInstant:
    """Build an instant from keyword parameters, e.g. make_instant(t=5.0, Wsymb2=8)."""
    return ForecastInstant(
        valid_time=datetime.fromisoformat(valid_time).astimezone(UTC),
        parameters=tuple(NamedParameter(name, (value,)) for name, value in params.items()),
    )


@pytest.fixture
def make_instant():
    """Factory fixture: make_instant(t=5.0, Wsymb2=8) -> ForecastInstant."""
    return _make_instant


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def smhi_payload() -> dict:
    """Raw pmp3g response with 14 hourly instants."""
    with open(FIXTURE_DIR / "smhi_point_forecast.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def single_instant() -> ForecastInstant:
    return _make_instant(t=5.0, ws=3.0, wd=270, r=80, msl=1012, vis=10, Wsymb2=8)


@pytest.fixture
def single_series(single_instant: ForecastInstant) -> ForecastSeries:
    return ForecastSeries(instants=(single_instant,))
