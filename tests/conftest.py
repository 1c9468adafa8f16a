"""Shared fixtures for shiftrange tests."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from shiftrange.domain.models import PanelOptions, ShiftDefinition


@pytest.fixture
def clock_at():
    """Factory for fixed clocks: ``clock_at("2025-01-15T10:00:00+00:00")``."""

    def make(iso: str):
        moment = datetime.fromisoformat(iso)
        return lambda: moment

    return make


@pytest.fixture
def local():
    """Format epoch milliseconds as local wall-clock time in a zone."""

    def fmt(epoch_ms: int, tz: str, pattern: str = "%Y-%m-%d %H:%M") -> str:
        return datetime.fromtimestamp(epoch_ms / 1000, tz=ZoneInfo(tz)).strftime(pattern)

    return fmt


@pytest.fixture
def plant_options():
    """Three-shift plant in Warsaw, night shift referenced by its end day."""
    return PanelOptions(
        shifts=[
            ShiftDefinition(name="Morning", start="06:00", end="14:00"),
            ShiftDefinition(name="Afternoon", start="14:00", end="22:00"),
            ShiftDefinition(name="Night", start="22:00", end="06:00", date_offset=-1),
        ],
        timezone="Europe/Warsaw",
    )
