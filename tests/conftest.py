"""Test configuration for the Bikram Sambat calendar engine."""

import os

import pytest

from bikram_sambat.calendar_systems import month_table, year_index
from bikram_sambat.calendar_systems.nepali import NepaliCalendar
from bikram_sambat.config import get_settings

# Keep developer .env files and shell settings out of the tests
for var in [name for name in os.environ if name.startswith("BIKRAM_SAMBAT_")]:
    del os.environ[var]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Give every test freshly loaded settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def calendar() -> NepaliCalendar:
    """Nepali calendar converter."""
    return NepaliCalendar()


@pytest.fixture
def uninitialized_tables(monkeypatch):
    """Drop the memoized month table and year-start index for one test."""
    monkeypatch.setattr(month_table, "_decoded", None)
    monkeypatch.setattr(year_index, "_year_start_index", None)
