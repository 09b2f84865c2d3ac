"""Shared test fixtures for the timezone test suite."""

from datetime import datetime, timezone

import pytest

from core.exceptions import ZoneLookupError
from core.services.timezone_service import TimezoneService
from core.zone_database import IanaZoneDatabase


# =============================================================================
# TEST CONSTANTS
# =============================================================================

# 2024-01-15 14:30 in New York (EST, UTC-5)
FIXED_NOW = datetime(2024, 1, 15, 19, 30, 0, tzinfo=timezone.utc)


# =============================================================================
# ZONE DATABASE FIXTURES
# =============================================================================


class UnresolvableZoneDatabase(IanaZoneDatabase):
    """Accepts every identifier but cannot resolve any of them."""

    def is_valid_zone(self, name: str) -> bool:
        return True

    def to_zone(self, instant, zone):
        raise ZoneLookupError(zone)

    def offset_minutes_at(self, instant, zone):
        raise ZoneLookupError(zone)

    def abbreviation_at(self, instant, zone):
        raise ZoneLookupError(zone)


class EmptyZoneDatabase(IanaZoneDatabase):
    """Knows no zones at all."""

    def is_valid_zone(self, name: str) -> bool:
        return False


@pytest.fixture
def database():
    return IanaZoneDatabase()


@pytest.fixture
def unresolvable_database():
    return UnresolvableZoneDatabase()


@pytest.fixture
def empty_database():
    return EmptyZoneDatabase()


# =============================================================================
# CLOCK & SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def fixed_clock():
    """Clock pinned to FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def service(database, fixed_clock):
    """TimezoneService over the real zone database with a pinned clock."""
    return TimezoneService(database=database, clock=fixed_clock)
