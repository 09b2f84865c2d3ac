"""
IANA time-zone database access.

The engine never reimplements transition tables. Everything it needs to
know about a zone goes through a ZoneDatabase, which is passed in so tests
can substitute a deterministic fixture. IanaZoneDatabase is the production
implementation on top of the stdlib zoneinfo module (backed by the system
zone files or the tzdata distribution).
"""

from datetime import datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from core.exceptions import ZoneLookupError


class ZoneDatabase(Protocol):
    """Read-only view of zone validity and per-instant zone rules."""

    def is_valid_zone(self, name: str) -> bool: ...

    def localize(self, wall_time: datetime, zone: str) -> datetime: ...

    def to_zone(self, instant: datetime, zone: str) -> datetime: ...

    def offset_minutes_at(self, instant: datetime, zone: str) -> int: ...

    def is_daylight_at(self, instant: datetime, zone: str) -> bool: ...

    def abbreviation_at(self, instant: datetime, zone: str) -> str: ...


class IanaZoneDatabase:
    """
    ZoneDatabase backed by zoneinfo.

    Wall times are interpreted with fold=0: inside a fall-back overlap the
    earlier (daylight) offset wins, and a time inside a spring-forward gap
    is read with the pre-transition offset, landing after the gap.
    """

    def _zone(self, name: str) -> ZoneInfo:
        try:
            return ZoneInfo(name)
        except (KeyError, ValueError, OSError, TypeError):
            # ZoneInfoNotFoundError is a KeyError; malformed keys raise ValueError
            raise ZoneLookupError(name)

    def is_valid_zone(self, name: str) -> bool:
        try:
            self._zone(name)
        except ZoneLookupError:
            return False
        return True

    def localize(self, wall_time: datetime, zone: str) -> datetime:
        """Attach `zone` to a naive wall-clock reading."""
        if wall_time.tzinfo is not None:
            raise ValueError("localize() expects a naive wall-clock datetime")
        return wall_time.replace(tzinfo=self._zone(zone), fold=0)

    def to_zone(self, instant: datetime, zone: str) -> datetime:
        if instant.tzinfo is None:
            raise ValueError(
                "Cannot convert naive datetime. Datetime must be timezone-aware."
            )
        return instant.astimezone(self._zone(zone))

    def offset_minutes_at(self, instant: datetime, zone: str) -> int:
        return _minutes(self.to_zone(instant, zone).utcoffset())

    def is_daylight_at(self, instant: datetime, zone: str) -> bool:
        """
        True when the zone is ahead of its standard offset at `instant`.

        The standard offset is the smaller of the zone's offsets on
        1 January and 1 July of the same year. tzdata's isdst flag is not
        consulted, since Europe/Dublin marks its winter time with a
        negative save.
        """
        local = self.to_zone(instant, zone)
        tz = local.tzinfo
        january = datetime(local.year, 1, 1, tzinfo=tz)
        july = datetime(local.year, 7, 1, tzinfo=tz)
        standard = min(_minutes(january.utcoffset()), _minutes(july.utcoffset()))
        return _minutes(local.utcoffset()) > standard

    def abbreviation_at(self, instant: datetime, zone: str) -> str:
        return self.to_zone(instant, zone).tzname() or zone


def _minutes(offset: timedelta | None) -> int:
    if offset is None:
        return 0
    # Truncate toward zero so -4:56:02 reads as -296, matching its ±HH:MM form
    return int(offset.total_seconds() / 60)


# Shared default; the database holds no mutable state.
default_database = IanaZoneDatabase()
