"""Daylight-saving classification."""

from core.exceptions import DateTimeParseError, InvalidTimezoneError
from core.models import DstStatus
from core.parser import parse_datetime
from core.validator import is_valid_timezone
from core.zone_database import ZoneDatabase, default_database


def dst_status(text: str, zone: str, database: ZoneDatabase | None = None) -> DstStatus:
    """
    Parse `text` in `zone` and classify the resulting instant.

    Zones without a daylight rule always report False. Instants inside a
    transition gap or overlap are disambiguated by the zone database.

    Raises:
        InvalidTimezoneError: If `zone` fails validation
        DateTimeParseError: If `text` matches no supported format or
            cannot be presented in `zone`
    """
    database = database or default_database

    if not is_valid_timezone(zone, database):
        raise InvalidTimezoneError(zone)

    instant = parse_datetime(text, zone, database)
    try:
        daylight = database.is_daylight_at(instant, zone)
    except OverflowError:
        raise DateTimeParseError(text)

    return DstStatus(instant=instant, timezone=zone, is_dst=daylight)


def is_dst(text: str, zone: str, database: ZoneDatabase | None = None) -> bool:
    """Whether `zone` observes daylight time at the instant described by `text`."""
    return dst_status(text, zone, database).is_dst
