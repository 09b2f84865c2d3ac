"""Zone-relative presentation of instants."""

import logging
from datetime import datetime
from typing import Callable

from core.exceptions import ZoneLookupError, ZoneResolutionError
from core.models import FormattedTime, ZonedTime
from core.offsets import format_offset
from core.zone_database import ZoneDatabase, default_database
from utils.timezone import now_utc, to_utc

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Fixed English month names; strftime("%B") follows the process locale.
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _full_format(local: datetime, abbreviation: str) -> str:
    """e.g. 'January 15, 2024 at 2:30:00 PM EST'."""
    hour12 = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{_MONTHS[local.month - 1]} {local.day}, {local.year} at "
        f"{hour12}:{local.minute:02d}:{local.second:02d} {meridiem} {abbreviation}"
    )


def resolve(
    instant: datetime, zone: str, database: ZoneDatabase | None = None
) -> ZonedTime:
    """
    Present `instant` in `zone`.

    `zone` must already be validated. A database failure at this point
    is a defect, not a user error, and is raised as ZoneResolutionError.

    Raises:
        ValueError: If `instant` is naive
        ZoneResolutionError: If the database cannot resolve `zone`
    """
    instant = to_utc(instant)
    database = database or default_database

    try:
        local = database.to_zone(instant, zone)
        offset_minutes = database.offset_minutes_at(instant, zone)
        abbreviation = database.abbreviation_at(instant, zone)
    except ZoneLookupError as e:
        logger.error(f"Validated timezone failed to resolve: {zone}")
        raise ZoneResolutionError(f"Failed to resolve time for timezone: {zone}") from e

    return ZonedTime(
        instant=instant,
        timezone=zone,
        offset_minutes=offset_minutes,
        utc_offset=format_offset(offset_minutes),
        timestamp=local.isoformat(timespec="milliseconds"),
        abbreviation=abbreviation,
        formatted=FormattedTime(
            date=f"{local.year:04d}-{local.month:02d}-{local.day:02d}",
            time=f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}",
            full=_full_format(local, abbreviation),
        ),
    )


def get_current_time(
    zone: str, clock: Clock = now_utc, database: ZoneDatabase | None = None
) -> ZonedTime:
    """Present the clock's current instant in `zone`."""
    return resolve(clock(), zone, database)
