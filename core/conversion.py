"""
Zone-to-zone conversion.

convert() is the fail-fast layer: it assumes its inputs were validated one
level up and stops at the first problem. Request validation that reports
every bad field at once lives in TimezoneService.
"""

import logging

from core.exceptions import DateTimeParseError, InvalidTimezoneError
from core.models import ConversionResult
from core.offsets import format_offset, format_offset_hours
from core.parser import parse_datetime
from core.resolver import resolve
from core.validator import is_valid_timezone
from core.zone_database import ZoneDatabase, default_database

logger = logging.getLogger(__name__)

__all__ = ["convert", "format_offset", "format_offset_hours"]


def convert(
    text: str,
    source_zone: str,
    target_zone: str,
    database: ZoneDatabase | None = None,
) -> ConversionResult:
    """
    Present the instant described by `text` in both zones.

    `text` is read in `source_zone` when it carries no offset. The
    delta is target offset minus source offset at that instant, so
    New York -> London in January is +300 minutes.

    Raises:
        InvalidTimezoneError: If either zone fails validation; `side`
            names which one
        DateTimeParseError: If `text` matches no supported format or its
            instant cannot be presented in either zone
        ZoneResolutionError: If a validated zone cannot be resolved
    """
    database = database or default_database

    if not is_valid_timezone(source_zone, database):
        raise InvalidTimezoneError(source_zone, side="source")
    if not is_valid_timezone(target_zone, database):
        raise InvalidTimezoneError(target_zone, side="target")

    instant = parse_datetime(text, source_zone, database)

    try:
        original = resolve(instant, source_zone, database)
        converted = resolve(instant, target_zone, database)
    except OverflowError:
        # The instant exists in UTC but its wall-clock reading does not
        raise DateTimeParseError(text)

    delta_minutes = converted.offset_minutes - original.offset_minutes
    logger.debug(
        f"Converted {instant.isoformat()} {source_zone} -> {target_zone} "
        f"({delta_minutes:+d} min)"
    )

    return ConversionResult(
        original=original,
        converted=converted,
        offset_delta_minutes=delta_minutes,
        offset_delta=format_offset(delta_minutes),
    )
