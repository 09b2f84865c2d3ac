"""
Free-form datetime parsing against a zone context.

Formats are tried in a fixed order and each must match the entire input:

1. ISO-8601 (date-time with a T designator, or a bare date), with or
   without an explicit offset
2. yyyy-MM-dd HH:mm:ss
3. yyyy-MM-dd (local midnight)

Inputs without an explicit offset are wall-clock readings in the given
zone. The result is always an aware datetime in UTC.
"""

import logging
import re
from datetime import datetime
from typing import Callable

from core.exceptions import DateTimeParseError
from core.zone_database import ZoneDatabase, default_database
from utils.timezone import to_utc

logger = logging.getLogger(__name__)

_DATETIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_ISO_DATE_PREFIX = re.compile(r"[0-9W-]+")


def _parse_iso8601(text: str) -> datetime | None:
    # fromisoformat takes any character between date and time; ISO-8601 only T.
    prefix = _ISO_DATE_PREFIX.match(text)
    if prefix is None:
        return None
    rest = text[prefix.end():]
    if rest and rest[0] not in "Tt":
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _parse_datetime_pattern(text: str) -> datetime | None:
    if not _DATETIME_PATTERN.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
    except ValueError:
        return None


def _parse_date_pattern(text: str) -> datetime | None:
    if not _DATE_PATTERN.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d")
    except ValueError:
        return None


FORMAT_CHAIN: tuple[tuple[str, Callable[[str], datetime | None]], ...] = (
    ("iso8601", _parse_iso8601),
    ("yyyy-MM-dd HH:mm:ss", _parse_datetime_pattern),
    ("yyyy-MM-dd", _parse_date_pattern),
)


def parse_datetime(text, zone: str, database: ZoneDatabase | None = None) -> datetime:
    """
    Parse `text` into a UTC instant, reading offset-less input in `zone`.

    Args:
        text: Datetime string; callers trim surrounding whitespace
        zone: Validated IANA identifier used for offset-less input

    Raises:
        DateTimeParseError: If no format matches the whole input, or the
            reading falls outside the range datetime can hold in UTC
    """
    if not isinstance(text, str):
        raise DateTimeParseError(text)

    database = database or default_database

    for format_name, parse in FORMAT_CHAIN:
        parsed = parse(text)
        if parsed is None:
            continue
        logger.debug(f"Parsed {text!r} as {format_name}")
        try:
            if parsed.tzinfo is None:
                parsed = database.localize(parsed, zone)
            return to_utc(parsed)
        except OverflowError:
            # Representable locally but not once shifted to UTC
            raise DateTimeParseError(text)

    raise DateTimeParseError(text)
