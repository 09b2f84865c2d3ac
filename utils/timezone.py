"""UTC clock and instant normalization shared by the core and the API layer."""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """
    Current time in UTC.

    This is the production clock. Core code never calls it directly;
    it is passed in wherever "now" is needed so tests can pin the value.
    """
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """
    Normalize an instant to UTC.

    Raises ValueError if datetime is naive (no timezone).
    """
    if dt.tzinfo is None:
        raise ValueError(
            "Cannot convert naive datetime to UTC. Datetime must be timezone-aware."
        )
    return dt.astimezone(timezone.utc)
