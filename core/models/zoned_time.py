"""Zone-relative presentation of a single instant."""

from datetime import datetime

from pydantic import BaseModel, Field


class FormattedTime(BaseModel):
    """Locale-independent renderings of a zoned time."""

    date: str = Field(..., description="yyyy-MM-dd")
    time: str = Field(..., description="HH:mm:ss, 24-hour clock")
    full: str = Field(..., description="e.g. 'January 15, 2024 at 2:30:00 PM EST'")


class ZonedTime(BaseModel):
    """
    An instant as seen from one zone.

    Derived on demand from (instant, zone); never stored.
    """

    instant: datetime = Field(..., description="The absolute instant, in UTC")
    timezone: str
    offset_minutes: int = Field(..., description="Zone's UTC offset at the instant")
    utc_offset: str = Field(..., description="Offset as ±HH:MM")
    timestamp: str = Field(..., description="ISO-8601 with milliseconds and offset")
    abbreviation: str
    formatted: FormattedTime
