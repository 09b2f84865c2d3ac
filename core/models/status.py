"""Small status records returned by TimezoneService."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class ServiceHealth(BaseModel):
    """Self-check of the timezone engine."""

    status: HealthStatus
    supported_timezones: int
    version: str


class DstStatus(BaseModel):
    """Daylight-saving classification of one instant in one zone."""

    instant: datetime
    timezone: str
    is_dst: bool
