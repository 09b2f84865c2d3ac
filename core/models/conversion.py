"""Result of re-presenting one instant in two zones."""

from pydantic import BaseModel, Field, computed_field, model_validator

from core.models.zoned_time import ZonedTime
from core.offsets import format_offset_hours


class ConversionResult(BaseModel):
    """
    One instant, presented in a source and a target zone.

    offset_delta_minutes is the difference between the two zones' UTC
    offsets at that instant, not a difference between wall-clock readings.
    """

    original: ZonedTime
    converted: ZonedTime
    offset_delta_minutes: int
    offset_delta: str = Field(..., description="Canonical delta as ±HH:MM")

    @model_validator(mode="after")
    def check_same_instant(self) -> "ConversionResult":
        """Only the presentation may differ between the two sides."""
        if self.original.instant != self.converted.instant:
            raise ValueError("original and converted must share the same instant")
        expected = self.converted.offset_minutes - self.original.offset_minutes
        if self.offset_delta_minutes != expected:
            raise ValueError(
                f"offset_delta_minutes must be {expected}, got {self.offset_delta_minutes}"
            )
        return self

    @computed_field
    @property
    def offset_delta_hours(self) -> str:
        """Legacy decimal-hours rendering of the delta, e.g. '+5.0h'."""
        return format_offset_hours(self.offset_delta_minutes)
