"""Per-field validation records."""

from pydantic import BaseModel, Field


class FieldErrorCode:
    """Codes for a single violated field constraint."""

    REQUIRED = "REQUIRED"
    EMPTY = "EMPTY"
    INVALID_FORMAT = "INVALID_FORMAT"


class FieldError(BaseModel):
    """One violated constraint on one request field."""

    field: str = Field(..., description="Request field the violation belongs to")
    message: str = Field(..., description="Human-readable explanation")
    code: str = Field(..., description="REQUIRED, EMPTY or INVALID_FORMAT")
