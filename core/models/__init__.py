"""Core domain models."""

from core.models.validation import FieldError, FieldErrorCode
from core.models.zoned_time import FormattedTime, ZonedTime
from core.models.conversion import ConversionResult
from core.models.status import DstStatus, HealthStatus, ServiceHealth

__all__ = [
    # Validation
    "FieldError", "FieldErrorCode",
    # Zoned time
    "FormattedTime", "ZonedTime",
    # Conversion
    "ConversionResult",
    # Status
    "DstStatus", "HealthStatus", "ServiceHealth",
]
