"""Typed exceptions for timezone resolution and conversion failures."""

from core.models.validation import FieldError


class ServiceErrorCode:
    """Codes carried by ServiceError across the core boundary."""

    INVALID_TIMEZONE_PARAMETER = "INVALID_TIMEZONE_PARAMETER"
    EMPTY_TIMEZONE = "EMPTY_TIMEZONE"
    INVALID_TIMEZONE = "INVALID_TIMEZONE"
    INVALID_REQUEST = "INVALID_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_SOURCE_TIME = "INVALID_SOURCE_TIME"
    INVALID_SOURCE_TIMEZONE = "INVALID_SOURCE_TIMEZONE"
    INVALID_TARGET_TIMEZONE = "INVALID_TARGET_TIMEZONE"
    INVALID_DATETIME = "INVALID_DATETIME"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TimezoneError(Exception):
    """Base class for errors raised by the timezone engine."""

    code = "TIMEZONE_ERROR"


class ZoneLookupError(TimezoneError):
    """The zone database could not load the requested zone."""

    code = "ZONE_LOOKUP_FAILED"

    def __init__(self, timezone: str):
        self.timezone = timezone
        super().__init__(f"Unknown timezone: {timezone}")


class InvalidTimezoneError(TimezoneError):
    """
    Timezone identifier rejected by the validator.

    `side` names which end of a conversion failed ("source" or "target"),
    or is None when only one zone is involved.
    """

    code = "INVALID_TIMEZONE"

    def __init__(self, timezone, side: str | None = None):
        self.timezone = timezone
        self.side = side
        label = f"{side} timezone" if side else "timezone"
        super().__init__(f"Invalid {label}: {timezone}")


class DateTimeParseError(TimezoneError):
    """No supported datetime format matched the whole input."""

    code = "DATETIME_PARSE_FAILED"

    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid source time format: {text}")


class ZoneResolutionError(TimezoneError):
    """
    An already-validated zone produced no usable result.

    Signals a bug in the validator or the zone database, never bad input.
    """

    code = "INTERNAL_ERROR"


class ServiceError(TimezoneError):
    """
    Structured failure returned to callers of TimezoneService.

    The only error shape that crosses the core boundary. `status_code`
    is a hint for the HTTP layer.
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: list[FieldError] | None = None,
        status_code: int = 400,
    ):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_internal(self) -> bool:
        return self.status_code >= 500
