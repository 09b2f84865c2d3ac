"""
Timezone service: the boundary between untrusted requests and the engine.

Every public method validates its raw input field by field and collects
all violations before reporting, then hands clean values to the fail-fast
engine functions. Failures leave this module only as ServiceError.
"""

import logging
from collections.abc import Mapping
from typing import Any

from core.config import ServiceConfig
from core.conversion import convert
from core.dst import dst_status
from core.exceptions import (
    DateTimeParseError,
    InvalidTimezoneError,
    ServiceError,
    ServiceErrorCode,
)
from core.models import (
    ConversionResult,
    DstStatus,
    FieldError,
    FieldErrorCode,
    HealthStatus,
    ServiceHealth,
    ZonedTime,
)
from core.resolver import Clock, get_current_time
from core.validator import is_valid_timezone
from core.zone_database import ZoneDatabase, default_database
from utils.timezone import now_utc

logger = logging.getLogger(__name__)

# (field, label) pairs for the request shapes this service accepts
_CONVERSION_FIELDS = (
    ("sourceTime", "Source time"),
    ("sourceTimezone", "Source timezone"),
    ("targetTimezone", "Target timezone"),
)
_DST_FIELDS = (
    ("dateTime", "Date time"),
    ("timezone", "Timezone"),
)
_TIMEZONE_FIELDS = {"sourceTimezone", "targetTimezone", "timezone"}


class TimezoneService:
    """Service for current-time, conversion and DST queries."""

    def __init__(
        self,
        database: ZoneDatabase | None = None,
        clock: Clock | None = None,
        config: ServiceConfig | None = None,
    ):
        self.database = database or default_database
        self.clock = clock or now_utc
        self.config = config or ServiceConfig()

    # -------------------------------------------------------------------------
    # Current time
    # -------------------------------------------------------------------------

    def get_current_time(self, timezone: Any) -> ZonedTime:
        """
        Current wall-clock time in `timezone`.

        Args:
            timezone: Raw identifier from the caller; surrounding
                whitespace is ignored

        Raises:
            ServiceError: INVALID_TIMEZONE_PARAMETER, EMPTY_TIMEZONE,
                INVALID_TIMEZONE or INTERNAL_ERROR
        """
        if not isinstance(timezone, str):
            raise ServiceError(
                ServiceErrorCode.INVALID_TIMEZONE_PARAMETER,
                "Timezone parameter is required and must be a string",
                [FieldError(field="timezone", message="Timezone is required",
                            code=FieldErrorCode.REQUIRED)],
            )

        clean = timezone.strip()
        if not clean:
            raise ServiceError(
                ServiceErrorCode.EMPTY_TIMEZONE,
                "Timezone cannot be empty",
                [FieldError(field="timezone", message="Timezone cannot be empty",
                            code=FieldErrorCode.EMPTY)],
            )

        if not is_valid_timezone(clean, self.database):
            raise ServiceError(
                ServiceErrorCode.INVALID_TIMEZONE,
                f"Invalid timezone identifier: {clean}. Please use a valid IANA "
                "timezone identifier (e.g., 'America/New_York', 'Europe/London')",
                [FieldError(field="timezone", message="Invalid IANA timezone identifier",
                            code=FieldErrorCode.INVALID_FORMAT)],
            )

        try:
            return get_current_time(clean, self.clock, self.database)
        except Exception as e:
            raise self._internal_error("Failed to get current time") from e

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert_time(self, request: Any) -> ConversionResult:
        """
        Convert a time from one zone to another.

        Args:
            request: Mapping with sourceTime, sourceTimezone and
                targetTimezone

        Returns:
            ConversionResult for the (trimmed) inputs

        Raises:
            ServiceError: INVALID_REQUEST when there is no request body,
                VALIDATION_ERROR listing every bad field, one of
                INVALID_SOURCE_TIME / INVALID_SOURCE_TIMEZONE /
                INVALID_TARGET_TIMEZONE when conversion rejects a value,
                INTERNAL_ERROR otherwise
        """
        self._require_mapping(request, "Conversion request is required")

        errors = self._validate_fields(request, _CONVERSION_FIELDS)
        if errors:
            raise ServiceError(
                ServiceErrorCode.VALIDATION_ERROR,
                "Validation failed for conversion request",
                errors,
            )

        source_time = request["sourceTime"].strip()
        source_timezone = request["sourceTimezone"].strip()
        target_timezone = request["targetTimezone"].strip()

        try:
            return convert(source_time, source_timezone, target_timezone, self.database)
        except DateTimeParseError:
            raise ServiceError(
                ServiceErrorCode.INVALID_SOURCE_TIME,
                "Invalid source time format. Please use ISO 8601 format or a valid date string",
                [FieldError(field="sourceTime", message="Invalid datetime format",
                            code=FieldErrorCode.INVALID_FORMAT)],
            )
        except InvalidTimezoneError as e:
            if e.side == "target":
                raise ServiceError(
                    ServiceErrorCode.INVALID_TARGET_TIMEZONE,
                    "Invalid target timezone identifier",
                    [FieldError(field="targetTimezone", message="Invalid IANA timezone identifier",
                                code=FieldErrorCode.INVALID_FORMAT)],
                )
            raise ServiceError(
                ServiceErrorCode.INVALID_SOURCE_TIMEZONE,
                "Invalid source timezone identifier",
                [FieldError(field="sourceTimezone", message="Invalid IANA timezone identifier",
                            code=FieldErrorCode.INVALID_FORMAT)],
            )
        except Exception as e:
            raise self._internal_error("Failed to convert time") from e

    # -------------------------------------------------------------------------
    # Daylight saving
    # -------------------------------------------------------------------------

    def check_dst(self, request: Any) -> DstStatus:
        """
        Whether a zone observes daylight time at a given datetime.

        Args:
            request: Mapping with dateTime and timezone

        Raises:
            ServiceError: INVALID_REQUEST, VALIDATION_ERROR,
                INVALID_DATETIME or INTERNAL_ERROR
        """
        self._require_mapping(request, "DST request is required")

        errors = self._validate_fields(request, _DST_FIELDS)
        if errors:
            raise ServiceError(
                ServiceErrorCode.VALIDATION_ERROR,
                "Validation failed for DST request",
                errors,
            )

        date_time = request["dateTime"].strip()
        timezone = request["timezone"].strip()

        try:
            return dst_status(date_time, timezone, self.database)
        except DateTimeParseError:
            raise ServiceError(
                ServiceErrorCode.INVALID_DATETIME,
                "Invalid date time format. Please use ISO 8601 format or a valid date string",
                [FieldError(field="dateTime", message="Invalid datetime format",
                            code=FieldErrorCode.INVALID_FORMAT)],
            )
        except Exception as e:
            raise self._internal_error("Failed to determine daylight saving time") from e

    # -------------------------------------------------------------------------
    # Catalog & health
    # -------------------------------------------------------------------------

    def validate_timezone(self, timezone: Any) -> bool:
        """Whether `timezone` (trimmed) is an acceptable identifier."""
        if not isinstance(timezone, str) or not timezone:
            return False
        return is_valid_timezone(timezone.strip(), self.database)

    def list_supported_timezones(self) -> list[str]:
        """Commonly used identifiers, in configured order."""
        return list(self.config.common_timezones)

    def get_service_health(self) -> ServiceHealth:
        """Healthy when UTC validates and at least one zone is advertised."""
        supported = len(self.list_supported_timezones())
        working = self.validate_timezone("UTC")

        status = HealthStatus.HEALTHY
        if not working or supported == 0:
            logger.warning(f"Timezone service unhealthy (utc_valid={working}, zones={supported})")
            status = HealthStatus.UNHEALTHY

        return ServiceHealth(
            status=status,
            supported_timezones=supported,
            version=self.config.version,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_mapping(self, request: Any, message: str) -> None:
        if not isinstance(request, Mapping):
            raise ServiceError(
                ServiceErrorCode.INVALID_REQUEST,
                message,
                [FieldError(field="request", message="Request body is required",
                            code=FieldErrorCode.REQUIRED)],
            )

    def _validate_fields(
        self, request: Mapping, fields: tuple[tuple[str, str], ...]
    ) -> list[FieldError]:
        """Check every field independently and return all violations."""
        errors = []
        for field, label in fields:
            value = request.get(field)
            if not isinstance(value, str):
                errors.append(FieldError(
                    field=field,
                    message=f"{label} is required and must be a string",
                    code=FieldErrorCode.REQUIRED,
                ))
            elif not value.strip():
                errors.append(FieldError(
                    field=field,
                    message=f"{label} cannot be empty",
                    code=FieldErrorCode.EMPTY,
                ))
            elif field in _TIMEZONE_FIELDS and not is_valid_timezone(value.strip(), self.database):
                errors.append(FieldError(
                    field=field,
                    message=f"Invalid {label.lower()} identifier",
                    code=FieldErrorCode.INVALID_FORMAT,
                ))
        return errors

    def _internal_error(self, message: str) -> ServiceError:
        """Log the active exception and build the INTERNAL_ERROR to raise."""
        logger.exception(message)
        return ServiceError(ServiceErrorCode.INTERNAL_ERROR, message, status_code=500)
