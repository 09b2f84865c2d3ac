"""Service configuration."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "TZAPI_"

DEFAULT_COMMON_TIMEZONES = [
    "UTC",
    "America/New_York",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "Europe/London",
    "Europe/Paris",
    "Europe/Berlin",
    "Asia/Tokyo",
    "Asia/Shanghai",
    "Asia/Kolkata",
    "Australia/Sydney",
    "Pacific/Auckland",
]


class ServiceConfig(BaseModel):
    """
    Timezone API configuration.

    Every field can be overridden by a TZAPI_<FIELD> environment variable
    (see load_config).
    """

    # Application
    app_name: str = Field(
        default="timezone-api",
        description="Service name reported by health checks and docs",
        min_length=1,
    )
    version: str = Field(
        default="1.0.0",
        description="Service version reported by health checks",
        min_length=1,
    )
    environment: str = Field(
        default="development",
        pattern="^(development|production|test)$",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR)$",
    )

    # HTTP
    api_prefix: str = Field(
        default="/api",
        description="Mount point for the time routes",
        pattern="^/[A-Za-z0-9_/-]*$",
    )

    # Timezones
    common_timezones: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COMMON_TIMEZONES),
        description="Identifiers advertised by the timezone listing",
        min_length=1,
    )


def load_config(env_file: Path | None = None) -> ServiceConfig:
    """
    Build ServiceConfig from the environment.

    Loads `env_file` (or the nearest .env from the working directory up)
    first; values already present in the environment win.
    common_timezones is read as a comma-separated list.

    Raises:
        pydantic.ValidationError: If any value is out of bounds
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    values = {}
    for name in ServiceConfig.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is None:
            continue
        if name == "common_timezones":
            values[name] = [tz.strip() for tz in raw.split(",") if tz.strip()]
        elif name == "log_level":
            values[name] = raw.upper()
        else:
            values[name] = raw

    return ServiceConfig(**values)
