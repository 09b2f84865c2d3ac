"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request

from api.base import success_response
from api.errors import register_error_handlers
from api.middleware import RequestIDMiddleware
from api.time import create_time_router
from core.config import ServiceConfig, load_config
from core.services.timezone_service import TimezoneService
from utils.timezone import now_utc

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Root logger setup; a no-op for handlers if logging is already configured."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def create_app(
    service: TimezoneService | None = None,
    config: ServiceConfig | None = None,
) -> FastAPI:
    """
    Build the HTTP app around a TimezoneService.

    The production wall clock is injected here; tests pass a service
    built with a fixed clock instead.
    """
    config = config or load_config()
    service = service or TimezoneService(clock=now_utc, config=config)

    configure_logging(config.log_level)

    app = FastAPI(title=config.app_name, version=config.version)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(create_time_router(service), prefix=config.api_prefix)

    @app.get("/health")
    async def health(request: Request):
        report = service.get_service_health()
        request_id = getattr(request.state, "request_id", None)
        return success_response(report.model_dump(mode="json"), request_id).model_dump(mode="json")

    logger.info(
        f"{config.app_name} {config.version} ready "
        f"(environment={config.environment}, prefix={config.api_prefix})"
    )
    return app
