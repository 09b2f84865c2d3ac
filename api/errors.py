"""Global exception handlers for FastAPI."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from api.base import error_response, ErrorCodes
from core.exceptions import ServiceError

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the app."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        if exc.is_internal:
            logger.error(
                f"Internal error on {request.method} {request.url.path}: "
                f"{exc.code} {exc.message}",
                exc_info=exc.__cause__,
            )
        else:
            logger.warning(
                f"Client error on {request.method} {request.url.path}: "
                f"{exc.code} {exc.message}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(
                exc.code, exc.message, exc.details, _request_id(request)
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=error_response(
                ErrorCodes.VALIDATION_ERROR,
                str(exc.errors()),
                request_id=_request_id(request),
            ).model_dump(mode="json"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        code = ErrorCodes.NOT_FOUND if exc.status_code == 404 else ErrorCodes.INVALID_REQUEST
        message = (
            f"Route {request.method} {request.url.path} not found"
            if exc.status_code == 404 else str(exc.detail)
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(
                code, message, request_id=_request_id(request)
            ).model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception")
        return JSONResponse(
            status_code=500,
            content=error_response(
                ErrorCodes.INTERNAL_ERROR,
                "An internal error occurred",
                request_id=_request_id(request),
            ).model_dump(mode="json"),
        )
