"""/api/time: current time, conversion and DST endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Request

from api.base import success_response
from core.services.timezone_service import TimezoneService


def _respond(request: Request, data: Any) -> dict:
    request_id = getattr(request.state, "request_id", None)
    return success_response(data, request_id).model_dump(mode="json")


def create_time_router(service: TimezoneService) -> APIRouter:
    router = APIRouter()

    # Request bodies are taken as raw JSON so that the service, not the
    # framework, reports every missing or malformed field.

    @router.get("/time/current/{timezone:path}")
    async def current_time_by_path(request: Request, timezone: str):
        result = service.get_current_time(timezone)
        return _respond(request, result.model_dump(mode="json"))

    @router.post("/time/current")
    async def current_time(request: Request, body: Any = Body(None)):
        timezone = body.get("timezone") if isinstance(body, dict) else None
        result = service.get_current_time(timezone)
        return _respond(request, result.model_dump(mode="json"))

    @router.post("/time/convert")
    async def convert_time(request: Request, body: Any = Body(None)):
        result = service.convert_time(body)
        return _respond(request, result.model_dump(mode="json"))

    @router.post("/time/dst")
    async def check_dst(request: Request, body: Any = Body(None)):
        result = service.check_dst(body)
        return _respond(request, result.model_dump(mode="json"))

    @router.get("/time/timezones")
    async def list_timezones(request: Request):
        return _respond(request, service.list_supported_timezones())

    return router
