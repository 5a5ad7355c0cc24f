from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sprint_api.core.logging import get_request_id
from sprint_api.utils.headers import failure_alert


@dataclass
class AppError(Exception):
    status_code: int
    code: str
    message: str
    details: dict[str, Any] | None = None
    headers: dict[str, str] | None = None


class BadRequest(AppError):
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(400, "bad_request", message, details)


class BadRequestAlert(AppError):
    """A 400 tied to an entity, announced to clients through failure-alert headers."""

    def __init__(self, message: str, entity_name: str, error_key: str):
        super().__init__(
            400,
            error_key,
            message,
            {"entity_name": entity_name, "error_key": error_key},
            failure_alert(entity_name, error_key),
        )
        self.entity_name = entity_name
        self.error_key = error_key


class NotFound(AppError):
    def __init__(self, message: str = "Not found", details: dict[str, Any] | None = None):
        super().__init__(404, "not_found", message, details)


def error_body(code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "correlation_id": get_request_id(),
        }
    }


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logging.getLogger("sprint_api").warning(
            "app_error",
            extra={
                "request_id": get_request_id(),
                "code": exc.code,
                "status_code": exc.status_code,
                "details": exc.details,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.code, exc.message, exc.details),
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        logging.getLogger("sprint_api").exception(
            "unhandled_error",
            extra={"request_id": get_request_id(), "path": request.url.path},
        )
        return JSONResponse(status_code=500, content=error_body("internal_error", "Internal server error"))
