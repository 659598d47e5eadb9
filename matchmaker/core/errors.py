"""Error taxonomy and normalized HTTP error handlers."""

import logging
from typing import Optional
from uuid import uuid4

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.requests import Request

from matchmaker.core.logging import LOGGER_NAME, get_request_id, log_event


class AppError(Exception):
    code = "app_error"
    status_code = 500

    def __init__(self, message: str, *, code: Optional[str] = None, status_code: Optional[int] = None, request_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code
        self.request_id = request_id


class InvalidInputShape(AppError, ValueError):
    """Wrong attribute count, names or null values. Caller can re-prompt."""
    code = "invalid_input"
    status_code = 400


class NotFoundError(AppError, ValueError):
    code = "not_found"
    status_code = 404


class EmptyCatalogError(AppError):
    """Raised when correlation is asked to pick from zero personas."""
    code = "empty_catalog"
    status_code = 500


class StageExecutionError(AppError):
    """A pipeline stage failed unexpectedly."""
    code = "stage_execution_failed"
    status_code = 500

    def __init__(self, message: str, *, stage: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.stage = stage


def _extract_request_id(request: Request) -> str:
    return (
        getattr(request.state, "request_id", None)
        or get_request_id()
        or str(uuid4())
    )


def _error_response(status_code: int, code: str, message: str, rid: str, *, stage: Optional[str] = None) -> JSONResponse:
    """Normalized envelope: {"error": {code, message, request_id[, stage]}, "detail": message}."""
    error = {"code": code, "message": message, "request_id": rid}
    if stage:
        error["stage"] = stage
    response = JSONResponse(status_code=status_code, content={"error": error, "detail": message})
    response.headers["x-request-id"] = rid
    return response


async def app_error_handler(request: Request, exc: AppError):
    rid = exc.request_id or _extract_request_id(request)
    stage = getattr(exc, "stage", None)
    log_event(
        "error" if exc.status_code >= 500 else "warning",
        "app.error",
        request_id=rid,
        stage=stage,
        error_code=exc.code,
        extra={"error_message": exc.message, "status": exc.status_code},
    )
    return _error_response(exc.status_code, exc.code, exc.message, rid, stage=stage)


async def http_error_handler(request: Request, exc: HTTPException):
    rid = _extract_request_id(request)
    code = "not_found" if exc.status_code == 404 else "http_error"
    message = exc.detail if exc.detail else "HTTP error"
    log_event("warning", "http.error", request_id=rid, error_code=code, extra={"status": exc.status_code})
    return _error_response(exc.status_code, code, message, rid)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies (e.g. invalid JSON) are caller-input problems."""
    errors = exc.errors()
    reason = errors[0].get("msg", "invalid request") if errors else "invalid request"
    return await app_error_handler(request, InvalidInputShape(f"Malformed request body: {reason}"))


async def unhandled_exception_handler(request: Request, exc: Exception):
    rid = _extract_request_id(request)
    logging.getLogger(LOGGER_NAME).error(
        "unhandled.exception", exc_info=True, extra={"request_id": rid, "error_code": "internal_error"}
    )
    return _error_response(500, "internal_error", "Unexpected error", rid)
