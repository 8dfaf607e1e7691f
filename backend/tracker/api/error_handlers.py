"""Error Handlers — every failure leaves the API as {"error": {...}}.

Invariants:
    - TrackerError -> its own http_status and to_response() body
      (404 not found / missing reference, 409 duplicate key, 503 database)
    - RequestValidationError -> 400 with one detail per offending field
    - Any other exception -> 500 with a fixed message; internals never leak
    - The request id, when bound, is copied into every error body

Design Decisions:
    - 4xx domain errors logged at INFO: a dangling reference in a request body
      is a client mistake, not an incident
    - Validation uses 400 rather than FastAPI's 422 to keep one "bad request" code
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tracker.core.errors import ErrorCategory, ErrorSeverity, TrackerError
from tracker.infrastructure.observability import request_id_var

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TrackerError, tracker_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _respond(status_code: int, body: dict) -> JSONResponse:
    request_id = request_id_var.get()
    if request_id:
        body["error"]["request_id"] = request_id
    return JSONResponse(status_code=status_code, content=body)


async def tracker_error_handler(request: Request, exc: TrackerError):
    level = logging.ERROR if exc.http_status >= 500 else logging.INFO
    logger.log(
        level,
        f"{exc.code}: {exc.message}",
        extra={**exc.log_extra(), "path": request.url.path},
    )
    return _respond(exc.http_status, exc.to_response())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.info(
        f"Invalid request on {request.url.path}: {len(details)} error(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return _respond(status.HTTP_400_BAD_REQUEST, {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": details,
        },
    })


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return _respond(status.HTTP_500_INTERNAL_SERVER_ERROR, {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "category": ErrorCategory.INTERNAL.value,
            "severity": ErrorSeverity.CRITICAL.value,
        },
    })
