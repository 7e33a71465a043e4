"""
Request-boundary error mapping.

Every error kind leaves the API as an ErrorResponse body:

    DomainValidationError / request validation   -> 400
    NotFoundError                                -> 404
    ExternalServiceError                         -> 502 (generic message)
    anything else                                -> 500 (generic message, traceback logged)
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hunting_engine.api.common.responses import ErrorResponse
from hunting_engine.common.logging_utils import get_logger
from hunting_engine.errors import (
    DomainValidationError,
    ExternalServiceError,
    NotFoundError,
)

logger = get_logger(__name__)

EXTERNAL_SERVICE_MESSAGE = "The synthesis service failed to produce a usable response"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def domain_validation_error_handler(request: Request, exc: DomainValidationError) -> JSONResponse:
    return error_response(400, exc.error_type, exc.message, exc.details)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body") or "body",
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]
    return error_response(400, "ValidationError", "Invalid request", {"fields": fields})


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(404, exc.error_type, exc.message)


async def external_service_error_handler(request: Request, exc: ExternalServiceError) -> JSONResponse:
    logger.error(
        "[api] %s %s failed on external service: %s",
        request.method,
        request.url.path,
        exc.message,
    )
    return error_response(502, exc.error_type, EXTERNAL_SERVICE_MESSAGE)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error = "NotFound" if exc.status_code == 404 else "HTTPError"
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code == 404 and message == "Not Found":
        message = "Route not found"
    return error_response(exc.status_code, error, message)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[api] Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "InternalServerError", INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(ExternalServiceError, external_service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
