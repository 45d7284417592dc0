"""Map exceptions to HTTP responses in the shared envelope.

Every response body is ``{"success": bool, "message": str, "data"?: ...}``.
Unexpected errors become a generic 500 without internal detail.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shop.application.access import AccessError, ForbiddenError, UnauthorizedError
from shop.domain.exceptions import (
    CapacityExceededError,
    DomainException,
    DuplicateEntityError,
    EntityNotFoundError,
    OrderRejectedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[Exception], int] = {
    UnauthorizedError: 401,
    ForbiddenError: 403,
    ValidationError: 400,
    CapacityExceededError: 400,
    OrderRejectedError: 400,
    EntityNotFoundError: 404,
    DuplicateEntityError: 409,
}


def status_for(exc: Exception) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return 500


def envelope(message: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    content: dict[str, Any] = {"success": 200 <= status_code < 300, "message": message}
    if data is not None:
        content["data"] = jsonable_encoder(data)
    return JSONResponse(status_code=status_code, content=content)


def install_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(DomainException)
    async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
        return envelope(str(exc), status_code=status_for(exc))

    @app.exception_handler(AccessError)
    async def access_error_handler(request: Request, exc: AccessError) -> JSONResponse:
        return envelope(str(exc), status_code=status_for(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return envelope(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(part) for part in first.get("loc", ())[1:])
            message = f"Invalid {field or 'request'}: {first.get('msg', 'invalid value')}"
        else:
            message = "Invalid request"
        return envelope(message, status_code=400)

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return envelope("Internal server error", status_code=500)
