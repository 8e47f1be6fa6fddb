"""
Error boundary for every route.

HTTPExceptions raised by services keep their status and become
`{"error": ...}` bodies. Store failures and anything unexpected are logged
with a traceback and returned as a generic 500.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import db
from .http import CORS_HEADERS

logger = logging.getLogger(__name__)


def error_body(detail: Any) -> dict[str, Any]:
    if isinstance(detail, dict):
        return detail
    return {"error": str(detail)}


def _json_error(status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> JSONResponse:
    merged = dict(CORS_HEADERS)
    if headers:
        merged.update(headers)
    return JSONResponse(body, status_code=status_code, headers=merged)


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _json_error(exc.status_code, error_body(exc.detail), getattr(exc, "headers", None))


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return _json_error(
        400,
        {"error": "Invalid request payload.", "details": jsonable_encoder(exc.errors())},
    )


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request_failed method=%s path=%s error=%s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    return _json_error(500, {"error": f"Failed to {request.method.lower()} request"})


async def error_boundary(request: Request, call_next) -> Response:
    # Last-resort 500 for anything the exception handlers did not take.
    try:
        return await call_next(request)
    except Exception as exc:
        return await server_error_handler(request, exc)


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(db.StoreError, server_error_handler)
    app.middleware("http")(error_boundary)
