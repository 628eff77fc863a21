"""HTTP Exception Handlers.

- ValidationError / RequestValidationError → 400 {"error": "..."}
- ApplicationError (저장소 오류 등) → 500, 내부 정보 노출 없음
- 그 외 예외 → 500
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.feed.application.common.exceptions import ApplicationError
from apps.feed.domain.exceptions import ValidationError
from apps.feed.setup.constants import INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info(
        "Request rejected",
        extra={"path": request.url.path, "field": exc.field, "reason": exc.reason},
    )
    return _error(400, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Request schema rejected", extra={"path": request.url.path})
    return _error(400, "Invalid request parameters")


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    logger.error(
        "Application error",
        exc_info=exc,
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return _error(500, INTERNAL_ERROR_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", exc_info=exc, extra={"path": request.url.path})
    return _error(500, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
