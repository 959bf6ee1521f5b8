"""
Exception -> JSON error body

Every failure leaving an endpoint is answered with an ErrorResponse carrying
a fresh request_id, which is also logged so a client report can be matched
to the console output.

    RequestValidationError -> 422 VALIDATION_ERROR (+ per-field list)
    DomainError            -> exc.status_code / exc.code
    anything else          -> 500 INTERNAL_SERVER_ERROR
"""

import uuid
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.schemas.error import ErrorDetail, ErrorResponse, FieldError, ValidationErrorResponse
from models.enums import LogCategory
from models.errors import (
    DomainError,
    EffectNotFoundError,
    InvalidLedIndexError,
    PresetNotFoundError,
)
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.API)

__all__ = [
    "DomainError",
    "EffectNotFoundError",
    "PresetNotFoundError",
    "InvalidLedIndexError",
    "register_exception_handlers",
]


def _new_request_id() -> str:
    return uuid.uuid4().hex[:12]


def _field_errors(errors: List[Dict[str, Any]]) -> List[FieldError]:
    # loc starts with "body" / "query" / "path"
    return [
        FieldError(
            field=".".join(str(part) for part in error["loc"][1:]),
            message=error["msg"],
            type=error["type"],
        )
        for error in errors
    ]


def _respond(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def on_validation_error(request: Request, exc: RequestValidationError):
        request_id = _new_request_id()
        fields = _field_errors(exc.errors())
        log.warn("Invalid request", request_id=request_id, path=request.url.path, errors=len(fields))

        return _respond(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            ValidationErrorResponse(
                error=ErrorDetail(
                    code="VALIDATION_ERROR",
                    message="Request validation failed",
                    details={"error_count": len(fields)},
                ),
                validation_errors=fields,
                request_id=request_id,
            ),
        )

    @app.exception_handler(DomainError)
    async def on_domain_error(request: Request, exc: DomainError):
        request_id = _new_request_id()
        log.warn(exc.message, request_id=request_id, code=exc.code)

        return _respond(
            exc.status_code,
            ErrorResponse(
                error=ErrorDetail(code=exc.code, message=exc.message, details=exc.details),
                request_id=request_id,
            ),
        )

    @app.exception_handler(Exception)
    async def on_unexpected_error(request: Request, exc: Exception):
        request_id = _new_request_id()
        log.error(
            "Unhandled exception",
            request_id=request_id,
            path=request.url.path,
            error=f"{type(exc).__name__}: {exc}",
        )

        return _respond(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(
                error=ErrorDetail(code="INTERNAL_SERVER_ERROR", message="Internal server error"),
                request_id=request_id,
            ),
        )
