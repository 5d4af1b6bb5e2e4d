"""
Error Handler Middleware

Every failure leaves the API in one envelope:

    {"error": {"code": "NOT_FOUND", "message": "Game not in collection", "details": {}}}

┌─────────────────────────────────┬────────────────────────────────────────────┐
│ Raised                          │ Response                                   │
├─────────────────────────────────┼────────────────────────────────────────────┤
│ GameVaultException subclass     │ its status_code / error_code / details     │
│ RateLimitError                  │ 429 plus Retry-After                       │
│ RequestValidationError,         │ 400 VALIDATION_ERROR, pydantic errors in   │
│ pydantic.ValidationError        │ details.errors                             │
│ anything else                   │ 500 INTERNAL_ERROR, traceback logged only  │
└─────────────────────────────────┴────────────────────────────────────────────┘
"""

from typing import Union

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from gamevault.shared.core.exceptions import GameVaultException, RateLimitError
from gamevault.shared.core.logging import logger


def _error_body(code: str, message: str, details: dict) -> dict:
    return {"error": {"code": code, "message": message, "details": details}}


async def handle_gamevault_exception(request: Request, exc: GameVaultException) -> JSONResponse:
    logger.warning(
        "Request rejected",
        error_code=exc.error_code,
        status_code=exc.status_code,
        message=exc.message,
        path=request.url.path,
    )

    headers = None
    if isinstance(exc, RateLimitError) and exc.retry_after:
        headers = {"Retry-After": str(exc.retry_after)}
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def handle_validation_error(
    request: Request,
    exc: Union[RequestValidationError, ValidationError],
) -> JSONResponse:
    """Body/query/path mismatches and schema errors raised in handlers are both 400."""
    errors = jsonable_encoder(exc.errors())
    logger.warning("Invalid request", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=400,
        content=_error_body("VALIDATION_ERROR", "Request validation failed", {"errors": errors}),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content=_error_body("INTERNAL_ERROR", "An unexpected error occurred", {}),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameVaultException, handle_gamevault_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
