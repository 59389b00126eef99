"""Error Handlers — global exception handlers mapping failures to {"error": message}.

Invariants:
    - AccountServiceError → its http_status with its public message
    - RequestValidationError / pydantic ValidationError → 400 "Invalid request data"
    - Unmatched route OR wrong method → 404 "Endpoint not found"
    - Exception (catch-all) → 500 "Internal server error", never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - 405 folded into 404: the route table is matched on (path, method) pairs, so a
      known path with the wrong method is simply not a route
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from account_service.core.errors import AccountServiceError, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
NOT_FOUND_MESSAGE = "Endpoint not found"
INVALID_REQUEST_MESSAGE = "Invalid request data"


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def internal_error_response() -> JSONResponse:
    return error_response(
        INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_account_error_handler(app)
    _register_validation_error_handlers(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_account_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AccountServiceError)
    async def account_error_handler(request: Request, exc: AccountServiceError):
        """Handle all domain/infrastructure errors."""
        extra = {
            **exc.log_extra(),
            "path": request.url.path,
            "status_code": exc.http_status,
        }
        if exc.severity == ErrorSeverity.CRITICAL:
            # traceback already logged where the driver error was mapped
            logger.error(f"{type(exc).__name__}: {exc.message}", extra=extra)
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handlers(app: FastAPI) -> None:
    """Register Pydantic validation error handlers (request shape, not field rules)."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return error_response(
            INVALID_REQUEST_MESSAGE, status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(ValidationError)
    async def body_validation_error_handler(
        request: Request, exc: ValidationError,
    ):
        logger.warning(
            f"Body validation error on {request.url.path}: "
            f"{exc.error_count()} error(s)",
        )
        return error_response(
            INVALID_REQUEST_MESSAGE, status.HTTP_400_BAD_REQUEST,
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            logger.info(
                f"No route for {request.method} {request.url.path}",
                extra={"method": request.method, "path": request.url.path},
            )
            return error_response(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
        return error_response(str(exc.detail), exc.status_code)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path},
            exc_info=True,
        )
        return internal_error_response()
