"""
Exception handlers for the relay API.

Every error leaves the service as ``{ok: false, error: {code, message, details}}``
with the status code mapped from the exception type.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    RateLimitExceededError,
    RelayError,
    TransportFailureError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class ExceptionHandlerRegistry:
    """Registers the relay's exception handlers on an application."""

    def __init__(self, is_production: bool = True):
        self.is_production = is_production

    def register_handlers(self, app: FastAPI) -> None:
        @app.exception_handler(RelayError)
        async def relay_error_handler(request: Request, exc: RelayError):
            """Handle relay domain exceptions."""
            status_code = get_http_status_code(exc)
            headers = None

            if isinstance(exc, RateLimitExceededError):
                headers = {"Retry-After": str(exc.retry_after)}

            if status_code >= 500:
                logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
            else:
                logger.info(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")

            return JSONResponse(
                status_code=status_code,
                content=create_error_response(exc),
                headers=headers,
            )

        @app.exception_handler(RequestValidationError)
        async def request_validation_handler(request: Request, exc: RequestValidationError):
            """Malformed bodies are client errors like any other validation failure."""
            errors = [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
                for error in exc.errors()
            ]
            body: Dict[str, Any] = {
                "ok": False,
                "error": {
                    "code": "ValidationError",
                    "message": "Invalid request body",
                    "details": {"errors": errors},
                },
            }
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)

            message = GENERIC_ERROR_MESSAGE if self.is_production else str(exc) or GENERIC_ERROR_MESSAGE
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=create_error_response(TransportFailureError(message, error_code="InternalError")),
            )


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """Register exception handlers for the relay application."""
    ExceptionHandlerRegistry(is_production).register_handlers(app)
