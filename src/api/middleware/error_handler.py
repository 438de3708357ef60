"""
Error handling middleware.
"""

import traceback
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config.logging import get_logger
from src.domain.exceptions.crm_error import CRMAPIError, CRMConfigurationError
from src.domain.exceptions.validation_error import ValidationError
from src.infrastructure.monitoring.metrics import record_error

logger = get_logger(__name__)

# Handlers whose error envelope is discriminated by "found" instead of "success"
FOUND_DISCRIMINATED_PATHS = ("/search-contact",)


def error_response(
    request: Request, status_code: int, message: str, details: Optional[Any] = None
) -> JSONResponse:
    """Build the JSON error envelope expected by the portal."""
    if request.url.path.endswith(FOUND_DISCRIMINATED_PATHS):
        content = {"found": False, "error": message}
    else:
        content = {"success": False, "error": message}

    if details is not None:
        content["details"] = details

    return JSONResponse(status_code=status_code, content=content)


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return error_response(request, 400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        message = "Invalid request"
        if errors:
            field = ".".join(str(part) for part in errors[0]["loc"] if part != "body")
            message = f"Invalid value for '{field}': {errors[0]['msg']}"

        logger.warning("Request validation error", error=message, path=request.url.path)
        return error_response(request, 400, message)

    @app.exception_handler(CRMConfigurationError)
    async def configuration_error_handler(request: Request, exc: CRMConfigurationError):
        logger.error("CRM configuration error", error=str(exc), path=request.url.path)
        record_error("configuration", "api")
        return error_response(request, 500, str(exc))

    @app.exception_handler(CRMAPIError)
    async def crm_api_error_handler(request: Request, exc: CRMAPIError):
        logger.error(
            "CRM API error",
            status_code=exc.status_code,
            error=exc.message,
            path=request.url.path,
        )
        record_error("crm_api", "api")
        return error_response(request, exc.status_code, exc.message, exc.details)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(request, exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        record_error("unhandled", "api")
        return error_response(request, 500, "Internal server error")
