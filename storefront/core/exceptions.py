"""
Application Exception Handling

Single AppException class for all server-side errors with FastAPI integration.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Rendered as ``{"error": <message>, "code": <code>}`` plus an optional
    ``details`` object. The message is always safe to show to a client;
    internal causes are logged, never attached.

    Usage:
        raise AppException("Game ID and User ID are required.", "VALIDATION_ERROR", 400)

    Error Codes:
        - VALIDATION_ERROR (400)
        - STORAGE_FAILURE (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "STORAGE_FAILURE")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict: Dict[str, Any] = {
            "error": self.message,
            "code": self.code,
        }

        if self.details:
            error_dict["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to its JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Render request body/query validation errors as 400 responses."""
    fields = [
        ".".join(str(part) for part in error["loc"] if part != "body")
        for error in exc.errors()
    ]
    logger.debug(f"Request validation failed on {request.url.path}: {fields}")

    app_exc = AppException(
        "Request body is invalid.",
        "VALIDATION_ERROR",
        400,
        {"fields": [field for field in fields if field]}
    )
    return JSONResponse(status_code=app_exc.status_code, content=app_exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def missing_fields(missing: List[str]) -> AppException:
    """Create missing required fields exception."""
    return AppException(
        f"{' and '.join(missing)} {'is' if len(missing) == 1 else 'are'} required.",
        "VALIDATION_ERROR",
        400,
        {"missing": missing}
    )


def storage_failure() -> AppException:
    """Create generic storage failure exception."""
    return AppException(
        "A server error occurred while retrieving game data.",
        "STORAGE_FAILURE",
        500
    )
