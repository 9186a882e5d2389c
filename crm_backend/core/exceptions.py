"""
Global exception handling for the application.
Every error leaves the API as {"success": false, "message": ...}.
"""

from typing import Optional

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers: Optional[dict[str, str]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)


class MissingFieldsError(AppError):
    """Required request fields are absent or empty."""
    def __init__(self, message: str = "Required fields are missing"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class DuplicateEmailError(AppError):
    """A user with this email already exists."""
    def __init__(self, message: str = "User already exists"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class ValidationFailedError(AppError):
    def __init__(self, message: str = "Invalid request"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class UnauthenticatedError(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message,
            status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidCredentialsError(UnauthenticatedError):
    """Same message whether the email is unknown or the password is wrong."""
    def __init__(self):
        super().__init__("Invalid credentials")


class ForbiddenError(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Admin access required"):
        super().__init__(message, status.HTTP_403_FORBIDDEN)


class InternalServerError(AppError):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render application errors with their own status and message."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
        headers=exc.headers,
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unhandled error", path=request.url.path)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Internal server error"},
    )
