"""
Service exceptions and the handlers that turn them into JSON errors.

Every error body has the same shape: {"success": false, "error", "type"}.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class UnauthorizedException(ServiceException):
    """Raised when the request carries no authenticated user."""
    status_code = 401


class UserNotFoundException(ServiceException):
    """Raised when the authenticated user has no profile row."""
    status_code = 404


class CoverLetterNotFoundException(ServiceException):
    """Raised when a cover letter is not found for the current user."""
    status_code = 404


class PersistenceException(ServiceException):
    """Raised when a database read or write fails after retries."""


def _error_response(status_code: int, error, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "type": error_type}
    )


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Map a ServiceException to its status code.

    Client errors are logged as warnings, server errors with traceback.
    """
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return _error_response(exc.status_code, str(exc), exc.__class__.__name__)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Last resort: hide the details, keep them in the log."""
    logger.exception(f"Unexpected error in {request.url.path}")
    return _error_response(500, "Internal server error", "InternalError")
