"""Exception handlers for converting custom exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from backend.app.core.exceptions import (
    IdeaBoardException,
    IdeaNotFoundError,
    IdeaValidationError,
)

logger = logging.getLogger(__name__)


async def ideaboard_exception_handler(request: Request, exc: IdeaBoardException) -> JSONResponse:
    """
    Handle all idea board exceptions and convert to appropriate HTTP responses.

    Args:
        request: The incoming request
        exc: The exception that was raised

    Returns:
        JSONResponse with appropriate status code and error details
    """
    if isinstance(exc, IdeaNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, IdeaValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.warning(
        f"[ERROR] {request.method} {request.url.path} -> {status_code}: {exc.message}"
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "type": exc.__class__.__name__,
            **({"info": exc.details} if exc.details else {})
        }
    )


def register_exception_handlers(app):
    """
    Register all custom exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(IdeaBoardException, ideaboard_exception_handler)
