"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ballot.domain.error import (
    DomainError,
    InactivePollError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error onto an ``HTTPException``.

    Args:
        error: Error raised by a service or use case

    Returns:
        Exception carrying the matching status code and message
    """
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, (NotAuthorizedError, InactivePollError)):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, InvalidInputError):
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logfire.warn(
        "Request rejected",
        error_type=type(error).__name__,
        error=str(error),
        status_code=code,
    )
    return HTTPException(status_code=code, detail=str(error))


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Render store failures without leaking a stack trace."""
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "sqlstate", None) or getattr(exc, "code", None)

    logfire.error(
        "Database error",
        path=request.url.path,
        error_type=type(exc).__name__,
        code=code,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Database error",
            "message": type(orig or exc).__name__,
            "code": code,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Render any unhandled exception as a generic 500."""
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install application-level exception handlers."""
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
