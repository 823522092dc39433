"""Translation of domain errors into HTTP responses.

Client errors are rendered by FastAPI's exception middleware. Internal
errors and anything unexpected are left to the outermost server-error
handler so they propagate through the DI request scope first and the
request's session is rolled back.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from leaderboard.domain.error import (
    ConflictError,
    DomainError,
    InternalError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
)

STATUS_BY_CATEGORY = {
    "invalid_input": status.HTTP_400_BAD_REQUEST,
    "unauthenticated": status.HTTP_401_UNAUTHORIZED,
    "not_found": status.HTTP_404_NOT_FOUND,
    "conflict": status.HTTP_409_CONFLICT,
    "internal": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

CLIENT_ERRORS = (InvalidInputError, UnauthenticatedError, NotFoundError, ConflictError)

GENERIC_ERROR_MESSAGE = "Internal server error"


def error_response(error: DomainError) -> JSONResponse:
    """Render a domain error as ``{"error", "category"}``."""
    return JSONResponse(
        status_code=STATUS_BY_CATEGORY.get(
            error.category, status.HTTP_500_INTERNAL_SERVER_ERROR
        ),
        content={"error": error.message, "category": error.category},
    )


async def handle_client_error(request: Request, exc: DomainError) -> JSONResponse:
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        category=exc.category,
        error=exc.message,
    )
    return error_response(exc)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    logfire.warn("Request validation failed", path=request.url.path, error=message)
    return error_response(InvalidInputError(message))


async def handle_server_error(request: Request, exc: Exception) -> JSONResponse:
    """Report internal and unexpected errors as 500.

    An ``InternalError`` keeps its own message; any other exception is
    replaced by a generic one.
    """
    if isinstance(exc, InternalError):
        logfire.error("Internal error", path=request.url.path, error=exc.message)
        return error_response(exc)

    logfire.error(
        "Unexpected error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(InternalError(GENERIC_ERROR_MESSAGE))


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    for error_class in CLIENT_ERRORS:
        app.add_exception_handler(error_class, handle_client_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    # Exception is routed to Starlette's outermost ServerErrorMiddleware
    app.add_exception_handler(Exception, handle_server_error)
