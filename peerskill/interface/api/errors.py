"""Exception handlers turning domain errors into HTTP responses.

Every error body is ``{"detail": ...}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from peerskill.domain.error import (
    AuthError,
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    StoreError,
    ValidationError,
)

STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    # Duplicate signup is reported as a bad request
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (StoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]

STORE_FAILURE = "Internal storage error"


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown subclasses are server errors."""
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    headers = None
    if isinstance(exc, AuthError):
        headers = {"WWW-Authenticate": "Bearer"}

    if code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        detail = str(exc) if isinstance(exc, StoreError) else STORE_FAILURE
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status=code,
            error_type=type(exc).__name__,
        )
        detail = str(exc)

    return JSONResponse(status_code=code, content={"detail": detail}, headers=headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.info("Invalid request body", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def store_error_handler(
    request: Request, exc: SQLAlchemyError | OSError
) -> JSONResponse:
    """Database failures, including a connection the driver could not open."""
    logfire.error(
        "Database error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": STORE_FAILURE},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the handlers to an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(OSError, store_error_handler)
