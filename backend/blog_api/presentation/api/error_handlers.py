"""Map domain exceptions to HTTP responses.

Single-cause failures render as ``{"error": "<message>"}``; validation
failures render as ``{"errors": [...]}`` with one entry per violated rule.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog_api.domain.exceptions import (
    AuthenticationError,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Record not found"
UNAUTHORIZED_MESSAGE = "Unauthorized"
FORBIDDEN_MESSAGE = "Forbidden"


async def _not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    logger.debug("%s %s → 404: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": NOT_FOUND_MESSAGE})


async def _authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": UNAUTHORIZED_MESSAGE},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _permission_handler(request: Request, exc: PermissionDeniedError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"error": FORBIDDEN_MESSAGE})


async def _validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"errors": exc.messages},
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies (wrong JSON types, missing wrapper key) share the 422 shape.

    A path id that is not a storable integer cannot name a record, so it is
    reported as not found.
    """
    errors = exc.errors()
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in errors):
        logger.debug("%s %s → 404: malformed path id", request.method, request.url.path)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": NOT_FOUND_MESSAGE})
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(
        status_code=422,
        content={"errors": messages},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers for every domain failure kind."""
    app.add_exception_handler(EntityNotFoundError, _not_found_handler)
    app.add_exception_handler(AuthenticationError, _authentication_handler)
    app.add_exception_handler(PermissionDeniedError, _permission_handler)
    app.add_exception_handler(ValidationError, _validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
