"""
Error envelope and exception handlers.

Domain errors raised anywhere below a route surface here and are rendered as
`{status_code, message, code}` with the matching HTTP status.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.schemas import ErrorResponse
from src.domain.errors import (
    AdminError,
    AuthenticationFailed,
    AuthorizationFailed,
    Conflict,
    NotFound,
    StoreUnavailable,
    Unauthenticated,
    ValidationFailed,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[AdminError], int] = {
    ValidationFailed: status.HTTP_400_BAD_REQUEST,
    AuthenticationFailed: status.HTTP_401_UNAUTHORIZED,
    Unauthenticated: status.HTTP_401_UNAUTHORIZED,
    AuthorizationFailed: status.HTTP_403_FORBIDDEN,
    NotFound: status.HTTP_404_NOT_FOUND,
    Conflict: status.HTTP_409_CONFLICT,
    StoreUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: AdminError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(status_code: int, exc: AdminError) -> dict[str, object]:
    body = ErrorResponse(status_code=status_code, **exc.to_dict())
    return body.model_dump(exclude_none=True)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AdminError)
    async def admin_error_handler(request: Request, exc: AdminError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info(
                "%s %s -> %s (%s)", request.method, request.url.path, status_code, exc.code
            )

        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=status_code, content=error_body(status_code, exc), headers=headers
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        field = None
        if errors:
            loc = [str(part) for part in errors[0].get("loc", ()) if part != "body"]
            field = ".".join(loc) or None
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                status.HTTP_400_BAD_REQUEST,
                ValidationFailed("Invalid request payload", field=field),
            ),
        )
