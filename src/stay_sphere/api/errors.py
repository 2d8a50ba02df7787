"""Exception handlers rendering errors as ``{"message": ...}`` bodies."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stay_sphere.domain.errors import (
    ForbiddenError,
    MalformedInputError,
    StaySphereError,
    StoreError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[StaySphereError], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    MalformedInputError: status.HTTP_400_BAD_REQUEST,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers mapping errors to status codes."""

    @app.exception_handler(StaySphereError)
    async def handle_domain_error(request: Request, exc: StaySphereError):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        for error_type in type(exc).__mro__:
            if error_type in _STATUS_BY_ERROR:
                status_code = _STATUS_BY_ERROR[error_type]
                break
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR and not isinstance(
            exc, StoreError
        ):
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _message(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.info("Rejected request body on %s", request.url.path)
        return _message(status.HTTP_400_BAD_REQUEST, "Malformed request")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _message(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
        )
