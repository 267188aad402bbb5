"""Error taxonomy shared by every route.

Handlers raise one of the ``ApiError`` subclasses below; the exception
handlers installed by :func:`register_exception_handlers` are the only place
that turns them into HTTP responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class DuplicateKeyError(Exception):
    """A unique index rejected the write."""

    def __init__(self, field: str):
        super().__init__(f"{field} already exists")
        self.field = field


class ApiError(Exception):
    status_code = 500

    def __init__(self, detail: Any, envelope: str = "response"):
        super().__init__(detail)
        self.detail = detail
        self.envelope = envelope

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, self.envelope: self.detail}


class ValidationFailure(ApiError):
    status_code = 400


class AuthenticationFailure(ApiError):
    status_code = 400


class AuthorizationFailure(ApiError):
    status_code = 401


class NotFound(ApiError):
    status_code = 404


class InternalFailure(ApiError):
    status_code = 500


def _render(error: ApiError, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code, content=error.to_dict(), headers=headers
    )


async def _api_error_handler(request: Request, exc: ApiError):
    return _render(exc)


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    missing = sorted(
        {str(err["loc"][-1]) for err in exc.errors() if err.get("loc")}
    )
    detail = f"Invalid or missing fields: {', '.join(missing)}" if missing else "Invalid request"
    return _render(ValidationFailure(detail))


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return _render(NotFound("Not Found"))
    error = ApiError(exc.detail)
    error.status_code = exc.status_code
    return _render(error, headers=exc.headers)


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _render(InternalFailure("Internal server error"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
