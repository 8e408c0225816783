"""Error taxonomy and the JSON handler that renders it."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hr_intranet.audit import log_safely

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal server error"


class IntranetError(Exception):
    """Base error carrying an HTTP status and a client-safe message."""

    status_code = 500
    default_detail = GENERIC_SERVER_ERROR

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(IntranetError):
    status_code = 400
    default_detail = "Invalid request"


class AuthenticationError(IntranetError):
    status_code = 401
    default_detail = "Invalid credentials"


class AuthorizationError(IntranetError):
    status_code = 403
    default_detail = "Access denied: admin rights required"


class ResourceError(IntranetError):
    """A server-side resource is unavailable. Its detail is only logged."""


async def intranet_error_handler(request: Request, exc: IntranetError) -> JSONResponse:
    detail = exc.detail
    if exc.status_code >= 500:
        log_safely(logger, logging.ERROR, f"{request.method} {request.url.path} failed: {exc.detail}")
        detail = GENERIC_SERVER_ERROR
    return JSONResponse({"detail": detail}, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IntranetError, intranet_error_handler)
