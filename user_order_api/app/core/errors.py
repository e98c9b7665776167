"""
Error types and the request-body error handler.

Service code raises the exceptions below; endpoints translate them into
``HTTPException`` with a client-error status.  FastAPI reports a body it
cannot decode or validate as ``422``; both services answer such requests
with ``400`` and the decoder's own message instead.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""


class UnknownUserError(ServiceError):
    """An order references a user the user service does not know."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"user {user_id!r} does not exist")
        self.user_id = user_id


class UserServiceUnavailable(ServiceError):
    """The user service could not be reached while validating an order."""


def _format_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "invalid request body")
    cause = (error.get("ctx") or {}).get("error")
    if cause and str(cause) not in message:
        message = f"{message}: {cause}"
    return f"{location}: {message}" if location else message


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Turn body decoding/validation failures into ``400 Bad Request``."""
    detail = "; ".join(_format_error(error) for error in exc.errors())
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
