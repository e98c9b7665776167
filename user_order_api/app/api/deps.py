"""
FastAPI dependencies resolving per-application collaborators.

Services are attached to ``app.state`` when an application is built, so
two applications in one process (or in one test session) never share a
store.

Request bodies are decoded by ``json_body`` rather than by FastAPI's own
body parameters: the raw bytes are always parsed as JSON, whatever
``Content-Type`` the client sent.
"""

from typing import Awaitable, Callable, Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from ..services.order_service import OrderService
from ..services.user_service import UserService

BodyT = TypeVar("BodyT", bound=BaseModel)


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service


def json_body(model: Type[BodyT]) -> Callable[[Request], Awaitable[BodyT]]:
    """Build a dependency that decodes the request body into ``model``.

    A JSON ``null`` body yields a model with every field at its default.
    Anything that is not valid JSON for ``model`` raises
    ``RequestValidationError``, which the application answers with 400.
    """

    async def decode(request: Request) -> BodyT:
        raw = await request.body()
        if raw.strip() == b"null":
            return model()
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors(include_url=False), body=raw) from exc

    return decode
