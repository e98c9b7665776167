"""
Permissive cross-origin middleware.

Every response, errors included, carries the same allow-all CORS
headers whether or not the request sent an ``Origin``.  Preflight
``OPTIONS`` requests never reach the router: they are answered here
with an empty ``200``.
"""

from typing import Awaitable, Callable

from fastapi import Request, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


async def cors_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
