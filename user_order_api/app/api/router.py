"""
Top-level routers, one per service.

Both services expose ``/health``; each then mounts its own resource.
There is no version prefix: resources live directly under ``/users``
and ``/orders``.
"""

from fastapi import APIRouter

from .endpoints import health, orders, users

user_router = APIRouter()
user_router.include_router(health.router, tags=["health"])
user_router.include_router(users.router, prefix="/users", tags=["users"])

order_router = APIRouter()
order_router.include_router(health.router, tags=["health"])
order_router.include_router(orders.router, prefix="/orders", tags=["orders"])
