"""
Application factories for the user and order services.

This module assembles the two FastAPI applications, sets up logging,
installs the CORS middleware and the request-body error handler, and
attaches each application's store and service to ``app.state``.  The
factories accept their collaborators so tests can pass empty stores or
fake validators; called without arguments they build (and optionally
seed) fresh stores.

Both applications are also instantiated at import time so they can be
run with uvicorn directly, e.g.::

    uvicorn user_order_api.app.main:user_app --port 8080
    uvicorn user_order_api.app.main:order_app --port 8081
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import order_router, user_router
from .core.config import settings
from .core.cors import cors_middleware
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.seed import seed_orders, seed_users
from .core.store import OrderStore, UserStore
from .services.order_service import OrderService
from .services.user_service import UserService
from .services.user_validator import HttpUserValidator, UserValidator

logger = logging.getLogger(__name__)

USER_SERVICE_NAME = "user-service"
ORDER_SERVICE_NAME = "order-service"


def _build_app(service_name: str) -> FastAPI:
    """Create the parts both services share."""
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=f"{settings.project_name}: {service_name}", version=settings.api_version)
    app.state.service_name = service_name
    app.middleware("http")(cors_middleware)
    register_exception_handlers(app)
    return app


def create_user_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure the user service.

    Parameters
    ----------
    store : Optional[UserStore]
        Store to serve.  If omitted, a new store is created and, unless
        ``SEED_DATA`` is disabled, filled with sample users.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    if store is None:
        store = UserStore()
        if settings.seed_data:
            seed_users(store)

    app = _build_app(USER_SERVICE_NAME)
    app.state.user_service = UserService(store)
    app.include_router(user_router)
    logger.info("Built %s with %d users", USER_SERVICE_NAME, len(store))
    return app


def create_order_app(
    store: Optional[OrderStore] = None,
    validator: Optional[UserValidator] = None,
) -> FastAPI:
    """Create and configure the order service.

    Parameters
    ----------
    store : Optional[OrderStore]
        Store to serve.  If omitted, a new store is created and, unless
        ``SEED_DATA`` is disabled, filled with sample orders.
    validator : Optional[UserValidator]
        How to check that an order's user exists.  Defaults to an
        :class:`HttpUserValidator` pointed at ``USER_SERVICE_URL``,
        which is closed when the application shuts down.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    if store is None:
        store = OrderStore()
        if settings.seed_data:
            seed_orders(store)

    owns_validator = validator is None
    if validator is None:
        validator = HttpUserValidator(
            base_url=settings.user_service_url,
            timeout=settings.user_service_timeout,
        )

    app = _build_app(ORDER_SERVICE_NAME)
    app.state.order_service = OrderService(store, validator)
    app.include_router(order_router)

    if owns_validator:
        @app.on_event("shutdown")
        def close_validator() -> None:
            validator.close()

    logger.info(
        "Built %s with %d orders, validating users against %s",
        ORDER_SERVICE_NAME,
        len(store),
        settings.user_service_url,
    )
    return app


# Create the application instances at import time so that tools such as
# uvicorn can discover them without calling the factories manually.
user_app = create_user_app()
order_app = create_order_app()
