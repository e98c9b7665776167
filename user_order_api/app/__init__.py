"""
Application package initializer.

This package contains the two services and everything they share: the
record store and its lock (``core``), request and record schemas
(``schemas``), the service layer (``services``) and the HTTP routes
(``api``).  ``main`` builds the FastAPI applications.
"""

from .main import order_app, user_app  # noqa: F401
