"""
Top-level package for the user and order record services.

All functionality lives in submodules under ``app``; import the
applications from ``user_order_api.app.main``.
"""

__all__ = []
