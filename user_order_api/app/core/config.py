"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so both
services start without any configuration: the user service listens on
``8080`` and the order service on ``8081``, validating user references
against ``http://localhost:8080``.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_optional_float(name: str) -> Optional[float]:
    value = os.getenv(name, "")
    return float(value) if value else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User/Order Record Services")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file in addition to the console handler.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    user_service_port: int = int(os.getenv("USER_SERVICE_PORT", "8080"))
    order_service_port: int = int(os.getenv("ORDER_SERVICE_PORT", "8081"))

    # Base URL the order service uses to check that a referenced user
    # exists.  The lookup is a single ``GET /users/{id}`` with no retry.
    user_service_url: str = os.getenv("USER_SERVICE_URL", "http://localhost:8080")

    # Seconds to wait for the user service.  Unset means the HTTP
    # client default, which is to wait indefinitely.
    user_service_timeout: Optional[float] = _env_optional_float("USER_SERVICE_TIMEOUT")

    # Populate the stores with sample records when the apps are built.
    seed_data: bool = _env_flag("SEED_DATA", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
