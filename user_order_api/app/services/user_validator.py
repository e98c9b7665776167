"""
Checking user references against the user service.

The order service only needs one question answered: does a user with a
given id exist?  ``UserValidator`` is that capability.
``HttpUserValidator`` answers it by calling ``GET /users/{id}`` on the
user service with the ``requests`` library; tests substitute their own
implementation instead of starting a second server.

The lookup is a single call.  It is not retried, and unless a timeout is
configured it waits as long as the HTTP client does.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import quote

import requests

from ..core.errors import UserServiceUnavailable

logger = logging.getLogger(__name__)


class UserValidator(ABC):
    """Answers whether a user id refers to an existing user."""

    @abstractmethod
    def user_exists(self, user_id: str) -> bool:
        """Return ``True`` if the user exists, ``False`` if it does not.

        Raises :class:`UserServiceUnavailable` when the answer cannot be
        obtained.
        """

    def close(self) -> None:
        """Release any resources held by the validator."""


class HttpUserValidator(UserValidator):
    """Validator backed by the user service's get-by-id endpoint.

    Any ``2xx`` answer means the user exists; every other status means
    it does not.  Connection errors and timeouts raise
    :class:`UserServiceUnavailable`.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the validator.

        Args:
            base_url: Base URL of the user service, e.g.
                ``http://localhost:8080``.
            timeout: Optional timeout in seconds for the lookup.  ``None``
                keeps the ``requests`` default of no timeout.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def user_exists(self, user_id: str) -> bool:
        url = f"{self.base_url}/users/{quote(user_id, safe='')}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("User service lookup %s failed: %s", url, exc)
            raise UserServiceUnavailable(str(exc)) from exc
        exists = 200 <= response.status_code < 300
        logger.debug("User service answered %s for user %s", response.status_code, user_id)
        return exists

    def close(self) -> None:
        self.session.close()
