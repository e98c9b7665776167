"""
Business logic for users.

``UserService`` wraps the user store: each method performs exactly one
store call and logs mutations.  Creating a user with an existing id
replaces that user; there is no separate "already exists" outcome.
"""

import logging
from typing import List, Optional

from ..core.store import UserStore
from ..schemas.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing user records held in a :class:`UserStore`."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def create_user(self, data: UserCreate) -> User:
        """Store a user under ``data.id`` and return the stored record."""
        user = User(**data.model_dump())
        self.store.create(user)
        logger.info("Stored user %s", user.id)
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        user = self.store.get(user_id)
        if user is None:
            logger.debug("User %s not found", user_id)
        return user

    def list_users(self) -> List[User]:
        return self.store.get_all()

    def update_user(self, user_id: str, data: UserUpdate) -> Optional[User]:
        """Replace all fields of an existing user.

        The body ``id`` is discarded in favour of ``user_id``.  Returns
        ``None`` if the user does not exist, in which case nothing is
        inserted.
        """
        user = User(**data.model_dump(exclude={"id"}), id=user_id)
        if not self.store.update(user):
            logger.debug("Cannot update missing user %s", user_id)
            return None
        logger.info("Updated user %s", user_id)
        return user

    def delete_user(self, user_id: str) -> bool:
        """Delete a user by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        deleted = self.store.delete(user_id)
        if deleted:
            logger.info("Deleted user %s", user_id)
        return deleted
