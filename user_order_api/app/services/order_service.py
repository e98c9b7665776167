"""
Business logic for orders.

Mirrors ``UserService`` for the order store.  The one difference is
creation: before an order is stored, its ``user_id`` is checked with the
configured :class:`~user_order_api.app.services.user_validator.UserValidator`.
Updates are not re-validated, and orders are never revisited when users
are deleted.
"""

import logging
from typing import List, Optional

from ..core.errors import UnknownUserError
from ..core.store import OrderStore
from ..schemas.order import Order, OrderCreate, OrderUpdate
from .user_validator import UserValidator

logger = logging.getLogger(__name__)


class OrderService:
    """Service for managing order records held in an :class:`OrderStore`."""

    def __init__(self, store: OrderStore, validator: UserValidator) -> None:
        self.store = store
        self.validator = validator

    def create_order(self, data: OrderCreate) -> Order:
        """Validate the referenced user, then store the order.

        Raises :class:`UnknownUserError` if the user does not exist.
        :class:`UserServiceUnavailable` from the validator propagates
        unchanged.  Nothing is stored in either case.
        """
        if not self.validator.user_exists(data.user_id):
            logger.warning("Rejected order %s: unknown user %s", data.id, data.user_id)
            raise UnknownUserError(data.user_id)
        order = Order(**data.model_dump())
        self.store.create(order)
        logger.info("Stored order %s for user %s", order.id, order.user_id)
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        order = self.store.get(order_id)
        if order is None:
            logger.debug("Order %s not found", order_id)
        return order

    def list_orders(self) -> List[Order]:
        return self.store.get_all()

    def update_order(self, order_id: str, data: OrderUpdate) -> Optional[Order]:
        """Replace all fields of an existing order, or return ``None``."""
        order = Order(**data.model_dump(exclude={"id"}), id=order_id)
        if not self.store.update(order):
            logger.debug("Cannot update missing order %s", order_id)
            return None
        logger.info("Updated order %s", order_id)
        return order

    def delete_order(self, order_id: str) -> bool:
        deleted = self.store.delete(order_id)
        if deleted:
            logger.info("Deleted order %s", order_id)
        return deleted
