"""Sample records loaded into fresh stores at startup."""

import logging

from ..schemas.order import Order
from ..schemas.user import User
from .store import OrderStore, UserStore

logger = logging.getLogger(__name__)

SEED_USERS = (
    User(id="1", name="John Doe", email="john@example.com"),
    User(id="2", name="Jane Smith", email="jane@example.com"),
)

# Seed orders reference the seed users but are not checked against the
# user service, which may not be running yet.
SEED_ORDERS = (
    Order(id="1", user_id="1", product="Laptop", quantity=1, total=999.99),
    Order(id="2", user_id="2", product="Headphones", quantity=2, total=149.98),
)


def seed_users(store: UserStore) -> None:
    for user in SEED_USERS:
        store.create(user)
    logger.info("Seeded %d users", len(SEED_USERS))


def seed_orders(store: OrderStore) -> None:
    for order in SEED_ORDERS:
        store.create(order)
    logger.info("Seeded %d orders", len(SEED_ORDERS))
