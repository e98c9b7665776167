"""Shared fixtures: fresh stores, fake validators and test clients."""

from typing import Iterable, List

import pytest
from fastapi.testclient import TestClient

from user_order_api.app.core.errors import UserServiceUnavailable
from user_order_api.app.core.store import OrderStore, UserStore
from user_order_api.app.main import create_order_app, create_user_app
from user_order_api.app.services.user_validator import UserValidator


class FakeUserValidator(UserValidator):
    """Knows a fixed set of user ids and records every lookup."""

    def __init__(self, known_ids: Iterable[str] = ()) -> None:
        self.known_ids = set(known_ids)
        self.calls: List[str] = []

    def user_exists(self, user_id: str) -> bool:
        self.calls.append(user_id)
        return user_id in self.known_ids


class UnreachableUserValidator(UserValidator):
    def __init__(self) -> None:
        self.calls: List[str] = []

    def user_exists(self, user_id: str) -> bool:
        self.calls.append(user_id)
        raise UserServiceUnavailable("connection refused")


@pytest.fixture
def user_store():
    return UserStore()


@pytest.fixture
def order_store():
    return OrderStore()


@pytest.fixture
def validator():
    return FakeUserValidator(known_ids={"1", "2"})


@pytest.fixture
def user_client(user_store):
    return TestClient(create_user_app(store=user_store))


@pytest.fixture
def order_client(order_store, validator):
    return TestClient(create_order_app(store=order_store, validator=validator))


@pytest.fixture
def unreachable_validator():
    return UnreachableUserValidator()
