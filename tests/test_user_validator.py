"""Tests for the HTTP-backed user validator."""

from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from user_order_api.app.core.errors import UserServiceUnavailable
from user_order_api.app.main import create_order_app, create_user_app
from user_order_api.app.services.user_validator import HttpUserValidator


def make_session(status_code=200):
    session = MagicMock(spec=requests.Session)
    session.get.return_value = MagicMock(status_code=status_code)
    return session


class TestHttpUserValidator:
    def test_existing_user(self):
        session = make_session(200)
        validator = HttpUserValidator(base_url="http://users:8080/", session=session)
        assert validator.user_exists("42") is True
        session.get.assert_called_once_with("http://users:8080/users/42", timeout=None)

    @pytest.mark.parametrize("status_code", [404, 500, 301])
    def test_non_success_means_missing(self, status_code):
        validator = HttpUserValidator(base_url="http://users:8080", session=make_session(status_code))
        assert validator.user_exists("42") is False

    def test_id_is_quoted(self):
        session = make_session()
        validator = HttpUserValidator(base_url="http://users:8080", session=session)
        validator.user_exists("a/b c")
        assert session.get.call_args[0][0] == "http://users:8080/users/a%2Fb%20c"

    def test_timeout_passed_through(self):
        session = make_session()
        validator = HttpUserValidator(base_url="http://users:8080", timeout=2.5, session=session)
        validator.user_exists("1")
        assert session.get.call_args[1]["timeout"] == 2.5

    def test_transport_error(self):
        session = make_session()
        session.get.side_effect = requests.ConnectionError("connection refused")
        validator = HttpUserValidator(base_url="http://users:8080", session=session)
        with pytest.raises(UserServiceUnavailable, match="connection refused"):
            validator.user_exists("1")
        assert session.get.call_count == 1

    def test_close_closes_session(self):
        session = make_session()
        HttpUserValidator(base_url="http://users:8080", session=session).close()
        session.close.assert_called_once_with()


class TestAgainstUserService:
    """The order service validating against a live user service app."""

    def test_order_creation_follows_user_store(self, user_store, order_store):
        user_client = TestClient(create_user_app(store=user_store))
        validator = HttpUserValidator(base_url="http://testserver", session=user_client)
        order_client = TestClient(create_order_app(store=order_store, validator=validator))

        order = {"id": "o1", "user_id": "1", "product": "Laptop"}
        assert order_client.post("/orders", json=order).status_code == 400

        user_client.post("/users", json={"id": "1", "name": "A", "email": "a@x.com"})
        assert order_client.post("/orders", json=order).status_code == 201

        # Deleting the user afterwards leaves the order in place.
        user_client.delete("/users/1")
        assert order_client.get("/orders/o1").status_code == 200
