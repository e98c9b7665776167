"""Tests for application construction, seeding and settings."""

import logging

import pytest
from fastapi.testclient import TestClient
from uvicorn.config import LOG_LEVELS

from user_order_api.app.core import config
from user_order_api.app.core.errors import _format_error
from user_order_api.app.core.logging_config import resolve_log_level, setup_logging
from user_order_api.app.core.seed import SEED_ORDERS, SEED_USERS, seed_orders, seed_users
from user_order_api.app.core.store import OrderStore, UserStore
from user_order_api.app.main import create_order_app, create_user_app


class TestSeeding:
    def test_seed_users(self):
        store = UserStore()
        seed_users(store)
        assert set(store.get_all()) == set(SEED_USERS)
        assert store.get("1").name == "John Doe"

    def test_seed_orders(self):
        store = OrderStore()
        seed_orders(store)
        assert {order.user_id for order in store.get_all()} == {"1", "2"}
        assert len(store) == len(SEED_ORDERS)

    def test_default_user_app_is_seeded(self, monkeypatch):
        monkeypatch.setattr(config.settings, "seed_data", True)
        client = TestClient(create_user_app())
        assert client.get("/users/2").json() == {
            "id": "2",
            "name": "Jane Smith",
            "email": "jane@example.com",
        }

    def test_seeding_can_be_disabled(self, monkeypatch, validator):
        monkeypatch.setattr(config.settings, "seed_data", False)
        assert TestClient(create_user_app()).get("/users").json() == []
        assert TestClient(create_order_app(validator=validator)).get("/orders").json() == []


class TestAppIsolation:
    def test_apps_do_not_share_stores(self):
        first = TestClient(create_user_app(store=UserStore()))
        second = TestClient(create_user_app(store=UserStore()))
        first.post("/users", json={"id": "1", "name": "A", "email": "a@x.com"})
        assert second.get("/users/1").status_code == 404


class TestSettings:
    def test_optional_float_unset(self, monkeypatch):
        monkeypatch.delenv("USER_SERVICE_TIMEOUT", raising=False)
        assert config._env_optional_float("USER_SERVICE_TIMEOUT") is None

    def test_optional_float(self, monkeypatch):
        monkeypatch.setenv("USER_SERVICE_TIMEOUT", "1.5")
        assert config._env_optional_float("USER_SERVICE_TIMEOUT") == 1.5

    def test_flag(self, monkeypatch):
        monkeypatch.setenv("SEED_DATA", "no")
        assert config._env_flag("SEED_DATA", "true") is False
        monkeypatch.setenv("SEED_DATA", "TRUE")
        assert config._env_flag("SEED_DATA", "true") is True


class TestErrorFormatting:
    def test_location_and_cause(self):
        error = {"loc": ("body", 5), "msg": "JSON decode error", "ctx": {"error": "Expecting value"}}
        assert _format_error(error) == "5: JSON decode error: Expecting value"

    def test_body_only_location(self):
        assert _format_error({"loc": ("body",), "msg": "Field required"}) == "Field required"

    def test_field_location(self):
        error = {"loc": ("body", "name"), "msg": "Input should be a valid string"}
        assert _format_error(error) == "name: Input should be a valid string"


class TestLogging:
    def test_setup_logging_is_idempotent(self):
        root = logging.getLogger()
        before = list(root.handlers)
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        if before:
            assert root.handlers == before
        else:
            assert len(root.handlers) == 1


class TestLogLevel:
    @pytest.mark.parametrize(
        "level, expected",
        [("debug", "DEBUG"), ("Info", "INFO"), ("warn", "WARNING"), ("verbose", "INFO"), ("", "INFO")],
    )
    def test_resolve_log_level(self, level, expected):
        assert resolve_log_level(level) == expected

    @pytest.mark.parametrize("level", ["verbose", "trace", "NOTSET", "critical"])
    def test_resolved_level_is_known_to_uvicorn(self, level):
        assert resolve_log_level(level).lower() in LOG_LEVELS
