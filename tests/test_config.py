"""Tests for settings validation and error message formatting."""

import pytest

from catalog_service.api.exception_handlers import describe_validation_errors
from catalog_service.config import Settings


def test_defaults():
    settings = Settings(api_port=3000, api_prefix="/api", seed_data=True)
    assert settings.api_port == 3000
    assert settings.api_prefix == "/api"
    assert settings.seed_data is True


@pytest.mark.parametrize("port", [0, 70000])
def test_rejects_bad_port(port):
    with pytest.raises(ValueError, match="API_PORT"):
        Settings(api_port=port)


@pytest.mark.parametrize("prefix", ["api", "/api/"])
def test_rejects_bad_prefix(prefix):
    with pytest.raises(ValueError, match="API_PREFIX"):
        Settings(api_prefix=prefix)


def test_rejects_unknown_log_level():
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings(log_level="LOUD")


def test_custom_prefix_moves_routes():
    from fastapi.testclient import TestClient

    from catalog_service.api.app import create_app

    settings = Settings(api_prefix="/v1", seed_data=False, log_level="WARNING")
    with TestClient(create_app(settings)) as client:
        assert client.get("/v1/users").status_code == 200
        assert client.get("/api/users").status_code == 404


def test_configure_logging_installs_one_handler():
    import logging

    from catalog_service.logging_setup import configure_logging

    root = logging.getLogger()
    before = len(root.handlers)

    configure_logging("DEBUG")
    after_first = len(root.handlers)
    configure_logging("WARNING")

    assert after_first in (before, before + 1)
    assert len(root.handlers) == after_first
    assert root.level == logging.WARNING


class TestDescribeValidationErrors:
    def test_missing_fields_reported_together(self):
        errors = [
            {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
            {"type": "missing", "loc": ("body", "age"), "msg": "Field required"},
        ]
        assert describe_validation_errors(errors) == "Missing required fields: name, age"

    def test_union_member_is_hidden(self):
        errors = [
            {"type": "int_parsing", "loc": ("body", "price", "int"), "msg": "bad int"},
            {"type": "float_parsing", "loc": ("body", "price", "float"), "msg": "bad float"},
        ]
        assert describe_validation_errors(errors) == "Invalid value for price: bad int"

    def test_missing_body(self):
        errors = [{"type": "missing", "loc": ("body",), "msg": "Field required"}]
        assert describe_validation_errors(errors) == "Request body is required"

    def test_empty(self):
        assert describe_validation_errors([]) == "Invalid request"
