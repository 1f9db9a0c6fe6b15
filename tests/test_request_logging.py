from unittest.mock import MagicMock

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from txintent.logging_config import add_toolkit_name
from txintent.middleware import RequestLoggingMiddleware
from txintent.middleware import logging_middleware
from txintent.middleware.logging_middleware import action_name_from_path


@pytest.fixture
def http_logger(monkeypatch):
    mock_logger = MagicMock()
    monkeypatch.setattr(logging_middleware, "logger", mock_logger)
    return mock_logger


@pytest.fixture
def client():
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.post("/actions/{name}")
    async def invoke(name: str):
        return structlog.contextvars.get_contextvars()

    @app.get("/healthz")
    async def healthz():
        return structlog.contextvars.get_contextvars()

    return TestClient(app)


def test_action_name_from_path():
    assert action_name_from_path("/actions/mint") == "mint"
    assert action_name_from_path("/actions/swap/") == "swap"
    assert action_name_from_path("/actions") is None
    assert action_name_from_path("/healthz") is None


def test_action_request_binds_action_and_id(client, http_logger):
    response = client.post("/actions/mint", headers={"x-action-id": "42", "x-request-id": "req-1"})

    bound = response.json()
    assert bound == {"request_id": "req-1", "action": "mint", "action_id": "42"}
    assert response.headers["x-request-id"] == "req-1"

    event, = http_logger.info.call_args[0]
    fields = http_logger.info.call_args[1]
    assert event == "action_request"
    assert fields["action"] == "mint"
    assert fields["action_id"] == "42"
    assert fields["status"] == 200


def test_other_paths_log_plain_http_request(client, http_logger):
    response = client.get("/healthz")

    assert "action" not in response.json()
    event, = http_logger.info.call_args[0]
    assert event == "http_request"
    assert "action" not in http_logger.info.call_args[1]


def test_client_errors_log_as_warning(client, http_logger):
    client.get("/missing")

    http_logger.info.assert_not_called()
    assert http_logger.warning.call_args[1]["status"] == 404


def test_toolkit_name_processor():
    processor = add_toolkit_name("txintent")

    assert processor(None, "info", {"event": "x"}) == {"event": "x", "toolkit": "txintent"}
    assert processor(None, "info", {"event": "x", "toolkit": "other"})["toolkit"] == "other"
