"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from userapi.core.logger import JSONFormatter, configure_logging, new_request_id


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        # Act
        configure_logging("DEBUG")

        # Assert
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_json_formatter_includes_request_fields() -> None:
    """Request metadata passed via ``extra`` ends up in the JSON payload."""

    record = logging.LogRecord("userapi.client", logging.INFO, __file__, 1, "%s %s", ("GET", "/users"), None)
    record.request_id = "abc"
    record.status = 200
    record.elapsed_ms = 1.5

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "GET /users"
    assert payload["request_id"] == "abc"
    assert payload["status"] == 200
    assert payload["elapsed_ms"] == 1.5
    assert "method" not in payload


def test_new_request_id_is_unique() -> None:
    assert new_request_id() != new_request_id()
