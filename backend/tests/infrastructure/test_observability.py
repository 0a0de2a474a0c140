"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from participant_api.infrastructure.observability import (
    HANDLER_NAME, JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "participant_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "participant_api.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(email="a@b.com", operation="scan", unrelated="x"),
    ))
    assert log["email"] == "a@b.com"
    assert log["operation"] == "scan"
    assert "unrelated" not in log


def test_json_formatter_surfaces_gate_request_fields():
    log = json.loads(JSONFormatter().format(
        _record(path="/add", method="POST", status_code=401),
    ))
    assert log["path"] == "/add"
    assert log["method"] == "POST"
    assert "status_code" not in log


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    original_level = logging.root.level
    setup_logging("DEBUG", "text")
    setup_logging("DEBUG", "json")
    owned = [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]
    assert len(owned) == 1
    assert len(logging.root.handlers) <= before + 1
    assert logging.root.level == logging.DEBUG
    logging.root.removeHandler(owned[0])
    logging.root.setLevel(original_level)
