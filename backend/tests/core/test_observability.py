"""Structured Logging — JSON formatter output and handler setup."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.api", logging.INFO, __file__, 1, "Goal created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_known_extras():
    out = json.loads(JSONFormatter().format(_record(resource_id="g1", path="/api/goals")))
    assert out["message"] == "Goal created"
    assert out["level"] == "INFO"
    assert out["resource_id"] == "g1"
    assert out["path"] == "/api/goals"


def test_json_formatter_skips_unknown_extras():
    out = json.loads(JSONFormatter().format(_record(secret="x")))
    assert "secret" not in out


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    after_first = len(logging.root.handlers)
    setup_logging("INFO", "text")
    assert len(logging.root.handlers) == after_first
    assert logging.root.level == logging.INFO
