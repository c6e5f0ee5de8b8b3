"""Tests for the JSON log formatter."""

import json
import logging

from fitness_tracker.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord("fitness_tracker.test", logging.INFO, __file__, 1, "hello", None, None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_entity_ids():
    payload = json.loads(JSONFormatter().format(_record(user_id=3, training_id=7)))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["user_id"] == 3
    assert payload["training_id"] == 7
    assert "statistics_id" not in payload


def test_json_formatter_skips_unknown_extras():
    payload = json.loads(JSONFormatter().format(_record(secret="x")))

    assert "secret" not in payload
