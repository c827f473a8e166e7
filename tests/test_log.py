"""Tests for the JSON log formatter."""
import json
import sys
import logging

from log import JSONFormatter, get_logger


def _record(msg, exc_info=None, **extra):
    record = logging.LogRecord("polyglot.test", logging.WARNING, __file__, 1, msg, None, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_extra_fields_are_included():
    line = JSONFormatter().format(_record("Language resolved", component="resolver", method="agreement",
                                          language="English", unrelated="dropped"))
    entry = json.loads(line)
    assert entry["msg"] == "Language resolved"
    assert entry["level"] == "warning"
    assert entry["component"] == "resolver"
    assert entry["method"] == "agreement"
    assert entry["language"] == "English"
    assert "unrelated" not in entry


def test_exception_details():
    try:
        raise TimeoutError("detector slow")
    except TimeoutError:
        line = JSONFormatter().format(_record("failed", exc_info=sys.exc_info()))
    entry = json.loads(line)
    assert entry["error"] == "detector slow"
    assert entry["error_type"] == "TimeoutError"


def test_get_logger_is_idempotent():
    first = get_logger("polyglot.test-idempotent")
    second = get_logger("polyglot.test-idempotent")
    assert first is second
    assert len(first.handlers) == 1
    assert first.propagate is False
