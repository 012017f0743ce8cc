"""Structured Logging: JSON formatter fields and idempotent setup."""

import json
import logging

import pytest

from status_demo.infrastructure.observability import (
    HANDLER_NAME, JSONFormatter, setup_logging,
)


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _record(**extra):
    record = logging.LogRecord(
        "status_demo.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "status_demo.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(path="/forbidden", status_code=403, media_type="text/xml"),
    ))
    assert log["path"] == "/forbidden"
    assert log["status_code"] == 403
    assert log["media_type"] == "text/xml"
    assert "error_code" not in log


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1
    assert not isinstance(ours[0].formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING
