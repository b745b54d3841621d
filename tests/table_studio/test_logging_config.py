from __future__ import annotations

import logging

import pytest
from pythonjsonlogger import jsonlogger

from table_studio.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("urllib3").setLevel(logging.NOTSET)


def test_json_format_by_default():
    configure_logging()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, jsonlogger.JsonFormatter)


def test_plain_format_and_no_duplicate_handlers():
    configure_logging("plain")
    configure_logging("plain")

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0].formatter, jsonlogger.JsonFormatter)


def test_environment_is_not_consulted(monkeypatch):
    monkeypatch.setenv("TABLE_STUDIO_LOG_FORMAT", "plain")
    configure_logging("json")

    assert isinstance(logging.getLogger().handlers[0].formatter, jsonlogger.JsonFormatter)


def test_level_is_applied_to_root():
    configure_logging("json", level=logging.WARNING)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING
