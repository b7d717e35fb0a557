"""Tests for the opt-in logging setup."""

import importlib
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from project_errors import logging as error_logging
from project_errors.logging import LoggingSettings, configure_logging, get_logger


@pytest.fixture
def host_logging() -> Iterator[logging.Handler]:
    """A host application's own root handler; everything is restored afterwards."""
    root = logging.getLogger()
    handlers_before, level_before = list(root.handlers), root.level
    host_handler = logging.NullHandler()
    root.addHandler(host_handler)
    root.setLevel(logging.WARNING)

    yield host_handler

    for handler in list(root.handlers):
        if handler not in handlers_before:
            root.removeHandler(handler)
    root.setLevel(level_before)
    structlog.reset_defaults()


def test_import_leaves_host_logging_alone(host_logging: logging.Handler) -> None:
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    structlog_before = structlog.get_config()

    importlib.reload(error_logging)
    error_logging.get_logger("project_errors.tests").info("imported")

    assert root.handlers == handlers_before
    assert root.level == logging.WARNING
    assert structlog.get_config() == structlog_before


def test_configure_logging_keeps_host_handlers(host_logging: logging.Handler) -> None:
    root = logging.getLogger()

    configure_logging(LoggingSettings(LOG_LEVEL="debug", LOG_JSON=True))
    configure_logging(LoggingSettings(LOG_LEVEL="debug", LOG_JSON=True))

    assert host_logging in root.handlers
    installed = [h for h in root.handlers if h.get_name() == "project_errors"]
    assert len(installed) == 1
    assert root.level == logging.DEBUG


def test_configure_logging_renders_json_lines(
    host_logging: logging.Handler, capsys: pytest.CaptureFixture[str]
) -> None:
    configure_logging(LoggingSettings(LOG_LEVEL="INFO", LOG_JSON=True))

    get_logger("project_errors.tests").warning("project_error", status=404)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["event"] == "project_error"
    assert payload["status"] == 404
    assert payload["level"] == "warning"
    assert "timestamp" in payload
