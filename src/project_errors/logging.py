"""Structured logging for the error layer.

Importing this package never touches logging configuration: get_logger()
returns a structlog logger that follows whatever the host application has
configured. Hosts without their own setup can opt in once at startup:

    from project_errors.logging import LoggingSettings, configure_logging

    configure_logging(LoggingSettings())
"""

import logging
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger

# Marks the handler configure_logging() installs, so repeated calls replace it.
_HANDLER_NAME = "project_errors"


def _add_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add ISO 8601 UTC timestamp with timezone offset."""
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


class LoggingSettings(BaseSettings):
    """Logging settings from environment variables."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # JSON lines for production; key=value console output when False.
    log_json: bool = Field(default=True, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def _build_handler(settings: LoggingSettings, pre_chain: list[Any]) -> logging.Handler:
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)
    )
    return handler


def configure_logging(settings: LoggingSettings) -> logging.Handler:
    """Send structlog and stdlib records through one renderer on stdout.

    Opt-in: call once from the application's startup, never from library code.
    Other handlers on the root logger are left in place; a handler installed
    by an earlier call is swapped for the new one. Returns the installed handler.
    """
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    handler = _build_handler(settings, pre_chain)
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())
    return handler


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger bound to ``name`` (typically __name__).

    Example:
        logger = get_logger(__name__)
        logger.warning("project_error", status=404, error_count=1)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
