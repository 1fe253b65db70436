"""
Structured logging configuration.

Uses structlog on top of the standard library. JSON output goes through
python-json-logger so every structlog key becomes a top-level JSON field.
"""
import logging
import sys
from typing import Any, Callable, Optional, TextIO

import structlog
from pythonjsonlogger import jsonlogger

from traffic_split.config import Settings, get_settings


def app_context_processor(settings: Settings) -> Callable[..., dict[str, Any]]:
    """
    Build a processor that adds application context to log events.

    Args:
        settings: Settings supplying app_name and app_env

    Returns:
        structlog processor
    """

    def add_app_context(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = settings.app_name
        event_dict["app_env"] = settings.app_env
        return event_dict

    return add_app_context


def setup_logging(settings: Optional[Settings] = None, stream: Optional[TextIO] = None) -> None:
    """
    Configure structured logging.

    Sets up:
    - JSON-formatted logs (or console rendering when log_json is off)
    - Application context on every event
    - Root logger level from settings

    Args:
        settings: Settings to use (default: cached settings)
        stream: Where log lines go (default: stdout)
    """
    settings = settings or get_settings()

    if settings.log_json:
        renderer: Any = structlog.stdlib.render_to_log_kwargs
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(message)s",
            rename_fields={"timestamp": "@timestamp"},
        )
    else:
        renderer = structlog.dev.ConsoleRenderer()
        formatter = logging.Formatter("%(message)s")

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            app_context_processor(settings),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "logging_configured",
        log_level=settings.log_level,
        log_json=settings.log_json,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name

    Returns:
        Any: Structured logger
    """
    return structlog.get_logger(name)
