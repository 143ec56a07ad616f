"""Logging setup for the shipment tracker.

Records go to stderr only; the console owns stdout. Production and staging
render one JSON object per line, every other environment a plain key=value
line.
"""

import logging
import os
import sys
from typing import Any

import structlog

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_JSON_ENVS = {"production", "staging"}


def _environment() -> str:
    return (os.getenv("SHIPPING_ENV") or os.getenv("ENVIRONMENT") or "development").lower()


def get_log_level() -> str:
    """LOG_LEVEL if set, otherwise the level mapped from SHIPPING_ENV / ENVIRONMENT."""
    return os.getenv("LOG_LEVEL", _LEVELS_BY_ENV.get(_environment(), "INFO")).upper()


def _install_stderr_handler(log_level: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)


def _renderer() -> Any:
    if _environment() in _JSON_ENVS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(log_level: str | None = None) -> None:
    """Route structlog through the stdlib root logger at the resolved level."""
    _install_stderr_handler((log_level or get_log_level()).upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind values to every record logged from the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
