"""Structured logging configuration using structlog.

The library never configures logging on import; applications call
:func:`setup_logging` or :func:`configure_from_settings` once at startup.
"""

import logging
import sys

import structlog

from selectorkit.config.settings import get_settings


def setup_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """Route selectorkit's structlog events through the stdlib logger."""
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if json_output or not sys.stderr.isatty():
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger("selectorkit").setLevel(level)


def configure_from_settings() -> None:
    """Apply SELECTORKIT_* environment settings to logging."""
    settings = get_settings()
    setup_logging(log_level=settings.log_level, json_output=settings.log_json)
