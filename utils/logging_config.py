"""Structured logging setup."""

import logging
import sys
from typing import Optional

import structlog

from config.settings import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog with JSON output on stderr.

    The library itself only calls ``structlog.get_logger``; applications
    call this once at start-up.

    Args:
        level: Log level name. Defaults to ``Settings.log_level``.
    """
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name, logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
