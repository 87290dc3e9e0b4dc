"""
Logging configuration for the FastOTP client.

Uses structlog for structured logging on top of the standard logging module.
Loggers are bound to stdlib loggers under the "fastotp" namespace, so nothing is
emitted until the embedding application (or setup_logging) configures handlers.
"""

import logging
import sys
from typing import List, Optional
import structlog

from fastotp.core.config import settings


def _processors() -> List:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if not settings.DEBUG else structlog.dev.ConsoleRenderer(),
    ]


def setup_logging(level: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Attach a console handler to the package logger and set its level."""

    package_logger = logging.getLogger("fastotp")
    package_logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper()))

    # Idempotent: only one console handler per process
    if not any(getattr(h, "_fastotp_console", False) for h in package_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        console_handler._fastotp_console = True
        package_logger.addHandler(console_handler)

    return get_logger("fastotp")


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance."""
    return structlog.wrap_logger(
        logging.getLogger(name or "fastotp"),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
