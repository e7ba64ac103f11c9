"""
Logging configuration
"""
import logging
import sys
from typing import Optional

import structlog

_configured_level: Optional[int] = None


def configure_logging(level: str = "INFO") -> None:
    """
    Configure stdlib logging and structlog for the whole process.

    Safe to call more than once; the last call wins.
    """
    global _configured_level

    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False
    )
    _configured_level = log_level


def setup_logger(name: Optional[str] = None, level: Optional[str] = None) -> structlog.BoundLogger:
    """
    Get a structured logger, configuring logging on first use.

    Args:
        name: Logger name (usually ``__name__``)
        level: Optional level override; reconfigures the process when given
    """
    if level is not None or _configured_level is None:
        configure_logging(level or "INFO")

    return structlog.get_logger(name)
