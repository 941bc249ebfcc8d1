"""structlog setup shared by the CLI and the viewer."""

import logging
import sys

import structlog

from .config import settings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = None, log_format: str = None) -> None:
    """
    Configure structlog and the stdlib root logger it writes through.

    Raises:
        ValueError: If the level is not one of LOG_LEVELS
    """
    level = (level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    log_format = log_format or settings.log_format

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
