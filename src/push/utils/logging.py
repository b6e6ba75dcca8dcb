"""Logging configuration for the Push domain."""

import logging
import os

import structlog


def configure_logging(level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    JSON output is used outside of development and test environments so
    log shippers can index the key/value context.
    """
    level = (level or os.environ.get("PUSH_LOG_LEVEL", "INFO")).upper()
    env = os.environ.get("PROTEAN_ENV", "development")

    logging.basicConfig(format="%(message)s", level=level)

    # Suppress noisy library loggers
    logging.getLogger("protean").setLevel(logging.WARNING)

    renderer = (
        structlog.dev.ConsoleRenderer()
        if env in ("development", "test")
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    return structlog.get_logger(name)
