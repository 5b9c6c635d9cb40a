"""Centralized structlog configuration for the fan hub API.

All logs are emitted as JSON lines on stdout with service and environment
context so they can be filtered after aggregation.
"""

from __future__ import annotations

import logging
import sys

import structlog

SERVICE_NAME = "fanhub-api"


def _normalize_log_level(level: str | None, environment: str) -> int:
    env = environment.lower()
    if level:
        normalized = level.strip().upper()
    else:
        normalized = "INFO" if env == "production" else "DEBUG"
    return logging._nameToLevel.get(normalized, logging.INFO)


def configure_logging(environment: str, log_level: str | None = None) -> None:
    """Configure structlog (and the stdlib root logger) for JSON output."""
    resolved_level = _normalize_log_level(log_level, environment)
    logging.basicConfig(level=resolved_level, stream=sys.stdout, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.EventRenamer("message"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.bind_contextvars(service=SERVICE_NAME, environment=environment)


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name).bind(logger=name)
