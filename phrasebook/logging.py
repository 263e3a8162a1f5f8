"""Structured logging helpers."""

from __future__ import annotations

import logging

import structlog


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Routed through the stdlib "phrasebook" logger so the host's level decides
# what gets emitted; nothing is printed until the host configures a handler.
logger = structlog.wrap_logger(
    logging.getLogger("phrasebook"),
    wrapper_class=structlog.stdlib.BoundLogger,
)

__all__ = ["configure_logging", "logger"]
