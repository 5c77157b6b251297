# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Structured Logging
JSON-formatted logs via structlog. Every binding call that reaches
the native engine leaves one diagnostic line behind.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from pysegnet.config import get_settings


def _add_lib_info(
    logger: Any, method: str, event_dict: EventDict
) -> EventDict:
    """Inject library name into every log entry."""
    event_dict["lib"] = "pysegnet"
    return event_dict


def configure_logging() -> None:
    """
    Configure structlog for JSON output by default and
    human-readable console output at DEBUG level.
    Called once by the host application at startup.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_lib_info,
    ]

    if settings.log_level == "DEBUG":
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True)
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "pysegnet") -> structlog.BoundLogger:
    """
    Return a structlog bound logger.

    Usage:
        log = get_logger(__name__)
        log.info("segnet_loading_builtin", network="aerial-fpv")
    """
    return structlog.get_logger(name)
