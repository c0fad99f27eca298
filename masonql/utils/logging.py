"""Structured logging helpers built on structlog.

masonQL never calls ``structlog.configure``.  Its loggers wrap the standard
library logger of the same name, so the host application's handlers and
levels decide what is emitted (debug events are silent by default)::

    from masonql.utils.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("statement_executing", sql=sql, arg_count=len(args))
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.KeyValueRenderer(key_order=["event", "logger", "level"]),
]


def get_logger(name: str) -> Any:
    """Return a structlog logger routed through ``logging.getLogger(name)``.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
