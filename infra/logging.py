"""Logging setup with a per-session correlation id.

Every record passing through a handler installed by ``configure_logging`` gets
a ``correlation_id`` attribute so that log lines from one Streamlit session
can be grouped together.
"""

from __future__ import annotations

import logging
import os
import uuid
from contextvars import ContextVar

from core.constants import ENV_LOG_LEVEL

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(correlation_id)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT_LOGGER_NAME = "avgcalc"


def new_correlation_id() -> str:
    return uuid.uuid4().hex[:12]


def get_correlation_id() -> str:
    """Return the current correlation id, generating one lazily."""
    cid = _correlation_id.get()
    if cid is None:
        cid = new_correlation_id()
        _correlation_id.set(cid)
    return cid


def set_correlation_id(cid: str) -> None:
    _correlation_id.set(cid)


class CorrelationIdFilter(logging.Filter):
    """Stamp records with the active correlation id."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id()
        return True


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Install a single stream handler on the application logger.

    Args:
        level: Logging level name or number; falls back to ``LOG_LEVEL`` then INFO

    Returns:
        The configured application root logger
    """
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Avoid stacking handlers on Streamlit reruns
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the application root logger."""
    if name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
