"""Logging configuration for Expenso.

``configure_logging()`` attaches one ``StreamHandler`` to the ``expenso``
logger and is called by the Streamlit entrypoint. Other modules only call
``get_logger("expenso.<module>")``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

_PKG_LOGGER_NAME = "expenso"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _parse_level(level: str) -> int:
    numeric = getattr(logging, str(level).strip().upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(level: str = "INFO", stream: IO[str] = sys.stderr) -> None:
    """Configure the ``expenso`` logger once; Streamlit reruns call this again."""

    global _CONFIGURED
    if _CONFIGURED:
        return

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT))

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    logger.setLevel(_parse_level(level))
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
