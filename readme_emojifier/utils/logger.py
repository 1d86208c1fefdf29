"""Centralized loguru setup for the emojifier."""

from __future__ import annotations

import os
import sys
from typing import Optional

from loguru import logger

_LOG_LEVEL = os.getenv("EMOJIFIER_LOG_LEVEL", "INFO").upper()
_LOG_FILE = os.getenv("EMOJIFIER_LOG_FILE")
_LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def configure_logger(extra_sink: Optional[str] = None, level: str = _LOG_LEVEL) -> None:
    """Replace loguru's default handler with the emojifier's sinks."""

    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT, colorize=True, enqueue=True)

    if extra_sink:
        logger.add(extra_sink, level=level, rotation="1 week", retention=4, enqueue=True)


configure_logger(extra_sink=_LOG_FILE)

__all__ = ["logger", "configure_logger"]
