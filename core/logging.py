"""Логгеры приложения.

Один StreamHandler на логгер, уровень берётся из settings.LOG_LEVEL.
"""
from __future__ import annotations

import logging
import threading

from core.config import settings

_LOCK = threading.Lock()
_FORMAT = "[poems] %(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str = "poems") -> logging.Logger:
    with _LOCK:
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
        if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(handler)
        logger.propagate = False
        return logger


__all__ = ["get_logger"]
