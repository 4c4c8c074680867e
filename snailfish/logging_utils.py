"""
Logger setup shared by the library and the CLIs.

Library modules call get_logger(__name__) and only emit DEBUG records;
the CLIs call setup_logger() once to attach handlers on the package
logger. Records go to stderr so stdout carries results only.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

PACKAGE_LOGGER = "snailfish"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_loggers: Dict[str, logging.Logger] = {}


def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_file: Optional[str] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """
    Configure a named logger with a stderr handler and an optional file handler.

    Calling it again for the same name only updates the level.
    """
    if name in _loggers:
        logger = _loggers[name]
        logger.setLevel(level)
        return logger

    logger = logging.getLogger(name)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _loggers[name] = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; handlers live on the package logger."""
    return logging.getLogger(name)
