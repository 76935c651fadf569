# -*- coding: utf-8 -*-
"""
Logging configuration.

All modules log through children of the "offerdesk" logger. The first
get_logger() call installs a rotating file handler under Config.LOGS_DIR
and a console handler for warnings.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

ROOT_LOGGER_NAME = "offerdesk"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_logger: Optional[logging.Logger] = None


def setup_logger(console_level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        console_level: Threshold for stdout; the log file always gets DEBUG

    Returns:
        The "offerdesk" logger
    """
    global _logger

    # Deferred to keep utils importable from app.config
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        Config.LOGS_DIR / Config.LOG_FILE,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    # Step navigation is logged at INFO, too chatty for the console
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger for a module, configuring the root logger on first use."""
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
