"""
Centralized logging configuration.

Handlers live on the top-level application loggers ('docmorph', 'api');
module loggers obtained with get_logger(__name__) are their children and
inherit the handlers, so each record is emitted once.
"""
import logging
import logging.handlers
from pathlib import Path
from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)

APP_LOGGERS = ('docmorph', 'api')


def setup_logger(name: str = None) -> logging.Logger:
    """
    Get or create a logger with console and rotating file handlers.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger('docmorph')
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'docmorph'.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'docmorph')

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler at the configured level
    console = logging.StreamHandler()
    console.setLevel(getattr(logging, LOG_LEVEL))
    console.setFormatter(formatter)
    logger.addHandler(console)

    # Rotating file handler keeps DEBUG detail (render/encode traces)
    Path(LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        LOG_FILE,
        maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8',
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Logger for a module.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    name = name or 'docmorph'
    top_level = name.split('.', 1)[0]
    if top_level in APP_LOGGERS:
        setup_logger(top_level)
        return logging.getLogger(name)
    return setup_logger(name)


# Package logger for quick imports
# Usage: from config.logging_config import logger
logger = setup_logger('docmorph')
