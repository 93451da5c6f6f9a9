"""
DocMorph configuration: static constants, logging setup.

Environment-driven settings live in config.settings and are imported
explicitly where needed (instantiating them creates the data directories).
"""
from .constants import *
from .logging_config import APP_LOGGERS, get_logger, logger, setup_logger

__all__ = [
    'APP_LOGGERS',
    'get_logger',
    'logger',
    'setup_logger',
    'DEFAULT_TEMPLATE_ID',
    'DEFAULT_ZOOM',
    'MIN_ZOOM',
    'MAX_ZOOM',
]
