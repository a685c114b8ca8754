# /scheduling_db/logging_setup.py

import logging

from .connection import config

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def configure_logging(level=None, log_file=None):
    """
    Attaches one handler to the package logger, using the [logging] section of
    config.ini unless arguments are given. Safe to call more than once.
    """
    section = config['logging'] if config.has_section('logging') else {}
    level = level or section.get('level', 'INFO')
    log_file = log_file or section.get('file')

    logger = logging.getLogger('scheduling_db')
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return logger

    handler = logging.FileHandler(log_file, encoding='utf-8') if log_file else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
