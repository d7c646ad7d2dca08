# utils/logger.py
import logging
import os
from dotenv import load_dotenv, find_dotenv

# Load .env before any module-level logger is created
load_dotenv(find_dotenv(usecwd=True))

_configured_loggers = set()


def _env_level():
    level = logging.getLevelName(os.getenv('LOG_LEVEL', 'INFO').strip().upper())
    # Unknown names are reported by load_config; stay at INFO until then
    return level if isinstance(level, int) else logging.INFO


def get_logger(name):
    """Returns a configured logger with a standard format."""
    logger = logging.getLogger(name)
    logger.setLevel(_env_level())

    if not logger.handlers:  # Avoid duplicate handlers
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _configured_loggers.add(name)
    return logger


def set_log_level(level):
    """Apply level to every logger handed out by get_logger."""
    for name in _configured_loggers:
        logging.getLogger(name).setLevel(level)
