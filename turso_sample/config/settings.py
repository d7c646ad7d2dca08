import logging
import os
from dotenv import load_dotenv, find_dotenv

from turso_sample.errors import ConfigurationError

# Defaults for the sampling run; each can be overridden from the environment
DEFAULT_LOCAL_DB_PATH = './sample.db'
DEFAULT_SOURCE_TABLE = 'tana_links'
DEFAULT_TABLE_PREFIX = 'tana_'
DEFAULT_SAMPLE_LIMIT = 200
DEFAULT_ID_COLUMN = 'id'
DEFAULT_QUOTE_CHARS = '`'
DEFAULT_LOG_LEVEL = 'INFO'

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


def _parse_bool(name, value):
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got '{value}'")


def _parse_limit(value):
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"SAMPLE_LIMIT must be an integer, got '{value}'")
    if limit <= 0:
        raise ConfigurationError(f"SAMPLE_LIMIT must be positive, got {limit}")
    return limit


def load_remote_config():
    """
    Connection settings for the remote database.
    Both DB_URL and DB_TOKEN are required.
    """
    load_dotenv(find_dotenv(usecwd=True))
    config = {
        'url': os.getenv('DB_URL'),
        'auth_token': os.getenv('DB_TOKEN'),
    }

    missing = [
        env_name
        for env_name, key in (('DB_URL', 'url'), ('DB_TOKEN', 'auth_token'))
        if not (config[key] or '').strip()
    ]
    if missing:
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

    return config


def load_sample_config():
    """Settings describing what to sample and where to write it."""
    load_dotenv(find_dotenv(usecwd=True))
    source_table = os.getenv('SOURCE_TABLE', DEFAULT_SOURCE_TABLE).strip()
    if not source_table:
        raise ConfigurationError("SOURCE_TABLE must not be empty")

    id_column = os.getenv('ID_COLUMN', DEFAULT_ID_COLUMN).strip()
    if not id_column:
        raise ConfigurationError("ID_COLUMN must not be empty")

    return {
        'local_db_path': os.getenv('LOCAL_DB_PATH', DEFAULT_LOCAL_DB_PATH),
        'source_table': source_table,
        'table_prefix': os.getenv('TABLE_PREFIX', DEFAULT_TABLE_PREFIX),
        'sample_limit': _parse_limit(os.getenv('SAMPLE_LIMIT', DEFAULT_SAMPLE_LIMIT)),
        'id_column': id_column,
        'quote_chars': os.getenv('QUOTE_CHARS', DEFAULT_QUOTE_CHARS),
        'single_transaction': _parse_bool('SINGLE_TRANSACTION', os.getenv('SINGLE_TRANSACTION', 'false')),
    }


def load_log_level():
    """LOG_LEVEL as a logging level number"""
    load_dotenv(find_dotenv(usecwd=True))
    value = os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"LOG_LEVEL must be a logging level name, got '{value}'")
    return level


def load_config():
    return {
        'remote': load_remote_config(),
        'sample': load_sample_config(),
        'log_level': load_log_level(),
    }
