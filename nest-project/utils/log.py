"""Shared logging configuration."""

import logging
import os

_ENV_VAR = 'NEST_LOG_LEVEL'
_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'


def _resolve_level(value):
    if isinstance(value, int):
        return value
    for candidate in (value, os.environ.get(_ENV_VAR)):
        if isinstance(candidate, str):
            level = logging.getLevelName(candidate.strip().upper())
            if isinstance(level, int):
                return level
    return logging.WARNING


def configure_logging(level=None):
    resolved = _resolve_level(level)
    root = logging.getLogger()
    if not root.hasHandlers():
        logging.basicConfig(level=resolved, format=_FORMAT)
    else:
        root.setLevel(resolved)


def get_logger(name=None):
    return logging.getLogger(name or 'nest')
