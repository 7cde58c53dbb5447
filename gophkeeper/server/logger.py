"""Structured JSON logger for the server."""

from __future__ import annotations

import json
import logging
import sys

from gophkeeper.server.config import LoggerConfig

LOGGER_NAME = "gophkeeper.server"

_LEVELS = {
    "": logging.INFO,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "dpanic": logging.CRITICAL,
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}

_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": _NAMES.get(record.levelno, record.levelname.lower()),
            "ts": record.created,
            "caller": f"{record.module}:{record.lineno}",
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["stacktrace"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _parse_level(text: str) -> int:
    key = text if text in _LEVELS else text.lower() if text.isupper() else None
    if key is None or key not in _LEVELS:
        raise ValueError(f'unrecognized level: "{text}"')
    return _LEVELS[key]


def new_logger(config: LoggerConfig) -> logging.Logger:
    """Create the server logger writing JSON lines to stderr at the configured level."""
    level = _parse_level(config.log_level)
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger