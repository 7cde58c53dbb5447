import json
import logging

import pytest

from gophkeeper.server.config import LoggerConfig
from gophkeeper.server.logger import new_logger


@pytest.mark.parametrize(
    "text, level",
    [
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        ("info", logging.INFO),
        ("warn", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("fatal", logging.CRITICAL),
    ],
)
def test_levels_are_parsed(text, level):
    assert new_logger(LoggerConfig(log_level=text)).level == level


def test_unknown_level_raises():
    with pytest.raises(ValueError, match="unrecognized level"):
        new_logger(LoggerConfig(log_level="loud"))


def test_writes_json_lines(capsys):
    logger = new_logger(LoggerConfig(log_level="info"))
    logger.info("started")
    logger.debug("hidden")
    lines = capsys.readouterr().err.strip().splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["msg"] == "started"
    assert entry["level"] == "info"


def test_repeated_creation_does_not_duplicate_output(capsys):
    new_logger(LoggerConfig())
    logger = new_logger(LoggerConfig())
    logger.warning("once")
    lines = capsys.readouterr().err.strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["level"] == "warn"