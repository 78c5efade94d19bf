"""Check log level resolution and handler setup for emitter loggers."""

import logging
import sys
import os

# Ensure project root is in path
root_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)

import pytest

from emitter.logger import LEVEL_ENV, get_level, get_logger


@pytest.mark.parametrize("value, expected", [
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    (" error ", logging.ERROR),
    ("", logging.INFO),
    ("chatty", logging.INFO),
])
def test_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv(LEVEL_ENV, value)
    assert get_level() == expected


def test_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv(LEVEL_ENV, raising=False)
    assert get_level() == logging.INFO
    assert get_level(logging.WARNING) == logging.WARNING


def test_get_logger_installs_single_handler(monkeypatch):
    monkeypatch.setenv(LEVEL_ENV, "DEBUG")
    logger = get_logger("emitter.test_logger")
    again = get_logger("emitter.test_logger")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_get_logger_keeps_level_set_after_setup(monkeypatch):
    monkeypatch.delenv(LEVEL_ENV, raising=False)
    logger = get_logger("emitter.test_logger_level")
    assert logger.level == logging.INFO

    logger.setLevel(logging.WARNING)
    monkeypatch.setenv(LEVEL_ENV, "DEBUG")
    assert get_logger("emitter.test_logger_level").level == logging.WARNING
