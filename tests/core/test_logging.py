"""
Tests for the logging setup.
"""

import logging

import pytest
from rich.logging import RichHandler

from battlecore.core.logging import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_installs_rich_handler(restore_root_logger):
    setup_logging(logging.DEBUG)
    assert restore_root_logger.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)


def test_get_logger_returns_named_logger():
    assert get_logger("battlecore.test").name == "battlecore.test"
