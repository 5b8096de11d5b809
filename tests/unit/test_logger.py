"""
Tests for logging setup.
"""

import logging
import logging.handlers

import pytest

from campus_records.utils.config import Settings
from campus_records.utils.logger import setup_logging


@pytest.fixture
def restore_root_handlers():
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


def test_repeated_setup_does_not_duplicate_handlers(restore_root_handlers):
    settings = Settings(_env_file=None, LOG_DIR="")

    setup_logging(settings)
    setup_logging(settings)

    assert len(logging.getLogger().handlers) == 1


def test_error_log_written_under_log_dir(tmp_path, restore_root_handlers):
    settings = Settings(_env_file=None, LOG_DIR=str(tmp_path / "logs"), LOG_LEVEL="debug")

    setup_logging(settings)

    root_logger = logging.getLogger()
    file_handlers = [
        h for h in root_logger.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.ERROR
    assert root_logger.level == logging.DEBUG
    assert (tmp_path / "logs").is_dir()
