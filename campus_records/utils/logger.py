"""
Logging setup for the Campus Records service.

Configures the root logger once per process start:
- Stream handler to stdout for console output
- Rotating error log file when a log directory is configured
- SQLAlchemy engine logging tied to the DEBUG setting
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from campus_records.utils.config import Settings, get_settings

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure global logging for the application.

    Existing root handlers are removed first so repeated calls (reloads,
    test apps) do not duplicate output.

    Args:
        settings: Application settings. Defaults to the cached settings.

    Returns:
        logging.Logger: The application logger
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    standard_formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else log_level)
    root_logger.addHandler(console_handler)

    if settings.LOG_DIR:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        error_file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "error.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        error_file_handler.setLevel(logging.ERROR)
        error_file_handler.setFormatter(
            logging.Formatter(VERBOSE_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )
        root_logger.addHandler(error_file_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )

    logger = logging.getLogger('campus_records')
    logger.info(f"Logging initialized with level {logging.getLevelName(log_level)}")
    return logger
