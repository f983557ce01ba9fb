"""
Logging configuration for presenter_kit.
Configures logging to file only, not to stdout/stderr.
"""

import logging
import logging.handlers
from pathlib import Path
from presenter_kit.core.config import settings


def configure_logging() -> Path:
    """
    Configure logging to write to a file only.
    All logs go to a file, stdout is quiet.
    """
    logs_dir = Path(settings.log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Remove any existing handlers to avoid duplicates
    logger = logging.getLogger()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    logger.setLevel(settings.log_level.upper())

    log_file = logs_dir / settings.log_file
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
    )
    file_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(formatter)

    logger.addHandler(file_handler)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance configured for file-only output.
    """
    return logging.getLogger(name)
