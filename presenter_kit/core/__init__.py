"""
Core layer - contains domain models, errors and configuration.
"""

from .models import FieldPreview
from .errors import (
    PresenterError,
    InvalidSubjectError,
    NoSuchAttributeError,
    ConfigurationError,
)
from .config import settings
from .logging_config import configure_logging, get_logger

__all__ = [
    "FieldPreview",
    "PresenterError",
    "InvalidSubjectError",
    "NoSuchAttributeError",
    "ConfigurationError",
    "settings",
    "configure_logging",
    "get_logger",
]
