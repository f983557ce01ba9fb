"""
presenter_kit - Escaping presenters for server-side views.
Follows onion architecture pattern.

Structure:
- core: Domain models, errors and configuration
- application: Presenter and the escaper interface
- infrastructure: HTML escaping built on markupsafe
- presentation: User interface (CLI)
"""

from .application import Presenter, Escaper, autoescape
from .infrastructure import HtmlEscaper
from .core import PresenterError, InvalidSubjectError, NoSuchAttributeError, ConfigurationError

__version__ = "0.1.0"

__all__ = [
    "Presenter",
    "Escaper",
    "autoescape",
    "HtmlEscaper",
    "PresenterError",
    "InvalidSubjectError",
    "NoSuchAttributeError",
    "ConfigurationError",
]
