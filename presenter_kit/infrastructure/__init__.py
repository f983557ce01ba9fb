"""
Infrastructure layer - contains implementation details for external collaborators.
Follows onion architecture - provides the HTML escaping used by presenters.
"""

from .html_escaper import (
    HtmlEscaper,
    HtmlMarkup,
    HexHtmlMarkup,
    build_escape_table,
    get_default_escaper,
    APOSTROPHE_ENTITIES,
)

__all__ = [
    "HtmlEscaper",
    "HtmlMarkup",
    "HexHtmlMarkup",
    "build_escape_table",
    "get_default_escaper",
    "APOSTROPHE_ENTITIES",
]
