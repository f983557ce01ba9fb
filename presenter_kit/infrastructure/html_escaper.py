"""
HTML Escaper - Infrastructure layer.
Escapes presenter output for HTML bodies and attribute values.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from markupsafe import Markup

from presenter_kit.core import settings, ConfigurationError
from presenter_kit.application.interfaces import Escaper


logger = logging.getLogger(__name__)

APOSTROPHE_ENTITIES = ("&apos;", "&#x27;")


def build_escape_table(apostrophe_entity: str) -> Dict[int, str]:
    """Build a str.translate() table for the HTML special characters."""
    if apostrophe_entity not in APOSTROPHE_ENTITIES:
        raise ConfigurationError(
            "apostrophe_entity", apostrophe_entity, " or ".join(APOSTROPHE_ENTITIES))

    return {
        ord("&"): "&amp;",
        ord("<"): "&lt;",
        ord(">"): "&gt;",
        ord('"'): "&quot;",
        ord("'"): apostrophe_entity,
        ord("/"): "&#x2F;",
    }


class HtmlMarkup(Markup):
    """
    Markup escaped with the full entity table.

    Markup runs every operand of +, %, format() and join() through
    cls.escape, so strings combined with an HtmlMarkup get the same
    entities as the value itself.
    """

    __slots__ = ()

    escape_table = build_escape_table("&apos;")

    @classmethod
    def escape(cls, s: Any) -> "HtmlMarkup":
        if isinstance(s, cls):
            return s
        if hasattr(s, "__html__"):
            return cls(s.__html__())
        return cls(str(s).translate(cls.escape_table))


class HexHtmlMarkup(HtmlMarkup):
    """HtmlMarkup writing apostrophes as &#x27;."""

    __slots__ = ()

    escape_table = build_escape_table("&#x27;")


MARKUP_CLASSES = {
    "&apos;": HtmlMarkup,
    "&#x27;": HexHtmlMarkup,
}


class HtmlEscaper(Escaper):
    """Escapes strings, and the strings inside collections, as HTML."""

    def __init__(self, apostrophe_entity: Optional[str] = None):
        self.apostrophe_entity = apostrophe_entity or settings.apostrophe_entity
        build_escape_table(self.apostrophe_entity)
        self.markup_class = MARKUP_CLASSES[self.apostrophe_entity]

    def escape_html(self, text: str) -> HtmlMarkup:
        """Escape a single string. Values already marked safe pass through."""
        return self.markup_class.escape(text)

    def escape(self, value: Any) -> Any:
        """
        Escape a value recursively.

        Strings become escaped Markup, lists/tuples/sets keep their type and
        order, mappings keep their keys and get their values escaped.
        Safe values (anything with __html__) and non-string scalars are
        returned unchanged.
        """
        if hasattr(value, "__html__"):
            return value

        if isinstance(value, str):
            return self.escape_html(value)

        if isinstance(value, list):
            return [self.escape(item) for item in value]

        if isinstance(value, tuple):
            items = [self.escape(item) for item in value]
            # namedtuple constructors take positional fields
            if hasattr(value, "_fields"):
                return type(value)(*items)
            return type(value)(items)

        if isinstance(value, (set, frozenset)):
            return type(value)(self.escape(item) for item in value)

        if isinstance(value, dict):
            # copy() keeps OrderedDict/defaultdict behaviour intact
            escaped = value.copy()
            for key, item in value.items():
                escaped[key] = self.escape(item)
            return escaped

        if isinstance(value, Mapping):
            return {key: self.escape(item) for key, item in value.items()}

        return value

    def raw(self, value: Any) -> Any:
        """Mark a trusted value as safe so escape() leaves it untouched."""
        logger.debug(f"Raw access bypassing escaping for {type(value).__name__} value")
        if isinstance(value, str) and not hasattr(value, "__html__"):
            return self.markup_class(value)
        return value


_default_escapers: Dict[str, HtmlEscaper] = {}


def get_default_escaper() -> HtmlEscaper:
    """Return the escaper matching the current settings."""
    entity = settings.apostrophe_entity
    if entity not in _default_escapers:
        _default_escapers[entity] = HtmlEscaper(entity)
    return _default_escapers[entity]
