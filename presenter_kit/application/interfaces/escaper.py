"""
Escaper interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class Escaper(ABC):
    """Abstract interface for output escaping."""

    @abstractmethod
    def escape_html(self, text: str) -> str:
        """
        Escape a single string for inclusion in HTML.

        Args:
            text: The untrusted string

        Returns:
            The escaped string, marked safe
        """
        pass

    @abstractmethod
    def escape(self, value: Any) -> Any:
        """
        Escape a value returned to a template.

        Strings are escaped, collections are escaped element by element,
        and every other value is returned unchanged.

        Args:
            value: Any value produced by a presenter or its subject

        Returns:
            The escaped value, with the same shape as the input
        """
        pass

    @abstractmethod
    def raw(self, value: Any) -> Any:
        """
        Mark a trusted value so that escaping leaves it alone.

        Args:
            value: The trusted value

        Returns:
            A value equal to the input
        """
        pass
