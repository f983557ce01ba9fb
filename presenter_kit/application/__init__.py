"""
Application layer - contains the presenter and the escaping contract.
Follows onion architecture - orchestrates domain logic and infrastructure.
"""

from .interfaces import Escaper
from .presenter import Presenter, autoescape

__all__ = [
    "Escaper",
    "Presenter",
    "autoescape",
]
