"""
Application layer interfaces/abstractions.
Defines contracts that infrastructure implementations must follow.
"""

from .escaper import Escaper

__all__ = [
    "Escaper",
]
