"""Functional core - pure journal logic with no I/O."""

from .rating import Rating
from .journal import Journal, JournalEntry

__all__ = [
    "Rating",
    "Journal",
    "JournalEntry",
]
