"""
Pass-through filter.
"""

from cardfilter.cards import Card
from .base import Filter


class EmptyFilter(Filter):
    """Accept every card. Useful as a placeholder slot in a composition."""

    @property
    def name(self) -> str:
        return "Empty Filter"

    @property
    def description(self) -> str:
        return "No filtering (all cards pass)"

    def evaluate(self, card: Card) -> bool:
        return True
