"""
Version-based filtering for cards.

Accepts cards whose version is in a list of accepted versions.
"""

from typing import Iterable, List

from cardfilter.cards import Card
from .base import Filter, builder


class VersionFilter(Filter):
    """
    Filter cards by version membership.

    Accepted versions are kept in insertion order; duplicates are harmless.
    With no accepted versions every card is rejected.
    """

    def __init__(self, versions: Iterable[int] = ()):
        super().__init__()
        self.versions: List[int] = [int(v) for v in versions]

    @property
    def name(self) -> str:
        return "Version Filter"

    @property
    def description(self) -> str:
        if not self.versions:
            return "No accepted versions (all cards rejected)"
        return f"Cards with version in {self.versions}"

    @builder
    def add(self, value: int) -> 'VersionFilter':
        """Accept cards of another version."""
        self.versions.append(int(value))
        self.logger.debug(f"accepted versions now {self.versions}")
        return self

    def evaluate(self, card: Card) -> bool:
        return card.version in self.versions

    def explain(self, card: Card, passed: bool) -> str:
        relation = "in" if passed else "not in"
        return f"version {card.version} {relation} {self.versions}"

    def validate_config(self) -> List[str]:
        if not self.versions:
            return ["no accepted versions; no card can pass"]
        return []

    def __repr__(self) -> str:
        return f"VersionFilter(versions={self.versions!r})"
