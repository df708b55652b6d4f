"""
Leader (category) filtering for cards.
"""

from typing import Iterable, List

from cardfilter.cards import Card
from .base import Filter, builder


class LeaderFilter(Filter):
    """Accept cards whose leader_id is in a list of accepted leaders."""

    def __init__(self, leaders: Iterable[int] = ()):
        super().__init__()
        self.leaders: List[int] = [int(v) for v in leaders]

    @property
    def name(self) -> str:
        return "Leader Filter"

    @property
    def description(self) -> str:
        if not self.leaders:
            return "No accepted leaders (all cards rejected)"
        return f"Cards with leader in {self.leaders}"

    @builder
    def add_leader(self, value: int) -> 'LeaderFilter':
        self.leaders.append(int(value))
        return self

    def evaluate(self, card: Card) -> bool:
        return card.leader_id in self.leaders

    def explain(self, card: Card, passed: bool) -> str:
        relation = "in" if passed else "not in"
        return f"leader {card.leader_id} {relation} {self.leaders}"

    def validate_config(self) -> List[str]:
        if not self.leaders:
            return ["no accepted leaders; no card can pass"]
        return []

    def __repr__(self) -> str:
        return f"LeaderFilter(leaders={self.leaders!r})"
