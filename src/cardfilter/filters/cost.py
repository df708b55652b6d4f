"""
Cost-based filtering for cards.

Accepts cards whose cost lies strictly between a minimum and a maximum.
Both bounds are exclusive: a card costing exactly the minimum or the
maximum is rejected.
"""

import sys
from typing import List

from cardfilter.cards import Card
from .base import Filter, builder

MAX_COST = sys.float_info.max


class CostFilter(Filter):
    """
    Filter cards by cost using exclusive bounds.

    Defaults accept every card with a positive cost. Inverted bounds
    (min_cost >= max_cost) are allowed and reject everything.
    """

    def __init__(self, min_cost: float = 0.0, max_cost: float = MAX_COST):
        super().__init__()
        self.min_cost = float(min_cost)
        self.max_cost = float(max_cost)

    @property
    def name(self) -> str:
        return "Cost Filter"

    @property
    def description(self) -> str:
        if self.max_cost == MAX_COST:
            return f"Cards with cost > {self.min_cost:g}"
        return f"Cards with cost between {self.min_cost:g} and {self.max_cost:g} (exclusive)"

    @builder
    def with_max(self, value: float) -> 'CostFilter':
        """Set the exclusive upper cost bound."""
        self.max_cost = float(value)
        self.logger.debug(f"max_cost set to {self.max_cost:g}")
        return self

    @builder
    def with_min(self, value: float) -> 'CostFilter':
        """Set the exclusive lower cost bound."""
        self.min_cost = float(value)
        self.logger.debug(f"min_cost set to {self.min_cost:g}")
        return self

    def evaluate(self, card: Card) -> bool:
        return self.min_cost < card.cost < self.max_cost

    def explain(self, card: Card, passed: bool) -> str:
        if passed:
            return f"cost {card.cost:g} within ({self.min_cost:g}, {self.max_cost:g})"
        if card.cost <= self.min_cost:
            return f"cost {card.cost:g} <= minimum {self.min_cost:g}"
        return f"cost {card.cost:g} >= maximum {self.max_cost:g}"

    def validate_config(self) -> List[str]:
        warnings = []
        if self.min_cost >= self.max_cost:
            warnings.append(
                f"min_cost {self.min_cost:g} is not below max_cost {self.max_cost:g}; no card can pass"
            )
        return warnings

    def __repr__(self) -> str:
        return f"CostFilter(min_cost={self.min_cost!r}, max_cost={self.max_cost!r})"
