"""
CardFilter - composable card filters.

Filter components are combined with logical AND into a single composed
filter, which is then run over a card list in one pass:

    from cardfilter import CostFilter, VersionFilter, compose, get_cards, sample_cards

    CardFilter = compose(CostFilter, VersionFilter)
    card_filter = CardFilter()
    card_filter.add(1).add(3)
    card_filter.with_max(50)

    out_cards = []
    get_cards(sample_cards(), card_filter, out_cards)
"""

__version__ = "1.0.0"

from cardfilter.cards import Card, CardList, sample_cards
from cardfilter.filters import (
    CostFilter,
    EmptyFilter,
    Filter,
    FilterFactory,
    FilterResult,
    LeaderFilter,
    MetaFilter,
    VersionFilter,
    builder,
    compose,
)
from cardfilter.selection import get_cards, select_cards

__all__ = [
    "__version__",
    "Card",
    "CardList",
    "sample_cards",
    "Filter",
    "FilterResult",
    "builder",
    "MetaFilter",
    "compose",
    "FilterFactory",
    "CostFilter",
    "VersionFilter",
    "LeaderFilter",
    "EmptyFilter",
    "get_cards",
    "select_cards",
]
