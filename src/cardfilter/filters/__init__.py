"""
Filtering System for Cards

Composable card filters. Each filter answers evaluate(card) -> bool and
exposes chainable builder methods for its configuration; MetaFilter
combines a fixed list of filters with logical AND.

Key Components:
- Filter: Abstract base class for all filters
- MetaFilter / compose: AND composition of filter types
- FilterFactory: Creates composed filters from configuration
- CostFilter, VersionFilter, LeaderFilter, EmptyFilter
"""

from .base import Filter, FilterResult, builder
from .cost import CostFilter
from .empty import EmptyFilter
from .leader import LeaderFilter
from .meta import MetaFilter, compose
from .version import VersionFilter
from .factory import FilterFactory

__all__ = [
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
]
