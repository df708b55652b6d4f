"""
Abstract Filter Base Classes

Defines the core interface for card filters. Every filter answers
``evaluate(card) -> bool``; ``apply`` wraps that answer in a FilterResult
with a human-readable reason for reporting.

Configuration happens through builder methods (marked with ``@builder``)
that return the filter itself so calls can be chained. Once a filter is
frozen, either permanently with ``freeze()`` or for the duration of a
``with flt.frozen():`` block, builder calls raise FilterFrozenError.
"""

import functools
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Tuple, TypeVar

from cardfilter.cards import Card
from cardfilter.core.exceptions import FilterFrozenError

F = TypeVar('F', bound=Callable[..., Any])

BUILDER_MARKER = '__filter_builder__'


@dataclass
class FilterResult:
    """
    Result of applying a filter to a card.

    Attributes:
        passed: Whether the card passed the filter
        reason: Human-readable reason for pass/fail
        metadata: Additional filter-specific metadata
    """
    passed: bool
    reason: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)


def builder(method: F) -> F:
    """
    Mark a filter method as a chainable configuration method.

    The wrapped method refuses to run on a frozen filter. Builders return
    the filter instance.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self.is_frozen:
            raise FilterFrozenError(
                f"Cannot call {method.__name__}() on frozen filter '{self.name}'",
                filter_name=self.name
            )
        return method(self, *args, **kwargs)

    setattr(wrapper, BUILDER_MARKER, True)
    return wrapper  # type: ignore[return-value]


class Filter(ABC):
    """
    Abstract base class for all card filters.

    Evaluation never mutates the filter. Subclasses must call
    ``super().__init__()`` before touching their own configuration.
    """

    def __init__(self):
        self._frozen = False
        self._freeze_depth = 0
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the filter."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the filter does."""

    @abstractmethod
    def evaluate(self, card: Card) -> bool:
        """
        Decide whether a card passes the filter.

        Args:
            card: Card to test

        Returns:
            True if the card passes
        """

    def apply(self, card: Card) -> FilterResult:
        """
        Evaluate a card and explain the outcome.

        Args:
            card: Card to test

        Returns:
            FilterResult carrying the evaluate() answer and a reason
        """
        passed = self.evaluate(card)
        return FilterResult(
            passed=passed,
            reason=self.explain(card, passed),
            metadata={"filter": self.name, "card_id": card.id}
        )

    def explain(self, card: Card, passed: bool) -> str:
        """Reason text for ``apply``; subclasses give a more specific one."""
        verdict = "accepted" if passed else "rejected"
        return f"{self.name} {verdict} card {card.id}"

    def validate_config(self) -> List[str]:
        """
        Validate the filter configuration.

        Degenerate configurations are legal, so the returned messages are
        warnings rather than errors.

        Returns:
            List of warning messages (empty if nothing is suspicious)
        """
        return []

    @classmethod
    def builder_names(cls) -> Tuple[str, ...]:
        """Names of the builder methods this filter class exposes."""
        return tuple(
            attr for attr in dir(cls)
            if not attr.startswith('_') and getattr(getattr(cls, attr, None), BUILDER_MARKER, False)
        )

    @property
    def is_frozen(self) -> bool:
        return self._frozen or self._freeze_depth > 0

    def freeze(self) -> 'Filter':
        """Make the configuration permanently read-only."""
        self._frozen = True
        return self

    @contextmanager
    def frozen(self) -> Iterator['Filter']:
        """Hold the configuration read-only for the duration of the block."""
        self._freeze_depth += 1
        try:
            yield self
        finally:
            self._freeze_depth -= 1

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
