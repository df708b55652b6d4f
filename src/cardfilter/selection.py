"""
Card selection

Runs a filter over a card list in a single pass. Results are references to
the source cards in their original order; the source list is never touched.
"""

import logging
from contextlib import nullcontext
from typing import Any, Iterable, List, Protocol

from cardfilter.cards import Card, CardList
from cardfilter.filters.base import Filter

logger = logging.getLogger(__name__)


class SupportsEvaluate(Protocol):
    """Anything that can answer evaluate(card) -> bool."""

    def evaluate(self, card: Card) -> bool:
        ...


def _frozen_during_pass(card_filter: Any):
    if isinstance(card_filter, Filter):
        return card_filter.frozen()
    return nullcontext(card_filter)


def get_cards(cards: Iterable[Card], card_filter: SupportsEvaluate, out_cards: List[Card]) -> int:
    """
    Collect the cards accepted by a filter.

    ``out_cards`` is cleared first, then every card from ``cards`` that the
    filter accepts is appended in input order. Each card is evaluated exactly
    once and the filter configuration is frozen for the duration of the pass.

    Args:
        cards: Source cards (not modified)
        card_filter: Filter to apply
        out_cards: List receiving the accepted cards

    Returns:
        Number of accepted cards

    Raises:
        ValueError: If ``out_cards`` is the source list itself
    """
    if out_cards is cards:
        raise ValueError("out_cards must not be the source card list")
    out_cards.clear()

    with _frozen_during_pass(card_filter):
        total = 0
        for card in cards:
            total += 1
            if card_filter.evaluate(card):
                out_cards.append(card)

    logger.debug(f"{len(out_cards)} of {total} cards passed {card_filter!r}")
    return len(out_cards)


def select_cards(cards: Iterable[Card], card_filter: SupportsEvaluate) -> CardList:
    """Return a new list of the cards accepted by ``card_filter``."""
    out_cards: CardList = []
    get_cards(cards, card_filter, out_cards)
    return out_cards
