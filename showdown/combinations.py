"""Enumeration of five-card candidate hands."""

from itertools import combinations
from math import comb
from typing import Iterator, Sequence

from showdown.cards import Card
from showdown.errors import InvalidHandInputError

HAND_SIZE = 5
SEVEN_CARDS = 7
COMBINATIONS_PER_HAND = comb(SEVEN_CARDS, HAND_SIZE)  # 21


def five_card_combinations(cards: Sequence[Card]) -> Iterator[tuple[Card, ...]]:
    """Lazily yield every 5-card subset of ``cards``.

    Subsets come out in lexicographic index order (0-1-2-3-4 first,
    2-3-4-5-6 last for seven cards) and keep the relative order of the input.
    Each call returns a fresh iterator.

    Showdowns always pass seven cards (21 subsets), but any count of five or
    more is accepted so a five-card hand or a partial deal can be enumerated
    too; callers that need exactly seven check the count themselves.
    """
    cards = tuple(cards)
    if len(cards) < HAND_SIZE:
        raise InvalidHandInputError(f"Need at least {HAND_SIZE} cards, got {len(cards)}")
    return combinations(cards, HAND_SIZE)
