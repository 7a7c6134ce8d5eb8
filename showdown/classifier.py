"""Classification of five-card hands into strength categories."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

import numpy as np

from showdown.cards import NUM_RANKS, NUM_SUITS, Card, Rank
from showdown.combinations import HAND_SIZE
from showdown.errors import InvalidHandInputError


class HandCategory(IntEnum):
    """Poker hand categories from weakest to strongest.

    The value is the strength ordinal used by the scorer.
    """

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    def __str__(self) -> str:
        names = {
            0: "High Card",
            1: "One Pair",
            2: "Two Pair",
            3: "Three of a Kind",
            4: "Straight",
            5: "Flush",
            6: "Full House",
            7: "Four of a Kind",
            8: "Straight Flush",
            9: "Royal Flush",
        }
        return names[self.value]


WHEEL = (Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE)
WHEEL_HIGH = 5


@dataclass(frozen=True, slots=True)
class Classification:
    """Category of a five-card hand plus the facts needed to score it."""

    category: HandCategory
    rank_counts: tuple[int, ...]  # 13 buckets, index = rank - 2
    is_flush: bool
    is_straight: bool
    straight_high: int  # 0 when not a straight

    def count_of(self, rank: Rank) -> int:
        return self.rank_counts[rank - 2]


def count_ranks(cards: Sequence[Card]) -> tuple[int, ...]:
    """Count occurrences of each rank, indexed by rank - 2."""
    indices = np.fromiter((c.rank - 2 for c in cards), dtype=np.int64, count=len(cards))
    return tuple(np.bincount(indices, minlength=NUM_RANKS).tolist())


def count_suits(cards: Sequence[Card]) -> tuple[int, ...]:
    """Count occurrences of each suit, indexed by suit ordinal."""
    indices = np.fromiter((int(c.suit) for c in cards), dtype=np.int64, count=len(cards))
    return tuple(np.bincount(indices, minlength=NUM_SUITS).tolist())


def find_straight(rank_counts: Sequence[int]) -> int:
    """Return the top value of a straight in ``rank_counts``, or 0.

    Buckets are already in ascending rank order, so a linear walk over the
    present ranks finds the run. A-2-3-4-5 counts as a five-high straight.
    """
    top = 0
    run = 0
    for index, count in enumerate(rank_counts):
        if count:
            run += 1
            if run >= HAND_SIZE:
                top = index + 2
        else:
            run = 0

    if not top and all(rank_counts[r - 2] for r in WHEEL):
        top = WHEEL_HIGH
    return top


def classify(cards: Sequence[Card]) -> Classification:
    """Classify exactly five cards."""
    if len(cards) != HAND_SIZE:
        raise InvalidHandInputError(f"Expected {HAND_SIZE} cards, got {len(cards)}")

    rank_counts = count_ranks(cards)
    suit_counts = count_suits(cards)

    is_flush = HAND_SIZE in suit_counts
    straight_high = find_straight(rank_counts)
    is_straight = straight_high > 0
    pairs = rank_counts.count(2)

    if is_straight and is_flush:
        if straight_high == Rank.ACE:
            category = HandCategory.ROYAL_FLUSH
        else:
            category = HandCategory.STRAIGHT_FLUSH
    elif 4 in rank_counts:
        category = HandCategory.FOUR_OF_A_KIND
    elif 3 in rank_counts and pairs:
        category = HandCategory.FULL_HOUSE
    elif is_flush:
        category = HandCategory.FLUSH
    elif is_straight:
        category = HandCategory.STRAIGHT
    elif 3 in rank_counts:
        category = HandCategory.THREE_OF_A_KIND
    elif pairs >= 2:
        category = HandCategory.TWO_PAIR
    elif pairs:
        category = HandCategory.PAIR
    else:
        category = HandCategory.HIGH_CARD

    return Classification(
        category=category,
        rank_counts=rank_counts,
        is_flush=is_flush,
        is_straight=is_straight,
        straight_high=straight_high,
    )
