"""Integer scoring of classified five-card hands.

Score layout (positional, base 100):
    category * 100**5 + k0 * 100**4 + k1 * 100**3 + k2 * 100**2 + k3 * 100 + k4

k0..k4 is the kicker sequence: ranks ordered by (count desc, value desc),
each repeated by its count. The largest possible kicker sum is
14 * 101010101 = 1414141414, below one category step of 10**10, so a higher
category always outscores a lower one.
"""

from typing import Sequence

from showdown.classifier import Classification, HandCategory
from showdown.combinations import HAND_SIZE

KICKER_BASE = 100
CATEGORY_WEIGHT = KICKER_BASE**HAND_SIZE

STRAIGHT_CATEGORIES = frozenset(
    {HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH, HandCategory.ROYAL_FLUSH}
)


def kicker_values(
    category: HandCategory,
    rank_counts: Sequence[int],
    straight_high: int = 0,
) -> tuple[int, ...]:
    """Build the five tie-break values, most significant first."""
    if category in STRAIGHT_CATEGORIES and straight_high:
        # The run itself; an Ace in a wheel plays as 1.
        return tuple(range(straight_high, straight_high - HAND_SIZE, -1))

    kickers: list[int] = []
    for count in range(4, 0, -1):
        for index in range(len(rank_counts) - 1, -1, -1):
            if rank_counts[index] == count:
                kickers.extend([index + 2] * count)

    while len(kickers) < HAND_SIZE:
        kickers.append(0)
    return tuple(kickers[:HAND_SIZE])


def score_hand(
    category: HandCategory,
    rank_counts: Sequence[int],
    straight_high: int = 0,
) -> int:
    """Combine category weight and kicker weights into one integer."""
    score = int(category) * CATEGORY_WEIGHT
    kickers = kicker_values(category, rank_counts, straight_high)
    for position, value in enumerate(kickers):
        score += value * KICKER_BASE ** (HAND_SIZE - 1 - position)
    return score


def score_classification(classification: Classification) -> int:
    """Score a classifier result."""
    return score_hand(
        classification.category,
        classification.rank_counts,
        classification.straight_high,
    )
