"""Statistics tracking over many showdowns."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from showdown.classifier import HandCategory

if TYPE_CHECKING:
    from simulation.runner import ScenarioResult


@dataclass
class ShowdownStatistics:
    """Aggregate counts over a batch of evaluated deals."""

    num_players: int
    deals: int = 0
    ties: int = 0
    # Category of the winning hand, one count per deal
    winning_categories: np.ndarray = field(default_factory=lambda: np.zeros(len(HandCategory), dtype=np.int64))
    # Category of every player's best hand
    hand_categories: np.ndarray = field(default_factory=lambda: np.zeros(len(HandCategory), dtype=np.int64))
    seat_wins: np.ndarray = field(init=False)
    seat_ties: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        self.seat_wins = np.zeros(self.num_players, dtype=np.int64)
        self.seat_ties = np.zeros(self.num_players, dtype=np.int64)

    def add(self, result: "ScenarioResult") -> None:
        """Record one evaluated deal."""
        self.deals += 1
        self.winning_categories[result.winning_category] += 1
        for hand in result.results.values():
            self.hand_categories[hand.category] += 1

        split = len(result.winners) > 1
        if split:
            self.ties += 1
        for player in result.winners:
            seat = player.id - 1
            if split:
                self.seat_ties[seat] += 1
            else:
                self.seat_wins[seat] += 1

    @property
    def tie_rate(self) -> float:
        return self.ties / self.deals if self.deals > 0 else 0.0

    def win_rate(self, seat: int) -> float:
        """Outright win rate for a 1-based seat."""
        return float(self.seat_wins[seat - 1]) / self.deals if self.deals > 0 else 0.0

    def category_frequencies(self, winning_only: bool = True) -> dict[HandCategory, float]:
        """Fraction of hands falling in each category."""
        counts = self.winning_categories if winning_only else self.hand_categories
        total = counts.sum()
        if total == 0:
            return {category: 0.0 for category in HandCategory}
        return {category: float(counts[category] / total) for category in HandCategory}
