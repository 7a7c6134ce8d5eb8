"""Showdown scenarios: fixed presets and random deals."""

from dataclasses import dataclass
from typing import Sequence

from showdown.cards import Card, Deck, parse_cards
from showdown.evaluator import BOARD_CARDS, HOLE_CARDS
from showdown.player import Player


@dataclass(frozen=True)
class Scenario:
    """Hole cards for each seat plus the shared board."""

    title: str
    hole_cards: tuple[tuple[Card, ...], ...]
    board: tuple[Card, ...]

    @classmethod
    def from_strings(cls, title: str, hands: Sequence[str], board: str) -> "Scenario":
        """Build a scenario from card strings, e.g. hands=['Ah Kh', '2d 7c']."""
        return cls(
            title=title,
            hole_cards=tuple(parse_cards(hand) for hand in hands),
            board=parse_cards(board),
        )

    @property
    def num_players(self) -> int:
        return len(self.hole_cards)

    def players(self) -> tuple[Player, ...]:
        """Seat players 1..n with their hole cards."""
        return tuple(
            Player(id=seat, hole_cards=cards)
            for seat, cards in enumerate(self.hole_cards, start=1)
        )


PRESET_SCENARIOS: tuple[Scenario, ...] = (
    Scenario.from_strings(
        "Scenario 1: Top hand vs simple pair",
        hands=["A♥ K♥", "2♦ 7♣"],
        board="Q♥ J♥ 10♥ 5♥ 2♣",
    ),
    Scenario.from_strings(
        "Scenario 2: Big pair vs smaller pair",
        hands=["J♥ J♦", "10♦ 7♣"],
        board="A♥ 9♣ 4♥ 10♥ Q♣",
    ),
)


def deal_scenario(num_players: int, deck: Deck, title: str = "Random deal") -> Scenario:
    """Shuffle ``deck`` and deal two hole cards per player plus a five-card board.

    Hole cards go round the table one at a time, as at a real table.
    """
    deck.reset()
    deck.shuffle()

    holes: list[list[Card]] = [[] for _ in range(num_players)]
    for _ in range(HOLE_CARDS):
        for hand in holes:
            hand.append(deck.deal_one())
    board = deck.deal(BOARD_CARDS)

    return Scenario(
        title=title,
        hole_cards=tuple(tuple(hand) for hand in holes),
        board=tuple(board),
    )
