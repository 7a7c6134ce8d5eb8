"""Card, Deck, Suit, and Rank definitions for Texas Hold'em showdowns."""

import re
from dataclasses import dataclass
from enum import IntEnum
from random import Random
from typing import Iterator

from showdown.errors import InvalidCardError


class Suit(IntEnum):
    """Card suits. The value doubles as the suit bucket index."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self.value]

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]


_SUIT_SYMBOLS = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}

RANK_CHARS = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "T": Rank.TEN,
    "10": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

SUIT_CHARS = {
    "c": Suit.CLUBS,
    "d": Suit.DIAMONDS,
    "h": Suit.HEARTS,
    "s": Suit.SPADES,
    "♣": Suit.CLUBS,
    "♦": Suit.DIAMONDS,
    "♥": Suit.HEARTS,
    "♠": Suit.SPADES,
}

NUM_RANKS = len(Rank)
NUM_SUITS = len(Suit)
NUM_CARDS = NUM_RANKS * NUM_SUITS


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise InvalidCardError(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise InvalidCardError(f"Invalid suit: {self.suit!r}")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def to_index(self) -> int:
        """Convert to 0-51 index.

        Index = suit * 13 + (rank - 2)
        """
        return self.suit * NUM_RANKS + (self.rank - 2)

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Create card from 0-51 index."""
        if not 0 <= index < NUM_CARDS:
            raise InvalidCardError(f"Card index out of range: {index}")
        suit = Suit(index // NUM_RANKS)
        rank = Rank((index % NUM_RANKS) + 2)
        return cls(rank=rank, suit=suit)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from strings like 'As', 'Kh', '2c', 'Td', '10♥'."""
        s = s.strip()
        if len(s) < 2:
            raise InvalidCardError(f"Invalid card string: {s!r}")
        rank_part, suit_part = s[:-1].upper(), s[-1]
        if rank_part not in RANK_CHARS:
            raise InvalidCardError(f"Invalid rank: {rank_part!r}")
        suit = SUIT_CHARS.get(suit_part.lower())
        if suit is None:
            raise InvalidCardError(f"Invalid suit: {suit_part!r}")
        return cls(rank=RANK_CHARS[rank_part], suit=suit)


def parse_cards(text: str) -> tuple[Card, ...]:
    """Parse a whitespace or comma separated list of cards, e.g. 'Ah Kh'."""
    return tuple(Card.from_string(token) for token in re.split(r"[\s,]+", text.strip()) if token)


def format_cards(cards) -> str:
    """Space separated display form of a card sequence."""
    return " ".join(str(c) for c in cards)


class Deck:
    """A standard 52-card deck."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = Random(seed)
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to full 52 cards."""
        self._cards = [Card.from_index(i) for i in range(NUM_CARDS)]

    def shuffle(self) -> None:
        """Shuffle the deck."""
        self._rng.shuffle(self._cards)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck."""
        if n > len(self._cards):
            raise ValueError(f"Cannot deal {n} cards, only {len(self._cards)} remaining")
        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card."""
        return self.deal(1)[0]

    def remaining(self) -> int:
        """Number of cards remaining in deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
