"""Card creation utilities for testing."""

from showdown.cards import Card


def make_cards_from_strings(card_strings: list[str]) -> tuple[Card, ...]:
    """Create cards from strings like ['As', 'Kh', 'Qc'].

    Args:
        card_strings: List of card strings (e.g., ['As', 'Kh', '10♥'])

    Returns:
        Tuple of Card objects in the given order
    """
    return tuple(Card.from_string(s) for s in card_strings)


def make_hand(
    hole1: str, hole2: str, community: list[str]
) -> tuple[tuple[Card, ...], tuple[Card, ...]]:
    """Create hole cards and community cards for testing.

    Args:
        hole1: First hole card (e.g., 'As')
        hole2: Second hole card (e.g., 'Kh')
        community: List of community cards

    Returns:
        Tuple of (hole cards, community cards)
    """
    return make_cards_from_strings([hole1, hole2]), make_cards_from_strings(community)


def split_seven(cards: list[str]) -> tuple[tuple[Card, ...], tuple[Card, ...]]:
    """Split seven card strings into (first two as hole cards, last five as board)."""
    parsed = make_cards_from_strings(cards)
    return parsed[:2], parsed[2:]
