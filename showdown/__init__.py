"""Texas Hold'em showdown evaluation engine."""

from showdown.cards import Card, Deck, Rank, Suit, parse_cards
from showdown.classifier import Classification, HandCategory, classify
from showdown.combinations import COMBINATIONS_PER_HAND, five_card_combinations
from showdown.errors import (
    EmptyResultSetError,
    InvalidCardError,
    InvalidHandInputError,
    ShowdownError,
)
from showdown.evaluator import (
    HandEvaluator,
    HandResult,
    evaluate_best_hand,
    evaluate_players,
    select_winners,
)
from showdown.player import Player
from showdown.scorer import score_hand

__all__ = [
    "COMBINATIONS_PER_HAND",
    "Card",
    "Classification",
    "Deck",
    "EmptyResultSetError",
    "HandCategory",
    "HandEvaluator",
    "HandResult",
    "InvalidCardError",
    "InvalidHandInputError",
    "Player",
    "Rank",
    "ShowdownError",
    "Suit",
    "classify",
    "evaluate_best_hand",
    "evaluate_players",
    "five_card_combinations",
    "parse_cards",
    "score_hand",
    "select_winners",
]
