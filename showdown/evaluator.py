"""Best-hand and winner selection for Texas Hold'em showdowns."""

import logging
from collections import Counter
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Hashable, Mapping, Sequence, TypeVar

from showdown.cards import Card, format_cards
from showdown.classifier import HandCategory, classify
from showdown.combinations import HAND_SIZE, SEVEN_CARDS, five_card_combinations
from showdown.errors import EmptyResultSetError, InvalidHandInputError
from showdown.player import Player
from showdown.scorer import score_classification

logger = logging.getLogger(__name__)

HOLE_CARDS = 2
BOARD_CARDS = SEVEN_CARDS - HOLE_CARDS

P = TypeVar("P", bound=Hashable)


@dataclass(frozen=True, slots=True, eq=False)
class HandResult:
    """Result of evaluating a poker hand.

    Comparisons use the score only: two results compare equal when the hands
    are equally strong, whatever cards make them up.
    """

    category: HandCategory
    cards: tuple[Card, ...]  # The 5 cards, in the order they were evaluated
    score: int

    def __lt__(self, other: "HandResult") -> bool:
        return self.score < other.score

    def __le__(self, other: "HandResult") -> bool:
        return self.score <= other.score

    def __gt__(self, other: "HandResult") -> bool:
        return self.score > other.score

    def __ge__(self, other: "HandResult") -> bool:
        return self.score >= other.score

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandResult):
            return NotImplemented
        return self.score == other.score

    def __hash__(self) -> int:
        return hash(self.score)

    def __str__(self) -> str:
        return f"{self.category}: {format_cards(self.cards)}"


class HandEvaluator:
    """Evaluate poker hands."""

    @staticmethod
    def evaluate_five(cards: Sequence[Card]) -> HandResult:
        """Evaluate exactly 5 cards."""
        classification = classify(cards)
        return HandResult(
            category=classification.category,
            cards=tuple(cards),
            score=score_classification(classification),
        )

    @staticmethod
    def evaluate(hole_cards: Sequence[Card], community: Sequence[Card]) -> HandResult:
        """Evaluate a player's best hand from 2 hole cards + 5 community cards.

        Raises:
            InvalidHandInputError: card counts are not 2 + 5, or a card repeats.
        """
        hole_cards = tuple(hole_cards)
        community = tuple(community)
        if len(hole_cards) != HOLE_CARDS:
            raise InvalidHandInputError(f"Expected {HOLE_CARDS} hole cards, got {len(hole_cards)}")
        if len(community) != BOARD_CARDS:
            raise InvalidHandInputError(
                f"Expected {BOARD_CARDS} community cards, got {len(community)}"
            )

        all_cards = hole_cards + community
        for card in all_cards:
            if not isinstance(card, Card):
                raise InvalidHandInputError(f"Not a card: {card!r}")
        if len(set(all_cards)) != len(all_cards):
            duplicates = [c for c, n in Counter(all_cards).items() if n > 1]
            raise InvalidHandInputError(f"Duplicate card(s): {format_cards(duplicates)}")

        return HandEvaluator.evaluate_seven(all_cards)

    @staticmethod
    def evaluate_seven(cards: Sequence[Card]) -> HandResult:
        """Evaluate best 5-card hand from 7 cards.

        Equal-scoring candidates resolve to the first one generated.
        """
        if len(cards) != SEVEN_CARDS:
            raise InvalidHandInputError(f"Expected {SEVEN_CARDS} cards, got {len(cards)}")

        best_hand: HandResult | None = None
        for combo in five_card_combinations(cards):
            hand = HandEvaluator.evaluate_five(combo)
            if best_hand is None or hand.score > best_hand.score:
                best_hand = hand

        assert best_hand is not None and len(best_hand.cards) == HAND_SIZE
        return best_hand

    @staticmethod
    def select_winners(results: Mapping[P, HandResult]) -> list[P]:
        """Return every participant tied at the top score, in mapping order.

        Raises:
            EmptyResultSetError: ``results`` is empty.
        """
        if not results:
            raise EmptyResultSetError("Cannot select winners from an empty result set")

        top_score = max(result.score for result in results.values())
        return [participant for participant, result in results.items() if result.score == top_score]


def evaluate_best_hand(hole_cards: Sequence[Card], shared_cards: Sequence[Card]) -> HandResult:
    """Best five-card hand for one participant's seven cards."""
    return HandEvaluator.evaluate(hole_cards, shared_cards)


def select_winners(results: Mapping[P, HandResult]) -> list[P]:
    """Participants whose result score equals the maximum."""
    winners = HandEvaluator.select_winners(results)
    logger.debug("Winners: %s", ", ".join(str(w) for w in winners))
    return winners


def _player_result(player: Player, future: "Future[HandResult]") -> HandResult:
    try:
        return future.result()
    except InvalidHandInputError as exc:
        raise InvalidHandInputError(f"{player}: {exc}") from exc


def evaluate_players(
    players: Sequence[Player],
    board: Sequence[Card],
    max_workers: int = 1,
) -> dict[Player, HandResult]:
    """Evaluate each player's best hand against a shared board, in seat order.

    Evaluations are independent. With ``max_workers > 1`` they run on a thread
    pool and are all joined before this returns.
    """
    board = tuple(board)
    results: dict[Player, HandResult] = {}

    if max_workers > 1 and len(players) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(evaluate_best_hand, p.hole_cards, board) for p in players]
        for player, future in zip(players, futures):
            results[player] = _player_result(player, future)
    else:
        for player in players:
            try:
                results[player] = evaluate_best_hand(player.hole_cards, board)
            except InvalidHandInputError as exc:
                raise InvalidHandInputError(f"{player}: {exc}") from exc

    for player, result in results.items():
        logger.debug("%s best hand: %s (score %d)", player, result, result.score)
    return results
