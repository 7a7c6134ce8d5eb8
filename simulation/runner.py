"""Runner for evaluating showdown scenarios."""

import logging
from dataclasses import dataclass

from tqdm import tqdm

from config.settings import EvaluationConfig
from showdown.cards import Deck
from showdown.classifier import HandCategory
from showdown.evaluator import HandResult, evaluate_players, select_winners
from showdown.player import Player
from simulation.scenarios import Scenario, deal_scenario
from simulation.statistics import ShowdownStatistics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioResult:
    """Outcome of one showdown."""

    scenario: Scenario
    results: dict[Player, HandResult]
    winners: list[Player]

    @property
    def players(self) -> list[Player]:
        return list(self.results)

    @property
    def winning_hand(self) -> HandResult:
        return self.results[self.winners[0]]

    @property
    def winning_category(self) -> HandCategory:
        return self.winning_hand.category

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1


class ShowdownRunner:
    """Evaluate scenarios and batches of random deals."""

    def __init__(
        self,
        config: EvaluationConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config or EvaluationConfig()
        self.deck = Deck(seed)

    def run_scenario(self, scenario: Scenario) -> ScenarioResult:
        """Evaluate every player's best hand, then pick the winner(s)."""
        players = scenario.players()
        results = evaluate_players(players, scenario.board, max_workers=self.config.max_workers)
        winners = select_winners(results)
        logger.debug(
            "%s: %s win with %s",
            scenario.title,
            ", ".join(str(w) for w in winners),
            results[winners[0]].category,
        )
        return ScenarioResult(scenario=scenario, results=results, winners=winners)

    def run_random(self, num_players: int) -> ScenarioResult:
        """Deal and evaluate one random scenario."""
        return self.run_scenario(deal_scenario(num_players, self.deck))

    def run_many(
        self,
        num_deals: int,
        num_players: int,
        show_progress: bool = True,
    ) -> ShowdownStatistics:
        """Deal ``num_deals`` random scenarios and aggregate the outcomes."""
        stats = ShowdownStatistics(num_players=num_players)

        iterator = range(num_deals)
        if show_progress:
            iterator = tqdm(iterator, desc="Evaluating deals", unit="deals")

        for _ in iterator:
            stats.add(self.run_random(num_players))

        logger.info("Evaluated %d deals, %d split pots", stats.deals, stats.ties)
        return stats
