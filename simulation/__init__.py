"""Scenario setup and batch evaluation of showdowns."""

from simulation.runner import ScenarioResult, ShowdownRunner
from simulation.scenarios import PRESET_SCENARIOS, Scenario, deal_scenario
from simulation.statistics import ShowdownStatistics

__all__ = [
    "PRESET_SCENARIOS",
    "Scenario",
    "ScenarioResult",
    "ShowdownRunner",
    "ShowdownStatistics",
    "deal_scenario",
]
