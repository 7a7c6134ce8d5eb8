"""Shared pytest fixtures for showdown tests."""

import pytest

from showdown.cards import Deck
from simulation.scenarios import PRESET_SCENARIOS
from tests.helpers.card_utils import make_cards_from_strings


@pytest.fixture
def royal_board():
    """Board from the top hand vs simple pair scenario."""
    return make_cards_from_strings(["Qh", "Jh", "Th", "5h", "2c"])


@pytest.fixture
def pair_board():
    """Board from the big pair vs smaller pair scenario."""
    return make_cards_from_strings(["Ah", "9c", "4h", "Th", "Qc"])


@pytest.fixture
def seeded_deck():
    """Provide a reproducible deck."""
    return Deck(seed=42)


@pytest.fixture(params=range(len(PRESET_SCENARIOS)))
def preset_scenario(request):
    """Parametrize over the built-in scenarios."""
    return PRESET_SCENARIOS[request.param]
