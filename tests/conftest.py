"""Shared pytest fixtures for five-card draw tests."""

import pytest

from config.settings import GameConfig
from poker.cards import Deck
from poker.game import RoundController
from tests.helpers.card_utils import make_player


@pytest.fixture
def deck():
    """Provide a reproducibly shuffled deck."""
    return Deck(seed=42)


@pytest.fixture
def controller():
    """Provide a seeded round controller."""
    return RoundController(seed=42)


@pytest.fixture
def two_players():
    """Two players with 100 chips each."""
    return [make_player("Alice"), make_player("Bob")]


@pytest.fixture
def three_players():
    """Three players with 100 chips each."""
    return [make_player("Alice"), make_player("Bob"), make_player("Carol")]


@pytest.fixture
def game_config():
    """A small seeded game configuration."""
    return GameConfig(starting_chips=50, seed=7)


@pytest.fixture(params=[1, 7, 42])
def seed(request):
    """Parametrize over a few RNG seeds."""
    return request.param
