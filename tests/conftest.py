import logging
import os

import pytest

from game.config import GameConfig
from game.events import EventBus
from game.player import Player
from tests.mocks.mock_provider import FakeClock, RecordingListener


@pytest.fixture(autouse=True)
def setup_logging():
    """Automatically disable logging for all tests."""
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch):
    """Give the test its own copy of the environment without POKER_* variables."""
    environ = {k: v for k, v in os.environ.items() if not k.startswith("POKER_")}
    monkeypatch.setattr(os, "environ", environ)
    return environ


@pytest.fixture
def player_factory():
    """Create a factory function for generating real players.

    Example:
        def test_stacks(player_factory):
            short = player_factory(name="Short", chips=200)
            assert short.chips == 200
    """

    def _create_player(name="TestPlayer", chips=1000, folded=False, bet=0):
        player = Player(name, chips)
        player.folded = folded
        player.bet = bet
        return player

    return _create_player


@pytest.fixture
def mock_players(player_factory):
    """Three players with different stacks.

    - Alice: 1000 chips
    - Bob: 500 chips
    - Charlie: 200 chips
    """
    return [
        player_factory(name="Alice", chips=1000),
        player_factory(name="Bob", chips=500),
        player_factory(name="Charlie", chips=200),
    ]


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def listener(event_bus):
    """Records every event published on the shared bus."""
    recorder = RecordingListener()
    event_bus.subscribe(recorder)
    return recorder


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def mock_config():
    """Blinds of 10/20, no ante and the default limits."""
    return GameConfig(starting_chips=1000, small_blind=10, big_blind=20, ante=0)


@pytest.fixture
def strength_comparator():
    """Build a hand comparator from a name -> strength mapping.

    Example:
        compare = strength_comparator({"Alice": 3, "Bob": 1})
    """

    def _build(strengths):
        def compare(first, second):
            return strengths.get(first.name, 0) - strengths.get(second.name, 0)

        return compare

    return _build
