from unittest.mock import Mock

import pytest

from data.enums import EventType
from exceptions import InsufficientFundsError, InvalidAmountError, InvalidOperationError
from game.pot import Pot
from loggers.pot_logger import PotLogger


@pytest.fixture
def pot():
    """Create a fresh Pot instance for each test."""
    return Pot()


@pytest.fixture
def dave(player_factory):
    return player_factory(name="Dave", chips=1000)


@pytest.fixture(autouse=True)
def setup_mocks(monkeypatch):
    """Setup mocks for all tests."""
    monkeypatch.setattr(PotLogger, "log_pot_change", Mock())
    monkeypatch.setattr(PotLogger, "log_pot_reset", Mock())
    monkeypatch.setattr(PotLogger, "log_invalid_operation", Mock())


class TestPot:
    def test_initialization(self, pot):
        """Test that a new pot is empty."""
        assert pot.money == 0
        assert pot.current_raise == 0
        assert pot.participants == []
        assert pot.is_even()

    def test_raise_and_call(self, pot, mock_players):
        """Test a raise followed by a call.

        Assumptions:
            - Alice raises 100 and pays the full raise
            - Bob calls and matches the raise
            - Both players are participants in raise order
        """
        alice, bob, _ = mock_players

        assert pot.raise_bet(alice, 100) == 100
        assert pot.call(bob) == 100

        assert pot.money == 200
        assert pot.current_raise == 100
        assert alice.chips == 900
        assert bob.chips == 400
        assert pot.participants == [alice, bob]
        assert pot.is_even()

    def test_reraise_adds_on_top_of_call(self, pot, mock_players):
        """Test that a raise first covers what the player owes."""
        alice, bob, _ = mock_players
        pot.raise_bet(alice, 100)

        assert pot.raise_bet(bob, 50) == 150
        assert pot.current_raise == 150
        assert pot.get_player_call_sum(alice) == 50
        assert not pot.is_even()

    def test_call_with_nothing_owed_is_a_check(self, pot, mock_players):
        """Test that calling on an open street moves nothing.

        Assumptions:
            - The player is not registered as a participant
        """
        alice = mock_players[0]

        assert pot.call(alice) == 0
        assert alice.chips == 1000
        assert pot.participants == []
        assert pot.money == 0

    def test_second_call_is_idempotent(self, pot, mock_players):
        alice, bob, _ = mock_players
        pot.raise_bet(alice, 100)
        pot.call(bob)

        assert pot.call(bob) == 0
        assert bob.chips == 400
        assert pot.money == 200

    def test_call_sum_query_moves_no_chips(self, pot, mock_players):
        """Test that asking what a player owes is repeatable and free.

        Assumptions:
            - Alice opens for 100
            - Bob is asked twice before he acts
            - The first query registers Bob with no bet but no chips move
        """
        alice, bob, _ = mock_players
        pot.raise_bet(alice, 100)

        assert pot.get_player_call_sum(bob) == 100
        assert pot.get_player_call_sum(bob) == 100
        assert pot.current_bets[bob] == 0
        assert bob not in pot.participants
        assert bob.chips == 500
        assert pot.money == 100

    def test_raise_without_funds(self, pot, mock_players):
        """Test that an unaffordable raise changes nothing."""
        charlie = mock_players[2]

        with pytest.raises(InsufficientFundsError):
            pot.raise_bet(charlie, 300)

        assert pot.current_raise == 0
        assert charlie.chips == 200
        assert pot.money == 0

    def test_call_without_funds(self, pot, mock_players):
        alice, _, charlie = mock_players
        pot.raise_bet(alice, 500)

        with pytest.raises(InsufficientFundsError):
            pot.call(charlie)
        assert charlie.chips == 200

    def test_negative_raise(self, pot, mock_players):
        with pytest.raises(InvalidAmountError):
            pot.raise_bet(mock_players[0], -10)

    def test_fold_keeps_last_participant(self, pot, mock_players):
        """Test that folding never leaves a pot without a winner."""
        alice, bob, _ = mock_players
        pot.raise_bet(alice, 100)
        pot.call(bob)

        pot.fold(alice)
        assert pot.participants == [bob]

        pot.fold(bob)
        assert pot.participants == [bob]

    def test_fold_of_outsider_is_ignored(self, pot, mock_players):
        alice, _, charlie = mock_players
        pot.raise_bet(alice, 100)

        pot.fold(charlie)
        assert pot.participants == [alice]

    def test_reset_raise_requires_even_pot(self, pot, mock_players):
        alice, bob, _ = mock_players
        pot.raise_bet(alice, 100)
        pot.call(bob)
        pot.raise_bet(alice, 50)

        with pytest.raises(InvalidOperationError):
            pot.reset_raise()

    def test_reset_raise_keeps_totals(self, pot, mock_players):
        """Test that closing a street only clears the street's bets."""
        alice, bob, _ = mock_players
        pot.raise_bet(alice, 100)
        pot.call(bob)

        pot.reset_raise()

        assert pot.current_raise == 0
        assert pot.money == 200
        assert pot.get_player_total_bet(alice) == 100
        assert pot.player_can_check(bob)

    def test_split_single_winner(self, pot, mock_players):
        alice, bob, _ = mock_players
        pot.raise_bet(alice, 100)
        pot.call(bob)
        pot.reset_raise()

        payouts = pot.split_pot([bob])

        assert payouts == {bob: 200}
        assert bob.chips == 600
        assert pot.money == 0
        assert pot.participants == []

    def test_split_remainder_goes_to_first_winner(self, pot, mock_players, dave):
        """Test an odd pot shared by two winners.

        Assumptions:
            - Dave opens for 1 and folds after the re-raise
            - Alice and Bob put in 50 each, so the pot holds 101
            - The odd chip goes to the first winner listed
        """
        alice, bob, _ = mock_players
        pot.raise_bet(dave, 1)
        pot.raise_bet(alice, 49)
        pot.call(bob)
        pot.fold(dave)
        assert pot.money == 101

        payouts = pot.split_pot([alice, bob])

        assert payouts == {alice: 51, bob: 50}
        assert alice.chips == 1001
        assert bob.chips == 500

    def test_split_three_ways(self, pot, mock_players, dave):
        """Test 100 chips split between three winners: 34, 33, 33."""
        alice, bob, charlie = mock_players
        pot.raise_bet(dave, 10)
        pot.raise_bet(alice, 20)
        pot.call(bob)
        pot.call(charlie)
        pot.fold(dave)
        assert pot.money == 100

        payouts = pot.split_pot([bob, alice, charlie])

        assert payouts == {bob: 34, alice: 33, charlie: 33}
        assert sum(payouts.values()) == 100

    def test_split_rejects_bad_winner_lists(self, pot, mock_players):
        alice, bob, charlie = mock_players
        pot.raise_bet(alice, 100)
        pot.call(bob)

        with pytest.raises(InvalidOperationError):
            pot.split_pot([])
        with pytest.raises(InvalidOperationError):
            pot.split_pot([alice, alice])
        with pytest.raises(InvalidOperationError):
            pot.split_pot([charlie])
        assert pot.money == 200

    def test_split_rejects_uneven_pot(self, pot, mock_players):
        alice, bob, _ = mock_players
        pot.raise_bet(alice, 100)
        pot.call(bob)
        pot.raise_bet(bob, 100)

        with pytest.raises(InvalidOperationError):
            pot.split_pot([bob])

    def test_events_published(self, mock_players, event_bus, listener):
        """Test that the pot reports raise level and total changes."""
        alice, bob, _ = mock_players
        pot = Pot(event_bus)

        pot.raise_bet(alice, 100)
        pot.call(bob)

        raise_events = listener.of_type(EventType.RAISE_LEVEL_CHANGED)
        total_events = listener.of_type(EventType.POT_TOTAL_CHANGED)
        assert raise_events[0].data == {"old_raise": 0, "new_raise": 100}
        assert [e.data["new_total"] for e in total_events] == [100, 200]

    def test_snapshot(self, pot, mock_players):
        alice, bob, _ = mock_players
        pot.raise_bet(alice, 100)
        pot.call(bob)

        snapshot = pot.get_snapshot(2)

        assert snapshot.index == 2
        assert snapshot.amount == 200
        assert snapshot.participants == ["Alice", "Bob"]
        assert snapshot.total_bets == {"Alice": 100, "Bob": 100}
