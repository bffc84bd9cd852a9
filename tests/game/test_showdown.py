from unittest.mock import Mock

import pytest

from game.showdown import handle_showdown, make_comparer
from game.side_pot import SidePot
from game.table import Table
from loggers.showdown_logger import ShowdownLogger


@pytest.fixture(autouse=True)
def setup_mocks(monkeypatch):
    monkeypatch.setattr(ShowdownLogger, "log_pot_win", Mock())


class TestMakeComparer:
    def test_live_players_use_hand_ranking(self, mock_players, strength_comparator):
        alice, bob, _ = mock_players
        table = Table(mock_players)
        compare = make_comparer(strength_comparator({"Alice": 1, "Bob": 2}), table)

        assert compare(bob, alice) > 0
        assert compare(alice, bob) < 0
        assert compare(alice, alice) == 0

    def test_folded_players_rank_last(self, mock_players):
        """Test that the hand ranking is never asked about a folded player."""
        alice, bob, charlie = mock_players
        table = Table(mock_players)
        table.fold(alice)
        table.fold(bob)
        ranking = Mock(return_value=0)
        compare = make_comparer(ranking, table)

        assert compare(charlie, alice) > 0
        assert compare(alice, charlie) < 0
        assert compare(alice, bob) == 0
        ranking.assert_not_called()


class TestHandleShowdown:
    def test_pays_every_pot(self, mock_players, strength_comparator):
        """Test the showdown of a three-way all in.

        Assumptions:
            - Stacks of 1000, 500 and 200 all go in
            - Charlie wins the main pot, Bob the side pot, Alice gets her excess back
        """
        alice, bob, charlie = mock_players
        table = Table(mock_players)
        side_pot = SidePot(mock_players)
        initial = {p: p.chips for p in mock_players}
        side_pot.raise_bet(alice, 1000)
        side_pot.call(bob)
        side_pot.call(charlie)
        side_pot.reset_raise()

        awards = handle_showdown(
            side_pot,
            table,
            strength_comparator({"Charlie": 3, "Bob": 2, "Alice": 1}),
            initial,
        )

        assert [a.payouts for a in awards] == [
            {"Charlie": 600},
            {"Bob": 600},
            {"Alice": 500},
        ]
        assert side_pot.money == 0
        assert ShowdownLogger.log_pot_win.call_count == 3

    def test_folded_contributor_cannot_win(self, mock_players, strength_comparator):
        alice, bob, charlie = mock_players
        table = Table(mock_players)
        side_pot = SidePot(mock_players)
        side_pot.raise_bet(alice, 100)
        side_pot.call(bob)
        side_pot.call(charlie)
        side_pot.fold(charlie)
        table.fold(charlie)
        side_pot.reset_raise()

        awards = handle_showdown(
            side_pot,
            table,
            strength_comparator({"Charlie": 9, "Bob": 2, "Alice": 1}),
            {},
        )

        assert awards[0].winners == ["Bob"]
        assert bob.chips == 700
