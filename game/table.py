"""
This module provides the Table class which tracks the seats of one hand.

The Table handles:
- Round order, starting with the dealer
- Which players are still playing (have not folded)
- Seat lookup with wrap-around for turn progression
- Detecting when nobody is left who can bet
"""

from typing import TYPE_CHECKING, Iterator, List

from game.player import Player
from loggers.table_logger import TableLogger

if TYPE_CHECKING:
    from game.side_pot import SidePot


class Table:
    """The seats of a hand in acting order.

    Seat 0 is the dealer, seat 1 opens the blinds, and so on around the table.
    Folded players keep their seat so that positions stay stable for the whole
    hand; they are only removed from ``playing``.

    Attributes:
        players (List[Player]): Round order for the hand, dealer first
        playing (List[Player]): Players who have not folded, in round order
    """

    def __init__(self, players: List[Player], dealer_index: int = 0):
        """Seat the players for a hand.

        Args:
            players (List[Player]): Players in seating order
            dealer_index (int): Position of the dealer in ``players``
        """
        if not players:
            raise ValueError("Cannot create a table without players")
        dealer_index %= len(players)
        self.players = players[dealer_index:] + players[:dealer_index]
        self.playing = list(self.players)
        TableLogger.log_table_creation(len(self.players))
        TableLogger.log_dealer_position(dealer_index, self.dealer.name)

    @property
    def dealer(self) -> Player:
        return self.players[0]

    def safe_get_player(self, index: int) -> Player:
        """Player at a seat, wrapping around the table."""
        return self.players[index % len(self.players)]

    def seat_of(self, player: Player) -> int:
        """Seat index of the player in round order, -1 if not seated."""
        try:
            return self.players.index(player)
        except ValueError:
            return -1

    def is_playing(self, player: Player) -> bool:
        return player in self.playing

    def has_round_players(self) -> bool:
        """More than one player is still in the hand."""
        return len(self.playing) > 1

    def fold(self, player: Player) -> None:
        player.folded = True
        if player in self.playing:
            self.playing.remove(player)
        TableLogger.log_player_states(
            [p.name for p in self.playing],
            [p.name for p in self.all_in_players()],
            [p.name for p in self.players if p.folded],
        )

    def active_players(self) -> List[Player]:
        """Playing players who still have chips to bet with."""
        return [p for p in self.playing if p.chips > 0]

    def all_in_players(self) -> List[Player]:
        return [p for p in self.playing if p.chips == 0]

    def round_players_are_all_in(self, pot: "SidePot") -> bool:
        """No betting is possible.

        True when at most one playing player has chips and every playing player
        either owes nothing or has nothing left.
        """
        if len(self.active_players()) >= 2:
            return False
        return all(p.chips == 0 or pot.get_player_call_sum(p) == 0 for p in self.playing)

    def reset_bets(self) -> None:
        """Clear the street's bet of every seated player."""
        for player in self.players:
            player.reset_bet()

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)

    def __getitem__(self, index: int) -> Player:
        return self.players[index]

    def __contains__(self, player: Player) -> bool:
        return player in self.players
