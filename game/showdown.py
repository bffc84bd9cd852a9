from typing import Callable, Dict, List

from data.types.pot_types import PotAward
from loggers.showdown_logger import ShowdownLogger

from .player import Player
from .side_pot import PlayerComparer, SidePot
from .table import Table


def make_comparer(
    hand_comparator: Callable[[Player, Player], int], table: Table
) -> PlayerComparer:
    """
    Wrap the external hand ranking for use on the pots.

    Folded players rank below anyone still in the hand and a player always
    ties with themselves, so the hand ranking is only asked about two
    different live players.

    Args:
        hand_comparator: Positive when the first player holds the better hand
        table: The hand's table, to tell folded players apart

    Returns:
        PlayerComparer: Total order used to pick each pot's winners
    """

    def compare(first: Player, second: Player) -> int:
        if first == second:
            return 0
        first_live = table.is_playing(first)
        second_live = table.is_playing(second)
        if first_live != second_live:
            return 1 if first_live else -1
        if not first_live:
            return 0
        return hand_comparator(first, second)

    return compare


def handle_showdown(
    pot: SidePot,
    table: Table,
    hand_comparator: Callable[[Player, Player], int],
    initial_chips: Dict[Player, int],
) -> List[PotAward]:
    """
    Pay out every pot of the hand to its winners.

    Args:
        pot: The hand's ledger
        table: The hand's table
        hand_comparator: External ranking over two players
        initial_chips: Stacks at the start of the hand, for logging

    Returns:
        List[PotAward]: One award per pot that held chips

    Side Effects:
        - Updates player chip counts
        - Resets the ledger to a single empty pot
    """
    ShowdownLogger.log_showdown_start()
    if len(table.playing) == 1:
        winner = table.playing[0]
        ShowdownLogger.log_single_winner(winner.name, pot.money)
    else:
        for player in table.playing:
            ShowdownLogger.log_player_hand(
                player.name, " ".join(str(card) for card in player.cards)
            )

    for index, snapshot in enumerate(pot.get_state().pots):
        if snapshot.amount:
            ShowdownLogger.log_side_pot_distribution(
                index, snapshot.amount, snapshot.participants
            )

    awards = pot.split_pot(make_comparer(hand_comparator, table))

    for award in awards:
        for name, amount in award.payouts.items():
            ShowdownLogger.log_pot_win(
                award.index, name, amount, is_split=len(award.winners) > 1
            )
    for player in table:
        ShowdownLogger.log_chip_movements(
            player.name, initial_chips.get(player, player.chips), player.chips
        )
    return awards
