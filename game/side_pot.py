"""
Multi-pot ledger for a hand.

A hand starts with a single pot. Whenever a raise goes above what some player
still in the hand can afford, the pot is capped at that player's stack and the
rest of the raise moves to a new pot, so a short-stacked player can only win
what they could match.
"""

from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from data.types.pot_types import PotAward, PotState
from exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    InvalidGameStateError,
)
from game.events import EventBus
from game.player import Player
from game.pot import Pot
from loggers.pot_logger import PotLogger

PlayerComparer = Callable[[Player, Player], int]


class SidePot:
    """
    The ordered pots of one hand and the players still able to open new ones.

    Attributes:
        pots (List[Pot]): Every pot of the hand in creation order
        active_pots (List[Pot]): Pots taking bets this street; always ends with
            the most recently created pot
        round_players (List[Player]): Players whose stacks can still cap a raise
        event_bus (Optional[EventBus]): Shared with every pot of the hand

    Usage:
        side_pot = SidePot([alice, bob, charlie])
        side_pot.raise_bet(alice, 3000)
        side_pot.call(bob)
        side_pot.call(charlie)
        side_pot.reset_raise()
        awards = side_pot.split_pot(compare_hands)
    """

    def __init__(
        self, players: Iterable[Player], event_bus: Optional[EventBus] = None
    ) -> None:
        self.event_bus = event_bus
        self.round_players: List[Player] = list(players)
        self.pots: List[Pot] = [Pot(event_bus)]
        self.active_pots: List[Pot] = list(self.pots)

    @property
    def current_pot(self) -> Pot:
        return self.pots[-1]

    @property
    def current_raise(self) -> int:
        """Total call target across the pots taking bets this street."""
        return sum(pot.current_raise for pot in self.active_pots)

    @property
    def money(self) -> int:
        """Chips held across every pot of the hand."""
        return sum(pot.money for pot in self.pots)

    def get_player_call_sum(self, player: Player) -> int:
        return sum(pot.get_player_call_sum(player) for pot in self.active_pots)

    def player_can_check(self, player: Player) -> bool:
        return self.current_pot.player_can_check(player)

    def get_player_total_bet(self, player: Player) -> int:
        return sum(pot.get_player_total_bet(player) for pot in self.pots)

    def is_even(self) -> bool:
        return all(pot.is_even() for pot in self.pots)

    def _plan_call(self, player: Player) -> Tuple[List[Pot], int, bool]:
        """Work out which active pots the player can pay, without paying.

        Returns:
            Tuple of the payable pots, the chips the call takes, and whether
            any pot had to be skipped

        Raises:
            InvalidGameStateError: If a skipped pot lists the player as a participant
        """
        remaining = player.chips
        payable: List[Pot] = []
        skipped = False
        for pot in self.active_pots:
            owed = pot.get_player_call_sum(player)
            if owed <= remaining:
                remaining -= owed
                payable.append(pot)
            elif pot.has_player_participated(player):
                message = (
                    f"{player.name} owes ${owed} with ${remaining} left "
                    f"in a pot they already play"
                )
                PotLogger.log_invalid_operation(message)
                raise InvalidGameStateError(message)
            else:
                skipped = True
        return payable, player.chips - remaining, skipped

    def get_affordable_call(self, player: Player) -> int:
        """Chips a call would actually take from the player."""
        _, amount, _ = self._plan_call(player)
        return amount

    def call(self, player: Player) -> int:
        """
        Pay every active pot the player can afford, in order.

        Pots the player cannot afford are pots they were capped out of and they
        simply stay out of them.

        Returns:
            int: Chips the player put in
        """
        payable, _, _ = self._plan_call(player)
        return sum(pot.call(player) for pot in payable)

    def raise_bet(self, player: Player, amount: int) -> int:
        """
        Call, then raise by ``amount``, opening side pots where stacks run out.

        Args:
            player (Player): The raising player
            amount (int): Chips to add on top of the call

        Returns:
            int: Chips the player put in

        Raises:
            InvalidAmountError: If amount is negative
            InsufficientFundsError: If the player cannot cover the call plus the raise
        """
        if amount < 0:
            raise InvalidAmountError(f"Cannot raise by a negative amount ({amount})")
        _, call_amount, skipped = self._plan_call(player)
        if skipped and amount > 0:
            raise InsufficientFundsError(
                f"{player.name} cannot raise without covering every pot"
            )
        if call_amount + amount > player.chips:
            raise InsufficientFundsError(
                f"{player.name} needs ${call_amount + amount} to raise "
                f"but has ${player.chips}"
            )

        paid = self.call(player)
        remaining = self.check_split(player, amount)
        paid += self.current_pot.raise_bet(player, remaining)
        return paid

    def check_split(self, player: Player, amount: int) -> int:
        """
        Cap the current pot at every stack the raise goes over.

        For each player still able to act, their real money is what they would
        have left after calling. Levels below the raise are consumed from the
        smallest up: the raiser puts the level into the current pot, a new pot
        is opened, and players whose real money was exactly that level can no
        longer open pots.

        Args:
            player (Player): The raising player, who has already called
            amount (int): The requested raise

        Returns:
            int: The part of the raise that goes into the newest pot
        """
        levels: Dict[int, List[Player]] = {}
        for round_player in self.round_players:
            real_money = round_player.chips - self.get_player_call_sum(round_player)
            if real_money < 0:
                continue
            levels.setdefault(real_money, []).append(round_player)

        remaining = amount
        consumed = 0
        for level in sorted(levels):
            step = level - consumed
            if step >= remaining:
                break
            self.current_pot.raise_bet(player, step)
            self._open_pot()
            remaining -= step
            consumed = level
            for capped in levels[level]:
                self.round_players.remove(capped)
            PotLogger.log_new_side_pot(
                len(self.pots) - 1, step, [p.name for p in levels[level]]
            )
        return remaining

    def _open_pot(self) -> Pot:
        pot = Pot(self.event_bus)
        self.pots.append(pot)
        self.active_pots.append(pot)
        return pot

    def fold(self, player: Player) -> None:
        """Take the player out of the hand's pots and out of round_players."""
        if player in self.round_players:
            self.round_players.remove(player)
        for pot in self.pots:
            pot.fold(player)

    def reset_raise(self) -> None:
        """Close the street on every active pot and keep only the newest one active."""
        for pot in self.active_pots:
            pot.reset_raise()
        self.active_pots = [self.current_pot]
        PotLogger.log_betting_round_end(self.money)

    def split_pot(self, comparer: PlayerComparer) -> List[PotAward]:
        """
        Pay every pot to its best participants, then reset the ledger.

        Args:
            comparer: Positive when the first player holds the better hand,
                zero for a tie

        Returns:
            List[PotAward]: One award per pot that held chips

        Raises:
            InvalidGameStateError: If a pot holds chips but has no participants
            InvalidOperationError: If a pot is not even
        """
        key = cmp_to_key(comparer)
        awards: List[PotAward] = []
        for index, pot in enumerate(self.pots):
            if not pot.participants:
                if pot.money > 0:
                    message = f"Pot {index} holds ${pot.money} but nobody can win it"
                    PotLogger.log_invalid_operation(message)
                    raise InvalidGameStateError(message)
                continue
            if pot.money == 0:
                continue

            ranked = sorted(pot.participants, key=key)
            best = ranked[-1]
            winners = [p for p in ranked if comparer(best, p) <= 0]
            amount = pot.money
            payouts = pot.split_pot(winners)
            for winner, share in payouts.items():
                PotLogger.log_payout(winner.name, share, index)
            awards.append(
                PotAward(
                    index=index,
                    amount=amount,
                    winners=[w.name for w in winners],
                    payouts={w.name: share for w, share in payouts.items()},
                )
            )

        self.reset()
        return awards

    def reset(self, players: Optional[Iterable[Player]] = None) -> None:
        """Start over with a single empty pot."""
        self.pots = [Pot(self.event_bus)]
        self.active_pots = list(self.pots)
        self.round_players = list(players) if players is not None else []

    def get_players_betting_data(self, players: List[Player]) -> List[List[int]]:
        """
        What each player put into each pot.

        Returns:
            List[List[int]]: One row per player, one column per pot, pots
                ordered from the largest to the smallest
        """
        ordered = sorted(self.pots, key=lambda pot: pot.money, reverse=True)
        return [[pot.get_player_total_bet(p) for pot in ordered] for p in players]

    def validate_conservation(self, players: List[Player], initial_total: int) -> None:
        """
        Check that no chips were created or lost.

        Raises:
            InvalidGameStateError: If stacks plus pots differ from initial_total,
                or a pot's total differs from what its players put in
        """
        for pot in self.pots:
            if pot.money != sum(pot.total_bets.values()):
                message = f"Pot total ${pot.money} differs from its recorded bets"
                PotLogger.log_invalid_operation(message)
                raise InvalidGameStateError(message)

        current = sum(p.chips for p in players) + self.money
        if current != initial_total:
            PotLogger.log_chip_mismatch(
                initial_total,
                current,
                {p.name: p.chips for p in players},
                [pot.money for pot in self.pots],
            )
            raise InvalidGameStateError(
                f"Chip total changed from ${initial_total} to ${current}"
            )

    def get_state(self) -> PotState:
        return PotState(
            pots=[pot.get_snapshot(i) for i, pot in enumerate(self.pots)],
            active_pots=[self.pots.index(pot) for pot in self.active_pots],
            current_raise=self.current_raise,
            total_pot=self.money,
        )

    def log_pots(self) -> None:
        PotLogger.log_side_pots_info(
            [
                {"index": s.index, "amount": s.amount, "participants": s.participants}
                for s in self.get_state().pots
            ]
        )
