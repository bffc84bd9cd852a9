from typing import Dict, List, Optional

from data.enums import EventType
from data.types.pot_types import PotSnapshot
from exceptions import InsufficientFundsError, InvalidAmountError, InvalidOperationError
from game.events import EventBus
from game.player import Player
from loggers.pot_logger import PotLogger


class Pot:
    """
    A single pool of chips and the players entitled to it.

    The Pot tracks the street's call target (``current_raise``), what each
    player has put in during the street and over the whole hand, and who is
    still eligible to win it. Every chip that enters the pot comes out of a
    player's stack through ``call``, so the pot total always equals the sum of
    the per-player totals.

    Attributes:
        participants (List[Player]): Contributors not eliminated by folding,
            in the order they first put chips in
        current_bets (Dict[Player, int]): Chips put in by each player this street
        total_bets (Dict[Player, int]): Chips put in by each player this hand
        event_bus (Optional[EventBus]): Receives raise level and pot total changes

    Usage:
        pot = Pot()

        # Alice bets 100, Bob calls
        pot.raise_bet(alice, 100)
        pot.call(bob)

        # Close the street once everyone has matched the raise
        pot.reset_raise()

        # Pay the winners at showdown
        pot.split_pot([alice])

    Note:
        - Every operation checks all of its preconditions before moving chips
        - A pot is even when every participant has matched current_raise
        - The last participant is never folded out, so a pot always has a winner
    """

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._current_raise: int = 0
        self._money: int = 0
        self.participants: List[Player] = []
        self.current_bets: Dict[Player, int] = {}
        self.total_bets: Dict[Player, int] = {}
        self.event_bus = event_bus

    @property
    def current_raise(self) -> int:
        """Chips each participant must have put in this street."""
        return self._current_raise

    @property
    def money(self) -> int:
        """Chips held by the pot."""
        return self._money

    def _set_current_raise(self, value: int) -> None:
        old_raise = self._current_raise
        if value == old_raise:
            return
        self._current_raise = value
        PotLogger.log_raise_change(old_raise, value)
        if self.event_bus:
            self.event_bus.publish(
                EventType.RAISE_LEVEL_CHANGED, old_raise=old_raise, new_raise=value
            )

    def _set_money(self, value: int) -> None:
        old_money = self._money
        if value == old_money:
            return
        self._money = value
        PotLogger.log_pot_change(old_money, value, value - old_money)
        if self.event_bus:
            self.event_bus.publish(
                EventType.POT_TOTAL_CHANGED, old_total=old_money, new_total=value
            )

    def get_player_call_sum(self, player: Player) -> int:
        """
        Chips the player must add to match the current raise.

        A player the pot has not seen yet is registered with no bet this
        street. No chips move.
        """
        current_bet = self.current_bets.setdefault(player, 0)
        return self._current_raise - current_bet

    def raise_bet(self, player: Player, amount: int) -> int:
        """
        Raise the call target by ``amount`` and bring the player up to it.

        Args:
            player (Player): The raising player
            amount (int): Chips to add on top of what the player owes

        Returns:
            int: Chips the player put in (owed amount plus the raise)

        Raises:
            InvalidAmountError: If amount is negative
            InsufficientFundsError: If the player cannot cover the call and the raise

        Side Effects:
            - Increases current_raise and publishes the new level
            - Moves the player's chips into the pot via call()
        """
        if amount < 0:
            raise InvalidAmountError(f"Cannot raise by a negative amount ({amount})")
        owed = self.get_player_call_sum(player)
        if player.chips < owed + amount:
            raise InsufficientFundsError(
                f"{player.name} needs ${owed + amount} to raise but has ${player.chips}"
            )

        self._set_current_raise(self._current_raise + amount)
        return self.call(player)

    def call(self, player: Player) -> int:
        """
        Bring the player's bet this street up to the current raise.

        Calling when nothing is owed is a check and changes nothing.

        Returns:
            int: Chips the player put in

        Raises:
            InsufficientFundsError: If the player cannot cover the owed amount
        """
        owed = self.get_player_call_sum(player)
        if owed == 0:
            return 0
        if player.chips < owed:
            raise InsufficientFundsError(
                f"{player.name} needs ${owed} to call but has ${player.chips}"
            )

        player.pay(owed)
        if player not in self.participants:
            self.participants.append(player)
        self.current_bets[player] = self._current_raise
        self.total_bets[player] = self.total_bets.get(player, 0) + owed
        self._set_money(self._money + owed)
        PotLogger.log_call(player.name, owed, self._money)
        return owed

    def fold(self, player: Player) -> None:
        """Remove the player from the participants unless they are the last one."""
        if player in self.participants and len(self.participants) > 1:
            self.participants.remove(player)
            PotLogger.log_fold_out(player.name, [p.name for p in self.participants])

    def is_even(self) -> bool:
        """Whether every participant has matched the current raise."""
        return all(
            self.current_bets.get(p, 0) == self._current_raise for p in self.participants
        )

    def reset_raise(self) -> None:
        """
        Close the betting street.

        Raises:
            InvalidOperationError: If some participant has not matched the raise
        """
        if not self.is_even():
            bets = {p.name: bet for p, bet in self.current_bets.items()}
            message = (
                f"Cannot close street with uneven pot: "
                f"raise={self._current_raise}, bets={bets}"
            )
            PotLogger.log_invalid_operation(message)
            raise InvalidOperationError(message)
        self.current_bets.clear()
        self._set_current_raise(0)

    def split_pot(self, winners: List[Player]) -> Dict[Player, int]:
        """
        Pay the pot out to the winners and reset it.

        Each winner receives an equal share. Chips that do not divide evenly go
        to the first winner in the given order.

        Args:
            winners (List[Player]): Winning participants, best first

        Returns:
            Dict[Player, int]: Chips paid to each winner

        Raises:
            InvalidOperationError: If winners is empty or repeats a player, the
                pot is not even, or a winner did not take part in the pot
        """
        if not winners or len(set(winners)) != len(winners):
            message = f"Invalid winner list: {[w.name for w in winners]}"
            PotLogger.log_invalid_operation(message)
            raise InvalidOperationError(message)
        outsiders = [w.name for w in winners if w not in self.participants]
        if outsiders:
            message = f"Players {outsiders} did not take part in this pot"
            PotLogger.log_invalid_operation(message)
            raise InvalidOperationError(message)
        if not self.is_even():
            message = "Cannot split a pot that is not even"
            PotLogger.log_invalid_operation(message)
            raise InvalidOperationError(message)

        share, remainder = divmod(self._money, len(winners))
        payouts: Dict[Player, int] = {}
        for i, winner in enumerate(winners):
            amount = share + remainder if i == 0 else share
            winner.collect(amount)
            payouts[winner] = amount

        self.reset()
        return payouts

    def reset(self) -> None:
        """Empty the pot for a new hand."""
        old_pot = self._money
        self.participants = []
        self.current_bets = {}
        self.total_bets = {}
        self._set_money(0)
        self._set_current_raise(0)
        PotLogger.log_pot_reset(old_pot)

    def get_player_total_bet(self, player: Player) -> int:
        return self.total_bets.get(player, 0)

    def has_player_participated(self, player: Player) -> bool:
        return player in self.participants

    def player_can_check(self, player: Player) -> bool:
        return self.current_bets.get(player, 0) == self._current_raise

    def get_snapshot(self, index: int = 0) -> PotSnapshot:
        return PotSnapshot(
            index=index,
            amount=self._money,
            current_raise=self._current_raise,
            participants=[p.name for p in self.participants],
            total_bets={p.name: amount for p, amount in self.total_bets.items()},
        )

    def __repr__(self) -> str:
        return (
            f"Pot(money={self._money}, current_raise={self._current_raise}, "
            f"participants={[p.name for p in self.participants]})"
        )
