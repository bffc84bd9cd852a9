from typing import List

from data.states.player_state import PlayerState
from exceptions import InsufficientFundsError, InvalidAmountError
from loggers.player_logger import PlayerLogger

from .card import Card


class Player:
    """
    Represents a seat at the table: a name, a stack and the cards of the hand.

    The pot ledger moves chips in and out of ``chips`` in place; it never
    copies players. Players are identified by name, so two Player objects with
    the same name are the same seat for every pot and table lookup.

    Attributes:
        name (str): The player's display name
        chips (int): Chips the player has behind, never negative
        bet (int): Chips put in during the current street
        folded (bool): Whether the player has folded in the current hand
        cards (List[Card]): Private cards dealt to the player this hand
    """

    name: str
    chips: int
    bet: int
    folded: bool
    cards: List[Card]

    def __init__(self, name: str, chips: int = 1000) -> None:
        """
        Initialize a new player with a name and starting chips.

        Args:
            name (str): The player's display name
            chips (int, optional): Starting amount of chips. Defaults to 1000.

        Raises:
            ValueError: If name is empty or chips is negative
        """
        if not name or name.isspace():
            raise ValueError("Player name cannot be empty or whitespace")
        if not isinstance(chips, int):
            raise ValueError("Chips must be an integer value")
        if chips < 0:
            raise ValueError("Cannot initialize player with negative chips")

        self.name = name
        self.chips = chips
        self.bet = 0
        self.folded = False
        self.cards = []

        PlayerLogger.log_player_creation(name, chips)

    @property
    def is_all_in(self) -> bool:
        return self.chips == 0 and not self.folded

    def pay(self, amount: int) -> int:
        """
        Move chips from the stack into the current street's bet.

        Args:
            amount (int): Chips to pay

        Returns:
            int: The amount paid

        Raises:
            InvalidAmountError: If amount is negative
            InsufficientFundsError: If the stack cannot cover the amount
        """
        if amount < 0:
            PlayerLogger.log_invalid_bet(self.name, "Cannot place negative bet")
            raise InvalidAmountError("Cannot place negative bet")
        if amount > self.chips:
            PlayerLogger.log_invalid_bet(
                self.name, f"Bet of ${amount} exceeds stack of ${self.chips}"
            )
            raise InsufficientFundsError(
                f"{self.name} cannot pay ${amount} with ${self.chips}"
            )

        self.chips -= amount
        self.bet += amount
        PlayerLogger.log_bet_placement(self.name, amount, self.bet, self.chips)
        if self.chips == 0 and amount > 0:
            PlayerLogger.log_all_in(self.name, self.bet)
        return amount

    def collect(self, amount: int) -> None:
        """Add pot winnings to the stack."""
        if amount < 0:
            raise InvalidAmountError("Cannot collect a negative amount")
        old_chips = self.chips
        self.chips += amount
        PlayerLogger.log_chips_update(self.name, old_chips, self.chips)

    def reset_bet(self) -> None:
        """Clear the current street's bet."""
        previous_bet = self.bet
        self.bet = 0
        PlayerLogger.log_state_reset(self.name, previous_bet, "new street")

    def reset_for_new_hand(self) -> None:
        """Reset player state for a new hand."""
        self.bet = 0
        self.folded = False
        self.cards = []
        PlayerLogger.log_state_reset(self.name, context="new hand")

    def get_state(self, private_attributes: bool = False) -> PlayerState:
        return PlayerState.from_player(self, private_attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"{self.name} (${self.chips})"

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, chips={self.chips}, bet={self.bet})"
