from dataclasses import dataclass
from typing import Optional

MAXIMAL_TIMEOUT = 90  # seconds


@dataclass
class GameConfig:
    """
    Configuration parameters for a poker game.

    This class defines all the customizable parameters that control game behavior,
    including forced bets, betting limits, starting conditions, seat clocks and
    tournament rules.

    Attributes:
        starting_chips (int): Initial chip amount for each player (default: 1000)
        small_blind (int): Amount posted by the first player after the dealer (default: 10)
        big_blind (int): Amount the second player after the dealer completes to (default: 20)
        ante (int): Mandatory bet required from all players before betting (default: 0)
        max_rounds (Optional[int]): Maximum number of hands to play, None for unlimited (default: None)
        session_id (Optional[str]): Unique identifier for the game session (default: None)
        raise_limit (int): Raising turns allowed per seated player in one betting round (default: 4)
        min_bet (Optional[int]): Minimum raise amount, defaults to big blind if not specified
        decision_timeout (Optional[float]): Seconds a player has to act, None disables the clock
        max_decision_attempts (int): Rejected decisions tolerated before the default action applies
        tournament_mode (bool): Grow blinds and antes as the game progresses (default: False)
        blind_increase_interval (Optional[int]): Hands between blind increases in tournament mode
        accept_players_after_start (bool): Seat waiting players between hands (default: False)

    Raises:
        ValueError: If any of the numerical parameters are invalid (negative or zero where not allowed)
    """

    starting_chips: int = 1000
    small_blind: int = 10
    big_blind: int = 20
    ante: int = 0
    max_rounds: Optional[int] = None
    session_id: Optional[str] = None
    raise_limit: int = 4
    min_bet: Optional[int] = None
    decision_timeout: Optional[float] = 30
    max_decision_attempts: int = 3
    tournament_mode: bool = False
    blind_increase_interval: Optional[int] = None
    accept_players_after_start: bool = False

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.starting_chips <= 0:
            raise ValueError("Starting chips must be positive")
        if self.small_blind < 0 or self.big_blind < 0:
            raise ValueError("Blinds cannot be negative")
        if self.small_blind > self.big_blind:
            raise ValueError("Small blind cannot exceed big blind")
        if self.ante < 0:
            raise ValueError("Ante cannot be negative")
        if self.raise_limit <= 0:
            raise ValueError("Raise limit must be positive")
        if self.max_rounds is not None and self.max_rounds <= 0:
            raise ValueError("Max rounds must be positive")
        if self.decision_timeout is not None and not (
            0 < self.decision_timeout < MAXIMAL_TIMEOUT
        ):
            raise ValueError(
                f"Decision timeout must be between 0 and {MAXIMAL_TIMEOUT} seconds"
            )
        if self.max_decision_attempts <= 0:
            raise ValueError("Max decision attempts must be positive")
        if self.blind_increase_interval is not None and self.blind_increase_interval <= 0:
            raise ValueError("Blind increase interval must be positive")
        if self.tournament_mode and self.accept_players_after_start:
            raise ValueError("Tournaments cannot accept players after the start")
        # Set min_bet to big blind if not specified
        if self.min_bet is None:
            self.min_bet = max(self.big_blind, 1)
        elif self.min_bet <= 0:
            raise ValueError("Minimum bet must be positive")
