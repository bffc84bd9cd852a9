class PokerGameError(Exception):
    """Base exception for poker game errors."""

    pass


class InvalidAmountError(PokerGameError):
    """Raised when a bet or raise amount is negative or otherwise meaningless."""

    pass


class InsufficientFundsError(PokerGameError):
    """Raised when player doesn't have enough chips."""

    pass


class InvalidActionError(PokerGameError):
    """Raised when player action is invalid."""

    pass


class InvalidOperationError(PokerGameError):
    """Raised when a pot operation is used out of order.

    Examples are paying out to a player who never contributed to the pot or
    closing a betting street while some participant has not matched the raise.
    """

    pass


class InvalidGameStateError(PokerGameError):
    """Raised when game state is invalid."""

    pass


class DecisionTimeoutError(PokerGameError):
    """Raised when a player fails to decide before their deadline."""

    pass


class PlayerDisconnectedError(PokerGameError):
    """Raised when a decision provider loses its player."""

    pass
