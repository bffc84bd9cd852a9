from enum import Enum


class GameType(str, Enum):
    """Valid poker game types."""

    TEXAS_HOLDEM = "texas-holdem"
    OMAHA_HOLDEM = "omaha-holdem"
    SEVEN_CARD_STUD = "7-card-stud"


class ActionType(str, Enum):
    """Valid poker actions.

    CHECK and CALL are the same ledger operation: pay whatever is owed, which
    may be nothing.
    """

    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    RAISE = "raise"
    ALL_IN = "all-in"


class EngineState(str, Enum):
    """States the round engine moves through during one hand."""

    IDLE = "idle"
    DEALING = "dealing"
    BETTING_ROUND = "betting_round"
    SHOWDOWN = "showdown"
    POT_DISTRIBUTION = "pot_distribution"


class EventType(str, Enum):
    """Notifications published to table observers."""

    RAISE_LEVEL_CHANGED = "raise_level_changed"
    POT_TOTAL_CHANGED = "pot_total_changed"
    STATE_CHANGED = "state_changed"
    ANTES_AND_DEALER = "antes_and_dealer"
    PLAYER_ACTION = "player_action"
    CARDS_DEALT = "cards_dealt"
    HAND_COMPLETE = "hand_complete"
