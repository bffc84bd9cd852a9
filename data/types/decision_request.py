from typing import List, Optional

from pydantic import BaseModel, validator

from data.enums import ActionType


class DecisionRequest(BaseModel):
    """
    Everything a player needs to choose an action for the current turn.

    The request is rebuilt and resent with ``last_error`` filled in whenever a
    previous answer was rejected.

    Attributes:
        player_name: Name of the player to act
        chips: Chips the player has behind
        call_amount: Chips owed to stay in the hand (0 means checking is possible)
        min_raise: Smallest raise accepted on top of the call
        max_raise: Largest raise the player can afford on top of the call
        can_raise: Whether raising is still allowed this round
        pot_total: All chips currently in the pots
        current_raise: The street's call target
        deadline: Clock reading after which the default action applies
        attempt: 1 for the first request of the turn, incremented on every re-prompt
        last_error: Why the previous answer was rejected
    """

    player_name: str
    chips: int
    call_amount: int
    min_raise: int
    max_raise: int
    can_raise: bool = True
    pot_total: int = 0
    current_raise: int = 0
    deadline: Optional[float] = None
    attempt: int = 1
    last_error: Optional[str] = None

    @validator("chips", "call_amount", "min_raise", "max_raise", "pot_total", "current_raise")
    def validate_non_negative(cls, v):
        if v < 0:
            raise ValueError("amounts cannot be negative")
        return v

    @property
    def all_in_only(self) -> bool:
        """True when calling takes the whole stack, so no raise is possible."""
        return self.call_amount >= self.chips

    def legal_actions(self) -> List[ActionType]:
        actions = [ActionType.FOLD]
        if self.call_amount == 0:
            actions.append(ActionType.CHECK)
        else:
            actions.append(ActionType.CALL)
        if self.can_raise and self.max_raise > 0:
            actions.append(ActionType.RAISE)
        if self.chips > 0 and (self.can_raise or self.all_in_only):
            actions.append(ActionType.ALL_IN)
        return actions
