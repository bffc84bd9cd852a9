from typing import Optional

from pydantic import BaseModel, validator

from data.enums import ActionType


class ActionDecision(BaseModel):
    """
    Represents the action a player chose for their turn.

    Attributes:
        action_type: The type of action to take
        raise_amount: The amount to raise on top of the call, if applicable
        reasoning: Optional free text explaining the choice
    """

    action_type: ActionType
    raise_amount: Optional[int] = None
    reasoning: Optional[str] = None

    @validator("raise_amount", always=True)
    def validate_raise_amount(cls, v, values):
        if values.get("action_type") == ActionType.RAISE:
            if v is None:
                raise ValueError("raise_amount is required when action_type is raise")
            if v <= 0:
                raise ValueError("raise_amount must be positive")
        elif v is not None and v < 0:
            raise ValueError("raise_amount cannot be negative")
        return v

    @classmethod
    def fold(cls, reasoning: Optional[str] = None) -> "ActionDecision":
        return cls(action_type=ActionType.FOLD, reasoning=reasoning)

    @classmethod
    def check(cls, reasoning: Optional[str] = None) -> "ActionDecision":
        return cls(action_type=ActionType.CHECK, reasoning=reasoning)

    @classmethod
    def call(cls, reasoning: Optional[str] = None) -> "ActionDecision":
        return cls(action_type=ActionType.CALL, reasoning=reasoning)

    @classmethod
    def raise_by(cls, amount: int, reasoning: Optional[str] = None) -> "ActionDecision":
        return cls(action_type=ActionType.RAISE, raise_amount=amount, reasoning=reasoning)

    @classmethod
    def all_in(cls, reasoning: Optional[str] = None) -> "ActionDecision":
        return cls(action_type=ActionType.ALL_IN, reasoning=reasoning)

    def __str__(self) -> str:
        if self.action_type == ActionType.RAISE:
            return f"{self.action_type.value} {self.raise_amount}"
        return self.action_type.value
