from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from data.enums import EngineState


@dataclass
class RoundState:
    """Represents the progress of the hand the engine is playing."""

    hand_number: int
    state: EngineState = EngineState.IDLE
    street: int = 0
    raise_count: int = 0
    dealer_position: int = 0
    first_bettor_index: Optional[int] = None
    last_raiser: Optional[str] = None
    playing: List[str] = field(default_factory=list)
    community_cards: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate the state after initialization."""
        self.validate_non_negative()

    def validate_non_negative(self) -> None:
        """Validate that numeric fields are non-negative."""
        for field_name in ["hand_number", "street", "raise_count", "dealer_position"]:
            value = getattr(self, field_name)
            if value < 0:
                raise ValueError(f"{field_name} cannot be negative")

    @classmethod
    def new_hand(cls, hand_number: int, dealer_position: int = 0) -> "RoundState":
        """Create a round state for the start of a hand."""
        return cls(hand_number=hand_number, dealer_position=dealer_position)

    def to_dict(self) -> Dict[str, Any]:
        """Convert round state to a dictionary."""
        return {
            "hand_number": self.hand_number,
            "state": self.state.value,
            "street": self.street,
            "raise_count": self.raise_count,
            "dealer_position": self.dealer_position,
            "first_bettor_index": self.first_bettor_index,
            "last_raiser": self.last_raiser,
            "playing": list(self.playing),
            "community_cards": list(self.community_cards),
        }
