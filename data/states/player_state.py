from typing import TYPE_CHECKING, Any, Dict, List

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from game.player import Player


class PlayerState(BaseModel):
    """Represents the public state of a player during a hand.

    Attributes:
        name: Player's display name
        chips: Current chip count
        bet: Chips put in during the current street
        folded: Whether the player has folded this hand
        is_all_in: Whether the player has no chips behind
        cards: The player's private cards, only filled in when requested
    """

    name: str
    chips: int
    bet: int
    folded: bool
    is_all_in: bool
    cards: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert player state to dictionary representation."""
        return self.dict()

    @classmethod
    def from_player(
        cls, player: "Player", private_attributes: bool = False
    ) -> "PlayerState":
        """Create a PlayerState instance from a Player object.

        Args:
            player: The player instance to create state from
            private_attributes: Whether to include the player's cards
        """
        return cls(
            name=player.name,
            chips=player.chips,
            bet=player.bet,
            folded=player.folded,
            is_all_in=player.is_all_in,
            cards=[str(card) for card in player.cards] if private_attributes else [],
        )
