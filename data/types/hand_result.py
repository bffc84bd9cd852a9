from typing import Dict, List

from pydantic import BaseModel, Field

from data.types.pot_types import PotAward


class HandResult(BaseModel):
    """Summary of one finished hand.

    Attributes:
        hand_number: Sequence number of the hand in the game
        awards: One entry per pot that held chips
        chip_changes: Net chip change per player over the hand
        eliminated: Players left with no chips after the payout
        showdown: False when everyone but one player folded
    """

    hand_number: int
    awards: List[PotAward] = Field(default_factory=list)
    chip_changes: Dict[str, int] = Field(default_factory=dict)
    eliminated: List[str] = Field(default_factory=list)
    showdown: bool = True

    @property
    def winners(self) -> List[str]:
        names: List[str] = []
        for award in self.awards:
            for name in award.winners:
                if name not in names:
                    names.append(name)
        return names
