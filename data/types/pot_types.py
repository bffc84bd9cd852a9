from typing import Dict, List

from pydantic import BaseModel, Field


class PotSnapshot(BaseModel):
    """Read-only view of one pot in the ledger."""

    index: int
    amount: int
    current_raise: int
    participants: List[str]
    total_bets: Dict[str, int] = Field(default_factory=dict)


class PotState(BaseModel):
    """Represents the state of all pots of a hand.

    Attributes:
        pots: Every pot of the hand in creation order
        active_pots: Indexes of the pots still taking bets this street
        current_raise: Sum of the call targets of the active pots
        total_pot: Chips held across all pots
    """

    pots: List[PotSnapshot] = Field(default_factory=list)
    active_pots: List[int] = Field(default_factory=list)
    current_raise: int = 0
    total_pot: int = 0

    @property
    def main_pot(self) -> int:
        return self.pots[0].amount if self.pots else 0

    @property
    def side_pots(self) -> List[PotSnapshot]:
        return self.pots[1:]


class PotAward(BaseModel):
    """Outcome of paying out one pot at showdown."""

    index: int
    amount: int
    winners: List[str]
    payouts: Dict[str, int]
