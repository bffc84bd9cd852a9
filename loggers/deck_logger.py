import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class DeckLogger:
    """Handles all logging operations for deck and dealing actions."""

    @staticmethod
    def log_shuffle(remaining_cards: Optional[int] = None) -> None:
        """Log deck shuffling."""
        logger.debug(f"Shuffling deck with {remaining_cards} cards")

    @staticmethod
    def log_deal_error(requested: int, available: int) -> None:
        """Log error when trying to deal too many cards."""
        logger.error(
            f"Cannot deal {requested} cards. Only {available} cards remaining."
        )

    @staticmethod
    def log_hole_cards(variant: str, seats: int, per_seat: int) -> None:
        logger.info(f"{variant}: dealing {per_seat} cards to {seats} seats")

    @staticmethod
    def log_increment(
        street: int, community: List[str], private: Dict[int, List[str]]
    ) -> None:
        """Log the cards dealt for a new street."""
        if community:
            logger.info(f"Street {street}: board {' '.join(community)}")
        if private:
            logger.debug(f"Street {street}: {len(private)} seats dealt one card each")
