import logging
from typing import List

logger = logging.getLogger(__name__)


class ShowdownLogger:
    """Handles all logging operations for showdown-related actions."""

    @staticmethod
    def log_showdown_start() -> None:
        """Log the start of showdown phase."""
        logger.info("\n=== Showdown ===")

    @staticmethod
    def log_player_hand(player_name: str, cards: str) -> None:
        """Log a player's cards at showdown."""
        logger.info(f"{player_name} shows: {cards}")

    @staticmethod
    def log_single_winner(winner_name: str, amount: int) -> None:
        """Log when there's a single winner (others folded)."""
        logger.info(f"{winner_name} wins ${amount} (all others folded)")

    @staticmethod
    def log_pot_win(
        pot_index: int, winner_name: str, amount: int, is_split: bool = False
    ) -> None:
        """Log when a player wins a pot."""
        action = "splits" if is_split else "wins"
        pot_name = "main pot" if pot_index == 0 else f"side pot {pot_index}"
        logger.info(f"{winner_name} {action} ${amount} from the {pot_name}")

    @staticmethod
    def log_side_pot_distribution(
        pot_number: int, amount: int, eligible_players: List[str]
    ) -> None:
        logger.debug(f"Pot {pot_number} (${amount}) contested by {eligible_players}")

    @staticmethod
    def log_chip_movements(player_name: str, initial: int, final: int) -> None:
        """Log the net chip movement of a player over the hand."""
        change = final - initial
        if change != 0:
            logger.info(f"{player_name}: ${initial} -> ${final} ({change:+d})")
        else:
            logger.debug(f"{player_name}: ${initial} -> ${final} (no change)")
