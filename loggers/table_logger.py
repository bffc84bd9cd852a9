import logging
from typing import List

logger = logging.getLogger(__name__)


class TableLogger:
    """Handles all logging operations for table-related actions and state changes."""

    @staticmethod
    def log_table_creation(num_players: int) -> None:
        """Log when a new table is created."""
        logger.debug(f"Table seated with {num_players} players")

    @staticmethod
    def log_dealer_position(position: int, player_name: str) -> None:
        """Log dealer button position."""
        logger.info(f"Dealer button at position {position} ({player_name})")

    @staticmethod
    def log_player_states(
        playing: List[str], all_in: List[str], folded: List[str]
    ) -> None:
        """Log current state of all players at the table."""
        logger.debug("Table state:")
        logger.debug(f"  Playing: {', '.join(playing)}")
        if all_in:
            logger.debug(f"  All-in players: {', '.join(all_in)}")
        if folded:
            logger.debug(f"  Folded players: {', '.join(folded)}")

    @staticmethod
    def log_round_complete(reason: str) -> None:
        """Log when a betting round is complete."""
        logger.info(f"Betting round complete: {reason}")

    @staticmethod
    def log_skip_player(player_name: str, reason: str) -> None:
        """Log when a player is skipped in the rotation."""
        logger.debug(f"Skipping {player_name}: {reason}")
