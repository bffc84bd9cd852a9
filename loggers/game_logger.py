import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class GameLogger:
    """Handles all logging operations for the main game flow and state changes."""

    @staticmethod
    def log_game_config(
        game_type: str,
        players: List[str],
        starting_chips: int,
        small_blind: int,
        big_blind: int,
        ante: int,
        max_rounds: Optional[int],
        session_id: Optional[str],
    ) -> None:
        """Log the initial game configuration."""
        logger.info(f"\n{'='*50}")
        logger.info(f"Game Configuration ({game_type})")
        logger.info(f"{'='*50}")
        logger.info(f"Players: {', '.join(players)}")
        logger.info(f"Starting chips: ${starting_chips}")
        logger.info(f"Blinds: ${small_blind}/${big_blind}")
        logger.info(f"Ante: ${ante}")
        if max_rounds:
            logger.info(f"Max rounds: {max_rounds}")
        if session_id:
            logger.info(f"Session ID: {session_id}")
        logger.info(f"{'='*50}\n")

    @staticmethod
    def log_round_header(hand_number: int) -> None:
        """Log the start of a new hand."""
        logger.info(f"\n{'='*50}")
        logger.info(f"Hand {hand_number}")
        logger.info(f"{'='*50}")

    @staticmethod
    def log_state_change(old_state: str, new_state: str) -> None:
        logger.debug(f"Engine state: {old_state} -> {new_state}")

    @staticmethod
    def log_chip_counts(chips_dict: Dict[str, int], message: str) -> None:
        """Log chip counts for all players."""
        logger.info(f"\n{message}:")
        for player_name, chips in sorted(
            chips_dict.items(), key=lambda x: x[1], reverse=True
        ):
            logger.info(f"  {player_name}: ${chips}")

    @staticmethod
    def log_betting_structure(
        small_blind: int, big_blind: int, ante: int, min_bet: int
    ) -> None:
        """Log the current betting structure."""
        logger.info("\nBetting structure:")
        logger.info(f"  Small blind: ${small_blind}")
        logger.info(f"  Big blind: ${big_blind}")
        if ante > 0:
            logger.info(f"  Ante: ${ante}")
        logger.info(f"  Minimum raise: ${min_bet}")

    @staticmethod
    def log_blind_increase(ante: int, small_blind: int, big_blind: int) -> None:
        logger.info(
            f"Blinds increase to ${small_blind}/${big_blind}, ante ${ante}"
        )

    @staticmethod
    def log_phase_header(phase: str) -> None:
        """Log the start of a game phase."""
        logger.info(f"\n====== {phase} ======\n")

    @staticmethod
    def log_player_elimination(player_name: str) -> None:
        """Log when a player is eliminated."""
        logger.info(f"\n{player_name} is eliminated (out of chips)!")

    @staticmethod
    def log_hand_aborted(
        hand_number: int, error: Exception, refunds: Dict[str, int]
    ) -> None:
        """Log a hand stopped by an error and the chips handed back."""
        logger.error(f"Hand #{hand_number} aborted: {error}")
        for name, amount in refunds.items():
            logger.info(f"  {name} gets ${amount} back from the pot")

    @staticmethod
    def log_player_joined(player_name: str, chips: int) -> None:
        logger.info(f"{player_name} joins the table with ${chips}")

    @staticmethod
    def log_game_winner(winner_name: str, chips: int) -> None:
        """Log the game winner."""
        logger.info(f"\nGame Over! {winner_name} wins with ${chips}!")

    @staticmethod
    def log_all_bankrupt() -> None:
        """Log when all players are bankrupt."""
        logger.info("\nGame Over! All players are bankrupt!")

    @staticmethod
    def log_max_rounds_reached(rounds: int) -> None:
        """Log when maximum rounds is reached."""
        logger.info(f"\nGame ended after {rounds} hands!")

    @staticmethod
    def log_game_summary(
        rounds_played: int,
        max_rounds: Optional[int],
        final_standings: List[Dict[str, Any]],
    ) -> None:
        """Log the final game summary."""
        logger.info("\n=== Game Summary ===")
        logger.info(f"Total hands played: {rounds_played}")
        if max_rounds and rounds_played >= max_rounds:
            logger.info("Game ended due to maximum rounds limit")

        logger.info("\nFinal Standings:")
        for i, player in enumerate(final_standings, 1):
            status = " (eliminated)" if player["eliminated"] else ""
            logger.info(f"{i}. {player['name']}: ${player['chips']}{status}")
