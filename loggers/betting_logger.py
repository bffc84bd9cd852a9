import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class BettingLogger:
    """Handles all logging operations for betting-related actions."""

    @staticmethod
    def log_player_turn(
        player_name: str,
        chips: int,
        call_amount: int,
        pot: int,
        playing: List[str],
        last_raiser: Optional[str] = None,
    ) -> None:
        """Log the start of a player's turn with all relevant information."""
        logger.info(f"---- {player_name} is active ----")
        logger.info(f"  Playing: {playing}")
        logger.info(f"  Last raiser: {last_raiser if last_raiser else 'None'}")
        logger.info(f"  Player chips: ${chips}")
        logger.info(f"  To call: ${call_amount}")
        logger.info(f"  Current pot: ${pot}")

    @staticmethod
    def log_player_action(
        player_name: str,
        action: str,
        amount: int = 0,
        is_all_in: bool = False,
        pot: Optional[int] = None,
    ) -> None:
        """Log a player's betting action."""
        status = " (all in)" if is_all_in else ""

        if action == "fold":
            logger.info(f"{player_name} folds")
        elif action == "check":
            logger.info(f"{player_name} checks")
        elif action == "call":
            logger.info(f"{player_name} calls ${amount}{status}")
        elif action in ("raise", "all-in"):
            logger.info(f"{player_name} raises ${amount}{status}")

        if pot is not None:
            logger.info(f"  Pot after action: ${pot}")

    @staticmethod
    def log_raise_limit(max_raises: int) -> None:
        """Log when the raise allowance of a round is used up."""
        logger.info(f"Raise allowance ({max_raises} turns) used up, raising closed")

    @staticmethod
    def log_rejected_action(
        player_name: str, action: str, reason: str, attempt: int
    ) -> None:
        """Log an action that failed validation and will be asked again."""
        logger.warning(
            f"Rejected {action} from {player_name} (attempt {attempt}): {reason}"
        )

    @staticmethod
    def log_default_action(player_name: str, action: str, reason: str) -> None:
        logger.warning(f"{player_name} {reason}, defaulting to {action}")

    @staticmethod
    def log_blind_or_ante(
        player_name: str,
        amount: int,
        actual_amount: int,
        is_ante: bool = False,
        is_small_blind: bool = False,
    ) -> None:
        """Log blind or ante posting."""
        if is_ante:
            bet_type = "ante"
        elif is_small_blind:
            bet_type = "small blind"
        else:
            bet_type = "big blind"

        if actual_amount < amount:
            logger.info(
                f"{player_name} posts partial {bet_type} of ${actual_amount} (all in)"
            )
        else:
            logger.info(f"{player_name} posts {bet_type} of ${actual_amount}")

    @staticmethod
    def log_collecting_antes(total: int) -> None:
        """Log the antes collected at the start of the hand."""
        logger.info(f"Collected antes: ${total}")

    @staticmethod
    def log_skip_round(reason: str) -> None:
        logger.info(f"Skipping betting round: {reason}")

    @staticmethod
    def log_line_break() -> None:
        """Log a line break for readability."""
        logger.info("")
