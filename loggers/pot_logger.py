import logging
from typing import Dict, List

logger = logging.getLogger(__name__)


class PotLogger:
    """Handles all logging operations for pot-related actions."""

    @staticmethod
    def log_pot_change(old_pot: int, new_pot: int, amount: int) -> None:
        """Log changes to the pot amount."""
        logger.debug(f"Pot change: {old_pot} -> {new_pot} (+{amount})")

    @staticmethod
    def log_raise_change(old_raise: int, new_raise: int) -> None:
        """Log changes to the amount needed to call."""
        logger.debug(f"Raise level: {old_raise} -> {new_raise}")

    @staticmethod
    def log_call(player_name: str, amount: int, pot: int) -> None:
        logger.debug(f"{player_name} puts ${amount} in the pot (pot now ${pot})")

    @staticmethod
    def log_fold_out(player_name: str, remaining: List[str]) -> None:
        """Log a player removed from a pot's participants."""
        logger.debug(f"{player_name} folded out of pot, remaining: {remaining}")

    @staticmethod
    def log_pot_reset(old_pot: int) -> None:
        """Log pot reset operations."""
        logger.debug(f"Pot reset: {old_pot}->0")

    @staticmethod
    def log_new_side_pot(index: int, threshold: int, capped: List[str]) -> None:
        """Log creation of a new side pot."""
        logger.debug(
            f"Created pot {index} after raising ${threshold}, capped players: {capped}"
        )

    @staticmethod
    def log_payout(player_name: str, amount: int, pot_index: int) -> None:
        logger.info(f"{player_name} collects ${amount} from pot {pot_index}")

    @staticmethod
    def log_side_pots_info(pots: List[Dict]) -> None:
        """Log detailed side pot information."""
        logger.info("\nPots:")
        for pot in pots:
            players_str = ", ".join(pot["participants"])
            logger.info(f"  Pot {pot['index']}: ${pot['amount']} (Eligible: {players_str})")

    @staticmethod
    def log_invalid_operation(message: str) -> None:
        logger.error(f"Invalid pot operation: {message}")

    @staticmethod
    def log_chip_mismatch(
        initial: int, current: int, players: Dict[str, int], pots: List[int]
    ) -> None:
        """Log chip total mismatch errors."""
        logger.error(f"Total chips mismatch - Initial: {initial}, Current: {current}")
        logger.error(f"Player chips: {players}")
        logger.error(f"Pots: {pots}")

    @staticmethod
    def log_betting_round_end(new_pot: int) -> None:
        """Log end of betting round."""
        logger.debug(f"End of betting round - New pot total: {new_pot}")
