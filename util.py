import logging
import sys
from datetime import datetime
from typing import Dict, Optional, Union

from loggers.config import configure_loggers


def setup_logging(
    session_id: str,
    log_file: Optional[str] = "poker_game.log",
    log_levels: Optional[Dict[str, Union[int, str]]] = None,
) -> None:
    """
    Configure logging with UTF-8 encoding support and session management.

    Sets up a logging system that outputs to the console and, unless disabled,
    to a log file that is overwritten for every session.

    Args:
        session_id (str): Unique identifier for this game session.
        log_file (Optional[str]): File to write, None for console only.
        log_levels: Per-concern levels passed on to configure_loggers.

    Side Effects:
        - Clears existing logging handlers
        - Creates/overwrites the log file
        - Sets the level of every per-concern logger
        - Logs session start information with timestamp
    """
    # Clear any existing handlers
    logging.getLogger().handlers = []

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8", mode="w"))

    logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=handlers)
    configure_loggers(log_levels)

    logging.info(f"\n{'='*70}")
    logging.info(f"New Poker Game Session Started - ID: {session_id}")
    logging.info(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logging.info(f"{'='*70}\n")
