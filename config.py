import os
from typing import Optional

from dotenv import load_dotenv

from game.config import GameConfig

ENV_PREFIX = "POKER_"


def _get_int(name: str) -> Optional[int]:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    return int(value) if value not in (None, "") else None


def _get_float(name: str) -> Optional[float]:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    return float(value) if value not in (None, "") else None


def _get_bool(name: str) -> Optional[bool]:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value in (None, ""):
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_game_config(env_file: Optional[str] = None, **overrides) -> GameConfig:
    """Build a GameConfig from POKER_* environment variables.

    Values are read after loading the optional ``.env`` file. Keyword overrides
    win over the environment, and anything left unset keeps the GameConfig
    default.

    Args:
        env_file: Path of the dotenv file, ``.env`` lookup when omitted
        **overrides: GameConfig fields to force

    Returns:
        GameConfig: The validated configuration

    Raises:
        ValueError: If a variable cannot be parsed or the result is invalid
    """
    load_dotenv(env_file)

    values = {
        "starting_chips": _get_int("STARTING_CHIPS"),
        "small_blind": _get_int("SMALL_BLIND"),
        "big_blind": _get_int("BIG_BLIND"),
        "ante": _get_int("ANTE"),
        "max_rounds": _get_int("MAX_ROUNDS"),
        "raise_limit": _get_int("RAISE_LIMIT"),
        "min_bet": _get_int("MIN_BET"),
        "decision_timeout": _get_float("DECISION_TIMEOUT"),
        "max_decision_attempts": _get_int("MAX_DECISION_ATTEMPTS"),
        "tournament_mode": _get_bool("TOURNAMENT_MODE"),
        "blind_increase_interval": _get_int("BLIND_INCREASE_INTERVAL"),
        "accept_players_after_start": _get_bool("ACCEPT_PLAYERS_AFTER_START"),
        "session_id": os.getenv(f"{ENV_PREFIX}SESSION_ID") or None,
    }
    values = {key: value for key, value in values.items() if value is not None}
    values.update(overrides)
    return GameConfig(**values)
