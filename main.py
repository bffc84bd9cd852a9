import logging
import random
from datetime import datetime

from config import load_game_config
from data.enums import GameType
from game.decisions import RandomProvider
from game.game import PokerGame
from game.player import Player
from util import setup_logging

logger = logging.getLogger(__name__)

RANK_VALUES = {"J": 11, "Q": 12, "K": 13, "A": 14}


def card_value(card) -> int:
    return RANK_VALUES.get(card.rank, card.rank)


def high_card_comparator(first: Player, second: Player) -> int:
    """Demo ranking: the player holding the higher private cards wins.

    Real hand evaluation is plugged in by the caller; this keeps the demo
    self-contained.
    """
    first_values = sorted((card_value(c) for c in first.cards), reverse=True)
    second_values = sorted((card_value(c) for c in second.cards), reverse=True)
    if first_values == second_values:
        return 0
    return 1 if first_values > second_values else -1


def main():
    session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    config = load_game_config(session_id=session_id, max_rounds=20)
    setup_logging(config.session_id)

    players = [
        Player("Alice", chips=config.starting_chips),
        Player("Bob", chips=config.starting_chips),
        Player("Charlie", chips=config.starting_chips),
        Player("Randy", chips=config.starting_chips),
    ]

    game = PokerGame(
        players,
        high_card_comparator,
        game_type=GameType.TEXAS_HOLDEM,
        config=config,
        default_provider=RandomProvider(random.Random(), fold_weight=0.2),
    )
    standings = game.play_game()
    logger.info(f"Winner: {standings[0]['name']} with ${standings[0]['chips']}")


if __name__ == "__main__":
    main()
