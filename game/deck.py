import random
from typing import List, Optional

from loggers.deck_logger import DeckLogger

from .card import Card


class Deck:
    """A standard 52-card deck with tracking of dealt cards."""

    ranks = [2, 3, 4, 5, 6, 7, 8, 9, 10, "J", "Q", "K", "A"]
    suits = ["♣", "♦", "♥", "♠"]

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize a new deck with all 52 cards.

        Args:
            rng: Random source used for shuffling, the module generator when omitted
        """
        self.rng = rng or random.Random()
        self.cards = [Card(rank, suit) for suit in self.suits for rank in self.ranks]
        self.dealt_cards: List[Card] = []

    def shuffle(self) -> None:
        """Put every dealt card back and shuffle the full deck."""
        self.cards.extend(self.dealt_cards)
        self.dealt_cards = []
        self.rng.shuffle(self.cards)
        DeckLogger.log_shuffle(len(self.cards))

    def deal(self, num: int = 1) -> List[Card]:
        """
        Deal a specified number of cards from the deck.

        Args:
            num: Number of cards to deal

        Returns:
            List of dealt cards

        Raises:
            ValueError: If requesting more cards than available
        """
        if num > len(self.cards):
            DeckLogger.log_deal_error(num, len(self.cards))
            raise ValueError(
                f"Cannot deal {num} cards. Only {len(self.cards)} cards remaining."
            )

        dealt = self.cards[:num]
        self.cards = self.cards[num:]
        self.dealt_cards.extend(dealt)
        return dealt

    def remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def __str__(self) -> str:
        return f"Deck: {len(self.cards)} cards remaining, {len(self.dealt_cards)} dealt"
