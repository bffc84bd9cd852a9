class Card:
    """
    Represents a single playing card with rank and suit.

    A card is immutable after creation and provides a string
    representation for display and logging purposes. Rank values are
    opaque to the round engine; only the external hand ranking reads them.

    Attributes:
        rank (str | int): The card's rank (2-10, 'J', 'Q', 'K', 'A')
        suit (str): The card's suit symbol
    """

    __slots__ = ("rank", "suit")

    def __init__(self, rank, suit: str):
        object.__setattr__(self, "rank", rank)
        object.__setattr__(self, "suit", suit)

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    def __repr__(self) -> str:
        return f"{self.rank}{self.suit}"
