"""
Dealing for each supported poker variant.

Every variant exposes the same small surface to the round engine:

- ``begin(num_players)`` deals the private starting cards
- ``can_deal_more()`` tells whether another street follows
- ``deal_next_increment()`` deals that street
- ``fold_seat(seat)`` stops dealing to a folded seat
- ``player_cards(seat)`` / ``community_cards`` expose what was dealt

The variant is picked by its GameType tag through ``create_dealer``; the engine
never branches on the variant itself.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple, Union

from data.enums import GameType
from exceptions import InvalidGameStateError
from loggers.deck_logger import DeckLogger

from .card import Card
from .deck import Deck


@dataclass
class DealtCards:
    """Cards handed out by one dealing step."""

    street: int
    community: List[Card] = field(default_factory=list)
    private: Dict[int, List[Card]] = field(default_factory=dict)


class _SeatDealer:
    """Seat bookkeeping shared by the variants."""

    game_type: GameType
    max_players: int

    def __init__(self, deck: Optional[Deck] = None) -> None:
        self.deck = deck or Deck()
        self.num_players = 0
        self.street = 0
        self.folded: Set[int] = set()
        self.hands: Dict[int, List[Card]] = {}

    def _start(self, num_players: int, per_seat: int) -> DealtCards:
        if not 2 <= num_players <= self.max_players:
            raise ValueError(
                f"{self.game_type.value} needs 2 to {self.max_players} players, "
                f"got {num_players}"
            )
        self.deck.shuffle()
        self.num_players = num_players
        self.street = 0
        self.folded = set()
        self.hands = {seat: self.deck.deal(per_seat) for seat in range(num_players)}
        DeckLogger.log_hole_cards(self.game_type.value, num_players, per_seat)
        return DealtCards(
            street=0, private={seat: list(cards) for seat, cards in self.hands.items()}
        )

    @property
    def live_seats(self) -> List[int]:
        return [seat for seat in range(self.num_players) if seat not in self.folded]

    def fold_seat(self, seat: int) -> None:
        self.folded.add(seat)

    def player_cards(self, seat: int) -> List[Card]:
        return list(self.hands.get(seat, []))

    def _check_can_deal(self) -> None:
        if not self.can_deal_more():
            raise InvalidGameStateError(
                f"No more cards to deal in {self.game_type.value}"
            )

    def can_deal_more(self) -> bool:
        raise NotImplementedError


class CommunityCardDealer(_SeatDealer):
    """Hold'em style dealing: private cards, then a shared flop, turn and river.

    Texas and Omaha differ only in how many private cards each seat gets and
    how many seats fit around the deck.
    """

    streets: Tuple[int, ...] = (3, 1, 1)

    def __init__(
        self,
        game_type: GameType,
        hole_cards: int,
        max_players: int,
        deck: Optional[Deck] = None,
    ) -> None:
        super().__init__(deck)
        self.game_type = game_type
        self.hole_cards = hole_cards
        self.max_players = max_players
        self.board: List[Card] = []

    def begin(self, num_players: int) -> DealtCards:
        self.board = []
        return self._start(num_players, self.hole_cards)

    @property
    def community_cards(self) -> List[Card]:
        return list(self.board)

    def can_deal_more(self) -> bool:
        return self.num_players > 0 and self.street < len(self.streets)

    def deal_next_increment(self) -> DealtCards:
        self._check_can_deal()
        cards = self.deck.deal(self.streets[self.street])
        self.board.extend(cards)
        self.street += 1
        DeckLogger.log_increment(self.street, [str(c) for c in cards], {})
        return DealtCards(street=self.street, community=cards)


class StudDealer(_SeatDealer):
    """Seven-card stud: three private cards, then one more per live seat up to seven."""

    game_type = GameType.SEVEN_CARD_STUD
    max_players = 7
    starting_cards = 3
    total_cards = 7

    def begin(self, num_players: int) -> DealtCards:
        return self._start(num_players, self.starting_cards)

    @property
    def community_cards(self) -> List[Card]:
        return []

    def can_deal_more(self) -> bool:
        if self.num_players == 0:
            return False
        return self.starting_cards + self.street < self.total_cards and bool(
            self.live_seats
        )

    def deal_next_increment(self) -> DealtCards:
        self._check_can_deal()
        private: Dict[int, List[Card]] = {}
        for seat in self.live_seats:
            cards = self.deck.deal(1)
            self.hands[seat].extend(cards)
            private[seat] = cards
        self.street += 1
        DeckLogger.log_increment(
            self.street, [], {seat: [str(c) for c in cards] for seat, cards in private.items()}
        )
        return DealtCards(street=self.street, private=private)


Dealer = Union[CommunityCardDealer, StudDealer]

MAX_PLAYERS = {
    GameType.TEXAS_HOLDEM: 23,
    GameType.OMAHA_HOLDEM: 11,
    GameType.SEVEN_CARD_STUD: StudDealer.max_players,
}


def create_dealer(game_type: GameType, deck: Optional[Deck] = None) -> Dealer:
    """Build the dealing adapter for a variant.

    Raises:
        ValueError: If the variant is not supported
    """
    if game_type == GameType.TEXAS_HOLDEM:
        return CommunityCardDealer(
            game_type, hole_cards=2, max_players=MAX_PLAYERS[game_type], deck=deck
        )
    if game_type == GameType.OMAHA_HOLDEM:
        return CommunityCardDealer(
            game_type, hole_cards=4, max_players=MAX_PLAYERS[game_type], deck=deck
        )
    if game_type == GameType.SEVEN_CARD_STUD:
        return StudDealer(deck)
    raise ValueError(f"Unsupported game type: {game_type}")
