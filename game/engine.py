"""
The round engine: plays one hand from the deal to the payout.

A hand moves through a fixed set of states::

    IDLE -> DEALING -> BETTING_ROUND -> DEALING ... -> SHOWDOWN
         -> POT_DISTRIBUTION -> IDLE

Betting rounds alternate with dealing for as long as the variant has cards
to deal and more than one player is left. Every state change is published on
the event bus.
"""

from typing import Callable, Dict, List, Optional

from data.enums import EngineState, EventType, GameType
from data.states.round_state import RoundState
from data.types.hand_result import HandResult
from exceptions import InvalidGameStateError
from game.config import GameConfig
from game.dealing import DealtCards, create_dealer
from game.decisions import ActionProvider, SeatClock
from game.deck import Deck
from game.events import EventBus
from game.player import Player
from game.side_pot import SidePot
from game.table import Table
from loggers.game_logger import GameLogger
from loggers.player_logger import PlayerLogger

from . import betting, showdown

HandComparator = Callable[[Player, Player], int]

ALLOWED_TRANSITIONS = {
    EngineState.IDLE: {EngineState.DEALING},
    EngineState.DEALING: {EngineState.BETTING_ROUND},
    EngineState.BETTING_ROUND: {EngineState.DEALING, EngineState.SHOWDOWN},
    EngineState.SHOWDOWN: {EngineState.POT_DISTRIBUTION},
    EngineState.POT_DISTRIBUTION: {EngineState.IDLE},
}


class RoundEngine:
    """
    Plays single hands of a poker variant.

    The engine owns the hand's ledger and table while a hand is running and
    mutates the players' stacks in place. Hand ranking is not its business:
    the comparator passed in decides who holds the better hand.

    Attributes:
        game_type (GameType): Variant being dealt
        config (GameConfig): Betting structure and limits
        hand_comparator (HandComparator): External hand ranking
        providers (Dict[str, ActionProvider]): Decision source per player name
        default_provider (Optional[ActionProvider]): Used for players without one
        event_bus (EventBus): Observer channel
        seat_clock (SeatClock): Deadlines for decisions
        ante, small_blind, big_blind (int): Current forced bet levels
        state (EngineState): Where the engine is in the hand
        table (Optional[Table]): Seats of the running hand
        pot (Optional[SidePot]): Ledger of the running hand

    Example:
        >>> engine = RoundEngine(GameType.TEXAS_HOLDEM, config, compare_hands,
        ...                      providers={"Alice": alice_ai, "Bob": bob_ai})
        >>> result = engine.play_hand([alice, bob], dealer_index=0)
    """

    def __init__(
        self,
        game_type: GameType,
        config: GameConfig,
        hand_comparator: HandComparator,
        providers: Optional[Dict[str, ActionProvider]] = None,
        default_provider: Optional[ActionProvider] = None,
        event_bus: Optional[EventBus] = None,
        seat_clock: Optional[SeatClock] = None,
        deck: Optional[Deck] = None,
    ) -> None:
        self.game_type = game_type
        self.config = config
        self.hand_comparator = hand_comparator
        self.providers = dict(providers or {})
        self.default_provider = default_provider
        self.event_bus = event_bus or EventBus()
        self.seat_clock = seat_clock or SeatClock(config.decision_timeout)
        self.dealer = create_dealer(game_type, deck)

        self.ante = config.ante
        self.small_blind = config.small_blind
        self.big_blind = config.big_blind

        self.state = EngineState.IDLE
        self.hand_number = 0
        self.total_chips = 0
        self.table: Optional[Table] = None
        self.pot: Optional[SidePot] = None
        self.round_state = RoundState.new_hand(0)

    @property
    def max_players(self) -> int:
        return self.dealer.max_players

    @property
    def min_raise(self) -> int:
        """Smallest raise accepted, growing with the big blind."""
        return max(self.config.min_bet, self.big_blind, 1)

    def get_provider(self, player: Player) -> ActionProvider:
        provider = self.providers.get(player.name, self.default_provider)
        if provider is None:
            raise InvalidGameStateError(f"No decision provider for {player.name}")
        return provider

    def set_provider(self, player_name: str, provider: ActionProvider) -> None:
        self.providers[player_name] = provider

    def _transition(self, new_state: EngineState) -> None:
        if new_state not in ALLOWED_TRANSITIONS[self.state]:
            raise InvalidGameStateError(
                f"Cannot move from {self.state.value} to {new_state.value}"
            )
        old_state = self.state
        self.state = new_state
        self.round_state.state = new_state
        GameLogger.log_state_change(old_state.value, new_state.value)
        self.event_bus.publish(
            EventType.STATE_CHANGED,
            old_state=old_state.value,
            new_state=new_state.value,
            hand_number=self.hand_number,
        )

    def play_hand(self, players: List[Player], dealer_index: int = 0) -> HandResult:
        """
        Play one complete hand.

        Args:
            players (List[Player]): Players in seating order, all with chips
            dealer_index (int): Position of the dealer in ``players``

        Returns:
            HandResult: Pot awards, chip changes and eliminated players

        Raises:
            ValueError: If the player count does not suit the variant or a
                player has no chips
            InvalidGameStateError: If the hand is started while another runs
                or the ledger loses track of chips
            InvalidOperationError: If the ledger is used out of order
        """
        if self.state != EngineState.IDLE:
            raise InvalidGameStateError("A hand is already in progress")
        if not 2 <= len(players) <= self.max_players:
            raise ValueError(
                f"{self.game_type.value} needs 2 to {self.max_players} players"
            )
        broke = [p.name for p in players if p.chips <= 0]
        if broke:
            raise ValueError(f"Players without chips cannot be dealt in: {broke}")
        for player in players:
            self.get_provider(player)

        self.hand_number += 1
        initial_chips = {p: p.chips for p in players}
        self.total_chips = sum(initial_chips.values())

        try:
            self._start_hand(players, dealer_index)
            self._transition(EngineState.DEALING)
            self._sync_cards(self.dealer.begin(len(self.table)))

            betting.collect_antes(self)
            starting_seat = betting.post_blinds(self)
            self.round_state.first_bettor_index = starting_seat
            self._betting_street(starting_seat)

            while self.dealer.can_deal_more() and self.table.has_round_players():
                self._transition(EngineState.DEALING)
                self._sync_cards(self.dealer.deal_next_increment())
                self._betting_street(1)

            return self._finish_hand(initial_chips)
        except Exception as e:
            self._abort_hand(e)
            raise

    def _abort_hand(self, error: Exception) -> None:
        """
        Stop the running hand after an error and leave the engine ready for
        the next one.

        Chips still in the ledger go back to whoever put them in.
        """
        refunds: Dict[str, int] = {}
        if self.pot is not None:
            for pot in self.pot.pots:
                for player, amount in pot.total_bets.items():
                    if amount > 0:
                        player.collect(amount)
                        refunds[player.name] = refunds.get(player.name, 0) + amount
            self.pot.reset()
        if self.table is not None:
            for player in self.table:
                player.reset_bet()

        GameLogger.log_hand_aborted(self.hand_number, error, refunds)
        self.state = EngineState.IDLE
        self.round_state.state = EngineState.IDLE
        self.table = None
        self.pot = None

    def _start_hand(self, players: List[Player], dealer_index: int) -> None:
        for player in players:
            player.reset_for_new_hand()
        self.table = Table(players, dealer_index)
        self.pot = SidePot(self.table.players, self.event_bus)
        self.round_state = RoundState.new_hand(
            self.hand_number, dealer_index % len(players)
        )
        self.round_state.playing = [p.name for p in self.table.playing]
        GameLogger.log_round_header(self.hand_number)
        GameLogger.log_chip_counts(
            {p.name: p.chips for p in self.table}, "Starting stacks"
        )
        GameLogger.log_betting_structure(
            self.small_blind, self.big_blind, self.ante, self.min_raise
        )

    def _betting_street(self, starting_seat: int) -> None:
        self._transition(EngineState.BETTING_ROUND)
        GameLogger.log_phase_header(f"Betting round {self.round_state.street + 1}")
        betting.betting_round(self, starting_seat)
        self.round_state.street += 1
        self.round_state.playing = [p.name for p in self.table.playing]
        self.pot.log_pots()
        self.pot.validate_conservation(self.table.players, self.total_chips)

    def _sync_cards(self, dealt: DealtCards) -> None:
        """Copy newly dealt cards onto the players and tell the observers."""
        for seat in dealt.private:
            player = self.table[seat]
            player.cards = self.dealer.player_cards(seat)
            PlayerLogger.log_cards_dealt(
                player.name, " ".join(str(card) for card in player.cards)
            )
        self.round_state.community_cards = [
            str(card) for card in self.dealer.community_cards
        ]
        self.event_bus.publish(
            EventType.CARDS_DEALT,
            street=dealt.street,
            community=[str(card) for card in dealt.community],
            seats=sorted(dealt.private),
        )

    def fold_player(self, player: Player) -> None:
        """Take a player out of the table and the dealing."""
        seat = self.table.seat_of(player)
        self.table.fold(player)
        if seat >= 0:
            self.dealer.fold_seat(seat)
        self.round_state.playing = [p.name for p in self.table.playing]

    @property
    def community_cards(self):
        return self.dealer.community_cards

    def _finish_hand(self, initial_chips: Dict[Player, int]) -> HandResult:
        went_to_showdown = self.table.has_round_players()
        self._transition(EngineState.SHOWDOWN)
        awards = showdown.handle_showdown(
            self.pot, self.table, self.hand_comparator, initial_chips
        )

        self._transition(EngineState.POT_DISTRIBUTION)
        current = sum(p.chips for p in self.table) + self.pot.money
        if current != self.total_chips:
            raise InvalidGameStateError(
                f"Chip total changed from ${self.total_chips} to ${current} over the hand"
            )
        eliminated = [p.name for p in self.table if p.chips == 0]
        for name in eliminated:
            GameLogger.log_player_elimination(name)

        result = HandResult(
            hand_number=self.hand_number,
            awards=awards,
            chip_changes={p.name: p.chips - initial_chips[p] for p in self.table},
            eliminated=eliminated,
            showdown=went_to_showdown,
        )
        for player in self.table:
            player.reset_bet()

        self._transition(EngineState.IDLE)
        self.event_bus.publish(EventType.HAND_COMPLETE, result=result.dict())
        return result

