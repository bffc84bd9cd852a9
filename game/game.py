from typing import Any, Dict, List, Optional

from data.enums import GameType
from data.types.hand_result import HandResult
from exceptions import InvalidActionError, InvalidGameStateError
from game.config import GameConfig
from loggers.game_logger import GameLogger

from .decisions import ActionProvider, SeatClock
from .deck import Deck
from .engine import HandComparator, RoundEngine
from .events import EventBus
from .player import Player


class PokerGame:
    """
    Runs a session of hands until a single player is left.

    This class manages everything that spans more than one hand:
    - Seating, eliminating and (outside tournaments) admitting players
    - Rotating the dealer button
    - Growing the blinds and antes in tournament mode
    - Checking that the chips in play never change between hands

    Each hand itself is played by a RoundEngine.

    Attributes:
        players (List[Player]): Players still in the game, in seating order
        eliminated (List[Player]): Players who lost all their chips, in order of exit
        waiting (List[Player]): Players queued to join at the next hand
        engine (RoundEngine): Plays the individual hands
        config (GameConfig): Configuration parameters for the game
        dealer_index (int): Position of current dealer (0-based, moves clockwise)
        round_number (int): Number of hands started
        total_chips (int): Chips in play across all seated players

    Example:
        >>> players = [Player("Alice"), Player("Bob"), Player("Charlie")]
        >>> game = PokerGame(players, compare_hands, GameType.OMAHA_HOLDEM,
        ...                  default_provider=PassiveProvider())
        >>> standings = game.play_game()
    """

    def __init__(
        self,
        players: List[Player],
        hand_comparator: HandComparator,
        game_type: GameType = GameType.TEXAS_HOLDEM,
        config: Optional[GameConfig] = None,
        providers: Optional[Dict[str, ActionProvider]] = None,
        default_provider: Optional[ActionProvider] = None,
        event_bus: Optional[EventBus] = None,
        seat_clock: Optional[SeatClock] = None,
        deck: Optional[Deck] = None,
    ) -> None:
        """Initialize a new game with the given players and configuration.

        Raises:
            ValueError: If there are fewer than 2 players, more than the variant
                seats, duplicate names, or a player without chips
        """
        self.config = config or GameConfig()
        self.engine = RoundEngine(
            game_type,
            self.config,
            hand_comparator,
            providers=providers,
            default_provider=default_provider,
            event_bus=event_bus,
            seat_clock=seat_clock,
            deck=deck,
        )

        if len(players) < 2:
            raise ValueError("Must provide at least 2 players")
        if len(players) > self.engine.max_players:
            raise ValueError(
                f"{game_type.value} seats at most {self.engine.max_players} players"
            )
        if len({p.name for p in players}) != len(players):
            raise ValueError("Player names must be unique")
        if any(p.chips <= 0 for p in players):
            raise ValueError("Players must start with chips")

        self.players = list(players)
        self.eliminated: List[Player] = []
        self.waiting: List[Player] = []
        self.dealer_index = 0
        self.round_number = 0
        self.total_chips = sum(p.chips for p in self.players)

        GameLogger.log_game_config(
            game_type=game_type.value,
            players=[p.name for p in self.players],
            starting_chips=self.config.starting_chips,
            small_blind=self.config.small_blind,
            big_blind=self.config.big_blind,
            ante=self.config.ante,
            max_rounds=self.config.max_rounds,
            session_id=self.config.session_id,
        )

    @property
    def event_bus(self) -> EventBus:
        return self.engine.event_bus

    def add_player(
        self, player: Player, provider: Optional[ActionProvider] = None
    ) -> None:
        """
        Queue a player to be seated when the current hand ends.

        Raises:
            InvalidActionError: If the game does not take players after the
                start, the name is taken, or the player has no chips
        """
        if self.config.tournament_mode or not self.config.accept_players_after_start:
            raise InvalidActionError("This game does not accept new players")
        taken = {p.name for p in self.players + self.waiting}
        if player.name in taken:
            raise InvalidActionError(f"{player.name} is already at the table")
        if player.chips <= 0:
            raise InvalidActionError("Players must join with chips")
        if provider is not None:
            self.engine.set_provider(player.name, provider)
        self.waiting.append(player)

    def play_game(self) -> List[Dict[str, Any]]:
        """
        Play hands until the game is decided.

        The game ends when one player holds all the chips, every player is
        gone, or ``max_rounds`` hands have been played.

        Returns:
            List[Dict[str, Any]]: Final standings, richest first
        """
        while len(self.players) > 1:
            if self.config.max_rounds and self.round_number >= self.config.max_rounds:
                GameLogger.log_max_rounds_reached(self.round_number)
                break
            self.play_hand()

        if len(self.players) == 1:
            GameLogger.log_game_winner(self.players[0].name, self.players[0].chips)
        elif not self.players:
            GameLogger.log_all_bankrupt()

        standings = self.get_standings()
        GameLogger.log_game_summary(
            rounds_played=self.round_number,
            max_rounds=self.config.max_rounds,
            final_standings=standings,
        )
        return standings

    def play_hand(self) -> HandResult:
        """Play the next hand and update the table for the one after.

        Raises:
            InvalidGameStateError: If chips were created or lost
        """
        if len(self.players) < 2:
            raise InvalidGameStateError("Need at least 2 players to play a hand")
        self._check_chip_total()

        self.round_number += 1
        interval = self.config.blind_increase_interval
        if self.config.tournament_mode and interval and self.round_number % interval == 0:
            self.raise_blinds()

        result = self.engine.play_hand(self.players, self.dealer_index)

        self._handle_player_eliminations()
        self._check_chip_total()
        self._seat_waiting_players()
        if self.players:
            self.dealer_index = (self.dealer_index + 1) % len(self.players)
        return result

    def raise_blinds(self) -> None:
        """Grow the antes and blinds by their starting amounts (tournament mode only).

        The big blind never goes above half the chips in play.
        """
        if not self.config.tournament_mode:
            return
        engine = self.engine
        engine.ante += self.config.ante
        engine.small_blind += self.config.small_blind
        engine.big_blind += self.config.big_blind
        cap = self.total_chips // 2
        if engine.big_blind > cap:
            engine.big_blind = cap
        engine.small_blind = min(engine.small_blind, engine.big_blind)
        GameLogger.log_blind_increase(engine.ante, engine.small_blind, engine.big_blind)

    def _handle_player_eliminations(self) -> None:
        for player in [p for p in self.players if p.chips == 0]:
            self.players.remove(player)
            self.eliminated.append(player)
            self.raise_blinds()

    def _seat_waiting_players(self) -> None:
        while self.waiting and len(self.players) < self.engine.max_players:
            player = self.waiting.pop(0)
            self.players.append(player)
            self.total_chips += player.chips
            GameLogger.log_player_joined(player.name, player.chips)

    def _check_chip_total(self) -> None:
        current = sum(p.chips for p in self.players)
        if current != self.total_chips:
            raise InvalidGameStateError(
                f"Chips in play changed from ${self.total_chips} to ${current}"
            )

    def get_standings(self) -> List[Dict[str, Any]]:
        standings = [
            {"name": p.name, "chips": p.chips, "eliminated": False}
            for p in sorted(self.players, key=lambda p: p.chips, reverse=True)
        ]
        standings.extend(
            {"name": p.name, "chips": p.chips, "eliminated": True}
            for p in reversed(self.eliminated)
        )
        return standings
