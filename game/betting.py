"""Poker betting round management and rules implementation.

This module handles all betting-related logic for a hand, including:
- Collecting antes and posting blinds
- Running a complete betting round in round order
- Building decision requests and validating the answers
- Applying actions to the pot ledger

The main components are:
- collect_antes: Every player antes before the blinds
- post_blinds: Forced bets that open the first betting round
- betting_round: Core betting loop for a single street

A betting round ends when every player still in the hand has checked or
called since the last raise, or only one player is left. Players with no
chips behind are all in and are passed over. Each seated player adds
``raise_limit`` turns to the round's raise allowance; once those turns are
used up, raising is no longer offered.
"""

from typing import TYPE_CHECKING, Tuple

from data.enums import ActionType, EventType
from data.types.action_decision import ActionDecision
from data.types.decision_request import DecisionRequest
from exceptions import (
    InsufficientFundsError,
    InvalidActionError,
    InvalidAmountError,
    InvalidGameStateError,
)
from game.decisions import ask_provider, default_action
from game.player import Player
from loggers.betting_logger import BettingLogger
from loggers.table_logger import TableLogger

if TYPE_CHECKING:
    from game.engine import RoundEngine


def collect_antes(engine: "RoundEngine") -> int:
    """Collect the ante from every seated player.

    The dealer raises the ante (or whatever they have) and everyone else
    calls; short stacks are capped into side pots by the ledger. The ante
    street is then closed.

    Args:
        engine: The engine playing the hand

    Returns:
        int: Total collected
    """
    table, pot = engine.table, engine.pot
    for seat, player in enumerate(table):
        if seat == 0:
            posted = pot.raise_bet(player, min(engine.ante, player.chips))
        else:
            posted = pot.call(player)
        if engine.ante > 0:
            BettingLogger.log_blind_or_ante(player.name, engine.ante, posted, is_ante=True)

    pot.reset_raise()
    table.reset_bets()
    BettingLogger.log_collecting_antes(pot.money)
    engine.event_bus.publish(
        EventType.ANTES_AND_DEALER, pot_total=pot.money, dealer=table.dealer.name
    )
    return pot.money


def post_blinds(engine: "RoundEngine") -> int:
    """Post the blinds and return the seat that acts first.

    Seat 1 opens with the small blind and seat 2 completes to the big blind.
    Heads-up, seat 1 posts the whole big blind and the dealer acts first.

    Args:
        engine: The engine playing the hand

    Returns:
        int: Seat index, in round order, of the first player to act
    """
    table, pot = engine.table, engine.pot
    opener = table.safe_get_player(1)
    raiser = table.safe_get_player(2)

    if len(table.playing) < 3:
        blind_open = min(engine.big_blind, opener.chips)
        pot.raise_bet(opener, blind_open)
        BettingLogger.log_blind_or_ante(opener.name, engine.big_blind, blind_open)
        return 2 % len(table)

    blind_open = min(engine.small_blind, opener.chips)
    blind_raise = min(engine.big_blind, raiser.chips) - blind_open
    pot.raise_bet(opener, blind_open)
    BettingLogger.log_blind_or_ante(
        opener.name, engine.small_blind, blind_open, is_small_blind=True
    )

    if blind_raise <= 0:
        posted = pot.call(raiser)
    else:
        posted = pot.raise_bet(raiser, blind_raise)
    BettingLogger.log_blind_or_ante(raiser.name, engine.big_blind, posted)
    return 3 % len(table)


def betting_round(engine: "RoundEngine", starting_seat: int) -> None:
    """Run one street of betting starting from ``starting_seat``.

    Args:
        engine: The engine playing the hand
        starting_seat: Seat index, in round order, of the first player to act

    Raises:
        InvalidGameStateError: If the pots are not even once betting stops

    Side Effects:
        - Moves chips from players into the pots
        - Folds players out of the table, the pots and the dealing
        - Closes the street on the ledger and clears player bets
    """
    table, pot = engine.table, engine.pot

    if table.round_players_are_all_in(pot):
        BettingLogger.log_skip_round("no player can bet")
    else:
        seat = starting_seat % len(table)
        all_check = 0
        turns = 0
        raise_allowance = len(table.playing) * engine.config.raise_limit

        while all_check != len(table.playing) and table.has_round_players():
            player = table.safe_get_player(seat)
            if table.is_playing(player):
                if player.chips > 0:
                    can_raise = turns < raise_allowance
                    if turns == raise_allowance:
                        BettingLogger.log_raise_limit(raise_allowance)
                    raised = process_turn(engine, player, can_raise)
                    if raised:
                        all_check = 1
                    elif table.is_playing(player):
                        all_check += 1
                else:
                    TableLogger.log_skip_player(player.name, "all in")
                    all_check += 1
            seat = (seat + 1) % len(table)
            turns += 1

        TableLogger.log_round_complete(
            "one player left" if not table.has_round_players() else "all players called"
        )

    if not pot.is_even():
        raise InvalidGameStateError("Betting round ended with uneven pots")
    pot.reset_raise()
    table.reset_bets()
    BettingLogger.log_line_break()


def build_request(
    engine: "RoundEngine",
    player: Player,
    can_raise: bool,
    deadline=None,
    attempt: int = 1,
    last_error=None,
) -> DecisionRequest:
    """Describe the player's options for this turn."""
    call_amount = engine.pot.get_affordable_call(player)
    return DecisionRequest(
        player_name=player.name,
        chips=player.chips,
        call_amount=call_amount,
        min_raise=engine.min_raise,
        max_raise=player.chips - call_amount,
        can_raise=can_raise,
        pot_total=engine.pot.money,
        current_raise=engine.pot.current_raise,
        deadline=deadline,
        attempt=attempt,
        last_error=last_error,
    )


def validate_decision(request: DecisionRequest, decision: ActionDecision) -> None:
    """Check a decision against the request it answers.

    Raises:
        InvalidActionError: If the action is not available this turn
        InvalidAmountError: If a raise is below the minimum without being all in
        InsufficientFundsError: If a raise is more than the player has behind
    """
    action = decision.action_type
    if action in (ActionType.FOLD, ActionType.CHECK, ActionType.CALL):
        return

    if action == ActionType.ALL_IN:
        if request.chips == 0:
            raise InvalidActionError("No chips left to go all in with")
        if request.max_raise > 0 and not request.can_raise:
            raise InvalidActionError("Raising is closed for this round; call or fold")
        return

    if action == ActionType.RAISE:
        amount = decision.raise_amount or 0
        if not request.can_raise:
            raise InvalidActionError("Raising is closed for this round; call or fold")
        if amount > request.max_raise:
            raise InsufficientFundsError(
                f"Cannot raise ${amount}, at most ${request.max_raise} is left "
                f"after calling; go all in instead"
            )
        if amount < request.min_raise and amount != request.max_raise:
            raise InvalidAmountError(
                f"Raise must be at least ${request.min_raise} unless going all in"
            )
        return

    raise InvalidActionError(f"Unknown action {action}")


def obtain_decision(
    engine: "RoundEngine", player: Player, can_raise: bool
) -> Tuple[ActionDecision, DecisionRequest]:
    """Ask the player's provider until it gives a legal answer.

    Rejected answers are sent back with the reason. The turn's deadline does
    not restart on a re-prompt. When the deadline passes or the player keeps
    answering illegally, the default action is used.

    Returns:
        Tuple of the legal decision and the request it answers
    """
    provider = engine.get_provider(player)
    deadline = engine.seat_clock.start()
    attempt = 1
    last_error = None

    while True:
        request = build_request(engine, player, can_raise, deadline, attempt, last_error)
        decision, forced = ask_provider(provider, request, player, engine.seat_clock)
        if forced:
            return decision, request
        try:
            validate_decision(request, decision)
            return decision, request
        except (InvalidActionError, InvalidAmountError, InsufficientFundsError) as e:
            BettingLogger.log_rejected_action(
                player.name, str(decision), str(e), attempt
            )
            if attempt >= engine.config.max_decision_attempts:
                decision = default_action(request)
                BettingLogger.log_default_action(
                    player.name, decision.action_type.value, "kept sending illegal actions"
                )
                return decision, request
            attempt += 1
            last_error = str(e)


def apply_decision(
    engine: "RoundEngine", player: Player, decision: ActionDecision, request: DecisionRequest
) -> bool:
    """Carry out a validated decision on the ledger.

    Returns:
        bool: True if the action raised
    """
    table, pot = engine.table, engine.pot
    action = decision.action_type
    raised = False
    amount = 0

    if action == ActionType.FOLD:
        pot.fold(player)
        engine.fold_player(player)
    elif action in (ActionType.CHECK, ActionType.CALL):
        amount = pot.call(player)
        action = ActionType.CALL if amount > 0 else ActionType.CHECK
    elif action == ActionType.RAISE:
        amount = pot.raise_bet(player, decision.raise_amount)
        raised = True
    elif action == ActionType.ALL_IN:
        if request.max_raise > 0:
            amount = pot.raise_bet(player, request.max_raise)
            raised = True
        else:
            amount = pot.call(player)

    if raised:
        engine.round_state.last_raiser = player.name
        engine.round_state.raise_count += 1

    BettingLogger.log_player_action(
        player.name, action.value, amount, player.chips == 0, pot.money
    )
    engine.event_bus.publish(
        EventType.PLAYER_ACTION,
        player=player.name,
        action=action.value,
        amount=amount,
        call_amount=request.call_amount,
        chips=player.chips,
    )
    return raised


def process_turn(engine: "RoundEngine", player: Player, can_raise: bool) -> bool:
    """Let one player act. Returns True if they raised."""
    BettingLogger.log_player_turn(
        player_name=player.name,
        chips=player.chips,
        call_amount=engine.pot.get_affordable_call(player),
        pot=engine.pot.money,
        playing=[p.name for p in engine.table.playing],
        last_raiser=engine.round_state.last_raiser,
    )
    decision, request = obtain_decision(engine, player, can_raise)
    return apply_decision(engine, player, decision, request)
