"""
Where player actions come from.

The round engine asks an ActionProvider for each decision and waits for the
answer. A seat clock gives every turn a deadline: an answer that comes back
after it, no answer at all, or a provider that reports a timeout all lead to
the default action. A provider that has lost its player reports a disconnect,
which folds the seat.
"""

import random
import time
from typing import Callable, Optional, Tuple

from data.enums import ActionType
from data.types.action_decision import ActionDecision
from data.types.decision_request import DecisionRequest
from exceptions import DecisionTimeoutError, PlayerDisconnectedError
from game.player import Player
from loggers.betting_logger import BettingLogger

DecisionCallback = Callable[[DecisionRequest, Player], Optional[ActionDecision]]


class ActionProvider:
    """Base class for anything that chooses actions for a seat.

    Subclasses may return None or raise DecisionTimeoutError when they ran out
    of time, and raise PlayerDisconnectedError when the player is gone.
    """

    def decide_action(
        self, request: DecisionRequest, player: Player
    ) -> Optional[ActionDecision]:
        raise NotImplementedError


class CallbackProvider(ActionProvider):
    """Adapts a plain function to the provider interface."""

    def __init__(self, callback: DecisionCallback):
        self.callback = callback

    def decide_action(
        self, request: DecisionRequest, player: Player
    ) -> Optional[ActionDecision]:
        return self.callback(request, player)


class PassiveProvider(ActionProvider):
    """Checks when possible and calls otherwise."""

    def decide_action(
        self, request: DecisionRequest, player: Player
    ) -> Optional[ActionDecision]:
        if request.call_amount == 0:
            return ActionDecision.check()
        return ActionDecision.call()


class RandomProvider(ActionProvider):
    """A provider that makes random legal decisions."""

    def __init__(self, rng: Optional[random.Random] = None, fold_weight: float = 0.1):
        self.rng = rng or random.Random()
        self.fold_weight = fold_weight

    def decide_action(
        self, request: DecisionRequest, player: Player
    ) -> Optional[ActionDecision]:
        actions = request.legal_actions()

        # Never fold for free
        if request.call_amount == 0 and ActionType.FOLD in actions:
            actions.remove(ActionType.FOLD)
        elif self.rng.random() >= self.fold_weight and ActionType.FOLD in actions:
            actions.remove(ActionType.FOLD)

        action = self.rng.choice(actions)
        if action == ActionType.RAISE:
            low = min(request.min_raise, request.max_raise)
            high = max(low, min(request.max_raise, request.min_raise * 3))
            return ActionDecision.raise_by(self.rng.randint(low, high))
        return ActionDecision(action_type=action)


class SeatClock:
    """Deadlines for player decisions.

    Args:
        timeout: Seconds allowed per turn, None for no limit
        clock: Monotonic time source, injectable for tests
    """

    def __init__(
        self, timeout: Optional[float], clock: Callable[[], float] = time.monotonic
    ):
        self.timeout = timeout
        self.clock = clock

    def start(self) -> Optional[float]:
        """Start a turn and return its deadline."""
        if self.timeout is None:
            return None
        return self.clock() + self.timeout

    def expired(self, deadline: Optional[float]) -> bool:
        return deadline is not None and self.clock() > deadline

    def remaining(self, deadline: Optional[float]) -> Optional[float]:
        if deadline is None:
            return None
        return max(0.0, deadline - self.clock())


def default_action(request: DecisionRequest) -> ActionDecision:
    """The action taken for a player who did not answer: check if free, else fold."""
    if request.call_amount == 0:
        return ActionDecision.check(reasoning="default action")
    return ActionDecision.fold(reasoning="default action")


def ask_provider(
    provider: ActionProvider,
    request: DecisionRequest,
    player: Player,
    clock: SeatClock,
) -> Tuple[ActionDecision, bool]:
    """
    Get one answer from a provider, substituting the default on timeout.

    Args:
        provider: Who decides for the player
        request: The decision to make
        player: The player to act
        clock: The seat clock that issued request.deadline

    Returns:
        Tuple[ActionDecision, bool]: The decision and whether it was forced
            (default action or disconnect fold) rather than chosen
    """
    try:
        decision = provider.decide_action(request, player)
    except DecisionTimeoutError:
        decision = None
    except PlayerDisconnectedError:
        BettingLogger.log_default_action(player.name, "fold", "disconnected")
        return ActionDecision.fold(reasoning="disconnected"), True

    if decision is None or clock.expired(request.deadline):
        forced = default_action(request)
        BettingLogger.log_default_action(
            player.name, forced.action_type.value, "ran out of time"
        )
        return forced, True
    return decision, False
