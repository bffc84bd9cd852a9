import random

import pytest

from data.enums import ActionType
from data.types.action_decision import ActionDecision
from data.types.decision_request import DecisionRequest
from exceptions import DecisionTimeoutError, PlayerDisconnectedError
from game.betting import validate_decision
from game.decisions import (
    CallbackProvider,
    PassiveProvider,
    RandomProvider,
    SeatClock,
    ask_provider,
    default_action,
)
from tests.mocks.mock_provider import ScriptedProvider


def make_request(**overrides):
    values = dict(
        player_name="Alice",
        chips=1000,
        call_amount=20,
        min_raise=20,
        max_raise=980,
    )
    values.update(overrides)
    return DecisionRequest(**values)


class TestSeatClock:
    def test_no_timeout(self, fake_clock):
        clock = SeatClock(None, clock=fake_clock)

        assert clock.start() is None
        assert not clock.expired(None)
        assert clock.remaining(None) is None

    def test_deadline(self, fake_clock):
        clock = SeatClock(30, clock=fake_clock)
        deadline = clock.start()

        assert deadline == 30
        fake_clock.advance(10)
        assert clock.remaining(deadline) == 20
        assert not clock.expired(deadline)

        fake_clock.advance(25)
        assert clock.expired(deadline)
        assert clock.remaining(deadline) == 0


class TestDefaultAction:
    def test_check_when_free(self):
        assert default_action(make_request(call_amount=0)).action_type == ActionType.CHECK

    def test_fold_when_owing(self):
        assert default_action(make_request()).action_type == ActionType.FOLD


class TestAskProvider:
    @pytest.fixture
    def player(self, player_factory):
        return player_factory(name="Alice")

    def test_answer_passes_through(self, player, fake_clock):
        provider = ScriptedProvider([ActionDecision.raise_by(40)])

        decision, forced = ask_provider(
            provider, make_request(), player, SeatClock(30, fake_clock)
        )

        assert decision.raise_amount == 40
        assert not forced

    def test_no_answer_uses_default(self, player, fake_clock):
        provider = ScriptedProvider([None])

        decision, forced = ask_provider(
            provider, make_request(call_amount=0), player, SeatClock(30, fake_clock)
        )

        assert decision.action_type == ActionType.CHECK
        assert forced

    def test_timeout_error_uses_default(self, player, fake_clock):
        provider = ScriptedProvider([DecisionTimeoutError("too slow")])

        decision, forced = ask_provider(
            provider, make_request(), player, SeatClock(30, fake_clock)
        )

        assert decision.action_type == ActionType.FOLD
        assert forced

    def test_late_answer_uses_default(self, player, fake_clock):
        """Test an answer that arrives after the deadline.

        Assumptions:
            - The provider takes 31 seconds on a 30 second clock
            - Its call is ignored and the player folds
        """
        seat_clock = SeatClock(30, fake_clock)
        request = make_request(deadline=seat_clock.start())

        def slow(request, player):
            fake_clock.advance(31)
            return ActionDecision.call()

        decision, forced = ask_provider(CallbackProvider(slow), request, player, seat_clock)

        assert decision.action_type == ActionType.FOLD
        assert forced

    def test_disconnect_folds(self, player, fake_clock):
        provider = ScriptedProvider([PlayerDisconnectedError("gone")])

        decision, forced = ask_provider(
            provider, make_request(call_amount=0), player, SeatClock(30, fake_clock)
        )

        assert decision.action_type == ActionType.FOLD
        assert forced


class TestProviders:
    def test_passive_provider(self, player_factory):
        provider = PassiveProvider()
        player = player_factory()

        assert provider.decide_action(make_request(call_amount=0), player).action_type == ActionType.CHECK
        assert provider.decide_action(make_request(), player).action_type == ActionType.CALL

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"call_amount": 0},
            {"can_raise": False},
            {"chips": 50, "call_amount": 50, "max_raise": 0},
            {"chips": 30, "call_amount": 20, "max_raise": 10},
        ],
    )
    def test_random_provider_stays_legal(self, player_factory, overrides):
        """Test that random decisions always pass validation."""
        provider = RandomProvider(random.Random(5), fold_weight=0.3)
        request = make_request(**overrides)
        player = player_factory()

        for _ in range(50):
            decision = provider.decide_action(request, player)
            validate_decision(request, decision)
            assert decision.action_type in request.legal_actions()
