import pytest

from data.enums import ActionType
from data.types.action_decision import ActionDecision


class TestActionDecision:
    def test_raise_requires_amount(self):
        with pytest.raises(ValueError):
            ActionDecision(action_type=ActionType.RAISE)

    @pytest.mark.parametrize("amount", [0, -10])
    def test_raise_amount_must_be_positive(self, amount):
        with pytest.raises(ValueError):
            ActionDecision.raise_by(amount)

    def test_negative_amount_rejected_for_other_actions(self):
        with pytest.raises(ValueError):
            ActionDecision(action_type=ActionType.CALL, raise_amount=-1)

    def test_factories(self):
        assert ActionDecision.fold().action_type == ActionType.FOLD
        assert ActionDecision.check().action_type == ActionType.CHECK
        assert ActionDecision.call().action_type == ActionType.CALL
        assert ActionDecision.all_in().action_type == ActionType.ALL_IN

        decision = ActionDecision.raise_by(150, reasoning="strong draw")
        assert decision.raise_amount == 150
        assert decision.reasoning == "strong draw"

    def test_action_from_string(self):
        decision = ActionDecision(action_type="all-in")
        assert decision.action_type == ActionType.ALL_IN

    def test_str(self):
        assert str(ActionDecision.raise_by(40)) == "raise 40"
        assert str(ActionDecision.fold()) == "fold"
