import pytest

from exceptions import InsufficientFundsError, InvalidAmountError
from game.card import Card
from game.player import Player


class TestPlayer:
    @pytest.fixture
    def player(self):
        return Player("TestPlayer", 1000)

    def test_player_initialization(self, player):
        """Test that a player is initialized with correct default values"""
        assert player.name == "TestPlayer"
        assert player.chips == 1000
        assert player.bet == 0
        assert player.folded is False
        assert player.cards == []

    @pytest.mark.parametrize("name", ["", "   "])
    def test_invalid_name(self, name):
        with pytest.raises(ValueError):
            Player(name, 100)

    def test_invalid_chips(self):
        with pytest.raises(ValueError):
            Player("Broke", -1)
        with pytest.raises(ValueError):
            Player("Fraction", 10.5)

    def test_pay(self, player):
        """Test that paying moves chips into the street's bet"""
        assert player.pay(300) == 300
        assert player.chips == 700
        assert player.bet == 300

    def test_pay_more_than_chips(self, player):
        with pytest.raises(InsufficientFundsError):
            player.pay(1500)
        assert player.chips == 1000
        assert player.bet == 0

    def test_pay_negative(self, player):
        with pytest.raises(InvalidAmountError):
            player.pay(-5)

    def test_all_in(self, player):
        player.pay(1000)
        assert player.is_all_in

        player.folded = True
        assert not player.is_all_in

    def test_collect(self, player):
        player.collect(250)
        assert player.chips == 1250
        with pytest.raises(InvalidAmountError):
            player.collect(-1)

    def test_reset_for_new_hand(self, player):
        player.pay(100)
        player.folded = True
        player.cards = [Card("A", "♠")]

        player.reset_for_new_hand()

        assert player.bet == 0
        assert not player.folded
        assert player.cards == []
        assert player.chips == 900

    def test_identity_by_name(self, player):
        """Players with the same name are the same seat"""
        twin = Player("TestPlayer", 5)

        assert twin == player
        assert hash(twin) == hash(player)
        assert Player("Other", 1000) != player

    def test_get_state(self, player):
        player.cards = [Card("K", "♥"), Card(10, "♣")]

        public = player.get_state()
        private = player.get_state(private_attributes=True)

        assert public.cards == []
        assert private.cards == ["K♥", "10♣"]
        assert public.to_dict()["chips"] == 1000
