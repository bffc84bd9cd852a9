import logging

import pytest

from config import load_game_config
from game.config import MAXIMAL_TIMEOUT, GameConfig
from loggers.config import configure_loggers


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()

        assert config.starting_chips == 1000
        assert (config.small_blind, config.big_blind) == (10, 20)
        assert config.min_bet == 20
        assert config.raise_limit == 4
        assert config.decision_timeout == 30

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"starting_chips": 0},
            {"small_blind": -1},
            {"small_blind": 30, "big_blind": 20},
            {"ante": -5},
            {"raise_limit": 0},
            {"max_rounds": 0},
            {"decision_timeout": 0},
            {"decision_timeout": MAXIMAL_TIMEOUT},
            {"max_decision_attempts": 0},
            {"blind_increase_interval": 0},
            {"min_bet": -10},
            {"tournament_mode": True, "accept_players_after_start": True},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_clock_can_be_disabled(self):
        assert GameConfig(decision_timeout=None).decision_timeout is None


class TestLoadGameConfig:
    def test_environment(self, clean_env, tmp_path):
        clean_env.update({"POKER_SMALL_BLIND": "25", "POKER_BIG_BLIND": "50",
                          "POKER_TOURNAMENT_MODE": "yes"})

        config = load_game_config(str(tmp_path / "missing.env"))

        assert (config.small_blind, config.big_blind) == (25, 50)
        assert config.min_bet == 50
        assert config.tournament_mode is True

    def test_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("POKER_STARTING_CHIPS=5000\nPOKER_DECISION_TIMEOUT=12.5\n")

        config = load_game_config(str(env_file))

        assert config.starting_chips == 5000
        assert config.decision_timeout == 12.5

    def test_overrides_win(self, clean_env, tmp_path):
        clean_env["POKER_ANTE"] = "5"

        config = load_game_config(str(tmp_path / "missing.env"), ante=1, session_id="abc")

        assert config.ante == 1
        assert config.session_id == "abc"

    def test_invalid_value(self, clean_env, tmp_path):
        clean_env["POKER_BIG_BLIND"] = "lots"

        with pytest.raises(ValueError):
            load_game_config(str(tmp_path / "missing.env"))


class TestConfigureLoggers:
    def test_levels(self):
        configure_loggers({"pot": "DEBUG", "betting": logging.WARNING})

        assert logging.getLogger("loggers.pot_logger").level == logging.DEBUG
        assert logging.getLogger("loggers.betting_logger").level == logging.WARNING
        assert logging.getLogger("loggers.table_logger").level == logging.INFO

    def test_unknown_logger(self):
        with pytest.raises(ValueError):
            configure_loggers({"llm": "INFO"})
