import pytest

from tictactoe.config import COMPUTER_DELAY_MS, GameConfig, build_policy
from tictactoe.game_logic import Mode
from tictactoe.opponent import LowestIndexPolicy, RandomPolicy


def test_defaults():
    cfg = GameConfig.from_env({})
    assert cfg.computer_delay_ms == COMPUTER_DELAY_MS == 600
    assert cfg.seed is None
    assert cfg.opponent == "random"
    assert cfg.initial_mode is None


def test_env_overrides():
    cfg = GameConfig.from_env({
        "TICTACTOE_DELAY_MS": "50",
        "TICTACTOE_SEED": " 9 ",
        "TICTACTOE_OPPONENT": "lowest",
    })
    assert cfg.computer_delay_ms == 50
    assert cfg.seed == 9
    assert cfg.opponent == "lowest"


def test_bad_env_value_names_variable():
    with pytest.raises(ValueError, match="TICTACTOE_DELAY_MS"):
        GameConfig.from_env({"TICTACTOE_DELAY_MS": "soon"})


@pytest.mark.parametrize("kwargs", [{"computer_delay_ms": -1}, {"opponent": "minimax"}])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_override_skips_unset_flags():
    cfg = GameConfig(computer_delay_ms=10, seed=3)
    cfg2 = cfg.override(computer_delay_ms=None, seed=None, initial_mode=Mode.TWO_PLAYER)
    assert cfg2.computer_delay_ms == 10
    assert cfg2.seed == 3
    assert cfg2.initial_mode == Mode.TWO_PLAYER


def test_build_policy():
    assert isinstance(build_policy(GameConfig(opponent="lowest")), LowestIndexPolicy)
    seeded = build_policy(GameConfig(seed=5))
    assert isinstance(seeded, RandomPolicy)
    board = (None,) * 9
    assert seeded.choose_move(board) == build_policy(GameConfig(seed=5)).choose_move(board)
