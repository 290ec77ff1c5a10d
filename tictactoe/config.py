import os
from dataclasses import dataclass, replace
from typing import Optional

from .game_logic import Mode
from .opponent import POLICIES, RandomPolicy

COMPUTER_DELAY_MS = 600        # pause before the computer answers

ENV_DELAY = "TICTACTOE_DELAY_MS"
ENV_SEED = "TICTACTOE_SEED"
ENV_OPPONENT = "TICTACTOE_OPPONENT"


def _env_int(environ, name):
    raw = environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """
    runtime settings; env vars first, cli flags on top
    """
    computer_delay_ms: int = COMPUTER_DELAY_MS
    seed: Optional[int] = None
    opponent: str = "random"
    initial_mode: Optional[Mode] = None
    verbose: bool = False

    def __post_init__(self):
        if self.computer_delay_ms < 0:
            raise ValueError("computer delay must not be negative")
        if self.opponent not in POLICIES:
            raise ValueError(f"unknown opponent {self.opponent!r}, pick one of {sorted(POLICIES)}")

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        kwargs = {}
        delay = _env_int(environ, ENV_DELAY)
        if delay is not None:
            kwargs["computer_delay_ms"] = delay
        seed = _env_int(environ, ENV_SEED)
        if seed is not None:
            kwargs["seed"] = seed
        opponent = environ.get(ENV_OPPONENT, "").strip()
        if opponent:
            kwargs["opponent"] = opponent
        return cls(**kwargs)

    def override(self, **changes):
        # None means "flag not given", keep the current value
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def build_policy(config):
    if config.opponent == "random":
        return RandomPolicy(seed=config.seed)
    return POLICIES[config.opponent]()
