import random

import pytest

from snake.config import Config
from snake.game import new_game_state
from snake.storage import BestScoreStore


@pytest.fixture
def cfg():
    return Config(seed=7)


@pytest.fixture
def store(tmp_path):
    return BestScoreStore(tmp_path / "best.json")


@pytest.fixture
def state(cfg, store):
    """Fresh 21x21 game at t=0 with food parked out of the snake's way."""
    s = new_game_state(0, cfg, store, random.Random(cfg.seed))
    s.food = (0, 0)
    return s
