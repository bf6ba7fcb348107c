import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from snake.config import RIGHT, RUNNING
from snake.game import GameState
from snake.session import GameSession
from snake.storage import HighScoreStore


def _make_state(snake, food=(15, 15), direction=RIGHT, score=0, speed_ms=150, seed=0):
    return GameState(
        snake=list(snake),
        direction=direction,
        pending=direction,
        food=food,
        score=score,
        speed_ms=speed_ms,
        run_state=RUNNING,
        rng=random.Random(seed),
    )


@pytest.fixture
def make_state():
    return _make_state


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(tmp_path / "scores.json")


@pytest.fixture
def session(store):
    s = GameSession(store, rng=random.Random(1), now_ms=0)
    yield s
    s.close()
