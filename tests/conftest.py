import os
import random
from collections import deque

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake.config import GameConfig
from gridsnake.model import GameEngine, Segment


@pytest.fixture
def engine():
    return GameEngine(GameConfig(), rng=random.Random(1234))


@pytest.fixture
def running(engine):
    engine.start()
    return engine


def arrange(engine, snake, direction, food=None):
    """Put a running engine into a hand-built position."""
    engine._snake = deque(Segment(x, y) for x, y in snake)
    engine._direction = direction
    engine._pending = direction
    if food is not None:
        engine._food = Segment(*food)
    return engine
