import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from snake_game.state import GameState


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_state(rng):
    """Build a GameState with a fixed layout instead of random placement."""
    def _make(snake=((5, 10), (4, 10), (3, 10)), direction=(1, 0), food=(15, 15),
              obstacles=(), **kw):
        return GameState(
            direction=direction,
            next_direction=direction,
            snake=list(snake),
            food=food,
            obstacles=list(obstacles),
            rng=rng,
            **kw,
        )
    return _make
