"""Game state record and fresh-game construction."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .config import START_DIR, START_FOOD_TTL, START_SNAKE
from .food import place_food
from .obstacles import build_obstacles


@dataclass
class GameState:
    """Everything one game needs; replaced wholesale on reset."""
    direction: tuple = START_DIR
    next_direction: tuple = START_DIR
    snake: list = field(default_factory=lambda: list(START_SNAKE))
    grow: int = 0
    food: tuple = (0, 0)
    food_ttl: float = START_FOOD_TTL
    food_timer: float = START_FOOD_TTL
    score: int = 0
    level: int = 1
    obstacles: list = field(default_factory=list)
    playing: bool = True
    over: bool = False
    paused: bool = False
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @property
    def head(self):
        return self.snake[0]

    @property
    def running(self):
        return self.playing and not self.paused


def new_game(rng: random.Random | None = None) -> GameState:
    """Fresh state: level-1 obstacle set (empty), food placed, timer armed."""
    state = GameState(rng=rng if rng is not None else random.Random())
    state.obstacles = build_obstacles(state, state.level)
    place_food(state)
    return state
