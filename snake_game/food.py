"""Food placement and its time-to-live countdown."""

import logging

from .config import food_ttl
from .grid import free_random_cell

logger = logging.getLogger(__name__)


def regen_food_timer(state):
    state.food_ttl = food_ttl(state.level)
    state.food_timer = state.food_ttl


def place_food(state):
    """Move the food to a free cell and re-arm its timer."""
    occupied = set(state.snake)
    occupied.update(state.obstacles)
    state.food = free_random_cell(occupied, state.rng)
    regen_food_timer(state)
    logger.debug("food at %s for %ss", state.food, state.food_ttl)


def tick_food_timer(state, dt):
    """Count the timer down by ``dt`` seconds; expired food respawns at once."""
    state.food_timer -= dt
    if state.food_timer <= 0:
        place_food(state)
