"""Obstacle placement, scaled by level."""

import logging

from .config import obstacles_for
from .grid import NoFreeCellError, free_random_cell

logger = logging.getLogger(__name__)


def build_obstacles(state, level):
    """
    Return a fresh obstacle list for ``level``.

    Cells avoid the snake, the current food and each other. The set is
    always rebuilt from scratch; callers replace ``state.obstacles`` with it.
    If the board runs out of room the remaining obstacles are skipped.
    """
    occupied = set(state.snake)
    if state.food is not None:
        occupied.add(state.food)

    obs = []
    for i in range(obstacles_for(level)):
        try:
            c = free_random_cell(occupied, state.rng)
        except NoFreeCellError:
            logger.warning("board full: placed %d of %d obstacles", i, obstacles_for(level))
            break
        obs.append(c)
        occupied.add(c)
    return obs
