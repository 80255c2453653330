"""Grid helpers: bounds checks and random free-cell search."""

import random

from .config import GRID

MAX_TRIES = 2000


class NoFreeCellError(RuntimeError):
    """Raised when every cell of the grid is occupied."""


def add(a, b):
    return (a[0] + b[0], a[1] + b[1])


def in_bounds(cell):
    x, y = cell
    return 0 <= x < GRID and 0 <= y < GRID


def random_cell(rng=random):
    return (rng.randrange(GRID), rng.randrange(GRID))


def free_random_cell(occupied, rng=random, max_tries=MAX_TRIES):
    """
    Return a random cell (x, y) not in ``occupied``.

    Rejection sampling is fast while the board is mostly empty. After
    ``max_tries`` misses the free cells are enumerated and one is picked
    uniformly, so a crowded board still terminates. Raises NoFreeCellError
    if nothing is free.
    """
    occupied = {c for c in occupied if in_bounds(c)}
    if len(occupied) >= GRID * GRID:
        raise NoFreeCellError(f"all {GRID * GRID} cells are occupied")

    for _ in range(max_tries):
        c = random_cell(rng)
        if c not in occupied:
            return c

    free = [(x, y) for y in range(GRID) for x in range(GRID) if (x, y) not in occupied]
    if not free:
        raise NoFreeCellError(f"all {GRID * GRID} cells are occupied")
    return rng.choice(free)
