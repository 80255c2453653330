import random

import pytest

from snake_game.config import GRID
from snake_game.grid import NoFreeCellError, free_random_cell, in_bounds, random_cell


def test_random_cell_in_bounds(rng):
    for _ in range(500):
        assert in_bounds(random_cell(rng))


def test_in_bounds_edges():
    assert in_bounds((0, 0))
    assert in_bounds((GRID - 1, GRID - 1))
    assert not in_bounds((GRID, 10))
    assert not in_bounds((-1, 0))
    assert not in_bounds((3, GRID))


def test_free_cell_avoids_occupied(rng):
    occupied = {(x, y) for x in range(GRID) for y in range(GRID // 2)}
    for _ in range(200):
        c = free_random_cell(occupied, rng)
        assert c not in occupied
        assert in_bounds(c)


def test_single_free_cell_found_after_retries_run_out(rng):
    everything = {(x, y) for x in range(GRID) for y in range(GRID)}
    hole = (7, 13)
    occupied = everything - {hole}
    assert free_random_cell(occupied, rng, max_tries=3) == hole


def test_full_board_raises():
    everything = {(x, y) for x in range(GRID) for y in range(GRID)}
    with pytest.raises(NoFreeCellError):
        free_random_cell(everything, random.Random(0))
