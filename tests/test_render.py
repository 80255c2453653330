import pygame

from snake_game.config import BOARD_PX, CELL, COL_EYE, COL_HEAD, COL_OBS
from snake_game.render import (
    draw_scene, eye_rects, food_rects, make_tint, obstacle_rects, scene,
    snake_rects, to_rgba,
)
from snake_game.state import GameState


def test_cell_geometry():
    outer, inner = obstacle_rects([(2, 3)])
    assert outer == [(2 * CELL + 1, 3 * CELL + 1, CELL - 2, CELL - 2)]
    assert inner == [(2 * CELL + 6, 3 * CELL + 6, CELL - 12, CELL - 12)]

    f1, f2 = food_rects((0, 0))
    assert f1 == [(5, 5, CELL - 10, CELL - 10)]
    assert f2 == [(11, 11, CELL - 22, CELL - 22)]
    assert food_rects(None) == ([], [])


def test_snake_head_and_body():
    body, head = snake_rects([(5, 10), (4, 10), (3, 10)])
    assert head == [(5 * CELL + 2, 10 * CELL + 2, CELL - 4, CELL - 4)]
    assert len(body) == 2
    assert body[0] == (4 * CELL + 3, 10 * CELL + 3, CELL - 6, CELL - 6)


def test_eyes_follow_heading():
    right = eye_rects((0, 0), (1, 0))
    assert right == [(16, 11, 4, 4), (26, 11, 4, 4)]
    up = eye_rects((0, 0), (0, -1))
    assert up == [(8, 3, 4, 4), (18, 3, 4, 4)]


def test_scene_order(make_state):
    state = make_state(obstacles=[(1, 1)])
    colors = [c for c, _ in scene(state)]
    assert colors[0] == COL_OBS
    assert colors[-2:] == [COL_HEAD, COL_EYE]


def test_to_rgba():
    assert to_rgba((1.0, 0.0, 0.5, 0.35)) == (255, 0, 128, 89)


def test_draw_scene_paints_head():
    pygame.init()
    try:
        state = GameState(food=(15, 15))
        surface = pygame.Surface((BOARD_PX, BOARD_PX))
        draw_scene(surface, state, make_tint())
        hx, hy = state.head
        # centre of the head cell, between the eyes
        px = surface.get_at((hx * CELL + CELL // 2, hy * CELL + CELL - 4))
        assert tuple(px)[:3] == to_rgba(COL_HEAD)[:3]
    finally:
        pygame.quit()
