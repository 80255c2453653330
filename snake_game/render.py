"""
Board rendering.

The rectangle builders are pure: they turn grid cells into (x, y, w, h)
boxes in board pixels. ``draw_scene`` hands the batches to pygame.
"""

import pygame

from .config import (
    BG, BOARD_PX, CELL, COL_EYE, COL_FOOD, COL_FOOD_INNER, COL_HEAD,
    COL_OBS, COL_OBS_INNER, COL_SNAKE,
)


# ---------- Rectangle builders ----------
def cell_rect(cell, inset):
    x, y = cell
    return (x * CELL + inset, y * CELL + inset, CELL - 2 * inset, CELL - 2 * inset)


def obstacle_rects(obstacles):
    outer = [cell_rect(c, 1) for c in obstacles]
    inner = [cell_rect(c, 6) for c in obstacles]
    return outer, inner


def food_rects(food):
    if food is None:
        return [], []
    return [cell_rect(food, 5)], [cell_rect(food, 11)]


def snake_rects(snake):
    """(body, head) boxes; the head is drawn slightly larger."""
    body = [cell_rect(c, 3) for c in snake[1:]]
    return body, [cell_rect(snake[0], 2)]


def eye_rects(head, direction):
    # eyes slide 8px toward the heading
    dx, dy = direction
    ex = 8 if dx > 0 else -8 if dx < 0 else 0
    ey = 8 if dy > 0 else -8 if dy < 0 else 0
    hx = head[0] * CELL + CELL // 2
    hy = head[1] * CELL + CELL // 2
    return [
        (hx - 7 + ex, hy - 4 + ey, 4, 4),
        (hx + 3 + ex, hy - 4 + ey, 4, 4),
    ]


def scene(state):
    """Ordered (color, rects) batches for one frame, back to front."""
    batches = []
    if state.obstacles:
        outer, inner = obstacle_rects(state.obstacles)
        batches.append((COL_OBS, outer))
        batches.append((COL_OBS_INNER, inner))
    f1, f2 = food_rects(state.food)
    if f1:
        batches.append((COL_FOOD, f1))
        batches.append((COL_FOOD_INNER, f2))
    body, head = snake_rects(state.snake)
    batches.append((COL_SNAKE, body))
    batches.append((COL_HEAD, head))
    batches.append((COL_EYE, eye_rects(state.head, state.direction)))
    return batches


# ---------- pygame drawing ----------
def to_rgba(color):
    """Float RGBA in [0, 1] -> pygame 0..255 ints."""
    return tuple(max(0, min(255, round(c * 255))) for c in color)


def draw_rects(surface, rects, color):
    rgba = to_rgba(color)
    if rgba[3] == 255:
        for r in rects:
            pygame.draw.rect(surface, rgba, r)
        return
    # translucent: draw onto an alpha layer and blend it in
    layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for r in rects:
        pygame.draw.rect(layer, rgba, r)
    surface.blit(layer, (0, 0))


def make_tint(size=(BOARD_PX, BOARD_PX)):
    """Faint blue-to-pink diagonal gradient painted under the board."""
    w, h = size
    tint = pygame.Surface(size, pygame.SRCALPHA)
    a = (35, 100, 255, 20)
    b = (255, 60, 180, 10)
    steps = w + h
    for i in range(0, steps, 2):
        t = i / steps
        col = tuple(round(a[k] + (b[k] - a[k]) * t) for k in range(4))
        pygame.draw.line(tint, col, (i, 0), (i - h, h), 3)
    return tint


def draw_scene(surface, state, tint=None):
    surface.fill(BG)
    if tint is not None:
        surface.blit(tint, (0, 0))
    for color, rects in scene(state):
        draw_rects(surface, rects, color)
