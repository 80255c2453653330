"""
The game-step state machine.

States: Playing -> Paused <-> Playing -> Game Over. Game Over is terminal;
the only way out is a brand new state from ``new_game``.
"""

import logging
from dataclasses import dataclass

from .config import DIRECTIONS, GROW_PER_FOOD, POINTS_PER_FOOD
from .food import place_food
from .grid import NoFreeCellError, add, in_bounds
from .levels import level_up_if_needed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Overlay:
    title: str
    message: str
    button: str


def opposite(a, b):
    """True if direction a is the exact reverse of direction b."""
    return a[0] == -b[0] and a[1] == -b[1]


def set_direction(state, direction):
    """Queue a heading for the next step. Reversals are filtered in ``step``."""
    direction = tuple(direction)
    if direction not in DIRECTIONS:
        raise ValueError(f"not a unit direction: {direction!r}")
    state.next_direction = direction


def game_over(state, reason="collision"):
    state.playing = False
    state.over = True
    logger.info("game over (%s): score %d, level %d, length %d",
                reason, state.score, state.level, len(state.snake))


def step(state):
    """Advance the snake one cell."""
    if state.over:
        return

    # no instant reverse
    if not opposite(state.next_direction, state.direction):
        state.direction = state.next_direction

    new_head = add(state.head, state.direction)

    if not in_bounds(new_head):
        return game_over(state, "wall")
    if new_head in state.obstacles or new_head in state.snake:
        return game_over(state, "obstacle" if new_head in state.obstacles else "self")

    state.snake.insert(0, new_head)

    if new_head == state.food:
        state.score += POINTS_PER_FOOD
        state.grow += GROW_PER_FOOD
        level_up_if_needed(state)
        try:
            place_food(state)
        except NoFreeCellError:
            state.food = None
            return game_over(state, "board full")

    if state.grow > 0:
        state.grow -= 1
    else:
        state.snake.pop()


def toggle_pause(state, force=None):
    """Flip ``paused`` (or set it to ``force``). Ignored once the game is over."""
    if state.over:
        return
    state.paused = (not state.paused) if force is None else bool(force)


def overlay_for(state):
    """The modal to show for the current state, or None."""
    if state.over:
        return Overlay("Game Over!", f"Score: {state.score}. Press R to restart.", "Restart")
    if state.paused:
        return Overlay("Paused", "Press P to continue.", "Continue")
    return None


def modal_action(state):
    """
    What the overlay button does: ask for a reset after game over,
    otherwise resume. Returns "reset" or "resume".
    """
    if state.over:
        return "reset"
    toggle_pause(state, False)
    return "resume"
