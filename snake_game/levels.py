"""Score-to-level bookkeeping and the values the HUD shows."""

import logging
import math
from dataclasses import dataclass

from .config import level_for_score, speed_for_level
from .obstacles import build_obstacles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HudValues:
    score: int
    level: int
    speed: int         # cells per second
    food_seconds: int  # whole seconds left on the food timer


def level_up_if_needed(state):
    """Sync ``level`` with the score; a new level gets a new obstacle set."""
    new_level = level_for_score(state.score)
    if new_level == state.level:
        return False
    state.level = new_level
    state.obstacles = build_obstacles(state, new_level)
    logger.info("level %d: %d obstacles, %d cells/s",
                new_level, len(state.obstacles), speed_for_level(new_level))
    return True


def hud_values(state):
    return HudValues(
        score=state.score,
        level=state.level,
        speed=speed_for_level(state.level),
        food_seconds=math.ceil(state.food_timer),
    )
