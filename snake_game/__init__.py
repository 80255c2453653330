"""Víbora — grid snake with obstacles, expiring food and levels."""

from .engine import Overlay, modal_action, overlay_for, set_direction, step, toggle_pause
from .grid import NoFreeCellError
from .levels import HudValues, hud_values, level_up_if_needed
from .loop import FixedStepLoop
from .state import GameState, new_game

__all__ = [
    "FixedStepLoop",
    "GameState",
    "HudValues",
    "NoFreeCellError",
    "Overlay",
    "hud_values",
    "level_up_if_needed",
    "modal_action",
    "new_game",
    "overlay_for",
    "set_direction",
    "step",
    "toggle_pause",
]
