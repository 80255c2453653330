"""Fixed-timestep driver: wall-clock frames in, discrete steps out."""

from .config import speed_for_level
from .engine import step
from .food import tick_food_timer


class FixedStepLoop:
    """
    Turns frame times into discrete steps at the level's cells-per-second.

    Each ``advance`` may run zero or several steps, so the simulation rate
    does not depend on the frame rate. The food timer is ticked by the raw
    frame delta instead.
    """

    def __init__(self):
        self.accumulator = 0.0

    def reset(self):
        self.accumulator = 0.0

    def advance(self, state, dt):
        """Feed ``dt`` seconds of wall time. Returns the number of steps run."""
        if dt < 0:
            raise ValueError(f"frame delta must be >= 0, got {dt}")
        if not state.running:
            return 0

        steps = 0
        self.accumulator += dt
        step_time = 1.0 / speed_for_level(state.level)
        while self.accumulator >= step_time and not state.over:
            step(state)
            self.accumulator -= step_time
            steps += 1

        if state.over:
            self.accumulator = 0.0
        else:
            tick_food_timer(state, dt)
        return steps
