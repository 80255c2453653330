"""
Víbora — snake with obstacles, expiring food and levels (Pygame).

Controls
- Arrow keys / WASD: move
- P: pause / resume
- R: new game
- Esc or window close: quit
Mouse: HUD Pause / Reset buttons and the overlay button.
"""

import argparse
import logging
import random
import sys

import pygame

from .config import BOARD_PX, DOWN, HUD_H, LEFT, RIGHT, UP, WINDOW_H, WINDOW_W
from .engine import modal_action, overlay_for, set_direction, toggle_pause
from .levels import hud_values
from .loop import FixedStepLoop
from .render import draw_scene, make_tint
from .state import new_game
from .ui import PAUSE_BUTTON, RESET_BUTTON, draw_hud, draw_overlay, modal_button_rect

logger = logging.getLogger(__name__)

KEY_TO_DIR = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}


class App:
    def __init__(self, seed=None, fps=60):
        pygame.init()
        pygame.display.set_caption("Víbora")
        self.screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
        self.board = pygame.Surface((BOARD_PX, BOARD_PX))
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.font = pygame.font.SysFont(None, 26)
        self.big_font = pygame.font.SysFont(None, 52)
        self.tint = make_tint()

        self.rng = random.Random(seed)
        self.loop = FixedStepLoop()
        self.state = None
        self.reset()

    def reset(self):
        self.state = new_game(self.rng)
        self.loop.reset()
        logger.info("new game: food at %s", self.state.food)

    # ----- input -----
    def handle_key(self, key):
        if key in KEY_TO_DIR:
            set_direction(self.state, KEY_TO_DIR[key])
        elif key == pygame.K_p:
            toggle_pause(self.state)
        elif key == pygame.K_r:
            self.reset()

    def handle_click(self, pos):
        if overlay_for(self.state) is not None and modal_button_rect(self.screen.get_size()).collidepoint(pos):
            if modal_action(self.state) == "reset":
                self.reset()
        elif PAUSE_BUTTON.collidepoint(pos):
            toggle_pause(self.state)
        elif RESET_BUTTON.collidepoint(pos):
            self.reset()

    def handle_events(self):
        """Returns False once the window should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                self.handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(event.pos)
        return True

    # ----- frame -----
    def draw(self):
        mouse = pygame.mouse.get_pos()
        draw_scene(self.board, self.state, self.tint)
        self.screen.blit(self.board, (0, HUD_H))
        draw_hud(self.screen, hud_values(self.state), self.font, self.state.paused, mouse)
        overlay = overlay_for(self.state)
        if overlay is not None:
            draw_overlay(self.screen, overlay, (self.big_font, self.font), mouse)
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(self.fps) / 1000.0
            running = self.handle_events()
            self.loop.advance(self.state, dt)
            self.draw()
        pygame.quit()


def parse_args(argv):
    parser = argparse.ArgumentParser(prog="vibora", description="Snake with obstacles, expiring food and levels")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food and obstacle placement")
    parser.add_argument("--fps", type=int, default=60, help="Render frame cap (simulation speed is per level)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(list(argv))


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    App(seed=args.seed, fps=args.fps).run()
    return 0
