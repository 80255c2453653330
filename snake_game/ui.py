"""HUD strip and the modal overlay (game over / pause)."""

import pygame

from .config import BUTTON, BUTTON_HOVER, HUD_BG, HUD_H, TEXT, TEXT_DIM, WINDOW_W

# HUD buttons, in window coordinates
PAUSE_BUTTON = pygame.Rect(WINDOW_W - 176, 8, 78, HUD_H - 16)
RESET_BUTTON = pygame.Rect(WINDOW_W - 90, 8, 78, HUD_H - 16)

MODAL_W, MODAL_H = 360, 190


def modal_rect(size):
    w, h = size
    return pygame.Rect((w - MODAL_W) // 2, (h - MODAL_H) // 2, MODAL_W, MODAL_H)


def modal_button_rect(size):
    box = modal_rect(size)
    return pygame.Rect(box.centerx - 70, box.bottom - 58, 140, 40)


def hud_text(hud):
    return f"Score {hud.score}   Level {hud.level}   Speed {hud.speed}/s   Food {hud.food_seconds}s"


def draw_button(surface, rect, label, font, mouse=None):
    hover = mouse is not None and rect.collidepoint(mouse)
    pygame.draw.rect(surface, BUTTON_HOVER if hover else BUTTON, rect, border_radius=6)
    text = font.render(label, True, TEXT)
    surface.blit(text, text.get_rect(center=rect.center))


def draw_hud(surface, hud, font, paused=False, mouse=None):
    pygame.draw.rect(surface, HUD_BG, (0, 0, WINDOW_W, HUD_H))
    pygame.draw.line(surface, TEXT_DIM, (0, HUD_H - 1), (WINDOW_W, HUD_H - 1))
    text = font.render(hud_text(hud), True, TEXT)
    surface.blit(text, (12, HUD_H // 2 - text.get_height() // 2))
    draw_button(surface, PAUSE_BUTTON, "Resume" if paused else "Pause", font, mouse)
    draw_button(surface, RESET_BUTTON, "Reset", font, mouse)


def draw_overlay(surface, overlay, fonts, mouse=None):
    """Dim the whole window and show ``overlay`` (an engine.Overlay)."""
    big, small = fonts
    w, h = surface.get_size()

    dim = pygame.Surface((w, h), pygame.SRCALPHA)
    dim.fill((0, 0, 0, 150))
    surface.blit(dim, (0, 0))

    box = modal_rect((w, h))
    pygame.draw.rect(surface, HUD_BG, box, border_radius=10)
    pygame.draw.rect(surface, TEXT_DIM, box, 1, border_radius=10)

    title = big.render(overlay.title, True, TEXT)
    surface.blit(title, title.get_rect(center=(box.centerx, box.top + 40)))
    msg = small.render(overlay.message, True, TEXT)
    surface.blit(msg, msg.get_rect(center=(box.centerx, box.top + 84)))

    draw_button(surface, modal_button_rect((w, h)), overlay.button, small, mouse)
