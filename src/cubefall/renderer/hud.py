"""Heads-up display — current and best difficulty."""

from __future__ import annotations

import pygame

from cubefall.models import DifficultyState
from cubefall.renderer.colors import HUD_DIM, HUD_TEXT


def render_hud(surface: pygame.Surface, state: DifficultyState) -> None:
    font = pygame.font.SysFont("monospace", 20)

    lines = [
        (f"Difficulty: {state.current:.2f}", HUD_TEXT),
        (f"Best: {state.best:.2f}", HUD_DIM),
    ]

    y = 10
    for line, color in lines:
        text = font.render(line, True, color)
        surface.blit(text, (10, y))
        y += 28
