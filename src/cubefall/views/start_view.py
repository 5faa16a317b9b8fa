"""Title card with instructions and the stored best difficulty."""

from __future__ import annotations

import pygame

from cubefall.renderer import colors
from cubefall.views.base import ViewAction, ViewContext

_INSTRUCTIONS = [
    "Hit the falling notes as they reach the bottom of their lane.",
    "Keys: D  F  Space  J  K   (or tap / click a lane)",
    "Notes speed up over time. A miss resets the speed.",
]


class StartView:
    name = "start"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._best: float = 0.0
        self._font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._font = pygame.font.SysFont("monospace", 18)
        self._title_font = pygame.font.SysFont("monospace", 40)
        self._best = context.store.load()

    def on_exit(self) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return ViewAction(kind="quit")
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                return ViewAction(kind="push", target="play")
        elif event.type == pygame.FINGERDOWN or (
            event.type == pygame.MOUSEBUTTONDOWN and not getattr(event, "touch", False)
        ):
            return ViewAction(kind="push", target="play")
        return None

    def update(self, dt: float) -> ViewAction | None:
        return None

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(colors.BG)
        if not self._font or not self._title_font:
            return

        w, h = surface.get_size()
        y = h // 3

        title = self._title_font.render("Cubefall", True, colors.HUD_TEXT)
        surface.blit(title, (w // 2 - title.get_width() // 2, y))
        y += title.get_height() + 30

        for line in _INSTRUCTIONS:
            text = self._font.render(line, True, colors.HUD_DIM)
            surface.blit(text, (w // 2 - text.get_width() // 2, y))
            y += 26

        y += 20
        best = self._font.render(f"Best: {self._best:.2f}", True, colors.HUD_TEXT)
        surface.blit(best, (w // 2 - best.get_width() // 2, y))
        y += 40

        hint = self._font.render("Press Enter or tap to start", True, colors.HUD_TEXT)
        surface.blit(hint, (w // 2 - hint.get_width() // 2, y))
