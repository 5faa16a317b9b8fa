"""Gameplay view — drives a GameSession from pygame events and timers."""

from __future__ import annotations

import logging

import pygame

from cubefall.config import (
    GROWTH_INTERVAL_MS,
    MISS_FLASH_MS,
    PRESS_FEEDBACK_MS,
    SPAWN_INTERVAL_MS,
)
from cubefall.input import lane_for_event
from cubefall.models import MissEvent
from cubefall.renderer import colors
from cubefall.renderer.field import lane_rects, render_field
from cubefall.renderer.hud import render_hud
from cubefall.session import GameSession
from cubefall.views.base import ViewAction, ViewContext

SPAWN_EVENT = pygame.event.custom_type()
GROWTH_EVENT = pygame.event.custom_type()

_HIDDEN_EVENTS = (pygame.WINDOWHIDDEN, pygame.WINDOWMINIMIZED)
_SHOWN_EVENTS = (pygame.WINDOWSHOWN, pygame.WINDOWRESTORED)

logger = logging.getLogger(__name__)


class PlayView:
    name = "play"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._session: GameSession | None = None
        self._pressed: list[float] = []
        self._miss_flash: float = 0.0

    @property
    def session(self) -> GameSession | None:
        return self._session

    @property
    def press_feedback(self) -> tuple[float, ...]:
        """Per-lane press tint strength, 1.0 right after a press, fading to 0."""
        return tuple(self._pressed)

    @property
    def miss_flash(self) -> float:
        return self._miss_flash

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._session = GameSession(context.store)
        self._session.add_listener(self)
        self._pressed = [0.0] * self._session.registry.lane_count
        self._miss_flash = 0.0
        pygame.time.set_timer(SPAWN_EVENT, SPAWN_INTERVAL_MS)
        pygame.time.set_timer(GROWTH_EVENT, GROWTH_INTERVAL_MS)

    def on_exit(self) -> None:
        pygame.time.set_timer(SPAWN_EVENT, 0)
        pygame.time.set_timer(GROWTH_EVENT, 0)
        if self._session is not None:
            logger.info("Session ended (best %.2f)", self._session.difficulty.best)
            self._session.remove_listener(self)
        self._session = None

    # SessionListener

    def on_lane_pressed(self, lane: int) -> None:
        self._pressed[lane] = 1.0

    def on_miss(self, event: MissEvent) -> None:
        self._miss_flash = 1.0

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        session = self._session
        if session is None or self._context is None:
            return None

        if event.type == SPAWN_EVENT:
            session.spawn_tick()
        elif event.type == GROWTH_EVENT:
            session.growth_tick()
        elif event.type in _HIDDEN_EVENTS:
            session.set_visible(False)
        elif event.type in _SHOWN_EVENTS:
            session.set_visible(True)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return ViewAction(kind="pop")
        else:
            rects = lane_rects(self._context.screen_size, session.registry.lane_count)
            lane = lane_for_event(event, rects)
            if lane is not None:
                session.on_lane_activated(lane)
        return None

    def update(self, dt: float) -> ViewAction | None:
        session = self._session
        if session is None or self._context is None:
            return None

        # Input first, then advance: a press is judged before this frame's movement
        midi = self._context.midi_input
        if midi is not None:
            while (lane := midi.poll()) is not None:
                session.on_lane_activated(lane)

        session.frame()

        press_decay = dt / (PRESS_FEEDBACK_MS / 1000.0)
        self._pressed = [max(0.0, p - press_decay) for p in self._pressed]
        self._miss_flash = max(0.0, self._miss_flash - dt / (MISS_FLASH_MS / 1000.0))
        return None

    def draw(self, surface: pygame.Surface) -> None:
        session = self._session
        if session is None:
            return

        surface.fill(colors.BG)
        render_field(surface, session.registry.lanes, self._pressed, self._miss_flash)
        render_hud(surface, session.difficulty.state)
