"""Top-level application: initializes pygame, manages screens, and runs the game loop."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from cubefall.config import FPS, LANE_COUNT, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from cubefall.storage import DEFAULT_DB_PATH, BestScoreStore
from cubefall.views.base import ViewContext, ViewManager
from cubefall.views.play_view import PlayView
from cubefall.views.start_view import StartView

logger = logging.getLogger(__name__)


class App:
    def __init__(self, db_path: Path = DEFAULT_DB_PATH, midi_port: int | None = None) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.store = BestScoreStore(db_path)
        # Optional subsystems gracefully degrade
        self._midi_input = self._try_midi(midi_port)

        context = ViewContext(
            screen_size=(WINDOW_WIDTH, WINDOW_HEIGHT),
            store=self.store,
            midi_input=self._midi_input,
        )

        self.views = ViewManager(context)
        self.views.register(StartView)
        self.views.register(PlayView)
        self.views.push("start")

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            # Queued input and timer events are handled before the frame update
            for event in pygame.event.get():
                if event.type == pygame.QUIT or not self.views.handle_event(event):
                    running = False
                    break
            if running:
                if not self.views.update(dt):
                    running = False
            self.views.draw(self.screen)
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def _cleanup(self) -> None:
        while self.views.active_view:
            self.views.pop()
        if self._midi_input is not None:
            self._midi_input.close()
        self.store.close()

    @staticmethod
    def _try_midi(port: int | None):
        try:
            from cubefall.input import MidiLaneInput
            mi = MidiLaneInput(LANE_COUNT, port_index=port)
            mi.open()
            return mi
        except Exception as exc:
            logger.info("MIDI input unavailable: %s", exc)
            return None
