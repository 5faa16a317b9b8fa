"""The session context object tying the gameplay core together.

A session owns the note registry, difficulty controller, spawner, judge and
frame loop for one run of play, and exposes the four entry points that may
mutate gameplay state:

- ``frame()``: called once per rendered frame.
- ``spawn_tick()``: called on the spawn timer.
- ``growth_tick()``: called on the difficulty growth timer.
- ``on_lane_activated(lane)``: called by input adapters.

Everything runs on one thread; callers must process pending input before
calling ``frame()`` so a press is judged against pre-advance positions.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol, runtime_checkable

from cubefall.clock import Clock, MonotonicClock
from cubefall.config import LANE_COUNT
from cubefall.difficulty import DifficultyController
from cubefall.judge import HitJudge
from cubefall.loop import GameLoop
from cubefall.models import JudgeResult, MissCause, MissEvent, Note
from cubefall.notes import NoteRegistry
from cubefall.spawner import Spawner
from cubefall.storage import BestScoreStore

logger = logging.getLogger(__name__)


@runtime_checkable
class SessionListener(Protocol):
    """Presentation hooks. Fire-and-forget; return values are ignored."""

    def on_lane_pressed(self, lane: int) -> None: ...
    def on_miss(self, event: MissEvent) -> None: ...


class GameSession:
    def __init__(
        self,
        store: BestScoreStore,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        lane_count: int = LANE_COUNT,
    ) -> None:
        self.clock = clock or MonotonicClock()
        self.registry = NoteRegistry(lane_count)
        self.difficulty = DifficultyController(store)
        self.spawner = Spawner(self.registry, rng)
        self.judge = HitJudge(self.registry, self.difficulty)
        self.loop = GameLoop(self.registry, self.difficulty)
        self.visible = True
        self._listeners: list[SessionListener] = []
        logger.info("Session started (best %.2f)", self.difficulty.best)

    def add_listener(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        self._listeners.remove(listener)

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def frame(self) -> list[Note]:
        """Advance notes by the time since the last frame; evicted notes are misses."""
        if not self.visible:
            self.loop.suspend()
            return []
        evicted = self.loop.step(self.clock.now())
        for note in evicted:
            self._miss(note.lane, MissCause.PASSED_TARGET)
        return evicted

    def spawn_tick(self) -> list[Note]:
        if not self.visible:
            return []
        return self.spawner.tick()

    def growth_tick(self) -> float:
        if not self.visible:
            return self.difficulty.current
        return self.difficulty.grow()

    def on_lane_activated(self, lane: int) -> JudgeResult:
        self.registry.lane(lane)  # fail fast on unknown lanes
        for listener in self._listeners:
            listener.on_lane_pressed(lane)

        result = self.judge.judge(lane)
        if not result.is_hit:
            self._miss(lane, result.cause)
        return result

    def _miss(self, lane: int, cause: MissCause) -> None:
        event = MissEvent(lane=lane, cause=cause, difficulty_before=self.difficulty.current)
        logger.debug("Miss on lane %d (%s) at difficulty %.3f", lane, cause.name, event.difficulty_before)
        self.difficulty.register_miss()
        for listener in self._listeners:
            listener.on_miss(event)
