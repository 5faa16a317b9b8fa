"""Frame loop: advances notes and evicts the ones that slid past the target."""

from __future__ import annotations

from cubefall.config import LANE_LENGTH, TARGET_POSITION, TIMING_WINDOW_SECONDS
from cubefall.difficulty import DifficultyController
from cubefall.models import Note
from cubefall.notes import NoteRegistry


def removal_threshold(travel_time: float) -> float:
    """Position past which an unjudged note counts as missed."""
    return TARGET_POSITION + (LANE_LENGTH / travel_time) * (TIMING_WINDOW_SECONDS / 2)


class GameLoop:
    def __init__(self, registry: NoteRegistry, difficulty: DifficultyController) -> None:
        self._registry = registry
        self._difficulty = difficulty
        self._last_timestamp: float | None = None

    @property
    def last_timestamp(self) -> float | None:
        return self._last_timestamp

    def suspend(self) -> None:
        """Forget the last timestamp so the next step starts with no elapsed time."""
        self._last_timestamp = None

    def step(self, now: float) -> list[Note]:
        """Advance one frame. Returns the notes evicted as misses."""
        if self._last_timestamp is None:
            self._last_timestamp = now
        elapsed = max(0.0, now - self._last_timestamp)
        self._last_timestamp = now

        # Speed is fixed for the whole frame, even if a miss resets difficulty mid-way
        travel_time = self._difficulty.travel_time
        threshold = removal_threshold(travel_time)
        distance = LANE_LENGTH * (elapsed / travel_time)

        evicted: list[Note] = []
        for lane in self._registry.lanes:
            for note in list(lane.notes):
                if note.position > threshold:
                    self._registry.remove(note)
                    evicted.append(note)
                else:
                    note.position += distance
        return evicted
