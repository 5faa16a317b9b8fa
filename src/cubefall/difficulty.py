"""Difficulty progression: periodic growth, reset on miss, best tracking."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cubefall.config import DIFFICULTY_CEILING, DIFFICULTY_GROWTH_MAX, DIFFICULTY_INITIAL
from cubefall.models import DifficultyState

if TYPE_CHECKING:
    from cubefall.storage import BestScoreStore

logger = logging.getLogger(__name__)


def remap(value: float, from_start: float, from_end: float, to_start: float, to_end: float) -> float:
    """Linearly map ``value`` from one range onto another (no clamping)."""
    progress = (value - from_start) / (from_end - from_start)
    return to_start + progress * (to_end - to_start)


def growth_delta(current: float) -> float:
    """Amount the growth step adds at ``current``.

    0.1 at the initial difficulty, shrinking linearly to 0 at the ceiling.
    Never negative, so difficulty does not drift back down past the ceiling.
    """
    delta = remap(current, DIFFICULTY_INITIAL, DIFFICULTY_CEILING, DIFFICULTY_GROWTH_MAX, 0.0)
    return max(0.0, delta)


class DifficultyController:
    """Owns the current and best difficulty for one session."""

    def __init__(self, store: BestScoreStore, initial: float = DIFFICULTY_INITIAL) -> None:
        if initial < 1.0:
            raise ValueError(f"initial difficulty must be >= 1, got {initial}")
        self._store = store
        self._initial = initial
        self._persisted = store.load()
        self.state = DifficultyState(current=initial, best=max(initial, self._persisted))

    @property
    def current(self) -> float:
        return self.state.current

    @property
    def best(self) -> float:
        return self.state.best

    @property
    def persisted(self) -> float:
        """Best value last read from or written to the store."""
        return self._persisted

    @property
    def travel_time(self) -> float:
        """Seconds a note takes to cross the whole lane."""
        return 1.0 / self.state.current

    def grow(self) -> float:
        self.state.current += growth_delta(self.state.current)
        self.state.best = max(self.state.best, self.state.current)
        logger.debug("Difficulty grew to %.3f (best %.3f)", self.state.current, self.state.best)
        return self.state.current

    def register_miss(self) -> None:
        """Persist a new best if one was reached, then reset to the initial level."""
        if self.state.best > self._persisted:
            self._store.save(self.state.best)
            self._persisted = self.state.best
            logger.info("New best difficulty %.2f saved", self.state.best)
        self.state.current = self._initial
