"""Shared fixtures for gameplay tests."""

from __future__ import annotations

import pytest

from cubefall.storage import BestScoreStore


class ManualClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, start: float = 0.0) -> None:
        self.time = start

    def now(self) -> float:
        return self.time

    def advance(self, seconds: float) -> None:
        self.time += seconds


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed draws."""

    def __init__(self, floats: list[float], lanes: list[int] | None = None, picks: list[int] | None = None) -> None:
        self._floats = list(floats)
        self._lanes = list(lanes or [])
        self._picks = list(picks or [])

    def random(self) -> float:
        return self._floats.pop(0)

    def randrange(self, n: int) -> int:
        return self._lanes.pop(0)

    def choice(self, seq):
        return seq[self._picks.pop(0)]


@pytest.fixture
def store(tmp_path):
    s = BestScoreStore(tmp_path / "storage.db")
    yield s
    s.close()


@pytest.fixture
def clock():
    return ManualClock()
