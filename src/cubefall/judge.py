"""Hit judgement — compare a lane press to the lane's nearest note."""

from __future__ import annotations

from cubefall.config import LANE_LENGTH, TARGET_POSITION, TIMING_WINDOW_SECONDS
from cubefall.difficulty import DifficultyController
from cubefall.models import Judgement, JudgeResult, MissCause
from cubefall.notes import NoteRegistry


def timing_window_distance(travel_time: float) -> float:
    """Width of the timing window in field units at the given travel time."""
    return LANE_LENGTH * (TIMING_WINDOW_SECONDS / travel_time)


class HitJudge:
    """Judges lane presses against the head note of the lane.

    Only a hit removes a note. An early or late press is a miss that
    leaves the note in place; it can still be hit or slide past later.
    """

    def __init__(self, registry: NoteRegistry, difficulty: DifficultyController) -> None:
        self._registry = registry
        self._difficulty = difficulty

    def judge(self, lane: int) -> JudgeResult:
        candidate = self._registry.head(lane)
        if candidate is None:
            return JudgeResult(lane=lane, judgement=Judgement.MISS, cause=MissCause.EMPTY_LANE)

        window = timing_window_distance(self._difficulty.travel_time)
        distance = abs(TARGET_POSITION - candidate.position)
        if distance > window / 2:
            return JudgeResult(
                lane=lane,
                judgement=Judgement.MISS,
                distance=distance,
                cause=MissCause.OUT_OF_WINDOW,
            )

        self._registry.pop_head(lane)
        return JudgeResult(lane=lane, judgement=Judgement.HIT, distance=distance)
