"""Core data models shared across the engine."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto


class Judgement(Enum):
    HIT = auto()
    MISS = auto()


class MissCause(Enum):
    EMPTY_LANE = auto()  # pressed a lane with no live note
    OUT_OF_WINDOW = auto()  # pressed too early or too late
    PASSED_TARGET = auto()  # note slid past the removal threshold


class UnknownLaneError(IndexError):
    """Raised when a lane index outside the fixed lane set is used."""


@dataclass(eq=False)
class Note:
    """A single falling note."""

    lane: int
    position: float = 0.0  # distance travelled from the spawn point


@dataclass
class Lane:
    """A column of notes, oldest (closest to the target) first."""

    index: int
    notes: deque[Note] = field(default_factory=deque)

    @property
    def head(self) -> Note | None:
        return self.notes[0] if self.notes else None


@dataclass
class DifficultyState:
    current: float
    best: float


@dataclass
class JudgeResult:
    lane: int
    judgement: Judgement
    distance: float | None = None  # None when the lane was empty
    cause: MissCause | None = None

    @property
    def is_hit(self) -> bool:
        return self.judgement == Judgement.HIT


@dataclass
class MissEvent:
    lane: int
    cause: MissCause
    difficulty_before: float
