"""Tests for hit judgement."""

import pytest

from cubefall.config import TARGET_POSITION
from cubefall.difficulty import DifficultyController
from cubefall.judge import HitJudge, timing_window_distance
from cubefall.models import Judgement, MissCause
from cubefall.notes import NoteRegistry


@pytest.fixture
def registry():
    return NoteRegistry(5)


@pytest.fixture
def judge(registry, store):
    return HitJudge(registry, DifficultyController(store))


def test_timing_window_at_initial_speed():
    assert timing_window_distance(1.0) == pytest.approx(96.0)


def test_note_on_target_is_hit(registry, judge):
    note = registry.spawn(2)
    note.position = TARGET_POSITION
    result = judge.judge(2)
    assert result.judgement == Judgement.HIT
    assert result.distance == 0
    assert registry.head(2) is None


def test_edge_of_window_is_hit(registry, judge):
    note = registry.spawn(0)
    note.position = TARGET_POSITION - 48.0
    assert judge.judge(0).is_hit


def test_early_press_is_miss_and_keeps_note(registry, judge):
    note = registry.spawn(0)
    note.position = TARGET_POSITION - 49.0
    result = judge.judge(0)
    assert result.judgement == Judgement.MISS
    assert result.cause == MissCause.OUT_OF_WINDOW
    assert registry.head(0) is note


def test_only_head_note_is_judged(registry, judge):
    older = registry.spawn(1)
    newer = registry.spawn(1)
    older.position = 100.0
    newer.position = TARGET_POSITION
    result = judge.judge(1)
    assert result.cause == MissCause.OUT_OF_WINDOW
    assert list(registry.lane(1).notes) == [older, newer]


def test_empty_lane_is_always_miss(judge):
    for _ in range(10):
        result = judge.judge(3)
        assert result.judgement == Judgement.MISS
        assert result.cause == MissCause.EMPTY_LANE
        assert result.distance is None


def test_faster_difficulty_widens_window(registry, store):
    difficulty = DifficultyController(store)
    for _ in range(20):
        difficulty.grow()
    judge = HitJudge(registry, difficulty)
    note = registry.spawn(4)
    note.position = TARGET_POSITION + 60.0
    assert judge.judge(4).is_hit
