"""Tests for the difficulty curve and the miss reset."""

import math

import pytest

from cubefall.config import DIFFICULTY_INITIAL
from cubefall.difficulty import DifficultyController, growth_delta, remap


def test_remap_endpoints_and_midpoint():
    assert remap(1.0, 1.0, 5.0, 0.1, 0.0) == pytest.approx(0.1)
    assert remap(5.0, 1.0, 5.0, 0.1, 0.0) == pytest.approx(0.0)
    assert remap(3.0, 1.0, 5.0, 0.1, 0.0) == pytest.approx(0.05)


def test_growth_delta_positive_and_shrinking_below_ceiling():
    values = [1.0 + i * 0.05 for i in range(80)]  # 1.0 .. 4.95
    deltas = [growth_delta(v) for v in values]
    assert all(d > 0 for d in deltas)
    assert all(a > b for a, b in zip(deltas, deltas[1:]))


def test_growth_delta_never_negative_past_ceiling():
    assert growth_delta(5.0) == 0.0
    assert growth_delta(6.0) == 0.0


def test_forty_growth_steps_approach_but_stay_below_ceiling(store):
    controller = DifficultyController(store)
    history = [controller.current]
    for _ in range(40):
        history.append(controller.grow())
    assert all(a < b for a, b in zip(history, history[1:]))
    assert history[-1] < 5.0
    assert history[-1] > 3.5


def test_growth_raises_best(store):
    controller = DifficultyController(store)
    controller.grow()
    assert controller.current == pytest.approx(1.1)
    assert controller.best == pytest.approx(1.1)


def test_travel_time_positive_and_finite(store):
    controller = DifficultyController(store)
    for _ in range(200):
        assert controller.travel_time > 0
        assert math.isfinite(controller.travel_time)
        controller.grow()


def test_miss_resets_and_persists_new_best(store):
    controller = DifficultyController(store)
    for _ in range(5):
        controller.grow()
    best = controller.best

    controller.register_miss()

    assert controller.current == DIFFICULTY_INITIAL
    assert controller.best == best
    assert store.load() == best


def test_miss_without_new_best_does_not_write(store):
    store.save(4.0)
    controller = DifficultyController(store)
    controller.grow()
    controller.register_miss()
    assert store.get_item("highscore") == repr(4.0)
    assert controller.best == 4.0


def test_second_miss_after_reset_does_not_rewrite(store):
    controller = DifficultyController(store)
    controller.grow()
    controller.register_miss()
    store.save(9.0)  # simulate an outside write; in-session comparison uses memory
    controller.register_miss()
    assert store.load() == 9.0


def test_initial_difficulty_below_one_rejected(store):
    with pytest.raises(ValueError):
        DifficultyController(store, initial=0.5)


def test_first_session_miss_before_growth_writes_nothing(store):
    controller = DifficultyController(store)
    controller.register_miss()
    assert store.get_item("highscore") is None
    assert store.load() == DIFFICULTY_INITIAL
