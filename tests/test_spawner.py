"""Tests for the randomized spawner."""

import random

from conftest import ScriptedRandom

from cubefall.notes import NoteRegistry
from cubefall.spawner import Spawner


def test_skip_draw_spawns_nothing():
    registry = NoteRegistry(5)
    spawner = Spawner(registry, ScriptedRandom(floats=[0.5]))
    assert spawner.tick() == []
    assert len(registry) == 0


def test_single_note_at_spawn_point():
    registry = NoteRegistry(5)
    spawner = Spawner(registry, ScriptedRandom(floats=[0.1, 0.9], lanes=[3]))
    notes = spawner.tick()
    assert len(notes) == 1
    assert notes[0].lane == 3
    assert notes[0].position == 0.0
    assert registry.head(3) is notes[0]


def test_second_note_goes_to_another_lane():
    registry = NoteRegistry(5)
    # others for lane 2 are [0, 1, 3, 4]; pick index 2 -> lane 3
    spawner = Spawner(registry, ScriptedRandom(floats=[0.1, 0.1], lanes=[2], picks=[2]))
    notes = spawner.tick()
    assert [n.lane for n in notes] == [2, 3]


def test_spawned_notes_append_at_tail():
    registry = NoteRegistry(5)
    spawner = Spawner(registry, ScriptedRandom(floats=[0.1, 0.9, 0.1, 0.9], lanes=[0, 0]))
    first = spawner.tick()[0]
    second = spawner.tick()[0]
    assert list(registry.lane(0).notes) == [first, second]


def test_spawn_rates_over_many_ticks():
    registry = NoteRegistry(5)
    spawner = Spawner(registry, random.Random(1234))
    ticks = 20000
    counts = [len(spawner.tick()) for _ in range(ticks)]
    spawning = sum(1 for c in counts if c > 0)
    doubles = sum(1 for c in counts if c == 2)
    assert abs(spawning / ticks - 0.5) < 0.02
    assert abs(doubles / spawning - 0.2) < 0.02


def test_double_spawns_never_share_a_lane():
    registry = NoteRegistry(5)
    spawner = Spawner(registry, random.Random(99))
    for _ in range(5000):
        notes = spawner.tick()
        if len(notes) == 2:
            assert notes[0].lane != notes[1].lane
