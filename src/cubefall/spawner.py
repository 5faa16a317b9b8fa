"""Randomized note spawner, ticked on a fixed wall-clock interval."""

from __future__ import annotations

import random

from cubefall.config import SECOND_NOTE_CHANCE, SPAWN_CHANCE
from cubefall.models import Note
from cubefall.notes import NoteRegistry


class Spawner:
    def __init__(
        self,
        registry: NoteRegistry,
        rng: random.Random | None = None,
        spawn_chance: float = SPAWN_CHANCE,
        second_note_chance: float = SECOND_NOTE_CHANCE,
    ) -> None:
        self._registry = registry
        self._rng = rng or random.Random()
        self._spawn_chance = spawn_chance
        self._second_note_chance = second_note_chance

    def tick(self) -> list[Note]:
        """Spawn zero, one, or two notes. Two notes never share a lane."""
        if self._rng.random() >= self._spawn_chance:
            return []

        lane_count = self._registry.lane_count
        first = self._rng.randrange(lane_count)
        spawned = [self._registry.spawn(first)]

        if self._rng.random() < self._second_note_chance:
            others = [i for i in range(lane_count) if i != first]
            spawned.append(self._registry.spawn(self._rng.choice(others)))

        return spawned
