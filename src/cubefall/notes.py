"""The fixed lanes and the live notes inside them."""

from __future__ import annotations

from cubefall.config import LANE_COUNT
from cubefall.models import Lane, Note, UnknownLaneError


class NoteRegistry:
    """Owns every lane and note for a session.

    Lanes are created once and never destroyed. Within a lane, notes are
    kept in spawn order so the head is always the note nearest the target.
    """

    def __init__(self, lane_count: int = LANE_COUNT) -> None:
        if lane_count < 2:
            raise ValueError(f"need at least 2 lanes, got {lane_count}")
        self._lanes = tuple(Lane(index=i) for i in range(lane_count))

    @property
    def lanes(self) -> tuple[Lane, ...]:
        return self._lanes

    @property
    def lane_count(self) -> int:
        return len(self._lanes)

    def lane(self, index: int) -> Lane:
        if not 0 <= index < len(self._lanes):
            raise UnknownLaneError(f"no lane {index} (have {len(self._lanes)})")
        return self._lanes[index]

    def spawn(self, index: int) -> Note:
        note = Note(lane=index)
        self.lane(index).notes.append(note)
        return note

    def head(self, index: int) -> Note | None:
        return self.lane(index).head

    def pop_head(self, index: int) -> Note:
        return self.lane(index).notes.popleft()

    def remove(self, note: Note) -> None:
        self.lane(note.lane).notes.remove(note)

    def __len__(self) -> int:
        return sum(len(lane.notes) for lane in self._lanes)
