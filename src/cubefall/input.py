"""Input adapters — translate keys, touches, clicks and MIDI pads into lane indices."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import mido
import pygame

logger = logging.getLogger(__name__)


class MidiDeviceError(Exception):
    """Raised when no MIDI device is found or connection fails."""


@runtime_checkable
class LaneSource(Protocol):
    """Common interface for polled lane inputs."""
    def poll(self) -> int | None: ...
    def close(self) -> None: ...


# Home-row layout: left hand d f, thumbs on space, right hand j k
_KEY_TO_LANE: dict[int, int] = {
    pygame.K_d: 0,
    pygame.K_f: 1,
    pygame.K_SPACE: 2,
    pygame.K_j: 3,
    pygame.K_k: 4,
}

# Pad controllers: consecutive pitches from middle C
MIDI_BASE_PITCH = 60


def lane_for_key(key: int) -> int | None:
    return _KEY_TO_LANE.get(key)


def lane_at(x: float, lane_rects: list[pygame.Rect]) -> int | None:
    """Return the lane whose column contains horizontal pixel ``x``."""
    for index, rect in enumerate(lane_rects):
        if rect.left <= x < rect.right:
            return index
    return None


def lane_for_event(event: pygame.event.Event, lane_rects: list[pygame.Rect]) -> int | None:
    """Map a pygame key, touch or mouse event to a lane, or None if it is not a press."""
    if event.type == pygame.KEYDOWN:
        return lane_for_key(event.key)
    if event.type == pygame.FINGERDOWN:
        # Touch coordinates are normalized to 0..1
        surface = pygame.display.get_surface()
        width = surface.get_width() if surface else 0
        return lane_at(event.x * width, lane_rects)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
        return lane_at(event.pos[0], lane_rects)
    return None


def lane_for_midi(data: list[int], lane_count: int, base_pitch: int = MIDI_BASE_PITCH) -> int | None:
    """Decode a raw MIDI message; a note-on inside the pad range gives a lane."""
    try:
        msg = mido.Message.from_bytes(data)
    except ValueError:
        return None
    if msg.type != "note_on" or msg.velocity == 0:
        return None
    lane = msg.note - base_pitch
    if 0 <= lane < lane_count:
        return lane
    return None


class MidiLaneInput:
    """Reads lane presses from a MIDI pad controller."""

    def __init__(self, lane_count: int, port_index: int | None = None) -> None:
        import rtmidi

        self.midi_in = rtmidi.MidiIn()
        self._lane_count = lane_count
        self._port_index = port_index
        self._open = False

    def open(self) -> None:
        ports = self.midi_in.get_ports()
        if not ports:
            raise MidiDeviceError("No MIDI input devices found")
        idx = self._port_index if self._port_index is not None else 0
        self.midi_in.open_port(idx)
        self._open = True
        logger.info("MIDI input opened on %s", ports[idx])

    def poll(self) -> int | None:
        """Non-blocking poll. Returns the next activated lane, or None."""
        if not self._open:
            return None
        while (msg := self.midi_in.get_message()) is not None:
            data, _delta = msg
            lane = lane_for_midi(data, self._lane_count)
            if lane is not None:
                return lane
        return None

    def close(self) -> None:
        if self._open:
            self.midi_in.close_port()
            self._open = False
