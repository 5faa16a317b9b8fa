"""Play field layout and drawing: lanes, target bands, notes, miss flash."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from cubefall.config import LANE_LENGTH, NOTE_SIZE
from cubefall.models import Lane
from cubefall.renderer import colors

LANE_GAP = NOTE_SIZE // 2
NOTE_DEPTH = 4  # visible thickness of a note's lower side, in field units


def field_scale(surface_size: tuple[int, int]) -> float:
    """Pixels per field unit; the lanes always span the full window height."""
    return surface_size[1] / LANE_LENGTH


def lane_rects(surface_size: tuple[int, int], lane_count: int) -> list[pygame.Rect]:
    """Screen rects of each lane, centered horizontally."""
    scale = field_scale(surface_size)
    lane_w = NOTE_SIZE * scale
    gap = LANE_GAP * scale
    total_w = lane_count * lane_w + (lane_count - 1) * gap
    left = (surface_size[0] - total_w) / 2
    return [
        pygame.Rect(int(left + i * (lane_w + gap)), 0, int(lane_w), surface_size[1])
        for i in range(lane_count)
    ]


def render_field(
    surface: pygame.Surface,
    lanes: Sequence[Lane],
    pressed: Sequence[float],
    miss_flash: float,
) -> None:
    """Draw every lane and its notes.

    ``pressed`` holds per-lane press feedback strength and ``miss_flash``
    the miss overlay strength, both in 0..1.
    """
    size = surface.get_size()
    scale = field_scale(size)
    rects = lane_rects(size, len(lanes))

    for lane, rect in zip(lanes, rects):
        strength = pressed[lane.index] if lane.index < len(pressed) else 0.0
        _draw_lane(surface, rect, scale, strength)
        for note in lane.notes:
            _draw_note(surface, rect, note.position, scale)

    if miss_flash > 0:
        r, g, b, a = colors.MISS_FLASH
        flash = pygame.Surface(size, pygame.SRCALPHA)
        flash.fill((r, g, b, int(a * miss_flash)))
        surface.blit(flash, (0, 0))


def _draw_lane(surface: pygame.Surface, rect: pygame.Rect, scale: float, strength: float) -> None:
    face = _blend(colors.LANE_FACE, colors.LANE_PRESSED, strength)
    pygame.draw.rect(surface, colors.LANE, rect.inflate(4, 0))
    pygame.draw.rect(surface, face, rect)

    target_h = int(NOTE_SIZE * scale)
    target = pygame.Rect(rect.x, rect.bottom - target_h, rect.w, target_h)
    pygame.draw.rect(surface, _blend(face, colors.TARGET, 0.5), target)


def _draw_note(surface: pygame.Surface, lane_rect: pygame.Rect, position: float, scale: float) -> None:
    # Notes are positioned by their center
    size = NOTE_SIZE * scale
    center = (lane_rect.centerx, int(position * scale))

    shadow = pygame.Rect(0, 0, int(size * 1.1), int(size * 1.1))
    shadow.center = center
    pygame.draw.rect(surface, colors.NOTE_SHADOW, shadow, border_radius=int(size * 0.2))

    face = pygame.Rect(0, 0, int(size), int(size))
    face.center = center
    pygame.draw.rect(surface, colors.NOTE_SIDE, face.move(0, int(NOTE_DEPTH * scale)))
    pygame.draw.rect(surface, colors.NOTE_FACE, face)


def _blend(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    t = max(0.0, min(1.0, t))
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )
