"""Lane targets and scrolling notes."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from keylane.config import NOTE_SIZE, NUM_COLUMNS
from keylane.models import NotePosition
from keylane.projector import target_x
from keylane.renderer import colors


def ndc_to_pixels(x: float, y: float, size: tuple[int, int]) -> tuple[float, float]:
    """Convert normalized device coordinates ([-1, 1], y up) to surface pixels (y down)."""
    width, height = size
    return (x + 1) / 2 * width, (1 - y) / 2 * height


def square_rect(x: float, y: float, size: tuple[int, int], side: float = NOTE_SIZE) -> pygame.Rect:
    """Pixel rect of a square whose lower-left corner sits at (x, y) in NDC."""
    left, top = ndc_to_pixels(x, y + side, size)
    right, bottom = ndc_to_pixels(x + side, y, size)
    return pygame.Rect(int(left), int(top), int(right - left), int(bottom - top))


def render_targets(surface: pygame.Surface, target_y: float, held: set[int] | None = None) -> None:
    """Draw the translucent hit targets, one per lane."""
    held = held or set()
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for column in range(NUM_COLUMNS):
        color = colors.TARGET_HELD if column in held else colors.TARGET
        rect = square_rect(target_x(column), target_y - 1, surface.get_size())  # bottom of clip space is -1
        pygame.draw.rect(overlay, color, rect)
    surface.blit(overlay, (0, 0))


def render_notes(surface: pygame.Surface, positions: Iterable[NotePosition]) -> None:
    size = surface.get_size()
    for pos in positions:
        rect = square_rect(pos.x, pos.y, size)
        if rect.bottom < 0 or rect.top > size[1]:
            continue
        pygame.draw.rect(surface, colors.NOTE, rect)
