"""Computer keyboard input mapped to lanes."""

from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class LaneKeyEvent:
    column: int
    elapsed_ms: float


# Home-row keys -> lane column
KEY_TO_COLUMN: dict[int, int] = {
    pygame.K_d: 0,
    pygame.K_f: 1,
    pygame.K_j: 2,
    pygame.K_k: 3,
}


class KeyboardInput:
    """Queues a LaneKeyEvent for every mapped keydown; other keys are ignored."""

    def __init__(self, key_map: dict[int, int] | None = None) -> None:
        self._key_map = dict(KEY_TO_COLUMN if key_map is None else key_map)
        self._events: list[LaneKeyEvent] = []
        self._held: set[int] = set()

    def feed_event(self, event: pygame.event.Event, elapsed_ms: float) -> None:
        """Call from the game loop for each pygame event."""
        if event.type == pygame.KEYDOWN and event.key in self._key_map:
            # Held keys do not retrigger until released
            if event.key not in self._held:
                self._held.add(event.key)
                self._events.append(LaneKeyEvent(column=self._key_map[event.key], elapsed_ms=elapsed_ms))
        elif event.type == pygame.KEYUP and event.key in self._key_map:
            self._held.discard(event.key)

    def poll(self) -> LaneKeyEvent | None:
        if self._events:
            return self._events.pop(0)
        return None

    @property
    def held_columns(self) -> set[int]:
        return {self._key_map[k] for k in self._held}

    def close(self) -> None:
        self._events.clear()
        self._held.clear()
