"""Miss sweeper — retires notes whose outer window has passed."""

from __future__ import annotations

import logging

from keylane.models import Grade, HitResult, Tolerances
from keylane.notes import NoteSet

logger = logging.getLogger(__name__)


class MissSweeper:
    def __init__(self, note_set: NoteSet, tolerances: Tolerances) -> None:
        self.note_set = note_set
        self.tolerances = tolerances

    def flush(self, elapsed_ms: float) -> list[HitResult]:
        """Mark every pending note older than the outer window as missed, across all lanes."""
        min_time = elapsed_ms - self.tolerances.bad
        missed: list[HitResult] = []
        for note in self.note_set.pending():
            if note.scheduled_ms < min_time and self.note_set.mark_missed(note):
                missed.append(HitResult(
                    grade=Grade.MISS,
                    note=note,
                    timing_offset_ms=elapsed_ms - note.scheduled_ms,
                ))
        if missed:
            logger.debug("%d note(s) missed at t=%.0f", len(missed), elapsed_ms)
        return missed

    def sweep(self, elapsed_ms: float) -> int:
        """Same as flush(), returning only the number of newly missed notes."""
        return len(self.flush(elapsed_ms))
