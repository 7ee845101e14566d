"""Hit evaluation — grade keypresses against the pending notes of a lane."""

from __future__ import annotations

import logging

from keylane.config import GOOD_SCORE_RATIO, GREAT_SCORE_RATIO
from keylane.models import Grade, HitResult, Note, Tolerances
from keylane.notes import NoteSet

logger = logging.getLogger(__name__)


def grade_for_diff(diff_ms: float, tolerances: Tolerances) -> Grade:
    """Map an absolute timing difference to a grade. Never returns MISS."""
    if diff_ms < tolerances.perfect:
        return Grade.PERFECT
    if diff_ms < tolerances.great:
        return Grade.GREAT
    if diff_ms < tolerances.good:
        return Grade.GOOD
    if diff_ms < tolerances.bad:
        return Grade.BAD
    return Grade.NONE


def score_for_grade(grade: Grade, max_score: float) -> float:
    if grade is Grade.PERFECT:
        return max_score
    if grade is Grade.GREAT:
        return max_score * GREAT_SCORE_RATIO
    if grade is Grade.GOOD:
        return max_score * GOOD_SCORE_RATIO
    return 0.0


class Resolver:
    """Matches a keypress to the note it should act on and grades it."""

    def __init__(self, note_set: NoteSet, tolerances: Tolerances, max_score_per_hit: float) -> None:
        self.note_set = note_set
        self.tolerances = tolerances
        self.max_score_per_hit = max_score_per_hit

    def target(self, column: int, elapsed_ms: float) -> Note | None:
        """Earliest-scheduled pending note in the lane still inside the outer window.

        This is the oldest due note, not the one closest to ``elapsed_ms``.
        """
        if not self.note_set.has_column(column):
            return None
        min_time = elapsed_ms - self.tolerances.bad
        for note in self.note_set.pending_in_column(column):
            if note.scheduled_ms >= min_time:
                return note
        return None

    def resolve(self, column: int, elapsed_ms: float) -> HitResult | None:
        """Grade a keypress in ``column``. Returns None when there is nothing to hit."""
        note = self.target(column, elapsed_ms)
        if note is None:
            return None

        grade = grade_for_diff(abs(note.scheduled_ms - elapsed_ms), self.tolerances)
        if grade is Grade.NONE:
            return None

        # A miss sweep may have claimed the note first
        if not self.note_set.mark_resolved(note):
            return None

        result = HitResult(
            grade=grade,
            score=score_for_grade(grade, self.max_score_per_hit),
            note=note,
            timing_offset_ms=elapsed_ms - note.scheduled_ms,
        )
        logger.debug(
            "col=%d t=%.0f -> %s (%+.0f ms)",
            column, note.scheduled_ms, grade.name, result.timing_offset_ms,
        )
        return result
