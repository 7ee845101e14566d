"""Note set — owns every scheduled note and guards its lifecycle."""

from __future__ import annotations

import logging
import threading
from collections import Counter
from collections.abc import Iterable, Iterator

from keylane.config import NUM_COLUMNS, ConfigError
from keylane.models import Note, NoteState

logger = logging.getLogger(__name__)


class NoteStateError(Exception):
    """Raised when a transition is requested for a note the set does not own."""


class NoteSet:
    """Flat, scan-based collection of notes in construction order.

    Notes are never removed; resolved and missed notes are simply excluded
    from the pending queries.
    """

    def __init__(self, notes: Iterable[Note], num_columns: int = NUM_COLUMNS) -> None:
        self.num_columns = num_columns
        self._notes: list[Note] = []
        self._lock = threading.Lock()
        for note in notes:
            if not 0 <= note.column < num_columns:
                raise ConfigError(f"Note column {note.column} outside 0..{num_columns - 1}")
            if note.scheduled_ms < 0:
                raise ConfigError(f"Note scheduled at negative time {note.scheduled_ms}")
            self._notes.append(note)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, float]], num_columns: int = NUM_COLUMNS) -> NoteSet:
        """Build a set from (column, scheduled_ms) pairs."""
        return cls((Note(column=c, scheduled_ms=ms) for c, ms in pairs), num_columns)

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def has_column(self, column: int) -> bool:
        return 0 <= column < self.num_columns

    def pending(self) -> list[Note]:
        return [n for n in self._notes if n.pending]

    def pending_in_column(self, column: int) -> list[Note]:
        """Pending notes of one lane, earliest first. Ties keep construction order."""
        notes = [n for n in self._notes if n.column == column and n.pending]
        return sorted(notes, key=lambda n: n.scheduled_ms)

    def mark_resolved(self, note: Note) -> bool:
        return self._transition(note, NoteState.RESOLVED)

    def mark_missed(self, note: Note) -> bool:
        return self._transition(note, NoteState.MISSED)

    def counts(self) -> dict[NoteState, int]:
        tally = Counter(n.state for n in self._notes)
        return {state: tally.get(state, 0) for state in NoteState}

    def _transition(self, note: Note, target: NoteState) -> bool:
        """Move a pending note to a terminal state. Returns False if it already left PENDING."""
        if not any(n is note for n in self._notes):
            raise NoteStateError(f"Note at column {note.column}, {note.scheduled_ms} ms is not in this set")
        with self._lock:
            if note.state is not NoteState.PENDING:
                logger.debug(
                    "Ignoring %s for note col=%d t=%.0f, already %s",
                    target.name, note.column, note.scheduled_ms, note.state.name,
                )
                return False
            note.state = target
        return True
