"""Tests for the miss sweeper."""

from keylane.models import Grade, NoteState
from keylane.notes import NoteSet
from keylane.sweeper import MissSweeper


def test_note_missed_just_past_outer_window(tolerances):
    notes = NoteSet.from_pairs([(0, 4000)])
    sweeper = MissSweeper(notes, tolerances)
    assert sweeper.sweep(4500) == 0
    assert sweeper.sweep(4501) == 1
    assert list(notes)[0].state == NoteState.MISSED


def test_sweep_is_idempotent(tolerances):
    notes = NoteSet.from_pairs([(0, 1000), (3, 1200)])
    sweeper = MissSweeper(notes, tolerances)
    assert sweeper.sweep(5000) == 2
    assert sweeper.sweep(5000) == 0


def test_sweep_spans_all_columns_and_spares_future_notes(tolerances):
    notes = NoteSet.from_pairs([(0, 1000), (1, 1100), (2, 1200), (3, 9000)])
    missed = MissSweeper(notes, tolerances).flush(2000)
    assert [r.note.column for r in missed] == [0, 1, 2]
    assert all(r.grade == Grade.MISS and r.score == 0 for r in missed)
    assert missed[0].timing_offset_ms == 1000
    assert notes.counts()[NoteState.PENDING] == 1


def test_resolved_notes_are_not_missed(tolerances):
    notes = NoteSet.from_pairs([(0, 1000)])
    notes.mark_resolved(list(notes)[0])
    assert MissSweeper(notes, tolerances).sweep(10_000) == 0


def test_pending_count_never_increases(tolerances):
    notes = NoteSet.from_pairs([(i % 4, 500 * i) for i in range(20)])
    sweeper = MissSweeper(notes, tolerances)
    previous = len(notes.pending())
    for elapsed in range(0, 12_000, 250):
        sweeper.sweep(elapsed)
        current = len(notes.pending())
        assert current <= previous
        previous = current
    assert previous == 0
