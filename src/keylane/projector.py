"""Position projector — where pending notes and targets sit on screen."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from keylane.config import BASE_X, BASE_Y, COLUMN_SPACING
from keylane.models import Note, NotePosition


def y_distance_per_second(target_y: float, song_duration_s: float) -> float:
    """Scroll speed that carries a note across the visible area in ``song_duration_s``.

    The clip space is 2 units tall; the targets sit ``target_y`` above its bottom.
    """
    return (2 - target_y) / song_duration_s


def target_x(column: int) -> float:
    return BASE_X + column * COLUMN_SPACING


def project(
    notes: Iterable[Note],
    y_distance_per_second: float,
    elapsed_ms: float = 0.0,
) -> Iterator[NotePosition]:
    """Yield a position for every pending note.

    With ``elapsed_ms`` left at zero the positions are the static spawn points;
    passing the current time gives the scrolled, visible position.
    """
    for note in notes:
        if not note.pending:
            continue
        seconds_ahead = (note.scheduled_ms - elapsed_ms) / 1000
        yield NotePosition(
            x=target_x(note.column),
            y=BASE_Y + seconds_ahead * y_distance_per_second,
            column=note.column,
        )
