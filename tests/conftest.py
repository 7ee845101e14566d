import pytest

from keylane.models import Note, Tolerances
from keylane.notes import NoteSet
from keylane.session import GameSession


@pytest.fixture
def tolerances():
    return Tolerances(perfect=100, great=200, good=300, bad=500)


@pytest.fixture
def make_session(tolerances):
    """Build a GameSession from (column, scheduled_ms) pairs."""
    def _make(pairs, max_score=100, y_per_s=0.35):
        return GameSession(
            NoteSet.from_pairs(pairs),
            tolerances=tolerances,
            max_score_per_hit=max_score,
            y_distance_per_second=y_per_s,
        )
    return _make


@pytest.fixture
def single_note():
    return Note(column=0, scheduled_ms=4000)
