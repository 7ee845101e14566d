"""Game session — the per-frame tick and keypress entry points of the engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from keylane.evaluator import Resolver
from keylane.models import HitResult, Note, NotePosition, NoteState, SessionState, SessionStats, Tolerances
from keylane.notes import NoteSet
from keylane.projector import project
from keylane.scoring import ScoreStore
from keylane.settings import GameSettings
from keylane.sweeper import MissSweeper

logger = logging.getLogger(__name__)


class GameSession:
    """Wires the note set, resolver, sweeper, projector and score store together.

    The host owns the clock: it calls ``tick`` once per frame and
    ``on_key_press`` for every keydown mapped to a lane, both with the
    milliseconds elapsed since the session started.
    """

    def __init__(
        self,
        notes: Iterable[Note] | NoteSet,
        tolerances: Tolerances,
        max_score_per_hit: float,
        y_distance_per_second: float,
    ) -> None:
        self.note_set = notes if isinstance(notes, NoteSet) else NoteSet(notes)
        self.tolerances = tolerances
        self.y_distance_per_second = y_distance_per_second
        self.resolver = Resolver(self.note_set, tolerances, max_score_per_hit)
        self.sweeper = MissSweeper(self.note_set, tolerances)
        self.store = ScoreStore()

    @classmethod
    def from_settings(cls, settings: GameSettings, notes: Iterable[Note] | NoteSet) -> GameSession:
        return cls(
            notes,
            tolerances=settings.tolerances(),
            max_score_per_hit=settings.max_score_per_hit,
            y_distance_per_second=settings.y_distance_per_second(),
        )

    @property
    def state(self) -> SessionState:
        return self.store.get_state()

    @property
    def finished(self) -> bool:
        return not self.note_set.pending()

    def tick(self, elapsed_ms: float) -> tuple[int, list[NotePosition]]:
        """Retire expired notes, then project what is still pending."""
        missed = self.sweeper.flush(elapsed_ms)
        for result in missed:
            self.store.dispatch(result)
        positions = list(project(self.note_set, self.y_distance_per_second, elapsed_ms))
        return len(missed), positions

    def on_key_press(self, column: int, elapsed_ms: float) -> HitResult | None:
        result = self.resolver.resolve(column, elapsed_ms)
        if result is not None:
            self.store.dispatch(result)
        return result

    def get_stats(self) -> SessionStats:
        state = self.state
        judged = state.perfect + state.great + state.good + state.bad + state.missed
        hits = state.perfect + state.great + state.good
        accuracy = (hits / judged * 100.0) if judged > 0 else 0.0

        return SessionStats(
            total_notes=len(self.note_set),
            perfect=state.perfect,
            great=state.great,
            good=state.good,
            bad=state.bad,
            missed=state.missed,
            pending=self.note_set.counts()[NoteState.PENDING],
            max_combo=state.max_combo,
            total_score=state.total_score,
            accuracy_pct=round(accuracy, 1),
        )
