"""Score and combo aggregation."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from dataclasses import replace

from keylane.models import Grade, HitResult, SessionState

_COMBO_GRADES = {Grade.PERFECT, Grade.GREAT}
_COUNTERS = {
    Grade.PERFECT: "perfect",
    Grade.GREAT: "great",
    Grade.GOOD: "good",
    Grade.BAD: "bad",
    Grade.MISS: "missed",
}

Reducer = Callable[[SessionState, HitResult], SessionState]
Listener = Callable[[SessionState], None]


def apply(state: SessionState, result: HitResult) -> SessionState:
    """Fold one grading or miss result into the session state.

    PERFECT and GREAT extend the combo; every other grade breaks it.
    MISS leaves the score untouched.
    """
    if result.grade not in _COUNTERS:
        raise ValueError(f"{result.grade.name} results carry nothing to aggregate")

    combo = state.combo + 1 if result.grade in _COMBO_GRADES else 0
    total = state.total_score
    if result.grade is not Grade.MISS:
        total += result.score

    counter = _COUNTERS[result.grade]
    return replace(
        state,
        total_score=total,
        combo=combo,
        last_grade=result.grade,
        max_combo=max(state.max_combo, combo),
        **{counter: getattr(state, counter) + 1},
    )


class ScoreStore:
    """Holds the current SessionState and notifies subscribers after each dispatch."""

    def __init__(self, state: SessionState | None = None, reducer: Reducer = apply) -> None:
        self._state = state if state is not None else SessionState()
        self._reducer = reducer
        self._subscriptions: list[tuple[int, Listener]] = []
        self._ids = itertools.count()

    def get_state(self) -> SessionState:
        return self._state

    def dispatch(self, result: HitResult) -> SessionState:
        self._state = self._reducer(self._state, result)
        for _, listener in list(self._subscriptions):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that removes it again."""
        sub_id = next(self._ids)
        self._subscriptions.append((sub_id, listener))

        def unsubscribe() -> None:
            self._subscriptions = [(i, f) for i, f in self._subscriptions if i != sub_id]

        return unsubscribe
