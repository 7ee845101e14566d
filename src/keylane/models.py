"""Core data models shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from keylane.config import ConfigError


class NoteState(Enum):
    PENDING = auto()
    RESOLVED = auto()
    MISSED = auto()


class Grade(Enum):
    PERFECT = auto()
    GREAT = auto()
    GOOD = auto()
    BAD = auto()
    NONE = auto()  # outside every window, nothing to score
    MISS = auto()  # expired without a keypress

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(eq=False)
class Note:
    """A single scheduled hit event. Compared by identity."""

    column: int
    scheduled_ms: float  # elapsed-time instant the note should be hit
    state: NoteState = NoteState.PENDING

    @property
    def pending(self) -> bool:
        return self.state is NoteState.PENDING


@dataclass(frozen=True)
class Tolerances:
    """Ascending windows of absolute timing error, in milliseconds."""

    perfect: float
    great: float
    good: float
    bad: float

    def __post_init__(self) -> None:
        values = (self.perfect, self.great, self.good, self.bad)
        if self.perfect < 0:
            raise ConfigError(f"Tolerances must be non-negative: {values}")
        if not self.perfect < self.great < self.good < self.bad:
            raise ConfigError(
                f"Tolerances must be strictly increasing (perfect < great < good < bad): {values}"
            )


@dataclass(frozen=True)
class HitResult:
    grade: Grade
    score: float = 0.0
    note: Note | None = None
    timing_offset_ms: float | None = None  # negative = early, positive = late


@dataclass(frozen=True)
class SessionState:
    total_score: float = 0.0
    combo: int = 0
    last_grade: Grade | None = None
    max_combo: int = 0
    perfect: int = 0
    great: int = 0
    good: int = 0
    bad: int = 0
    missed: int = 0


@dataclass(frozen=True)
class NotePosition:
    """Where a pending note sits on screen, in normalized device coordinates."""

    x: float
    y: float
    column: int


@dataclass
class SessionStats:
    total_notes: int = 0
    perfect: int = 0
    great: int = 0
    good: int = 0
    bad: int = 0
    missed: int = 0
    pending: int = 0
    max_combo: int = 0
    total_score: float = 0.0
    accuracy_pct: float = 0.0
