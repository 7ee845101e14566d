"""Game settings loaded from ``~/.keylane/settings.json``."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from keylane import config
from keylane.config import ConfigError
from keylane.models import Tolerances
from keylane.projector import y_distance_per_second

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".keylane" / "settings.json"


@dataclass
class GameSettings:
    max_score_per_hit: float = config.MAX_SCORE_PER_HIT
    perfect_ms: float = config.PERFECT_WINDOW_MS
    great_ms: float = config.GREAT_WINDOW_MS
    good_ms: float = config.GOOD_WINDOW_MS
    bad_ms: float = config.BAD_WINDOW_MS
    target_y: float = config.TARGET_Y
    song_duration_s: float = config.SONG_DURATION_S

    def __post_init__(self) -> None:
        if self.max_score_per_hit <= 0:
            raise ConfigError(f"max_score_per_hit must be positive, got {self.max_score_per_hit}")
        if self.song_duration_s <= 0:
            raise ConfigError(f"song_duration_s must be positive, got {self.song_duration_s}")
        # Raises ConfigError for degenerate windows
        self.tolerances()

    def tolerances(self) -> Tolerances:
        return Tolerances(
            perfect=self.perfect_ms,
            great=self.great_ms,
            good=self.good_ms,
            bad=self.bad_ms,
        )

    def y_distance_per_second(self) -> float:
        return y_distance_per_second(self.target_y, self.song_duration_s)


def load_settings(path: Path = DEFAULT_SETTINGS_PATH) -> GameSettings:
    """Load game settings from disk, returning defaults if absent or unusable."""
    if not path.exists():
        return GameSettings()
    known = {f.name for f in fields(GameSettings)}
    try:
        data = json.loads(path.read_text())
        game = data.get("game", {})
        return GameSettings(**{k: v for k, v in game.items() if k in known})
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring settings in %s: %s", path, exc)
        return GameSettings()


def save_settings(settings: GameSettings, path: Path = DEFAULT_SETTINGS_PATH) -> None:
    """Persist game settings, keeping any other sections already in the file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data: dict = {}
    if path.exists():
        try:
            data = json.loads(path.read_text())
        except ValueError as exc:
            logger.warning("Overwriting unreadable settings file %s: %s", path, exc)
    data["game"] = asdict(settings)
    path.write_text(json.dumps(data, indent=2))
