"""Tests for configuration and settings persistence."""

import json

import pytest

from keylane.config import ConfigError
from keylane.models import Tolerances
from keylane.settings import GameSettings, load_settings, save_settings


@pytest.mark.parametrize("values", [
    (200, 100, 300, 500),
    (100, 100, 300, 500),
    (100, 200, 300, 300),
    (-1, 200, 300, 500),
])
def test_degenerate_tolerances_rejected(values):
    with pytest.raises(ConfigError):
        Tolerances(*values)


def test_defaults():
    settings = GameSettings()
    assert settings.tolerances() == Tolerances(100, 200, 300, 500)
    assert settings.max_score_per_hit == 100
    assert settings.y_distance_per_second() == pytest.approx(0.35)


def test_invalid_settings_rejected():
    with pytest.raises(ConfigError):
        GameSettings(max_score_per_hit=0)
    with pytest.raises(ConfigError):
        GameSettings(song_duration_s=0)
    with pytest.raises(ConfigError):
        GameSettings(great_ms=50)


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "nope.json") == GameSettings()


def test_round_trip_keeps_other_sections(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"display": {"fullscreen": True}}))
    save_settings(GameSettings(bad_ms=600, max_score_per_hit=300), path)

    data = json.loads(path.read_text())
    assert data["display"] == {"fullscreen": True}
    loaded = load_settings(path)
    assert loaded.bad_ms == 600
    assert loaded.max_score_per_hit == 300


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"game": {"perfect_ms": 50, "volume": 3}}))
    assert load_settings(path).perfect_ms == 50


def test_bad_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"game": {"perfect_ms": 900}}))
    assert load_settings(path) == GameSettings()
    assert "Ignoring settings" in caplog.text

    path.write_text("{not json")
    assert load_settings(path) == GameSettings()
