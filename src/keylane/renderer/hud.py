"""Heads-up display — score, last grade, combo."""

from __future__ import annotations

import pygame

from keylane.models import SessionState
from keylane.renderer import colors


def combo_text(combo: int) -> str:
    return f"{combo} combo" if combo else ""


class Hud:
    """Caches the HUD lines; refreshed by a ScoreStore subscription."""

    def __init__(self) -> None:
        self.score_text = "0"
        self.grade_text = ""
        self.combo_text = ""
        self._font: pygame.font.Font | None = None

    def on_state(self, state: SessionState) -> None:
        self.score_text = f"{state.total_score:g}"
        self.grade_text = state.last_grade.label if state.last_grade else ""
        self.combo_text = combo_text(state.combo)

    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 22)

        score = self._font.render(f"Score: {self.score_text}", True, colors.HUD_TEXT)
        surface.blit(score, (10, 10))

        if self.grade_text:
            color = colors.GRADE_COLORS.get(self.grade_text, colors.HUD_TEXT)
            grade = self._font.render(self.grade_text.upper(), True, color)
            surface.blit(grade, ((surface.get_width() - grade.get_width()) // 2, 10))

        if self.combo_text:
            combo = self._font.render(self.combo_text, True, colors.HUD_TEXT)
            surface.blit(combo, (surface.get_width() - combo.get_width() - 10, 10))
