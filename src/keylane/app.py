"""Top-level application: initializes pygame and runs the frame loop around a GameSession."""

from __future__ import annotations

import logging

import pygame

from keylane.config import END_GRACE_MS, FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from keylane.keyboard_input import KeyboardInput
from keylane.models import SessionStats
from keylane.renderer import colors
from keylane.renderer.hud import Hud
from keylane.renderer.lanes import render_notes, render_targets
from keylane.session import GameSession

logger = logging.getLogger(__name__)


class App:
    def __init__(self, session: GameSession, target_y: float) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.session = session
        self.target_y = target_y
        self._keyboard_input = KeyboardInput()
        self._hud = Hud()
        self._unsubscribe = session.store.subscribe(self._hud.on_state)

    def run(self) -> SessionStats:
        start = pygame.time.get_ticks()
        done_at: float | None = None
        running = True
        while running:
            self.clock.tick(FPS)
            elapsed = pygame.time.get_ticks() - start

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    self._keyboard_input.feed_event(event, elapsed)

            while (key := self._keyboard_input.poll()) is not None:
                self.session.on_key_press(key.column, key.elapsed_ms)

            _, positions = self.session.tick(elapsed)

            self.screen.fill(colors.BG)
            render_targets(self.screen, self.target_y, self._keyboard_input.held_columns)
            render_notes(self.screen, positions)
            self._hud.draw(self.screen)
            pygame.display.flip()

            if self.session.finished:
                done_at = elapsed if done_at is None else done_at
                if elapsed - done_at >= END_GRACE_MS:
                    running = False

        stats = self.session.get_stats()
        logger.info(
            "Session over: score=%g max_combo=%d perfect=%d great=%d good=%d bad=%d missed=%d accuracy=%.1f%%",
            stats.total_score, stats.max_combo, stats.perfect, stats.great,
            stats.good, stats.bad, stats.missed, stats.accuracy_pct,
        )
        self._cleanup()
        return stats

    def _cleanup(self) -> None:
        self._unsubscribe()
        self._keyboard_input.close()
        pygame.quit()
