"""Tests for keyboard-to-lane mapping."""

import pygame

from keylane.keyboard_input import KeyboardInput


def _down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def test_home_row_keys_map_to_lanes():
    kb = KeyboardInput()
    for i, key in enumerate((pygame.K_d, pygame.K_f, pygame.K_j, pygame.K_k)):
        kb.feed_event(_down(key), elapsed_ms=100 * i)
    events = []
    while (evt := kb.poll()) is not None:
        events.append((evt.column, evt.elapsed_ms))
    assert events == [(0, 0), (1, 100), (2, 200), (3, 300)]


def test_unmapped_keys_ignored():
    kb = KeyboardInput()
    kb.feed_event(_down(pygame.K_a), elapsed_ms=10)
    kb.feed_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1), elapsed_ms=10)
    assert kb.poll() is None


def test_held_key_does_not_retrigger():
    kb = KeyboardInput()
    kb.feed_event(_down(pygame.K_j), elapsed_ms=10)
    kb.feed_event(_down(pygame.K_j), elapsed_ms=20)
    assert kb.held_columns == {2}
    kb.feed_event(_up(pygame.K_j), elapsed_ms=30)
    kb.feed_event(_down(pygame.K_j), elapsed_ms=40)
    assert [kb.poll().elapsed_ms, kb.poll().elapsed_ms] == [10, 40]
    assert kb.poll() is None
