"""
test_input_manager.py
---------------------
Unit tests for translating pygame input into movement intents and start commands.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from stressfall.core.services.input_manager import InputManager
from stressfall.entities.entity_state import GameState, MoveIntent


@pytest.fixture
def loop():
    loop = MagicMock()
    loop.machine.state = GameState.PLAYING
    return loop


@pytest.fixture
def input_manager(loop, scheduler):
    return InputManager(loop, scheduler, board_width=480)


def key(event_type, key_code):
    return pygame.event.Event(event_type, key=key_code)


# ===========================================================
# Keyboard
# ===========================================================

@pytest.mark.parametrize("key_code, intent", [
    (pygame.K_LEFT, MoveIntent.LEFT),
    (pygame.K_a, MoveIntent.LEFT),
    (pygame.K_RIGHT, MoveIntent.RIGHT),
    (pygame.K_d, MoveIntent.RIGHT),
])
def test_arrow_keys_set_intent(input_manager, loop, key_code, intent):
    input_manager.handle_event(key(pygame.KEYDOWN, key_code))
    loop.set_intent.assert_called_once_with(intent)


def test_key_release_clears_intent(input_manager, loop):
    input_manager.handle_event(key(pygame.KEYUP, pygame.K_LEFT))
    loop.set_intent.assert_called_once_with(MoveIntent.NONE)


def test_movement_keys_ignored_when_not_playing(input_manager, loop):
    loop.machine.state = GameState.GAME_OVER
    input_manager.handle_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    loop.set_intent.assert_not_called()


def test_start_key_when_idle(input_manager, loop):
    loop.machine.state = GameState.IDLE
    input_manager.handle_event(key(pygame.KEYDOWN, pygame.K_RETURN))
    loop.press_start.assert_called_once()


def test_start_key_ignored_while_playing(input_manager, loop):
    input_manager.handle_event(key(pygame.KEYDOWN, pygame.K_SPACE))
    loop.press_start.assert_not_called()


def test_quit_events(input_manager):
    assert input_manager.handle_event(pygame.event.Event(pygame.QUIT)) == "quit"
    assert input_manager.handle_event(key(pygame.KEYDOWN, pygame.K_ESCAPE)) == "quit"


# ===========================================================
# Touch
# ===========================================================

def test_touch_drag_beyond_threshold(input_manager, loop):
    input_manager.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5))
    input_manager.handle_event(pygame.event.Event(pygame.FINGERMOTION, x=0.55, y=0.5))
    loop.set_intent.assert_called_once_with(MoveIntent.RIGHT)


def test_touch_drag_within_threshold_is_ignored(input_manager, loop):
    input_manager.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5))
    # 0.005 * 480 = 2.4 px
    input_manager.handle_event(pygame.event.Event(pygame.FINGERMOTION, x=0.505, y=0.5))
    loop.set_intent.assert_not_called()


def test_touch_end_clears_intent(input_manager, loop):
    input_manager.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5))
    input_manager.handle_event(pygame.event.Event(pygame.FINGERUP, x=0.5, y=0.5))
    loop.set_intent.assert_called_once_with(MoveIntent.NONE)


# ===========================================================
# Mouse
# ===========================================================

def click(x):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(x, 300), touch=False)


def test_click_moves_toward_side_then_stops(input_manager, loop, scheduler):
    input_manager.handle_event(click(100))
    loop.set_intent.assert_called_once_with(MoveIntent.LEFT)

    scheduler.advance(100)
    loop.set_intent.assert_called_with(MoveIntent.NONE)


def test_click_right_half(input_manager, loop):
    input_manager.handle_event(click(400))
    loop.set_intent.assert_called_once_with(MoveIntent.RIGHT)


def test_repeat_click_restarts_move_timer(input_manager, loop, scheduler):
    input_manager.handle_event(click(100))
    scheduler.advance(60)
    input_manager.handle_event(click(100))
    scheduler.advance(60)

    assert loop.set_intent.call_args.args == (MoveIntent.LEFT,)
    assert scheduler.pending_timers == 1


def test_click_on_overlay_starts_game(input_manager, loop):
    loop.machine.state = GameState.VICTORY
    input_manager.handle_event(click(100))
    loop.press_start.assert_called_once()
    loop.set_intent.assert_not_called()
