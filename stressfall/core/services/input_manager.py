"""
input_manager.py
----------------
Reduces raw pygame input to the two signals the simulation consumes.

Provides:
- A movement intent (left / right / none) from keyboard, touch drag or a
  click on either half of the board
- A start/restart command from Enter, Space or a click on the overlay
"""

import pygame

from stressfall.core.debug.debug_logger import DebugLogger
from stressfall.core.runtime.game_settings import Timing
from stressfall.entities.entity_state import GameState, MoveIntent


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "start": [pygame.K_RETURN, pygame.K_SPACE],
    "quit": [pygame.K_ESCAPE],
}


class InputManager:
    """
    Translates pygame events into calls on a SimulationLoop.

    Usage:
        for event in pygame.event.get():
            if input_manager.handle_event(event) == "quit":
                running = False
    """

    def __init__(self, loop, scheduler, board_width, key_bindings=None):
        """
        Args:
            loop: SimulationLoop receiving intents and start commands
            scheduler: FrameScheduler used to end click-moves
            board_width: Width in pixels used for click and touch mapping
            key_bindings: Action -> key list (defaults to DEFAULT_KEY_BINDINGS)
        """
        self.loop = loop
        self.scheduler = scheduler
        self.board_width = board_width
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS

        self._key_to_action = {
            key: action
            for action, keys in self.key_bindings.items()
            for key in keys
        }

        self._touch_start_x = None
        self._click_timer = None

        DebugLogger.init_entry("InputManager")

    # ===========================================================
    # Dispatch
    # ===========================================================
    @property
    def playing(self) -> bool:
        return self.loop.machine.state is GameState.PLAYING

    def handle_event(self, event):
        """
        Route one pygame event.

        Returns:
            str or None: "quit" when the game should close
        """
        if event.type == pygame.QUIT:
            return "quit"
        if event.type == pygame.KEYDOWN:
            return self._on_key_down(event.key)
        if event.type == pygame.KEYUP:
            self._on_key_up(event.key)
        elif event.type == pygame.FINGERDOWN:
            self._touch_start_x = event.x * self.board_width
        elif event.type == pygame.FINGERMOTION:
            self._on_touch_move(event.x * self.board_width)
        elif event.type == pygame.FINGERUP:
            self._touch_start_x = None
            self.loop.set_intent(MoveIntent.NONE)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # Touch input also produces synthetic mouse events
            if not getattr(event, "touch", False):
                self._on_click(event.pos[0])
        return None

    # ===========================================================
    # Keyboard
    # ===========================================================
    def _on_key_down(self, key):
        action = self._key_to_action.get(key)
        if action == "quit":
            return "quit"
        if action == "start" and not self.playing:
            self.loop.press_start()
        elif self.playing and action == "move_left":
            self.loop.set_intent(MoveIntent.LEFT)
        elif self.playing and action == "move_right":
            self.loop.set_intent(MoveIntent.RIGHT)
        return None

    def _on_key_up(self, key):
        if self._key_to_action.get(key) in ("move_left", "move_right"):
            self.loop.set_intent(MoveIntent.NONE)

    # ===========================================================
    # Touch & Mouse
    # ===========================================================
    def _on_touch_move(self, x):
        if not self.playing or self._touch_start_x is None:
            return
        diff = x - self._touch_start_x
        if abs(diff) > Timing.TOUCH_THRESHOLD_PX:
            self.loop.set_intent(MoveIntent.RIGHT if diff > 0 else MoveIntent.LEFT)

    def _on_click(self, x):
        """Overlay click starts a game; board click nudges toward that side."""
        if not self.playing:
            self.loop.press_start()
            return

        intent = MoveIntent.LEFT if x < self.board_width / 2 else MoveIntent.RIGHT
        self.loop.set_intent(intent)

        if self._click_timer is not None:
            self._click_timer.cancel()
        self._click_timer = self.scheduler.set_timeout(self._end_click_move, Timing.CLICK_MOVE_MS)

    def _end_click_move(self):
        self._click_timer = None
        self.loop.set_intent(MoveIntent.NONE)
