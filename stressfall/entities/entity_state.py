"""
entity_state.py
---------------
Runtime state enumerations for the session and the player character.
"""

from enum import Enum


class GameState(Enum):
    """
    Session lifecycle.

    IDLE -> PLAYING -> GAME_OVER | VICTORY. Terminal states are left only
    through an explicit start/reset, which passes back through IDLE.
    """
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "gameOver"
    VICTORY = "victory"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.GAME_OVER, GameState.VICTORY)


class MoveIntent(Enum):
    """Horizontal movement requested by the input layer."""
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
