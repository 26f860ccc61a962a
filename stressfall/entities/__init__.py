"""
Entity module exports.

Exports:
    GameState      - Session lifecycle (IDLE, PLAYING, GAME_OVER, VICTORY)
    MoveIntent     - Horizontal movement request (NONE, LEFT, RIGHT)
    Character      - Player rectangle
    FallingObject  - Stress item rectangle
"""

from stressfall.entities.entity_state import GameState, MoveIntent
from stressfall.entities.character import Character
from stressfall.entities.falling_object import FallingObject

__all__ = [
    'GameState',
    'MoveIntent',
    'Character',
    'FallingObject',
]
