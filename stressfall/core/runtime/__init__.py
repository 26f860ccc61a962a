"""
Runtime configuration exports.

Provides game-wide constants and the validated GameConfig. The simulation
and pygame loop are imported from their modules directly.
"""

from stressfall.core.runtime.game_settings import (
    Display,
    Board,
    Character,
    FallingObjects,
    Difficulty,
    Scoring,
    Timing,
    Audio,
    Layers,
)
from stressfall.core.runtime.game_config import GameConfig

__all__ = [
    'Display',
    'Board',
    'Character',
    'FallingObjects',
    'Difficulty',
    'Scoring',
    'Timing',
    'Audio',
    'Layers',
    'GameConfig',
]
