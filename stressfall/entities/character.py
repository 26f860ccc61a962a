"""
character.py
------------
The player-controlled bulldog.

Coordinates are top-left based (x, y) floats; the character only moves
horizontally and is never destroyed during a session.
"""

from stressfall.entities.entity_state import MoveIntent


class Character:
    """Axis-aligned player rectangle with a movement intent."""

    __slots__ = ("x", "y", "width", "height", "moving")

    def __init__(self, x: float, y: float, width: float, height: float):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.moving = MoveIntent.NONE

    @property
    def center(self):
        return self.x + self.width / 2, self.y + self.height / 2

    def reset(self, x: float, y: float):
        """Reposition for a new session and drop any held direction."""
        self.x = float(x)
        self.y = float(y)
        self.moving = MoveIntent.NONE

    def __repr__(self):
        return f"Character(x={self.x:.1f}, y={self.y:.1f}, moving={self.moving.value})"
