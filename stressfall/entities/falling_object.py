"""
falling_object.py
-----------------
A stress item dropping from the top of the board.

The speed multiplier is frozen at spawn time, so objects created early keep
their slower descent even after difficulty rises.
"""

import itertools

_ids = itertools.count(1)


class FallingObject:
    """
    Axis-aligned falling rectangle.

    Attributes:
        object_id: Unique, increasing identity
        label: Stress item name (e.g. "exam")
        emoji: Glyph drawn by the render layer
        speed_multiplier: Difficulty multiplier captured at spawn
        handle: Render handle; None means the sprite was lost and the
                object is pruned from the store
    """

    __slots__ = ("object_id", "x", "y", "width", "height",
                 "label", "emoji", "speed_multiplier", "handle")

    def __init__(self, x: float, y: float, size: float, label: str, emoji: str,
                 speed_multiplier: float):
        self.object_id = next(_ids)
        self.x = float(x)
        self.y = float(y)
        self.width = size
        self.height = size
        self.label = label
        self.emoji = emoji
        self.speed_multiplier = speed_multiplier
        self.handle = self.object_id

    @property
    def center(self):
        return self.x + self.width / 2, self.y + self.height / 2

    def __repr__(self):
        return (f"FallingObject(#{self.object_id} {self.label} "
                f"x={self.x:.1f}, y={self.y:.1f}, x{self.speed_multiplier:.2f})")
