"""
collision_detector.py
---------------------
Pure geometry for the character and falling objects.

Responsibilities
----------------
- Axis-aligned bounding-box overlap between two rectangles.
- Center-to-center distance for near-miss warnings.
- Classify a character/object pair as collision, warning, or clear.

Any object with x, y, width and height attributes counts as a rectangle.
Edges that only touch do not overlap.
"""

import math
from enum import Enum

from stressfall.core.runtime.game_settings import Scoring


class Contact(Enum):
    """Result of checking one object against the character."""
    CLEAR = 0
    WARNING = 1
    COLLISION = 2


def overlaps(a, b) -> bool:
    """Strict AABB intersection test. Symmetric in a and b."""
    return (
        a.x < b.x + b.width and
        a.x + a.width > b.x and
        a.y < b.y + b.height and
        a.y + a.height > b.y
    )


def proximity(a, b) -> float:
    """Euclidean distance between rectangle centers."""
    ax = a.x + a.width / 2
    ay = a.y + a.height / 2
    bx = b.x + b.width / 2
    by = b.y + b.height / 2
    return math.hypot(ax - bx, ay - by)


class CollisionDetector:
    """Applies the warning/collision policy for a given threshold."""

    def __init__(self, warning_distance: float = Scoring.WARNING_DISTANCE):
        self.warning_distance = warning_distance

    def is_collision(self, a, b) -> bool:
        return overlaps(a, b)

    def is_warning(self, a, b) -> bool:
        """Close to, but not touching, the other rectangle."""
        return proximity(a, b) < self.warning_distance and not overlaps(a, b)

    def check(self, character, obj) -> Contact:
        if overlaps(character, obj):
            return Contact.COLLISION
        if proximity(character, obj) < self.warning_distance:
            return Contact.WARNING
        return Contact.CLEAR
