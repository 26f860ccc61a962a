from stressfall.systems.collision.collision_detector import (
    CollisionDetector,
    Contact,
    overlaps,
    proximity,
)

__all__ = [
    'CollisionDetector',
    'Contact',
    'overlaps',
    'proximity',
]
