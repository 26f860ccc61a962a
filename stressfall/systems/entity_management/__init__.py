"""
Entity management system exports.

Provides the entity store, the frame-counted spawner and the per-tick mover.
"""

from stressfall.systems.entity_management.entity_store import EntityStore
from stressfall.systems.entity_management.spawn_manager import SpawnManager
from stressfall.systems.entity_management.movement import Mover, descent_speed

__all__ = [
    'EntityStore',
    'SpawnManager',
    'Mover',
    'descent_speed',
]
