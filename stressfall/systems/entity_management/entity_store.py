"""
entity_store.py
---------------
Owns the character and the active falling objects for one game.

Responsibilities
----------------
- Hold the single Character instance across sessions.
- Track active FallingObjects in spawn order.
- Remove objects that were dodged, hit, or lost their render handle.
"""

from stressfall.core.debug.debug_logger import DebugLogger
from stressfall.entities.character import Character


class EntityStore:
    """Container mutated by the spawner and the mover."""

    def __init__(self, config):
        self.config = config
        self.character = Character(
            *self.character_home(),
            config.character_width,
            config.character_height,
        )
        self.objects = []

    def character_home(self):
        """Start position: horizontally centered, near the bottom."""
        return (self.config.board_width / 2,
                self.config.board_height - self.config.character_bottom_offset)

    # ===========================================================
    # Falling Objects
    # ===========================================================
    def add(self, obj):
        self.objects.append(obj)
        return obj

    def remove(self, obj) -> bool:
        """Remove an object if still tracked."""
        try:
            self.objects.remove(obj)
            return True
        except ValueError:
            return False

    def clear(self):
        count = len(self.objects)
        self.objects.clear()
        if count:
            DebugLogger.trace(f"Cleared {count} falling objects", category="entity_cleanup")

    def prune_orphans(self) -> int:
        """Drop objects whose render handle went missing. Returns count dropped."""
        kept = [obj for obj in self.objects if obj is not None and obj.handle is not None]
        dropped = len(self.objects) - len(kept)
        if dropped:
            DebugLogger.warn(f"Dropped {dropped} falling object(s) without render handle",
                             category="entity_cleanup")
            self.objects[:] = kept
        return dropped

    def count(self) -> int:
        return len(self.objects)

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def reset(self):
        """Empty the board and re-center the character."""
        self.clear()
        self.character.reset(*self.character_home())
