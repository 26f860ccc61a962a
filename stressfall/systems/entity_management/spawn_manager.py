"""
spawn_manager.py
----------------
Frame-counted spawner for falling stress items.

Responsibilities
----------------
- Count playing ticks and emit one object each time the current spawn
  interval is reached.
- Pick a random label and horizontal start position for every object.
- Freeze the current speed multiplier onto the new object.
- Announce each spawn on the event bus (used for the spawn sound cue).

The interval is measured in ticks, not seconds, so spawn cadence follows
the frame rate.
"""

import random
from typing import Optional

from stressfall.core.debug.debug_logger import DebugLogger
from stressfall.core.services.event_manager import ObjectSpawnedEvent
from stressfall.entities.entity_state import GameState
from stressfall.entities.falling_object import FallingObject


class SpawnManager:
    """Creates FallingObjects on a tick-count cadence."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, config, store, session, events, rng: Optional[random.Random] = None):
        """
        Args:
            config: GameConfig providing board width, object size and catalog
            store: EntityStore receiving new objects
            session: GameSession; spawning only happens while PLAYING
            events: EventManager for spawn notifications
            rng: Random source (seed it for reproducible runs)
        """
        self.config = config
        self.store = store
        self.session = session
        self.events = events
        self.rng = rng or random.Random()

        self.counter = 0
        self.current_multiplier = 1.0

        self._spawn_stats = {"total_spawned": 0}

    # ===========================================================
    # Per-Tick
    # ===========================================================
    def tick(self, spawn_interval: int, speed_multiplier: Optional[float] = None) -> Optional[FallingObject]:
        """
        Advance the counter one tick and spawn when the interval is reached.

        Args:
            spawn_interval: Ticks between spawns at the current difficulty
            speed_multiplier: Current curve value, frozen onto new objects

        Returns:
            FallingObject or None
        """
        if self.session.state is not GameState.PLAYING:
            return None

        if speed_multiplier is not None:
            self.current_multiplier = speed_multiplier

        self.counter += 1
        if self.counter < spawn_interval:
            return None

        self.counter = 0
        return self.spawn()

    def spawn(self) -> Optional[FallingObject]:
        """Create one object at the top edge. No-op outside PLAYING."""
        if self.session.state is not GameState.PLAYING:
            return None

        size = self.config.object_size
        emoji, label = self.rng.choice(self.config.catalog)
        x = self.rng.uniform(0, self.config.board_width - size)

        obj = self.store.add(FallingObject(
            x=x,
            y=-size,
            size=size,
            label=label,
            emoji=emoji,
            speed_multiplier=self.current_multiplier,
        ))
        self._spawn_stats["total_spawned"] += 1

        DebugLogger.system(f"Spawned {label} at ({x:.0f}, {-size:.0f}) x{self.current_multiplier:.2f}",
                           category="entity_spawn")
        self.events.dispatch(ObjectSpawnedEvent(obj.object_id, label, self.current_multiplier))
        return obj

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def reset(self, initial_multiplier: float = 1.0):
        """Restart the cadence for a new session."""
        self.counter = 0
        self.current_multiplier = initial_multiplier

    @property
    def total_spawned(self) -> int:
        return self._spawn_stats["total_spawned"]
