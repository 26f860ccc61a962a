"""
session_stats.py
----------------
Value container for the current session.

Only GameStateMachine mutates a GameSession; the simulation loop and the
render layer read it.
"""

from stressfall.entities.entity_state import GameState


class GameSession:
    """State, score and clock for one run. Reset when starting a new game."""

    def __init__(self, duration: float):
        self.duration = duration
        self.state = GameState.IDLE
        self.score = 0
        self.elapsed_time = 0.0

    @property
    def time_left(self) -> float:
        return self.duration - self.elapsed_time

    # ===========================================================
    # Mutation (GameStateMachine only)
    # ===========================================================
    def add_score(self, amount: int):
        self.score += amount

    def add_time(self, dt: float):
        """Advance the clock, never past the session duration."""
        self.elapsed_time = min(self.elapsed_time + max(dt, 0.0), self.duration)

    def reset(self):
        self.score = 0
        self.elapsed_time = 0.0
