"""
game_state.py
-------------
Session state machine: idle, playing, game over, victory.

Responsibilities
----------------
- Own the GameSession (state, score, clock).
- Guard every transition so terminal states are entered exactly once.
- Reset the session, board and difficulty on start/restart.
- Schedule the delayed game-over presentation and cancel it on restart.

Transitions
-----------
    IDLE ──start──> PLAYING ──collision──> GAME_OVER ──start──> IDLE -> PLAYING
                       └────duration────> VICTORY   ──start──> IDLE -> PLAYING
"""

from typing import Optional

from stressfall.core.debug.debug_logger import DebugLogger
from stressfall.core.runtime.session_stats import GameSession
from stressfall.core.services.event_manager import (
    CollisionEvent, GameStartedEvent, VictoryEvent,
)
from stressfall.core.services.scheduler import TimerHandle
from stressfall.core.services.sinks import call_sink
from stressfall.entities.entity_state import GameState
from stressfall.graphics.overlays import game_over_overlay, idle_overlay, victory_overlay


class GameStateMachine:
    """Owns the GameSession and every change to its state."""

    def __init__(self, config, store, curve, events, scheduler, render=None):
        """
        Args:
            config: GameConfig
            store: EntityStore cleared on start and terminal presentation
            curve: DifficultyCurve providing the t = 0 values
            events: EventManager for collision/victory/start notifications
            scheduler: FrameScheduler for the delayed game-over presentation
            render: RenderSink receiving overlays
        """
        self.config = config
        self.store = store
        self.curve = curve
        self.events = events
        self.scheduler = scheduler
        self.render = render

        self.session = GameSession(config.duration)
        self.speed_multiplier, self.spawn_interval = curve.initial_values()
        self._game_over_timer: Optional[TimerHandle] = None

    # ===========================================================
    # Queries
    # ===========================================================
    @property
    def state(self) -> GameState:
        return self.session.state

    # ===========================================================
    # Transitions
    # ===========================================================
    def show_idle(self):
        """Enter IDLE and show the ready screen."""
        self._set_state(GameState.IDLE)
        title, message, options = idle_overlay(self.config.duration)
        call_sink(self.render, "present_overlay", title, message, options, category="game_state")

    def start(self):
        """Start (or restart) a session from any state."""
        self._cancel_game_over_timer()

        if self.session.state is not GameState.IDLE:
            self._set_state(GameState.IDLE)

        self.session.reset()
        self.store.reset()
        self.speed_multiplier, self.spawn_interval = self.curve.initial_values()

        self._set_state(GameState.PLAYING)
        call_sink(self.render, "hide_overlay", category="game_state")
        self.events.dispatch(GameStartedEvent(self.config.duration))

    def trigger_collision(self, object_id: int = 0) -> bool:
        """
        Enter GAME_OVER after a hit. Idempotent.

        The overlay is shown game_over_delay_ms later so the collision cue
        can play; objects are cleared at that moment.

        Returns:
            bool: True if this call performed the transition
        """
        if self.session.state is not GameState.PLAYING:
            DebugLogger.trace(f"Ignored collision report in state {self.session.state.value}",
                              category="game_state")
            return False

        self._set_state(GameState.GAME_OVER)
        self.events.dispatch(CollisionEvent(object_id, self.session.score, self.session.elapsed_time))

        self._game_over_timer = self.scheduler.set_timeout(
            self._present_game_over, self.config.game_over_delay_ms
        )
        return True

    def trigger_victory(self) -> bool:
        """Enter VICTORY once the duration is survived. Idempotent."""
        if self.session.state is not GameState.PLAYING:
            return False

        self.session.elapsed_time = self.session.duration
        self._set_state(GameState.VICTORY)
        self.store.clear()
        self.events.dispatch(VictoryEvent(self.session.score))

        title, message, options = victory_overlay(self.session)
        call_sink(self.render, "present_overlay", title, message, options, category="game_state")
        return True

    # ===========================================================
    # Session Updates
    # ===========================================================
    def advance_time(self, dt: float) -> float:
        """Advance the clock while playing. Returns the elapsed time."""
        if self.session.state is GameState.PLAYING:
            self.session.add_time(dt)
        return self.session.elapsed_time

    def award_dodge(self) -> bool:
        """Add the dodge reward while playing."""
        if self.session.state is not GameState.PLAYING:
            return False
        self.session.add_score(self.config.dodge_reward)
        return True

    def update_difficulty(self, speed_multiplier: float, spawn_interval: int):
        self.speed_multiplier = speed_multiplier
        self.spawn_interval = spawn_interval

    # ===========================================================
    # Internal
    # ===========================================================
    def _present_game_over(self):
        self._game_over_timer = None
        # A restart inside the delay cancels the timer, so this only runs in GAME_OVER
        if self.session.state is not GameState.GAME_OVER:
            return
        self.store.clear()
        call_sink(self.render, "render", self.store.character, (),
                  self.session.score, self.session.time_left, category="game_state")
        title, message, options = game_over_overlay(self.session)
        call_sink(self.render, "present_overlay", title, message, options, category="game_state")
        DebugLogger.state(f"Game over presented (score {self.session.score})")

    def _cancel_game_over_timer(self):
        if self._game_over_timer is not None:
            self._game_over_timer.cancel()
            self._game_over_timer = None

    def _set_state(self, new_state: GameState):
        old_state = self.session.state
        self.session.state = new_state
        DebugLogger.state(f"{old_state.value} -> {new_state.value}")
