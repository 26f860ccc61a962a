"""
simulation_loop.py
------------------
Frame-driven simulation for one game board.

Responsibilities
----------------
- Turn scheduler timestamps into delta time (zero on the first tick).
- Advance the session clock and detect victory.
- Sample the difficulty curves, spawn, move, resolve contacts, score dodges.
- Publish positions and HUD values to the render sink.
- Keep exactly one tick scheduled while running.

Tick order (fixed)
------------------
    time advance -> victory check -> difficulty -> spawn -> move
    -> collision/cleanup -> render -> schedule next
"""

import random
from typing import Optional

from stressfall.core.debug.debug_logger import DebugLogger
from stressfall.core.runtime.game_state import GameStateMachine
from stressfall.core.services.event_manager import ButtonPressEvent, ProximityWarningEvent
from stressfall.core.services.sinks import NullRenderSink, call_sink
from stressfall.entities.entity_state import GameState, MoveIntent
from stressfall.systems.collision.collision_detector import CollisionDetector, Contact, proximity
from stressfall.systems.difficulty.difficulty_curve import DifficultyCurve
from stressfall.systems.entity_management.entity_store import EntityStore
from stressfall.systems.entity_management.movement import Mover
from stressfall.systems.entity_management.spawn_manager import SpawnManager


class SimulationLoop:
    """Wires the core systems together and runs them once per frame."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, config, scheduler, events, render=None, rng: Optional[random.Random] = None):
        """
        Args:
            config: Validated GameConfig
            scheduler: FrameScheduler driving ticks and timers
            events: EventManager that audio subscribes to
            render: RenderSink (defaults to a headless no-op sink)
            rng: Random source for spawn positions and labels
        """
        self.config = config
        self.scheduler = scheduler
        self.events = events
        self.render = render if render is not None else NullRenderSink()

        self.store = EntityStore(config)
        self.curve = DifficultyCurve(config.speed_checkpoints, config.spawn_checkpoints)
        self.detector = CollisionDetector(config.warning_distance)
        self.mover = Mover(config)
        self.machine = GameStateMachine(config, self.store, self.curve, events, scheduler, self.render)
        self.spawner = SpawnManager(config, self.store, self.machine.session, events, rng)

        self._frame_handle: Optional[int] = None
        self._last_timestamp: Optional[float] = None
        self._stopped = True
        self.tick_count = 0

        DebugLogger.init_entry("SimulationLoop")

    # ===========================================================
    # Accessors
    # ===========================================================
    @property
    def session(self):
        return self.machine.session

    @property
    def character(self):
        return self.store.character

    @property
    def objects(self):
        return self.store.objects

    @property
    def running(self) -> bool:
        return not self._stopped

    # ===========================================================
    # Commands
    # ===========================================================
    def boot(self):
        """Show the ready screen and begin ticking in IDLE."""
        self._cancel_frame()
        self.machine.show_idle()
        self._begin()

    def start(self):
        """Start a fresh session. Also used for restart after a terminal state."""
        self._cancel_frame()
        self.machine.start()
        self.spawner.reset(self.machine.speed_multiplier)
        self._begin()
        self._publish()

    reset = start

    def press_start(self):
        """Start/restart requested from a UI control."""
        button = "restart" if self.machine.state.is_terminal else "start"
        self.events.dispatch(ButtonPressEvent(button))
        self.start()

    def stop(self):
        """Cancel the pending tick. The loop stays stopped until start/boot."""
        self._cancel_frame()
        self._stopped = True

    def set_intent(self, intent: MoveIntent):
        self.store.character.moving = intent

    # ===========================================================
    # Tick
    # ===========================================================
    def tick(self, timestamp: float):
        """Run one simulation step for a scheduler timestamp in milliseconds."""
        self._frame_handle = None
        if self._stopped:
            return

        if self._last_timestamp is None:
            dt = 0.0
        else:
            dt = max(timestamp - self._last_timestamp, 0.0) / 1000.0
        self._last_timestamp = timestamp

        if self.machine.state is not GameState.PLAYING:
            self._schedule()
            return

        self.tick_count += 1

        elapsed = self.machine.advance_time(dt)
        if elapsed >= self.config.duration:
            self.machine.trigger_victory()
            self.stop()
            self._publish()
            return

        speed_multiplier, spawn_interval = self.curve.sample(elapsed)
        self.machine.update_difficulty(speed_multiplier, spawn_interval)
        DebugLogger.trace(f"t={elapsed:.2f}s x{speed_multiplier:.2f} every {spawn_interval} ticks",
                          category="difficulty")

        self.spawner.tick(spawn_interval, speed_multiplier)

        self.store.prune_orphans()
        self.mover.advance(self.store.character, self.store.character.moving, self.store.objects)

        if self._resolve_contacts():
            self.stop()
            self._publish()
            return

        self._collect_dodged()
        self._publish()
        self._schedule()

    # ===========================================================
    # Contacts & Cleanup
    # ===========================================================
    def _resolve_contacts(self) -> bool:
        """
        Check every object against the character, newest first.

        Only the first collision is honored; the rest of the tick's objects
        are left untouched.

        Returns:
            bool: True if a collision ended the session
        """
        character = self.store.character
        for obj in reversed(list(self.store.objects)):
            contact = self.detector.check(character, obj)

            if contact is Contact.WARNING:
                self.events.dispatch(ProximityWarningEvent(obj.object_id, proximity(character, obj)))
            elif contact is Contact.COLLISION:
                self.store.remove(obj)
                DebugLogger.state(f"Hit by {obj.label} at {self.session.elapsed_time:.1f}s",
                                  category="collision")
                self.machine.trigger_collision(obj.object_id)
                return True
        return False

    def _collect_dodged(self):
        """Remove objects below the board and award the dodge reward for each."""
        bottom = self.config.board_height
        for obj in reversed(list(self.store.objects)):
            if obj.y > bottom:
                self.store.remove(obj)
                self.machine.award_dodge()

    # ===========================================================
    # Scheduling & Output
    # ===========================================================
    def _publish(self):
        call_sink(self.render, "render",
                  self.store.character,
                  tuple(self.store.objects),
                  self.session.score,
                  self.session.time_left,
                  category="render")

    def _begin(self):
        self._last_timestamp = None
        self._stopped = False
        self._schedule()

    def _schedule(self):
        if self._stopped or self._frame_handle is not None:
            return
        self._frame_handle = self.scheduler.request_frame(self.tick)

    def _cancel_frame(self):
        self.scheduler.cancel_frame(self._frame_handle)
        self._frame_handle = None
