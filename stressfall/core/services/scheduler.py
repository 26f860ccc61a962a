"""
scheduler.py
------------
Cooperative frame scheduler with one-shot timers.

Responsibilities
----------------
- Queue frame callbacks that run once on the next pump (like an animation
  frame request).
- Queue one-shot timers that fire once their delay has elapsed.
- Hand out cancellation handles for both.

Nothing here reads a clock. The owner calls pump(now_ms) once per rendered
frame, with pygame.time.get_ticks() in the game and synthetic timestamps in
tests, so scheduled work can be fast-forwarded deterministically.
"""

import itertools
from typing import Callable, Dict, List, Optional

from stressfall.core.debug.debug_logger import DebugLogger


class TimerHandle:
    """Cancellation token for a pending one-shot timer."""

    __slots__ = ("timer_id", "due_ms", "callback", "cancelled", "fired")

    def __init__(self, timer_id: int, due_ms: float, callback: Callable[[], None]):
        self.timer_id = timer_id
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        self.cancelled = True


class FrameScheduler:
    """Single-threaded scheduler pumped by the main loop."""

    def __init__(self):
        self._ids = itertools.count(1)
        self._frames: Dict[int, Callable[[float], None]] = {}
        self._timers: List[TimerHandle] = []
        self.now_ms: float = 0.0

    # ===========================================================
    # Frame Requests
    # ===========================================================
    def request_frame(self, callback: Callable[[float], None]) -> int:
        """
        Run callback(timestamp_ms) on the next pump.

        Returns:
            int: Handle for cancel_frame()
        """
        handle = next(self._ids)
        self._frames[handle] = callback
        return handle

    def cancel_frame(self, handle: Optional[int]):
        if handle is not None:
            self._frames.pop(handle, None)

    # ===========================================================
    # Timers
    # ===========================================================
    def set_timeout(self, callback: Callable[[], None], delay_ms: float) -> TimerHandle:
        """Run callback() once, no earlier than delay_ms after the current time."""
        timer = TimerHandle(next(self._ids), self.now_ms + delay_ms, callback)
        self._timers.append(timer)
        return timer

    # ===========================================================
    # Pump
    # ===========================================================
    def pump(self, now_ms: float):
        """
        Advance to now_ms: run queued frame callbacks, then due timers.

        Callbacks that request a new frame during this pump run on the next
        one, never in the same pass.
        """
        self.now_ms = now_ms

        frames, self._frames = self._frames, {}
        for callback in frames.values():
            callback(now_ms)

        due = [t for t in self._timers if t.pending and t.due_ms <= now_ms]
        self._timers = [t for t in self._timers if t.pending and t not in due]
        for timer in sorted(due, key=lambda t: (t.due_ms, t.timer_id)):
            # An earlier timer in this batch may have cancelled it
            if timer.cancelled:
                continue
            timer.fired = True
            timer.callback()

    def advance(self, delta_ms: float):
        """Convenience for tests: pump at now + delta_ms."""
        self.pump(self.now_ms + delta_ms)

    # ===========================================================
    # Introspection
    # ===========================================================
    @property
    def pending_frames(self) -> int:
        return len(self._frames)

    @property
    def pending_timers(self) -> int:
        return sum(1 for t in self._timers if t.pending)

    def clear(self):
        """Drop every pending frame and timer."""
        for timer in self._timers:
            timer.cancel()
        self._timers.clear()
        self._frames.clear()
        DebugLogger.trace("Scheduler cleared", category="timing")
