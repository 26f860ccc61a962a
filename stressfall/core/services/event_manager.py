"""
event_manager.py
----------------
Pub-sub bus between the simulation core and its side-effect collaborators.

The core dispatches fire-and-forget events; audio (and anything else that
wants to react) subscribes. A failing subscriber is logged and skipped so
it can never break a simulation tick.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from stressfall.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class GameStartedEvent(BaseEvent):
    """Dispatched when a session enters PLAYING."""
    duration: float


@dataclass(frozen=True)
class ObjectSpawnedEvent(BaseEvent):
    """Dispatched once per falling object created."""
    object_id: int
    label: str
    speed_multiplier: float


@dataclass(frozen=True)
class ProximityWarningEvent(BaseEvent):
    """Dispatched when an object passes close to the character without touching."""
    object_id: int
    distance: float


@dataclass(frozen=True)
class CollisionEvent(BaseEvent):
    """Dispatched once when the character is hit."""
    object_id: int
    score: int
    elapsed: float


@dataclass(frozen=True)
class VictoryEvent(BaseEvent):
    """Dispatched once when the character survives the full duration."""
    score: int


@dataclass(frozen=True)
class ButtonPressEvent(BaseEvent):
    """Dispatched when a UI control (start/restart) is used."""
    button: str


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        DebugLogger.system(
            f"Subscribed '{getattr(callback, '__name__', repr(callback))}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        callbacks = self._subscribers.get(event_type)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        Exceptions raised by callbacks are logged and discarded.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
