"""
sinks.py
--------
Render interface for the simulation's visual collaborator.

The core never imports pygame. It talks to a RenderSink (entities, HUD,
overlays) through this narrow interface, and every call crosses call_sink()
so a failing collaborator cannot stop the game. Audio listens on the
EventManager instead.
"""

from typing import Any, Dict, List, Protocol, Sequence

from stressfall.core.debug.debug_logger import DebugLogger


class RenderSink(Protocol):
    """Visual output. Called every tick while playing."""

    def render(self, character, objects: Sequence, score: int, time_left: float) -> None:
        ...

    def present_overlay(self, title: str, message: List[str], options: Dict[str, Any]) -> None:
        ...

    def hide_overlay(self) -> None:
        ...


class NullRenderSink:
    """Headless stand-in used when no display is attached."""

    def render(self, character, objects, score, time_left):
        pass

    def present_overlay(self, title, message, options):
        pass

    def hide_overlay(self):
        pass


def call_sink(sink, method: str, *args, category: str = "system", **kwargs):
    """
    Invoke sink.method(*args, **kwargs), discarding any failure.

    Args:
        category: Logger category the caller reports failures under

    Returns:
        The method's result, or None if it is missing or raised
    """
    if sink is None:
        return None
    try:
        return getattr(sink, method)(*args, **kwargs)
    except Exception as e:
        DebugLogger.warn(f"{type(sink).__name__}.{method} failed: {e}", category=category)
        return None
