"""
Core services exports.

Provides configuration loading, the event bus, the frame scheduler and the
collaborator interfaces. InputManager (pygame) is imported from its module.
"""

from stressfall.core.services.config_manager import ConfigError, load_config
from stressfall.core.services.event_manager import (
    EventManager,
    BaseEvent,
    GameStartedEvent,
    ObjectSpawnedEvent,
    ProximityWarningEvent,
    CollisionEvent,
    VictoryEvent,
    ButtonPressEvent,
)
from stressfall.core.services.scheduler import FrameScheduler, TimerHandle
from stressfall.core.services.sinks import RenderSink, NullRenderSink, call_sink

__all__ = [
    'ConfigError',
    'load_config',
    'EventManager',
    'BaseEvent',
    'GameStartedEvent',
    'ObjectSpawnedEvent',
    'ProximityWarningEvent',
    'CollisionEvent',
    'VictoryEvent',
    'ButtonPressEvent',
    'FrameScheduler',
    'TimerHandle',
    'RenderSink',
    'NullRenderSink',
    'call_sink',
]
