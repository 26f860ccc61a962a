"""
test_event_manager.py
---------------------
Unit tests for EventManager subscription and dispatch.
"""

from unittest.mock import MagicMock

import pytest

from stressfall.core.services.event_manager import (
    CollisionEvent, ObjectSpawnedEvent, VictoryEvent,
)


def test_dispatch_reaches_subscribers(events):
    callback = MagicMock()
    events.subscribe(VictoryEvent, callback)

    events.dispatch(VictoryEvent(score=30))

    callback.assert_called_once_with(VictoryEvent(score=30))


def test_dispatch_only_matching_type(events):
    callback = MagicMock()
    events.subscribe(VictoryEvent, callback)
    events.dispatch(CollisionEvent(1, 0, 2.0))
    callback.assert_not_called()


def test_duplicate_subscription_is_ignored(events):
    callback = MagicMock()
    events.subscribe(VictoryEvent, callback)
    events.subscribe(VictoryEvent, callback)
    assert events.get_subscriber_count(VictoryEvent) == 1


def test_unsubscribe(events):
    callback = MagicMock()
    events.subscribe(VictoryEvent, callback)
    events.unsubscribe(VictoryEvent, callback)
    events.dispatch(VictoryEvent(score=0))
    callback.assert_not_called()


def test_failing_callback_does_not_stop_others(events):
    broken = MagicMock(side_effect=RuntimeError("boom"))
    healthy = MagicMock()
    events.subscribe(ObjectSpawnedEvent, broken)
    events.subscribe(ObjectSpawnedEvent, healthy)

    events.dispatch(ObjectSpawnedEvent(1, "exam", 1.0))

    healthy.assert_called_once()


def test_clear_all_and_counts(events):
    events.subscribe(VictoryEvent, MagicMock())
    events.subscribe(CollisionEvent, MagicMock())
    assert events.get_subscriber_count() == 2
    events.clear_all()
    assert events.get_subscriber_count() == 0


def test_events_are_frozen():
    event = VictoryEvent(score=10)
    with pytest.raises(AttributeError):
        event.score = 20
