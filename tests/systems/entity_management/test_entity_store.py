"""
test_entity_store.py
--------------------
Unit tests for the EntityStore container.
"""

import pytest

from stressfall.entities.entity_state import MoveIntent
from stressfall.entities.falling_object import FallingObject
from stressfall.systems.entity_management.entity_store import EntityStore


@pytest.fixture
def store(config):
    return EntityStore(config)


def make_object(x=0, y=0):
    return FallingObject(x=x, y=y, size=50, label="exam", emoji="📝", speed_multiplier=1.0)


# ===========================================================
# Character
# ===========================================================

def test_character_starts_at_home(store):
    assert store.character_home() == (240, 540)
    assert (store.character.x, store.character.y) == (240, 540)
    assert (store.character.width, store.character.height) == (60, 70)


def test_reset_recenters_character_and_clears_board(store):
    store.character.x = 12
    store.character.moving = MoveIntent.LEFT
    store.add(make_object())

    store.reset()

    assert store.character.x == 240
    assert store.character.moving is MoveIntent.NONE
    assert store.count() == 0


# ===========================================================
# Objects
# ===========================================================

def test_add_keeps_spawn_order(store):
    first = store.add(make_object())
    second = store.add(make_object())
    assert store.objects == [first, second]
    assert first.object_id < second.object_id


def test_remove_reports_membership(store):
    obj = store.add(make_object())
    assert store.remove(obj) is True
    assert store.remove(obj) is False
    assert store.count() == 0


def test_clear_empties_board(store):
    for _ in range(3):
        store.add(make_object())
    store.clear()
    assert store.objects == []


def test_prune_orphans_drops_objects_without_handle(store):
    kept = store.add(make_object())
    lost = store.add(make_object())
    lost.handle = None

    assert store.prune_orphans() == 1
    assert store.objects == [kept]


def test_prune_orphans_without_orphans_is_noop(store):
    store.add(make_object())
    objects = store.objects
    assert store.prune_orphans() == 0
    assert store.objects is objects
    assert store.count() == 1
