"""
test_sound_manager.py
---------------------
Unit tests for SoundManager with pygame.mixer mocked out.

Covers:
- Asset loading (missing files skipped)
- Warning cooldown
- BGM start/stop around collision and victory
- Swallowed playback and mixer failures
- Event binding and volume fades
"""

from unittest.mock import MagicMock, patch

import pygame
import pytest

from stressfall.audio.sound_manager import SoundManager
from stressfall.core.services.event_manager import (
    CollisionEvent, GameStartedEvent, ObjectSpawnedEvent, VictoryEvent,
)


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def mock_pygame():
    with patch("stressfall.audio.sound_manager.pygame") as mocked:
        mocked.error = pygame.error
        mocked.mixer.Sound.side_effect = lambda path: MagicMock(name=path)
        yield mocked


@pytest.fixture
def asset_dir(tmp_path):
    (tmp_path / "b.MP3").write_bytes(b"")
    return str(tmp_path)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sound(mock_pygame, asset_dir, clock):
    return SoundManager(asset_dir=asset_dir, clock=clock)


# ===========================================================
# Setup
# ===========================================================

def test_loads_every_cue(sound):
    assert set(sound.sounds) == set(SoundManager.CUES)
    assert sound.bgm_path.endswith("b.MP3")


def test_missing_cue_is_skipped(mock_pygame, asset_dir, clock):
    def load(path):
        if path.endswith("w.mp3"):
            raise FileNotFoundError(path)
        return MagicMock()

    mock_pygame.mixer.Sound.side_effect = load
    manager = SoundManager(asset_dir=asset_dir, clock=clock)

    assert "warning" not in manager.sounds
    assert manager.notify_warning() is True


def test_missing_bgm_disables_music(mock_pygame, tmp_path, clock):
    manager = SoundManager(asset_dir=str(tmp_path), clock=clock)
    manager.play_bgm()
    assert manager.bgm_path is None
    mock_pygame.mixer.music.play.assert_not_called()


def test_mixer_failure_disables_audio(mock_pygame, asset_dir, clock):
    mock_pygame.mixer.get_init.return_value = False
    mock_pygame.mixer.init.side_effect = pygame.error("no audio device")

    manager = SoundManager(asset_dir=asset_dir, clock=clock)

    assert manager.enabled is False
    manager.notify_collision()
    manager.play_bgm()
    mock_pygame.mixer.music.play.assert_not_called()


def test_disabled_skips_mixer(mock_pygame, asset_dir, clock):
    SoundManager(asset_dir=asset_dir, clock=clock, enabled=False)
    mock_pygame.mixer.init.assert_not_called()
    mock_pygame.mixer.Sound.assert_not_called()


# ===========================================================
# Cues
# ===========================================================

def test_warning_cooldown(sound, clock):
    warning = sound.sounds["warning"]

    assert sound.notify_warning() is True
    clock.now = 200
    assert sound.notify_warning() is False
    clock.now = 600
    assert sound.notify_warning() is True

    assert warning.play.call_count == 2


def test_collision_stops_bgm_then_plays_cue(sound, mock_pygame):
    sound.play_bgm()
    sound.notify_collision()

    mock_pygame.mixer.music.stop.assert_called_once()
    sound.sounds["collision"].play.assert_called_once()
    assert sound.bgm_playing is False


def test_victory_stops_bgm_then_plays_cue(sound, mock_pygame):
    sound.play_bgm()
    sound.notify_victory()

    mock_pygame.mixer.music.stop.assert_called_once()
    sound.sounds["victory"].play.assert_called_once()


def test_playback_failure_is_swallowed(sound):
    sound.sounds["spawn"].play.side_effect = pygame.error("channel busy")
    sound.notify_spawn()


def test_bgm_loops_and_does_not_restart(sound, mock_pygame):
    sound.play_bgm()
    sound.play_bgm()
    mock_pygame.mixer.music.play.assert_called_once_with(loops=-1)
    mock_pygame.mixer.music.set_volume.assert_called_with(0.4)


# ===========================================================
# Events
# ===========================================================

def test_bind_routes_events(sound, events, mock_pygame):
    sound.bind(events)

    events.dispatch(GameStartedEvent(44.0))
    events.dispatch(ObjectSpawnedEvent(1, "exam", 1.0))
    events.dispatch(CollisionEvent(1, 0, 3.0))

    mock_pygame.mixer.music.play.assert_called_once()
    sound.sounds["spawn"].play.assert_called_once()
    sound.sounds["collision"].play.assert_called_once()
    assert sound.bgm_playing is False


def test_victory_event(sound, events):
    sound.bind(events)
    events.dispatch(VictoryEvent(100))
    sound.sounds["victory"].play.assert_called_once()


# ===========================================================
# Fade & Reset
# ===========================================================

def test_fade_ramps_volume(sound, clock, mock_pygame):
    sound.play_bgm()
    sound.fade_bgm(target_volume=0.1, duration_ms=500)

    clock.now = 250
    sound.update()
    assert sound.bgm_volume == pytest.approx(0.25)

    clock.now = 600
    sound.update()
    assert sound.bgm_volume == pytest.approx(0.1)
    mock_pygame.mixer.music.set_volume.assert_called_with(pytest.approx(0.1))

    clock.now = 1000
    sound.update()
    assert sound.bgm_volume == pytest.approx(0.1)


def test_restart_cancels_fade(sound, clock):
    sound.play_bgm()
    sound.fade_bgm(0.1, 500)
    sound.notify_collision()
    sound.play_bgm()

    clock.now = 500
    sound.update()
    assert sound.bgm_volume == 0.4


def test_reset_clears_cooldown(sound, clock):
    sound.notify_warning()
    sound.reset()
    assert sound.notify_warning() is True
