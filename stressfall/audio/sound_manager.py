"""
sound_manager.py
----------------
pygame.mixer audio for the game: looping background music and one-shot cues.

Cues arrive as events from the simulation. Audio is best-effort: a missing
file, an unavailable mixer or a playback error is logged and ignored.
"""

import os

import pygame

from stressfall.core.debug.debug_logger import DebugLogger
from stressfall.core.runtime.game_settings import Audio, Timing
from stressfall.core.services.event_manager import (
    ButtonPressEvent, CollisionEvent, GameStartedEvent,
    ObjectSpawnedEvent, ProximityWarningEvent, VictoryEvent,
)


class SoundManager:
    """Loads sound assets and plays them in response to game events."""

    CUES = ("spawn", "warning", "collision", "victory", "button")

    def __init__(self, asset_dir=Audio.ASSET_DIR, clock=None, enabled=True):
        """
        Args:
            asset_dir: Directory holding the files listed in Audio.ASSETS
            clock: Callable returning milliseconds (defaults to pygame.time.get_ticks)
            enabled: False skips mixer initialization entirely (headless runs)
        """
        self.asset_dir = asset_dir
        self.clock = clock or pygame.time.get_ticks
        self.sounds = {}
        self.bgm_path = None
        self.bgm_playing = False
        self.bgm_volume = Audio.VOLUMES["bgm"]

        self.warning_cooldown_ms = Timing.WARNING_COOLDOWN_MS
        self._last_warning_ms = None

        self._fade = None  # (start_ms, start_volume, target_volume, duration_ms)

        self.enabled = enabled and self._init_mixer()
        if self.enabled:
            self.load_assets()
        DebugLogger.init_entry("SoundManager", "OK" if self.enabled else "OFF")

    # ===========================================================
    # Setup
    # ===========================================================
    def _init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            return True
        except pygame.error as e:
            DebugLogger.warn(f"Audio disabled, mixer unavailable: {e}", category="audio")
            return False

    def load_assets(self):
        """Load every cue; missing files are skipped with a warning."""
        for name, filename in Audio.ASSETS.items():
            path = os.path.join(self.asset_dir, filename)
            if name == "bgm":
                self.bgm_path = path if os.path.exists(path) else None
                if self.bgm_path is None:
                    DebugLogger.warn(f"Failed to load background music: {path}", category="audio")
                continue
            try:
                sound = pygame.mixer.Sound(path)
                sound.set_volume(Audio.VOLUMES[name])
                self.sounds[name] = sound
            except (pygame.error, FileNotFoundError) as e:
                DebugLogger.warn(f"Missing sound '{name}' at {path}: {e}", category="audio")

    def bind(self, events):
        """Subscribe cue handlers to the simulation's events."""
        events.subscribe(GameStartedEvent, self.on_game_started)
        events.subscribe(ObjectSpawnedEvent, self.on_object_spawned)
        events.subscribe(ProximityWarningEvent, self.on_proximity_warning)
        events.subscribe(CollisionEvent, self.on_collision)
        events.subscribe(VictoryEvent, self.on_victory)
        events.subscribe(ButtonPressEvent, self.on_button_press)

    # ===========================================================
    # Event Handlers
    # ===========================================================
    def on_game_started(self, event):
        self.play_bgm()

    def on_object_spawned(self, event):
        self.notify_spawn()

    def on_proximity_warning(self, event):
        self.notify_warning()

    def on_collision(self, event):
        self.notify_collision()

    def on_victory(self, event):
        self.notify_victory()

    def on_button_press(self, event):
        self.notify_button_press()

    # ===========================================================
    # Cues
    # ===========================================================
    def notify_spawn(self):
        self.play_cue("spawn")

    def notify_warning(self):
        """Play the near-miss cue unless one played within the cooldown."""
        now = self.clock()
        if self._last_warning_ms is not None and now - self._last_warning_ms < self.warning_cooldown_ms:
            return False
        self._last_warning_ms = now
        self.play_cue("warning")
        return True

    def notify_collision(self):
        self.stop_bgm()
        self.play_cue("collision")

    def notify_victory(self):
        self.stop_bgm()
        self.play_cue("victory")

    def notify_button_press(self):
        self.play_cue("button")

    def play_cue(self, name):
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            DebugLogger.warn(f"Playback of '{name}' failed: {e}", category="audio")

    # ===========================================================
    # Background Music
    # ===========================================================
    def play_bgm(self):
        """Start the looping track from the beginning if it is not playing."""
        if not self.enabled or self.bgm_path is None or self.bgm_playing:
            return
        self._fade = None
        self.bgm_volume = Audio.VOLUMES["bgm"]
        try:
            pygame.mixer.music.load(self.bgm_path)
            pygame.mixer.music.set_volume(self.bgm_volume)
            pygame.mixer.music.play(loops=-1)
            self.bgm_playing = True
        except pygame.error as e:
            DebugLogger.warn(f"BGM playback failed: {e}", category="audio")

    def stop_bgm(self):
        self._fade = None
        if not self.bgm_playing:
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error as e:
            DebugLogger.warn(f"stop_bgm failed: {e}", category="audio")
        self.bgm_playing = False

    def fade_bgm(self, target_volume=0.1, duration_ms=Audio.FADE_MS):
        """Ramp BGM volume linearly to target over duration_ms (driven by update())."""
        self._fade = (self.clock(), self.bgm_volume, target_volume, max(duration_ms, 1))

    def update(self):
        """Advance an active fade. Call once per frame."""
        if self._fade is None:
            return
        start_ms, start_volume, target_volume, duration_ms = self._fade
        progress = min((self.clock() - start_ms) / duration_ms, 1.0)
        self.bgm_volume = start_volume + (target_volume - start_volume) * progress
        if self.bgm_playing:
            try:
                pygame.mixer.music.set_volume(self.bgm_volume)
            except pygame.error as e:
                DebugLogger.warn(f"fade_bgm failed: {e}", category="audio")
        if progress >= 1.0:
            self._fade = None

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def reset(self):
        """Stop music and clear the warning cooldown."""
        self.stop_bgm()
        self.bgm_volume = Audio.VOLUMES["bgm"]
        self._last_warning_ms = None
