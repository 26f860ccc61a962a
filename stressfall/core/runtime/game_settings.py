"""
game_settings.py
----------------
Centralized constants for all game systems.

These are the built-in defaults. GameConfig (core/runtime/game_config.py)
layers config/game.yaml on top of them and validates the result once at
startup.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window configuration."""
    FPS: int = 60
    CAPTION: str = "Avoid the Finals Stress"
    HUD_HEIGHT: int = 80


# ===========================================================
# Playfield
# ===========================================================

class Board:
    """Dimensions of the playable area (HUD excluded)."""
    WIDTH: int = 480
    HEIGHT: int = 640


class Character:
    """Player character defaults."""
    WIDTH: int = 60
    HEIGHT: int = 70
    MOVE_STEP: float = 8          # pixels per tick
    BOTTOM_OFFSET: int = 100      # y = board height - offset


class FallingObjects:
    """Falling object defaults and the stress-item catalog."""
    SIZE: int = 50

    CATALOG = (
        ("📚", "exam"),
        ("☕", "coffee"),
        ("✏️", "pencil"),
        ("👨‍🏫", "teacher"),
        ("⏰", "deadline"),
        ("😰", "stress"),
        ("⏲️", "alarm"),
        ("💻", "computer"),
        ("🌭", "hotdog"),
        ("🪑", "desk"),
    )


# ===========================================================
# Difficulty
# ===========================================================

class Difficulty:
    """Descent speed range and checkpoint tables (time in seconds)."""
    BASE_SPEED: float = 2.5
    MAX_SPEED: float = 6.5

    SPEED_CHECKPOINTS = (
        (0, 1.00),
        (5, 1.15),
        (10, 1.35),
        (15, 1.60),
        (20, 1.90),
        (30, 2.25),
        (35, 3.20),
        (40, 3.80),
    )

    # Values are tick counts between spawns
    SPAWN_CHECKPOINTS = (
        (0, 90),
        (5, 80),
        (10, 70),
        (15, 60),
        (20, 50),
        (25, 45),
        (30, 40),
        (35, 40),
        (40, 30),
    )


# ===========================================================
# Session Rules
# ===========================================================

class Scoring:
    """Session rules."""
    DURATION: float = 44.0          # seconds to survive
    DODGE_REWARD: int = 10
    WARNING_DISTANCE: float = 70.0


class Timing:
    """Delays in milliseconds."""
    GAME_OVER_DELAY_MS: int = 500
    WARNING_COOLDOWN_MS: int = 500
    CLICK_MOVE_MS: int = 100
    TOUCH_THRESHOLD_PX: int = 5


# ===========================================================
# Audio
# ===========================================================

class Audio:
    """Sound asset paths and per-cue volumes."""
    ASSET_DIR: str = "assets/audio"

    ASSETS = {
        "bgm": "b.MP3",
        "spawn": "sp.mp3",
        "warning": "w.mp3",
        "collision": "go.mp3",
        "victory": "win.mp3",
        "button": "ping.mp3",
    }

    VOLUMES = {
        "bgm": 0.4,
        "spawn": 0.3,
        "warning": 0.4,
        "collision": 0.7,
        "victory": 0.7,
        "button": 0.5,
    }

    FADE_MS: int = 500


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    OBJECTS: int = 100
    CHARACTER: int = 200
    HUD: int = 600
    OVERLAY: int = 700
