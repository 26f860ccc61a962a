"""
game_config.py
--------------
Immutable, validated configuration for one game process.

Built once at startup from the constants in game_settings.py, optionally
overridden by config/game.yaml. Any malformed value raises ConfigError here
so the game never starts with a broken difficulty table.
"""

from dataclasses import dataclass, field
from typing import Tuple

from stressfall.core.debug.debug_logger import DebugLogger
from stressfall.core.runtime.game_settings import (
    Board, Character, FallingObjects, Difficulty, Scoring, Timing,
)
from stressfall.core.services.config_manager import ConfigError, load_config
from stressfall.systems.difficulty.difficulty_curve import validate_checkpoints


DEFAULT_CONFIG_FILE = "game.yaml"

NUMERIC_FIELDS = {
    "board_width": float,
    "board_height": float,
    "character_width": float,
    "character_height": float,
    "character_bottom_offset": float,
    "move_step": float,
    "object_size": float,
    "duration": float,
    "dodge_reward": int,
    "warning_distance": float,
    "game_over_delay_ms": int,
    "base_speed": float,
    "max_speed": float,
}


def _normalize_catalog(catalog):
    """Turn catalog entries (pairs or {emoji, label} mappings) into (emoji, label) tuples."""
    if not catalog:
        raise ConfigError("stress item catalog is empty")
    try:
        entries = tuple(
            (item["emoji"], item["label"]) if isinstance(item, dict) else tuple(item)
            for item in catalog
        )
    except (KeyError, TypeError) as e:
        raise ConfigError(f"catalog entries need an emoji and a label ({e})") from e

    for entry in entries:
        if len(entry) != 2 or not all(isinstance(part, str) for part in entry):
            raise ConfigError(f"catalog entry must be (emoji, label) strings, got {entry!r}")
    return entries


@dataclass(frozen=True)
class GameConfig:
    """All tunables the simulation reads. Not mutable at runtime."""

    board_width: float = Board.WIDTH
    board_height: float = Board.HEIGHT
    character_width: float = Character.WIDTH
    character_height: float = Character.HEIGHT
    character_bottom_offset: float = Character.BOTTOM_OFFSET
    move_step: float = Character.MOVE_STEP
    object_size: float = FallingObjects.SIZE
    catalog: Tuple[Tuple[str, str], ...] = FallingObjects.CATALOG

    duration: float = Scoring.DURATION
    dodge_reward: int = Scoring.DODGE_REWARD
    warning_distance: float = Scoring.WARNING_DISTANCE
    game_over_delay_ms: int = Timing.GAME_OVER_DELAY_MS

    base_speed: float = Difficulty.BASE_SPEED
    max_speed: float = Difficulty.MAX_SPEED
    speed_checkpoints: tuple = field(default=Difficulty.SPEED_CHECKPOINTS)
    spawn_checkpoints: tuple = field(default=Difficulty.SPAWN_CHECKPOINTS)

    def __post_init__(self):
        self.validate()

    # ===========================================================
    # Validation
    # ===========================================================
    def validate(self):
        """Raise ConfigError on the first invalid value."""
        for name, kind in NUMERIC_FIELDS.items():
            value = getattr(self, name)
            try:
                object.__setattr__(self, name, kind(value))
            except (TypeError, ValueError) as e:
                raise ConfigError(f"{name} must be a number, got {value!r}") from e

        for name in ("board_width", "board_height", "character_width",
                     "character_height", "object_size", "duration"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")

        if self.character_width > self.board_width:
            raise ConfigError("character is wider than the board")
        if self.object_size > self.board_width:
            raise ConfigError("falling objects are wider than the board")
        if self.move_step < 0 or self.dodge_reward < 0 or self.game_over_delay_ms < 0:
            raise ConfigError("move_step, dodge_reward and game_over_delay_ms must be >= 0")
        if self.max_speed < self.base_speed:
            raise ConfigError("max_speed must be >= base_speed")

        # Normalized in place; frozen dataclass needs object.__setattr__
        object.__setattr__(self, "catalog", _normalize_catalog(self.catalog))
        object.__setattr__(self, "speed_checkpoints",
                           validate_checkpoints("speed_checkpoints", self.speed_checkpoints))
        object.__setattr__(self, "spawn_checkpoints",
                           validate_checkpoints("spawn_checkpoints", self.spawn_checkpoints))

    @property
    def speed_range(self) -> Tuple[float, float]:
        return self.base_speed, self.max_speed

    # ===========================================================
    # Construction
    # ===========================================================
    @classmethod
    def from_dict(cls, data: dict) -> "GameConfig":
        """
        Build from a (possibly partial) nested config dict.

        Recognized sections: board, character, falling_objects, session,
        difficulty. Unknown keys are ignored with a warning.
        """
        kwargs = {}
        sections = {
            "board": {"width": "board_width", "height": "board_height"},
            "character": {
                "width": "character_width",
                "height": "character_height",
                "bottom_offset": "character_bottom_offset",
                "move_step": "move_step",
            },
            "falling_objects": {"size": "object_size", "catalog": "catalog"},
            "session": {
                "duration": "duration",
                "dodge_reward": "dodge_reward",
                "warning_distance": "warning_distance",
                "game_over_delay_ms": "game_over_delay_ms",
            },
            "difficulty": {
                "base_speed": "base_speed",
                "max_speed": "max_speed",
                "speed_checkpoints": "speed_checkpoints",
                "spawn_checkpoints": "spawn_checkpoints",
            },
        }

        for section, values in data.items():
            mapping = sections.get(section)
            if mapping is None or not isinstance(values, dict):
                DebugLogger.warn(f"Ignoring unknown config section '{section}'", category="loading")
                continue
            for key, value in values.items():
                if key not in mapping:
                    DebugLogger.warn(f"Ignoring unknown config key '{section}.{key}'", category="loading")
                    continue
                kwargs[mapping[key]] = value

        return cls(**kwargs)

    @classmethod
    def load(cls, filename: str = DEFAULT_CONFIG_FILE, strict: bool = False) -> "GameConfig":
        """Load and validate the game config file. Raises ConfigError on bad data."""
        data = load_config(filename, strict=strict)
        config = cls.from_dict(data)
        DebugLogger.init_entry("GameConfig")
        DebugLogger.init_sub(
            f"Board {config.board_width:.0f}x{config.board_height:.0f}, "
            f"duration {config.duration:.0f}s, "
            f"{len(config.speed_checkpoints)} speed / {len(config.spawn_checkpoints)} spawn checkpoints"
        )
        return config
