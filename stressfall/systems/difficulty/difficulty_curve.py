"""
difficulty_curve.py
-------------------
Piecewise-linear difficulty curves keyed on elapsed session time.

Responsibilities
----------------
- Interpolate a value between the two checkpoints bracketing a time.
- Hold the final plateau once the last checkpoint has passed.
- Validate checkpoint tables once, when configuration is loaded.

A checkpoint is a (time, value) pair. Tables must be non-empty, start at
time 0 and have strictly increasing times; value_at() assumes this and does
no checking of its own.
"""

import math
from typing import Sequence, Tuple

from stressfall.core.services.config_manager import ConfigError

Checkpoint = Tuple[float, float]


def validate_checkpoints(name: str, checkpoints) -> Tuple[Checkpoint, ...]:
    """
    Normalize and validate a checkpoint table.

    Args:
        name: Table name used in error messages
        checkpoints: Iterable of (time, value) pairs or {"time", "value"} dicts

    Returns:
        tuple: Table as a tuple of (float, float) pairs

    Raises:
        ConfigError: If the table is empty, unsorted or does not start at 0
    """
    table = []
    for entry in checkpoints or ():
        try:
            if isinstance(entry, dict):
                time, value = entry["time"], entry["value"]
            else:
                time, value = entry
            table.append((float(time), float(value)))
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"{name}: malformed checkpoint {entry!r}") from e

    if not table:
        raise ConfigError(f"{name}: checkpoint table is empty")

    if table[0][0] != 0:
        raise ConfigError(f"{name}: first checkpoint must be at time 0, got {table[0][0]}")

    for (t0, _), (t1, _) in zip(table, table[1:]):
        if t1 <= t0:
            raise ConfigError(f"{name}: checkpoint times must strictly increase ({t0} -> {t1})")

    return tuple(table)


def value_at(elapsed: float, checkpoints: Sequence[Checkpoint]) -> float:
    """
    Evaluate the curve at the given elapsed time.

    Args:
        elapsed: Seconds since the session started (>= 0)
        checkpoints: Validated checkpoint table

    Returns:
        float: Interpolated value, clamped to the last checkpoint's value
    """
    last_time, last_value = checkpoints[-1]
    if elapsed >= last_time:
        return last_value

    for (t0, v0), (t1, v1) in zip(checkpoints, checkpoints[1:]):
        if t0 <= elapsed < t1:
            return v0 + (v1 - v0) * (elapsed - t0) / (t1 - t0)

    # elapsed < 0 only happens on caller error; hold the first value
    return checkpoints[0][1]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


class DifficultyCurve:
    """
    The pair of curves driving a session: speed multiplier and spawn interval.

    Spawn interval is in ticks, so it is rounded to an integer.
    """

    def __init__(self, speed_checkpoints, spawn_checkpoints):
        self.speed_checkpoints = validate_checkpoints("speed_checkpoints", speed_checkpoints)
        self.spawn_checkpoints = validate_checkpoints("spawn_checkpoints", spawn_checkpoints)

    def speed_multiplier(self, elapsed: float) -> float:
        return value_at(elapsed, self.speed_checkpoints)

    def spawn_interval(self, elapsed: float) -> int:
        return round_half_up(value_at(elapsed, self.spawn_checkpoints))

    def initial_values(self) -> Tuple[float, int]:
        """Values at t = 0, used when a session is reset."""
        return self.speed_multiplier(0.0), self.spawn_interval(0.0)

    def sample(self, elapsed: float) -> Tuple[float, int]:
        return self.speed_multiplier(elapsed), self.spawn_interval(elapsed)
