"""
config.py: Typed, validated session configuration.

Every value is fixed for the lifetime of an engine. A configuration that
would make the game impossible (or trivially endless) is rejected at
construction time instead of being clamped.
"""

import math
from dataclasses import dataclass, fields, replace

from .constants import (
    FIELD_WIDTH, FIELD_HEIGHT, GRAVITY, JUMP_IMPULSE, OBSTACLE_SPEED,
    SPAWN_RATE_TICKS, OBSTACLE_WIDTH, GAP_HEIGHT, MIN_GAP_TOP,
    BODY_SIZE, BODY_X, BODY_START_Y
)


class ConfigError(ValueError):
    """Raised for a configuration the simulation cannot run with."""


@dataclass(frozen=True)
class GameConfig:
    """Field geometry, physics and obstacle settings for one session."""
    field_width: float = FIELD_WIDTH
    field_height: float = FIELD_HEIGHT
    gravity: float = GRAVITY          # units/tick^2, downward positive
    jump_impulse: float = JUMP_IMPULSE  # units/tick, must be negative
    obstacle_speed: float = OBSTACLE_SPEED
    spawn_rate: int = SPAWN_RATE_TICKS
    obstacle_width: float = OBSTACLE_WIDTH
    gap_height: float = GAP_HEIGHT
    min_gap_top: float = MIN_GAP_TOP
    body_size: float = BODY_SIZE
    body_x: float = BODY_X
    body_start_y: float = BODY_START_Y

    @property
    def half_body(self) -> float:
        return self.body_size / 2

    @property
    def max_gap_top(self) -> float:
        """Largest gap offset that still leaves `min_gap_top` below the gap."""
        return self.field_height - self.gap_height - self.min_gap_top

    @property
    def gap_top_range(self) -> tuple[int, int]:
        """Inclusive whole-unit range spawned gap offsets are drawn from."""
        return math.ceil(self.min_gap_top), math.floor(self.max_gap_top)

    def validate(self) -> "GameConfig":
        """Checks the settings and returns self, raising ConfigError on the first problem."""
        positive = ("field_width", "field_height", "obstacle_speed",
                    "obstacle_width", "gap_height", "body_size")
        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)!r}")

        if not isinstance(self.spawn_rate, int) or isinstance(self.spawn_rate, bool) or self.spawn_rate < 1:
            raise ConfigError(f"spawn_rate must be a positive integer, got {self.spawn_rate!r}")
        if self.gravity < 0:
            raise ConfigError(f"gravity must not be negative, got {self.gravity!r}")
        if self.jump_impulse >= 0:
            raise ConfigError(f"jump_impulse must be negative (upward), got {self.jump_impulse!r}")
        if self.min_gap_top < 0:
            raise ConfigError(f"min_gap_top must not be negative, got {self.min_gap_top!r}")

        if self.gap_height <= self.body_size:
            raise ConfigError(
                f"gap_height ({self.gap_height}) must exceed body_size ({self.body_size})")
        if 2 * self.min_gap_top + self.gap_height >= self.field_height:
            raise ConfigError(
                "gap_height plus twice min_gap_top must be less than field_height "
                f"({self.gap_height} + 2*{self.min_gap_top} >= {self.field_height})")
        if math.ceil(self.min_gap_top) > math.floor(self.max_gap_top):
            raise ConfigError(
                f"No whole-unit gap offset fits between {self.min_gap_top} and {self.max_gap_top}")

        half = self.half_body
        if not half <= self.body_x <= self.field_width - half:
            raise ConfigError(f"body_x ({self.body_x}) puts the body outside the field")
        if not half <= self.body_start_y <= self.field_height - half:
            raise ConfigError(f"body_start_y ({self.body_start_y}) puts the body outside the field")
        return self


def load_config(**overrides) -> GameConfig:
    """Builds a validated config from the defaults plus keyword overrides."""
    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
    return replace(GameConfig(), **overrides).validate()
