"""
data_models.py: Data structures for the simulation state.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from .constants import BODY_START_Y, BODY_X, BODY_SIZE


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Body:
    """The falling actor. Only the engine mutates it."""
    y: float = BODY_START_Y
    velocity: float = 0.0
    x: float = BODY_X
    size: float = BODY_SIZE

    @property
    def half(self) -> float:
        return self.size / 2

    @property
    def top(self) -> float:
        return self.y - self.half

    @property
    def bottom(self) -> float:
        return self.y + self.half

    @property
    def left(self) -> float:
        return self.x - self.half

    @property
    def right(self) -> float:
        return self.x + self.half


@dataclass
class Obstacle:
    """A gapped barrier. `x` is its leading (left) edge."""
    x: float
    gap_top: float
    scored: bool = False

    def mark_scored(self):
        # Write-once: nothing ever clears the flag.
        self.scored = True

    def view(self) -> "ObstacleView":
        return ObstacleView(x=self.x, gap_top=self.gap_top, scored=self.scored)


@dataclass(frozen=True)
class ObstacleView:
    """Read-only copy of an obstacle handed out in snapshots."""
    x: float
    gap_top: float
    scored: bool


@dataclass(frozen=True)
class ScoreBoard:
    """
    The (score, best) pair as one value.

    Both numbers only change together through `award` and `new_round`,
    so `score <= best` holds for every instance the engine ever stores.
    """
    score: int = 0
    best: int = 0

    def __post_init__(self):
        if self.score < 0 or self.best < 0:
            raise ValueError(f"Scores must not be negative, got {self.score!r}/{self.best!r}")
        if self.score > self.best:
            raise ValueError(f"score ({self.score}) must not exceed best ({self.best})")

    def award(self) -> "ScoreBoard":
        score = self.score + 1
        return ScoreBoard(score=score, best=max(self.best, score))

    def new_round(self) -> "ScoreBoard":
        return replace(self, score=0)


@dataclass(frozen=True)
class SimulationSnapshot:
    """What the driver gets back after every tick."""
    state: GameState
    previous_state: GameState
    body_y: float
    body_velocity: float
    obstacles: Tuple[ObstacleView, ...]
    score: int
    best_score: int
    score_delta: int = 0
    tick_count: int = 0
    pending_activate: bool = False

    @property
    def transitioned(self) -> bool:
        return self.state is not self.previous_state

    @property
    def is_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def to_dict(self) -> dict:
        """Plain dictionary form, handy for logging and debugging overlays."""
        return {
            "state": self.state.value,
            "y": round(self.body_y, 2),
            "v": round(self.body_velocity, 2),
            "score": self.score,
            "best": self.best_score,
            "tick": self.tick_count,
            "obstacles": [
                {"x": round(o.x, 2), "gap_top": o.gap_top, "scored": o.scored}
                for o in self.obstacles
            ],
        }


def body_from_config(config) -> Body:
    """Fresh body at the configured start position."""
    return Body(
        y=config.body_start_y,
        velocity=0.0,
        x=config.body_x,
        size=config.body_size,
    )
