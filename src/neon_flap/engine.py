"""
engine.py: The single-player simulation engine.

Owns the body, the obstacle sequence and the round counters, and advances
them one fixed step per `tick()`. The caller owns the frame loop.
"""

import logging
import random
from typing import List, Optional, Tuple

from .config import GameConfig
from .data_models import (
    Body, GameState, Obstacle, ObstacleView, ScoreBoard, SimulationSnapshot,
    body_from_config
)
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    State machine plus physics, obstacle lifecycle, collision and scoring.

    `rng` only needs a `randint(a, b)` method; pass a seeded
    `random.Random` (or `seed=`) to get a reproducible obstacle sequence.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        best_score: int = 0,
    ):
        self.config = (config or GameConfig()).validate()
        self.core = PhysicsCore(self.config)
        self.rng = rng if rng is not None else random.Random(seed)

        if not isinstance(best_score, int) or isinstance(best_score, bool) or best_score < 0:
            raise ValueError(f"best_score must be a non-negative integer, got {best_score!r}")

        self._state = GameState.START
        self._body = body_from_config(self.config)
        self._obstacles: List[Obstacle] = []
        self._tick_count = 0
        self._scores = ScoreBoard(score=0, best=best_score)
        self._pending_activate = False

    # ----- read-only views -----

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._scores.score

    @property
    def best_score(self) -> int:
        return self._scores.best

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def body(self) -> Body:
        return Body(y=self._body.y, velocity=self._body.velocity,
                    x=self._body.x, size=self._body.size)

    @property
    def obstacles(self) -> Tuple[ObstacleView, ...]:
        return tuple(o.view() for o in self._obstacles)

    # ----- entry points -----

    def reset(self):
        """Starts a new round. The best score survives."""
        self._body = body_from_config(self.config)
        self._obstacles = []
        self._tick_count = 0
        self._scores = self._scores.new_round()
        self._pending_activate = False
        self._state = GameState.PLAYING
        logger.info("Round started (best %d)", self._scores.best)

    def activate(self):
        """
        The single player input.

        Starts a round from START or GAME_OVER. While playing, queues one
        impulse for the next tick; repeated calls before that tick coalesce.
        """
        if self._state is GameState.PLAYING:
            self._pending_activate = True
        else:
            self.reset()

    def tick(self) -> SimulationSnapshot:
        """Advances one step while playing; otherwise a no-op."""
        previous = self._state
        if previous is not GameState.PLAYING:
            return self.snapshot()

        before = self._scores.score

        # 1. Apply activation and integrate
        if self._pending_activate:
            self._body.velocity = self.core.flap()
            self._pending_activate = False
        self._body.y, self._body.velocity = self.core.apply_gravity_and_movement(
            self._body.y, self._body.velocity)

        collided = self.core.hits_boundary(self._body)

        # 2. Spawn on cadence
        self._tick_count += 1
        if self._tick_count % self.config.spawn_rate == 0:
            self._spawn_obstacle()

        # 3. Advance, collide and score every obstacle
        for obstacle in self._obstacles:
            obstacle.x -= self.config.obstacle_speed
            if self.core.hits_obstacle(self._body, obstacle):
                collided = True
            if not obstacle.scored and self.core.has_passed(self._body, obstacle):
                obstacle.mark_scored()
                self._scores = self._scores.award()

        # 4. Cull everything that left the field
        self._cull_obstacles()

        if collided:
            self._state = GameState.GAME_OVER
            logger.info("Game over at tick %d: score %d, best %d",
                        self._tick_count, self._scores.score, self._scores.best)

        return self.snapshot(previous_state=previous,
                             score_delta=self._scores.score - before)

    def snapshot(self, previous_state: Optional[GameState] = None,
                 score_delta: int = 0) -> SimulationSnapshot:
        """Read-only copy of the current state."""
        return SimulationSnapshot(
            state=self._state,
            previous_state=previous_state or self._state,
            body_y=self._body.y,
            body_velocity=self._body.velocity,
            obstacles=self.obstacles,
            score=self._scores.score,
            best_score=self._scores.best,
            score_delta=score_delta,
            tick_count=self._tick_count,
            pending_activate=self._pending_activate,
        )

    # ----- obstacle lifecycle -----

    def _spawn_obstacle(self):
        """Adds a new obstacle at the right edge of the field."""
        low, high = self.config.gap_top_range
        gap_top = self.rng.randint(low, high)
        self._obstacles.append(Obstacle(x=float(self.config.field_width), gap_top=gap_top))
        logger.debug("Spawned obstacle at tick %d with gap top %d", self._tick_count, gap_top)

    def _cull_obstacles(self):
        kept = [o for o in self._obstacles if not self.core.is_off_field(o)]
        if len(kept) != len(self._obstacles):
            logger.debug("Culled %d obstacle(s)", len(self._obstacles) - len(kept))
        self._obstacles = kept
