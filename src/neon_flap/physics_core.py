"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from .config import GameConfig
from .data_models import Body, Obstacle


class PhysicsCore:
    """
    Stateless per-tick physics used by the simulation engine.
    All numbers come from the session config.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """
        Calculates new position and velocity after one fixed tick.
        """
        velocity += self.config.gravity
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity right after an activation."""
        return self.config.jump_impulse

    def hits_boundary(self, body: Body) -> bool:
        """Top edge above the field top or bottom edge below the field bottom."""
        return body.top < 0 or body.bottom > self.config.field_height

    def hits_obstacle(self, body: Body, obstacle: Obstacle) -> bool:
        """Axis-aligned box test of the body against one obstacle's two barriers."""
        right_edge = obstacle.x + self.config.obstacle_width
        if not (body.right > obstacle.x and body.left < right_edge):
            return False

        gap_bottom = obstacle.gap_top + self.config.gap_height
        return body.top < obstacle.gap_top or body.bottom > gap_bottom

    def has_passed(self, body: Body, obstacle: Obstacle) -> bool:
        """True once the obstacle's trailing edge is behind the body's center."""
        return obstacle.x + self.config.obstacle_width < body.x

    def is_off_field(self, obstacle: Obstacle) -> bool:
        return obstacle.x + self.config.obstacle_width <= 0
