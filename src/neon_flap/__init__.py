"""
Neon Flap: a fixed-step side-scrolling flap-through-the-gaps simulation.
"""

from .config import ConfigError, GameConfig, load_config
from .data_models import Body, GameState, Obstacle, ObstacleView, ScoreBoard, SimulationSnapshot
from .engine import SimulationEngine

__all__ = [
    "Body", "ConfigError", "GameConfig", "GameState", "Obstacle", "ObstacleView",
    "ScoreBoard", "SimulationEngine", "SimulationSnapshot", "load_config",
]
