"""
Shared fixtures for the simulation tests.
"""

import random

import pytest

from neon_flap.config import GameConfig
from neon_flap.data_models import GameState
from neon_flap.engine import SimulationEngine


class SequenceRandom(random.Random):
    """Hands out a fixed list of gap offsets, repeating the last one."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        index = min(len(self.calls) - 1, len(self.values) - 1)
        return self.values[index]


# Body spans 283..317 vertically at the start height.
OPEN_GAP = 220      # gap 220..380 contains the body
CLOSED_GAP = 50     # gap 50..210 is entirely above it


def run_ticks(engine, count):
    snapshot = None
    for _ in range(count):
        snapshot = engine.tick()
    return snapshot


def run_until(engine, tick):
    """Ticks until `tick_count` reaches `tick` (or the round ends)."""
    snapshot = engine.snapshot()
    while engine.tick_count < tick and engine.state is GameState.PLAYING:
        snapshot = engine.tick()
    return snapshot


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def floating_config():
    """No gravity, so the body hovers at its start height."""
    return GameConfig(gravity=0.0)


@pytest.fixture
def engine(config):
    return SimulationEngine(config, seed=42)


@pytest.fixture
def playing(engine):
    engine.activate()
    return engine
