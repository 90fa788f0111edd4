"""
Tests for the pygame driver, run against SDL's dummy video driver.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from neon_flap.constants import DB_FILE, DEFAULT_PROFILE, RENDER_FPS
from neon_flap.data_models import GameState, ScoreBoard
from neon_flap.driver import FlappyApp, parse_args
from neon_flap.score_db import ScoreStore


@pytest.fixture
def store(tmp_path):
    store = ScoreStore(str(tmp_path / "scores.db"))
    yield store
    store.close()


@pytest.fixture
def make_app():
    def factory(**kwargs):
        return FlappyApp(seed=1, **kwargs)

    yield factory
    pygame.quit()


def press(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.seed is None
        assert args.fps == RENDER_FPS
        assert args.db == DB_FILE
        assert args.profile == DEFAULT_PROFILE
        assert not args.no_save
        assert args.log_level == "WARNING"

    def test_flags(self):
        args = parse_args(["--seed", "9", "--fps", "30", "--no-save", "--log-level", "DEBUG"])
        assert args.seed == 9
        assert args.fps == 30
        assert args.no_save
        assert args.log_level == "DEBUG"

    def test_bad_log_level(self):
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "LOUD"])


class TestInput:
    """Events turn into engine calls."""

    def test_space_starts_round(self, make_app):
        app = make_app()
        press(pygame.K_SPACE)
        assert app.step()
        assert app.engine.state is GameState.PLAYING

    def test_escape_stops_loop(self, make_app):
        app = make_app()
        press(pygame.K_ESCAPE)
        assert not app.step()

    def test_window_close_stops_loop(self, make_app):
        app = make_app()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert not app.step()


class TestBestScorePersistence:
    """Best score goes in at startup and back out on game over and on quit."""

    def test_stored_best_loaded_at_startup(self, make_app, store):
        store.update_best(7)
        app = make_app(store=store)
        assert app.engine.best_score == 7

    def test_saved_on_game_over(self, make_app, store):
        app = make_app(store=store)
        app.engine.activate()
        app.engine._scores = ScoreBoard(score=3, best=3)
        app.engine._body.y = 0.0

        assert app.step()
        assert app.engine.state is GameState.GAME_OVER
        assert store.get_best() == 3

    def test_saved_on_quit_mid_round(self, make_app, store):
        app = make_app(store=store)
        app.engine.activate()
        app.engine._scores = ScoreBoard(score=2, best=2)

        pygame.event.post(pygame.event.Event(pygame.QUIT))
        app.run()
        assert app.engine.state is GameState.PLAYING
        assert store.get_best() == 2

    def test_lower_score_does_not_overwrite(self, make_app, store):
        store.update_best(9)
        app = make_app(store=store)
        app.engine.activate()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        app.run()
        assert store.get_best() == 9

    def test_runs_without_store(self, make_app):
        app = make_app()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        app.run()
        assert app.engine.best_score == 0
