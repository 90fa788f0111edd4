"""
driver.py

Pygame front end: owns the frame loop, turns key/mouse events into
activations, ticks the engine once per frame and draws the snapshot.
"""

import argparse
import logging
import math
from typing import List, Optional

import pygame

from .config import GameConfig
from .constants import RENDER_FPS, DB_FILE, DEFAULT_PROFILE
from .data_models import GameState, SimulationSnapshot
from .engine import SimulationEngine
from .score_db import ScoreStore

logger = logging.getLogger(__name__)

BACKGROUND_TOP = (15, 23, 42)
BACKGROUND_BOTTOM = (30, 41, 59)
PIPE_COLOR = (16, 185, 129)
PIPE_CAP_COLOR = (52, 211, 153)
BIRD_COLOR = (245, 158, 11)
WING_COLOR = (217, 119, 6)
BEAK_COLOR = (239, 68, 68)
ACCENT = (52, 211, 153)
WHITE = (255, 255, 255)
MUTED = (161, 161, 170)
GOLD = (251, 191, 36)
RED = (239, 68, 68)

ACTIVATE_KEYS = (pygame.K_SPACE, pygame.K_UP)


class FlappyApp:
    def __init__(self, config: Optional[GameConfig] = None, store: Optional[ScoreStore] = None,
                 profile: str = DEFAULT_PROFILE, seed: Optional[int] = None, fps: int = RENDER_FPS):
        pygame.init()
        self.store = store
        self.profile = profile
        self.fps = fps

        best = store.get_best(profile) if store else 0
        self.engine = SimulationEngine(config=config, seed=seed, best_score=best)
        self.config = self.engine.config

        self.width = int(self.config.field_width)
        self.height = int(self.config.field_height)
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Neon Flap")

        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 72)
        self.font = pygame.font.Font(None, 40)
        self.small_font = pygame.font.Font(None, 26)
        self.background = self._make_background()

    def run(self):
        """The main loop: events, one engine tick, draw."""
        print(f"Neon Flap started. Best score: {self.engine.best_score}")
        while self.step():
            self.clock.tick(self.fps)

        # A new best set in an unfinished round is kept too.
        self._save_best(self.engine.best_score)
        pygame.quit()
        print(f"Bye. Best score: {self.engine.best_score}")

    def step(self) -> bool:
        """One frame: events, one engine tick, draw. Returns False once asked to quit."""
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in ACTIVATE_KEYS:
                self.engine.activate()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.engine.activate()

        snapshot = self.engine.tick()
        if snapshot.transitioned and snapshot.is_over:
            self._save_best(snapshot.best_score)

        self._draw(snapshot)
        return running

    def _save_best(self, best: int):
        if self.store is None:
            return
        stored = self.store.update_best(best, self.profile)
        logger.info("Saved best score %d for profile %s", stored, self.profile)

    # ----- rendering -----

    def _make_background(self) -> pygame.Surface:
        surface = pygame.Surface((self.width, self.height))
        for row in range(self.height):
            t = row / max(self.height - 1, 1)
            color = [int(a + (b - a) * t) for a, b in zip(BACKGROUND_TOP, BACKGROUND_BOTTOM)]
            pygame.draw.line(surface, color, (0, row), (self.width, row))
        return surface

    def _draw(self, snapshot: SimulationSnapshot):
        screen = self.screen
        screen.blit(self.background, (0, 0))

        width = self.config.obstacle_width
        gap = self.config.gap_height
        for pipe in snapshot.obstacles:
            bottom_y = pipe.gap_top + gap
            pygame.draw.rect(screen, PIPE_COLOR, (pipe.x, 0, width, pipe.gap_top))
            pygame.draw.rect(screen, PIPE_CAP_COLOR, (pipe.x - 5, pipe.gap_top - 20, width + 10, 20))
            pygame.draw.rect(screen, PIPE_COLOR, (pipe.x, bottom_y, width, self.height - bottom_y))
            pygame.draw.rect(screen, PIPE_CAP_COLOR, (pipe.x - 5, bottom_y, width + 10, 20))

        self._draw_bird(snapshot)

        score_text = self.large_font.render(str(snapshot.score), True, WHITE)
        screen.blit(score_text, (self.width // 2 - score_text.get_width() // 2, 30))

        if snapshot.state is GameState.START:
            self._draw_start_overlay()
        elif snapshot.state is GameState.GAME_OVER:
            self._draw_game_over_overlay(snapshot)

        footer = self.small_font.render(
            f"High Score: {snapshot.best_score}   SPACE / Click = Fly   Esc = Quit", True, MUTED)
        screen.blit(footer, (10, self.height - 30))

        pygame.display.flip()

    def _draw_bird(self, snapshot: SimulationSnapshot):
        size = int(self.config.body_size)
        sprite = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
        c = size  # sprite center
        pygame.draw.ellipse(sprite, BIRD_COLOR, (c - size // 2, c - int(size / 2.5), size, int(size / 1.25)))
        pygame.draw.circle(sprite, WHITE, (c + 8, c - 4), 5)
        pygame.draw.circle(sprite, (0, 0, 0), (c + 10, c - 4), 2)
        pygame.draw.polygon(sprite, BEAK_COLOR, [(c + 14, c), (c + 24, c + 4), (c + 14, c + 8)])
        pygame.draw.ellipse(sprite, WING_COLOR, (c - 18, c - 4, 20, 12))

        # Nose up while rising, down while falling, at most 45 degrees.
        angle = max(-math.pi / 4, min(math.pi / 4, snapshot.body_velocity * 0.1))
        rotated = pygame.transform.rotate(sprite, -math.degrees(angle))
        rect = rotated.get_rect(center=(int(self.config.body_x), int(snapshot.body_y)))
        self.screen.blit(rotated, rect)

    def _dim(self, alpha: int):
        shade = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, alpha))
        self.screen.blit(shade, (0, 0))

    def _blit_centered(self, surface: pygame.Surface, y: int):
        self.screen.blit(surface, (self.width // 2 - surface.get_width() // 2, y))

    def _draw_start_overlay(self):
        self._dim(150)
        mid = self.height // 2
        neon = self.large_font.render("NEON ", True, WHITE)
        flap = self.large_font.render("FLAP", True, ACCENT)
        x = self.width // 2 - (neon.get_width() + flap.get_width()) // 2
        self.screen.blit(neon, (x, mid - 80))
        self.screen.blit(flap, (x + neon.get_width(), mid - 80))
        self._blit_centered(self.font.render("Press SPACE or CLICK to fly", True, MUTED), mid + 10)

    def _draw_game_over_overlay(self, snapshot: SimulationSnapshot):
        self._dim(200)
        mid = self.height // 2
        self._blit_centered(self.large_font.render("GAME OVER", True, RED), mid - 110)
        self._blit_centered(self.font.render(f"Score  {snapshot.score}", True, WHITE), mid - 30)
        self._blit_centered(self.font.render(f"Best  {snapshot.best_score}", True, GOLD), mid + 10)
        self._blit_centered(self.small_font.render("SPACE / Click to try again", True, MUTED), mid + 70)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Neon Flap")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for obstacle gaps")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Frames (and ticks) per second")
    parser.add_argument("--db", default=DB_FILE, help=f"Best score database (default: {DB_FILE})")
    parser.add_argument("--profile", default=DEFAULT_PROFILE, help="Name the best score is saved under")
    parser.add_argument("--no-save", action="store_true", help="Keep the best score for this session only")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    store = None if args.no_save else ScoreStore(args.db)
    try:
        app = FlappyApp(store=store, profile=args.profile, seed=args.seed, fps=args.fps)
        app.run()
    finally:
        if store is not None:
            store.close()

