"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard, mouse-drag and touch-swipe events into model commands.
  - Drive the game loop: feed elapsed time to the model, ask the view to render.
  - Refit the playfield when the window is resized.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that reads pygame events.
"""

import logging
import random
import sys
from typing import Optional

import pygame

from .clock import RunPhase
from .config import BASE_WIDTH, BASE_HEIGHT, CELL, FPS
from .entities import Direction
from .gestures import SwipeTracker
from .layout import fit_grid
from .model import GameModel
from .scores import KeyValueStore
from .view import GameView

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
}
RESTART_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_r)
QUIT_KEYS    = (pygame.K_ESCAPE, pygame.K_q)


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        window: tuple[int, int] = (BASE_WIDTH, BASE_HEIGHT),
        cell: int = CELL,
        rng: Optional[random.Random] = None,
    ):
        pygame.init()
        self.screen = pygame.display.set_mode(window, pygame.RESIZABLE)
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()
        self.cell  = cell
        self.model = GameModel(fit_grid(*window, cell), store=store, rng=rng)
        self.view  = GameView(self.screen)
        self.swipe = SwipeTracker()

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        while True:
            dt_ms = self.clock.tick(FPS)
            self._handle_events()
            self.model.update(dt_ms)
            self.view.render(self.model.snapshot())

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            elif event.type == pygame.VIDEORESIZE:
                self._handle_resize(event.w, event.h)
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.model.pause()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if not getattr(event, "touch", False):
                    self.swipe.begin(*event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if not getattr(event, "touch", False):
                    self._handle_swipe_end(*event.pos)
            elif event.type == pygame.FINGERDOWN:
                self.swipe.begin(*self._finger_pos(event))
            elif event.type == pygame.FINGERUP:
                self._handle_swipe_end(*self._finger_pos(event))

    def _handle_keydown(self, key: int) -> None:
        if key in QUIT_KEYS:
            self._quit()

        phase = self.model.phase

        if phase is RunPhase.GAME_OVER:
            if key in RESTART_KEYS:
                self.model.restart()
        elif phase is RunPhase.PAUSED and key == pygame.K_RETURN:
            self.model.resume()
        elif key in (pygame.K_SPACE, pygame.K_p):
            self.model.toggle_pause()
        elif key in DIRECTION_KEYS:
            self.model.queue_direction(DIRECTION_KEYS[key])

    def _handle_swipe_end(self, x: float, y: float) -> None:
        direction = self.swipe.end(x, y)
        if direction is not None:
            self.model.queue_direction(direction)

    def _handle_resize(self, width: int, height: int) -> None:
        self.screen = pygame.display.get_surface()
        self.view.bind(self.screen)
        grid = fit_grid(width, height, self.cell)
        if grid != self.model.grid:
            logger.info("Window %dx%d -> playfield %s", width, height, grid)
            self.model.resize(grid)

    # ── Utilities ─────────────────────────────────────────────────
    def _finger_pos(self, event) -> tuple[float, float]:
        # finger coordinates arrive normalised to 0..1
        w, h = self.screen.get_size()
        return event.x * w, event.y * h

    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()
