"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input devices.
Exposes a clean API for the Controller to read/write.

Classes:
    Snapshot    — immutable per-frame view of the game for the renderer
    GameModel   — top-level model; owns the run's state, clock, input
                  buffer and score keeper
"""

import logging
import random
from typing import NamedTuple, Optional

from .clock import GameClock, RunPhase
from .config import BASE_WIDTH, BASE_HEIGHT, CELL, INITIAL_STEP_MS, OUTCOME_CLEARED
from .engine import NO_TICK, TickResult, tick
from .entities import Direction, GameState
from .food import FoodPlacer
from .grid import Cell, Grid
from .input_buffer import InputBuffer
from .layout import translate_state
from .scores import KeyValueStore, MemoryStore, ScoreKeeper

logger = logging.getLogger(__name__)


# ─────────────────────────── Snapshot ────────────────────────────
class Snapshot(NamedTuple):
    """What the view needs for one frame. Safe to render many times."""
    snake: tuple[Cell, ...]
    food: Optional[Cell]
    direction: Direction
    score: int
    high_score: int
    new_record: bool
    phase: RunPhase
    outcome: Optional[str]
    cols: int
    rows: int
    cell_size: int

    @property
    def game_over(self) -> bool:
        return self.phase is RunPhase.GAME_OVER

    @property
    def paused(self) -> bool:
        return self.phase is RunPhase.PAUSED

    @property
    def cleared(self) -> bool:
        return self.outcome == OUTCOME_CLEARED


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  The controller calls update() once per frame;
    the clock decides whether that frame runs a simulation tick.
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        store: Optional[KeyValueStore] = None,
        rng: Optional[random.Random] = None,
        initial_step_ms: int = INITIAL_STEP_MS,
    ):
        self.grid: Grid = grid or Grid(BASE_WIDTH, BASE_HEIGHT, CELL)
        self.rng = rng or random.Random()
        self.initial_step_ms = initial_step_ms
        self.scores = ScoreKeeper(store if store is not None else MemoryStore())
        self.placer = FoodPlacer(self.grid, self.rng)
        self.inputs = InputBuffer()
        self.state: Optional[GameState] = None
        self.clock: Optional[GameClock] = None
        self.runs: int = 0
        self.restart()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def phase(self) -> RunPhase:
        return self.clock.phase

    @property
    def score(self) -> int:
        return self.state.score

    # ── Public API ───────────────────────────────────────────────
    def restart(self) -> None:
        """Throw the current run away and start a fresh one."""
        self.scores.load()
        self.state = GameState.new_run(self.grid, self.initial_step_ms)
        self.state.food = self.placer.place(self.state.occupied())
        self.clock = GameClock(self.state.step_ms)
        self.inputs = InputBuffer()
        self.runs += 1
        logger.info(
            "Run %d started on %dx%d cells (best so far %d)",
            self.runs, self.grid.cols, self.grid.rows, self.scores.high_score,
        )

    def queue_direction(self, direction) -> bool:
        """Buffer a turn for a later tick. Returns True if it was queued."""
        if not isinstance(direction, Direction):
            logger.debug("Ignored malformed direction %r", direction)
            return False
        if self.phase is not RunPhase.RUNNING:
            return False
        return self.inputs.enqueue(direction)

    def toggle_pause(self) -> bool:
        changed = self.clock.toggle_pause()
        if changed:
            logger.info("Game %s", "paused" if self.phase is RunPhase.PAUSED else "resumed")
        return changed

    def pause(self) -> bool:
        if self.clock.pause():
            logger.info("Game paused")
            return True
        return False

    def resume(self) -> bool:
        if self.clock.resume():
            logger.info("Game resumed")
            return True
        return False

    def update(self, dt_ms: float) -> TickResult:
        """Advance real time by dt_ms. Runs at most one tick."""
        if not self.clock.advance(dt_ms):
            return NO_TICK
        return self.step()

    def step(self) -> TickResult:
        """Run exactly one simulation tick now. No-op once the run is over."""
        if self.phase is RunPhase.GAME_OVER or self.state.over:
            return NO_TICK
        result = tick(self.state, self.grid, self.placer, self.inputs.dequeue_one())
        self.clock.step_ms = self.state.step_ms
        if result.ended:
            self._end_run()
        return result

    def resize(self, grid: Grid) -> None:
        """Swap in a new playfield, carrying the live run over to it."""
        if grid == self.grid:
            return
        old, self.grid = self.grid, grid
        self.placer = FoodPlacer(grid, self.rng)
        # finished runs are shifted as well; their last frame stays on screen
        translate_state(self.state, old, grid, self.placer)
        if self.state.over and self.phase is not RunPhase.GAME_OVER:
            self._end_run()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.state.snake.cells(),
            food=self.state.food,
            direction=self.state.direction,
            score=self.state.score,
            high_score=self.scores.high_score,
            new_record=self.scores.new_record,
            phase=self.phase,
            outcome=self.state.outcome,
            cols=self.grid.cols,
            rows=self.grid.rows,
            cell_size=self.grid.cell_size,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _end_run(self) -> None:
        self.clock.finish()
        self.inputs.clear()
        logger.info(
            "Game over (%s) after %d ticks, score %d",
            self.state.outcome, self.state.ticks, self.state.score,
        )
        self.scores.submit(self.state.score)
