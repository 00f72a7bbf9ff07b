"""
layout.py — Fit the playfield to the window and carry a live run across resizes.

The playfield keeps the base aspect ratio, uses most of the window, and
is always a whole number of cells.  When its size changes mid-run the
snake is shifted by the move of the grid centre instead of restarting.
"""

import logging
from typing import Optional

from .config import (
    BASE_WIDTH, BASE_HEIGHT, CELL, VIEWPORT_FILL, MIN_GRID_CELLS, OUTCOME_CLEARED,
)
from .entities import GameState
from .food import FoodPlacer
from .grid import Grid
from .sprites import offset

logger = logging.getLogger(__name__)


def fit_playfield(
    viewport_w: int,
    viewport_h: int,
    cell: int = CELL,
    base: tuple[int, int] = (BASE_WIDTH, BASE_HEIGHT),
    fill: float = VIEWPORT_FILL,
) -> tuple[int, int]:
    """Largest cell-aligned (width, height) with the base aspect ratio that fits the viewport."""
    aspect = base[0] / base[1]
    if viewport_h <= 0 or viewport_w / viewport_h > aspect:
        # limited by height
        height = int(viewport_h * fill)
        width = int(height * aspect)
    else:
        # limited by width
        width = int(viewport_w * fill)
        height = int(width / aspect)

    width = (width // cell) * cell
    height = (height // cell) * cell
    floor = MIN_GRID_CELLS * cell
    return max(width, floor), max(height, floor)


def fit_grid(viewport_w: int, viewport_h: int, cell: int = CELL) -> Grid:
    w, h = fit_playfield(viewport_w, viewport_h, cell)
    return Grid(w, h, cell)


def translate_state(
    state: GameState,
    old: Grid,
    new: Grid,
    placer: Optional[FoodPlacer] = None,
) -> tuple[int, int]:
    """
    Shift the head (and the food) by the change in grid centre, folding it
    back onto the new torus, then lay the body out behind the head with the
    same unit steps it had on the old board.
    Returns the (dcol, drow) offset applied.

    Food with nowhere left to go ends the run as cleared.
    """
    (ocx, ocy), (ncx, ncy) = old.center(), new.center()
    dcol, drow = ncx - ocx, ncy - ocy

    old_cells = state.snake.cells()
    hx, hy = old_cells[0]
    moved = [((hx + dcol) % new.cols, (hy + drow) % new.rows)]
    seen = set(moved)
    for prev, cur in zip(old_cells, old_cells[1:]):
        sx, sy = offset(prev, cur)
        px, py = moved[-1]
        cell = ((px + sx) % new.cols, (py + sy) % new.rows)
        if cell in seen:
            # a smaller board folded the body onto itself: keep the part before the overlap
            break
        seen.add(cell)
        moved.append(cell)
    if len(moved) < len(old_cells):
        logger.info("Resize shortened snake from %d to %d cells", len(old_cells), len(moved))
    state.snake.body.clear()
    state.snake.body.extend(moved)

    if state.food is not None:
        food = ((state.food[0] + dcol) % new.cols, (state.food[1] + drow) % new.rows)
        if food in seen:
            placer = placer or FoodPlacer(new)
            food = placer.place(seen)
        state.food = food
        if food is None and not state.over:
            state.outcome = OUTCOME_CLEARED
            logger.info("Resize left no free cell; board cleared with score %d", state.score)

    logger.info("Playfield resized %s -> %s, run shifted by (%d, %d)", old, new, dcol, drow)
    return dcol, drow
