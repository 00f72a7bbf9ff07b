"""
engine.py — One fixed simulation step.

tick() is the only place game rules live: turning, wrap-around,
self-collision, eating, growth and speed-up.  It mutates the GameState it
is handed and reports what happened; it never touches timing, input
devices, persistence or rendering.
"""

import logging
from typing import NamedTuple, Optional

from .config import (
    SCORE_INCREMENT, SPEED_INTERVAL, STEP_DECREMENT, MIN_STEP_MS,
    OUTCOME_COLLISION, OUTCOME_CLEARED,
)
from .entities import Direction, GameState
from .food import FoodPlacer
from .grid import Cell, Grid

logger = logging.getLogger(__name__)


class TickResult(NamedTuple):
    advanced: bool = False
    ate: bool = False
    collided: bool = False
    cleared: bool = False
    sped_up: bool = False
    head: Optional[Cell] = None

    @property
    def ended(self) -> bool:
        return self.collided or self.cleared


NO_TICK = TickResult()


def next_step_ms(score: int, step_ms: int) -> int:
    """Step duration after reaching `score`: shorter on every interval, never below the floor."""
    if score > 0 and score % SPEED_INTERVAL == 0 and step_ms > MIN_STEP_MS:
        return max(MIN_STEP_MS, step_ms - STEP_DECREMENT)
    return step_ms


def steer(state: GameState, buffered: Optional[Direction]) -> None:
    """Accept a buffered turn unless it reverses straight back onto the neck."""
    if buffered is None:
        return
    if buffered.is_opposite(state.direction):
        logger.debug("Ignored reversal %r while heading %r", buffered, state.direction)
        return
    state.pending = buffered


def tick(
    state: GameState,
    grid: Grid,
    placer: FoodPlacer,
    buffered: Optional[Direction] = None,
) -> TickResult:
    """Advance `state` by one cell. A finished state is left untouched."""
    if state.over:
        return NO_TICK

    steer(state, buffered)
    state.direction = state.pending

    hx, hy = state.snake.head
    new_head = grid.wrap_cell(hx + state.direction.x, hy + state.direction.y)

    if state.snake.occupies(new_head):
        state.outcome = OUTCOME_COLLISION
        logger.info("Snake hit itself at %s with score %d", new_head, state.score)
        return TickResult(advanced=True, collided=True, head=new_head)

    state.ticks += 1
    state.snake.push_head(new_head)

    if new_head != state.food:
        state.snake.drop_tail()
        return TickResult(advanced=True, head=new_head)

    state.score += SCORE_INCREMENT
    new_step = next_step_ms(state.score, state.step_ms)
    sped_up = new_step != state.step_ms
    if sped_up:
        logger.debug("Speed-up at score %d: %dms -> %dms", state.score, state.step_ms, new_step)
        state.step_ms = new_step

    state.food = placer.place(state.occupied())
    if state.food is None:
        state.outcome = OUTCOME_CLEARED
        logger.info("Board cleared with score %d", state.score)
    return TickResult(
        advanced=True, ate=True, cleared=state.food is None,
        sped_up=sped_up, head=new_head,
    )
