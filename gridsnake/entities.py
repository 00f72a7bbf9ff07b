"""
entities.py — Plain game data, no rules.

Classes:
    Direction   — immutable (dx, dy) value object
    Snake       — ordered body cells, head first
    GameState   — everything one run owns: snake, heading, food, score, speed
"""

from collections import deque
from typing import Iterable, Optional

from .config import INITIAL_LENGTH, INITIAL_STEP_MS
from .grid import Cell, Grid


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int, name: str):
        self.x = x
        self.y = y
        self.name = name

    @property
    def delta(self) -> tuple[int, int]:
        return self.x, self.y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Optional["Direction"]:
        return _BY_DELTA.get((dx, dy))

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name.upper()}"


Direction.LEFT  = Direction(-1,  0, "left")
Direction.RIGHT = Direction( 1,  0, "right")
Direction.UP    = Direction( 0, -1, "up")
Direction.DOWN  = Direction( 0,  1, "down")
ALL_DIRS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

_BY_DELTA = {d.delta: d for d in ALL_DIRS}


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Body cells of the snake, head at index 0.
    Movement rules live in engine.py; this class only stores and answers.
    """

    def __init__(self, cells: Iterable[Cell]):
        self.body: deque[Cell] = deque(cells)
        if not self.body:
            raise ValueError("a snake needs at least one cell")

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def push_head(self, cell: Cell) -> None:
        self.body.appendleft(cell)

    def drop_tail(self) -> Cell:
        return self.body.pop()

    # ── Queries ──────────────────────────────────────────────────
    def occupies(self, cell: Cell) -> bool:
        return cell in self.body

    def cells(self) -> tuple[Cell, ...]:
        return tuple(self.body)


# ─────────────────────────── GameState ───────────────────────────
class GameState:
    """
    The aggregate one run owns.  A restart builds a fresh instance.

    `outcome` stays None while the run is alive and is set exactly once
    by the engine or by a resize with no free cell: "collision" or "cleared".
    """

    def __init__(
        self,
        snake: Snake,
        direction: Direction,
        food: Optional[Cell] = None,
        step_ms: int = INITIAL_STEP_MS,
    ):
        self.snake: Snake = snake
        self.direction: Direction = direction
        self.pending: Direction = direction
        self.food: Optional[Cell] = food
        self.score: int = 0
        self.step_ms: int = step_ms
        self.ticks: int = 0
        self.outcome: Optional[str] = None

    @classmethod
    def new_run(cls, grid: Grid, step_ms: int = INITIAL_STEP_MS) -> "GameState":
        """
        Starting layout: a short snake a quarter of the way across,
        vertically centred, heading right.  Food is placed by the caller.
        """
        start_col, start_row = grid.cols // 4, grid.rows // 2
        length = max(1, min(INITIAL_LENGTH, grid.cols))
        cells = [((start_col - i) % grid.cols, start_row) for i in range(length)]
        return cls(Snake(cells), Direction.RIGHT, step_ms=step_ms)

    @property
    def over(self) -> bool:
        return self.outcome is not None

    def occupied(self) -> set[Cell]:
        return set(self.snake.body)

    def __repr__(self):
        return (
            f"<GameState len={len(self.snake)} dir={self.direction!r} "
            f"food={self.food} score={self.score} step={self.step_ms}ms "
            f"outcome={self.outcome}>"
        )
