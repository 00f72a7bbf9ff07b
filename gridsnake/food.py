"""
food.py — Picks a free cell for the next food item.

Sparse boards use plain rejection sampling.  Once the occupied share
passes `dense_threshold` it switches to a shuffled free-list, so a long
snake never makes placement spin.  A completely full board yields None.
"""

import random
from typing import Collection, Optional

from .config import DENSE_BOARD
from .grid import Cell, Grid


class FoodPlacer:
    def __init__(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        dense_threshold: float = DENSE_BOARD,
    ):
        self.grid = grid
        self.rng = rng or random.Random()
        self.dense_threshold = dense_threshold

    def place(self, occupied: Collection[Cell]) -> Optional[Cell]:
        """Return a uniformly chosen cell not in `occupied`, or None if none is free."""
        blocked = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
        taken = sum(1 for cell in blocked if self.grid.contains(cell))
        if taken >= self.grid.size:
            return None
        if taken / self.grid.size > self.dense_threshold:
            return self._from_free_list(blocked)
        return self._by_rejection(blocked)

    # ── Strategies ───────────────────────────────────────────────
    def _by_rejection(self, blocked: Collection[Cell]) -> Cell:
        cols, rows = self.grid.cols, self.grid.rows
        while True:
            pos = (self.rng.randrange(cols), self.rng.randrange(rows))
            if pos not in blocked:
                return pos

    def _from_free_list(self, blocked: Collection[Cell]) -> Cell:
        free = [cell for cell in self.grid.cells() if cell not in blocked]
        self.rng.shuffle(free)
        return free[0]
