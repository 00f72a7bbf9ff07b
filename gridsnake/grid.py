"""
grid.py — Discrete toroidal coordinate space.

A Grid is built from pixel dimensions and a cell size, exactly like the
playfield surface it describes.  Positions inside the simulation are cells
(col, row); pixel space is only needed by the view and the layout fit.
"""

from typing import Iterator

Cell = tuple[int, int]


class Grid:
    """Fixed-size playfield of `cols` × `rows` cells that wraps at every edge."""

    def __init__(self, width: int, height: int, cell_size: int):
        if cell_size <= 0:
            raise ValueError(f"cell size must be positive, got {cell_size}")
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        if width % cell_size or height % cell_size:
            raise ValueError(
                f"grid {width}x{height} is not a multiple of cell size {cell_size}"
            )
        self.width = width
        self.height = height
        self.cell_size = cell_size

    # ── Dimensions ───────────────────────────────────────────────
    @property
    def cols(self) -> int:
        return self.width // self.cell_size

    @property
    def rows(self) -> int:
        return self.height // self.cell_size

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.cols * self.rows

    # ── Wrap-around ──────────────────────────────────────────────
    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """
        Map a pixel coordinate onto the torus.
        Leaving past one edge re-enters on the last cell of the opposite edge.
        """
        if x < 0:
            x = self.width - self.cell_size
        elif x >= self.width:
            x = 0
        if y < 0:
            y = self.height - self.cell_size
        elif y >= self.height:
            y = 0
        return x, y

    def wrap_cell(self, col: int, row: int) -> Cell:
        """Same rule as wrap(), expressed in cells."""
        x, y = self.wrap(col * self.cell_size, row * self.cell_size)
        return x // self.cell_size, y // self.cell_size

    # ── Queries ──────────────────────────────────────────────────
    def contains(self, cell: Cell) -> bool:
        col, row = cell
        return 0 <= col < self.cols and 0 <= row < self.rows

    def cells(self) -> Iterator[Cell]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield col, row

    def center(self) -> Cell:
        return self.cols // 2, self.rows // 2

    def to_pixels(self, cell: Cell) -> tuple[int, int]:
        return cell[0] * self.cell_size, cell[1] * self.cell_size

    def __eq__(self, other):
        return (
            isinstance(other, Grid)
            and (self.width, self.height, self.cell_size)
            == (other.width, other.height, other.cell_size)
        )

    def __hash__(self):
        return hash((self.width, self.height, self.cell_size))

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, cell={self.cell_size})"
