"""
sprites.py — Which segment shape to draw where.

Every body segment sits between a neighbour toward the head and a
neighbour toward the tail.  The pair of unit offsets to those neighbours
picks one of six shapes; straight pieces and the eight corner orders are
a plain table lookup.  Offsets across a wrapped edge are folded back to
unit length first.
"""

from typing import Optional

from .entities import Direction
from .grid import Cell

VERTICAL, HORIZONTAL = "vertical", "horizontal"
TOP_LEFT, TOP_RIGHT = "topleft", "topright"
BOTTOM_LEFT, BOTTOM_RIGHT = "bottomleft", "bottomright"

_UP, _DOWN, _LEFT, _RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# (offset to head-side neighbour, offset to tail-side neighbour) -> shape
BODY_SHAPES: dict[tuple[tuple[int, int], tuple[int, int]], str] = {
    (_UP, _DOWN):     VERTICAL,
    (_DOWN, _UP):     VERTICAL,
    (_LEFT, _RIGHT):  HORIZONTAL,
    (_RIGHT, _LEFT):  HORIZONTAL,
    (_DOWN, _LEFT):   BOTTOM_LEFT,
    (_LEFT, _DOWN):   BOTTOM_LEFT,
    (_DOWN, _RIGHT):  BOTTOM_RIGHT,
    (_RIGHT, _DOWN):  BOTTOM_RIGHT,
    (_UP, _LEFT):     TOP_LEFT,
    (_LEFT, _UP):     TOP_LEFT,
    (_UP, _RIGHT):    TOP_RIGHT,
    (_RIGHT, _UP):    TOP_RIGHT,
}

# Sides of the cell each shape connects to.
SHAPE_SIDES: dict[str, tuple[str, str]] = {
    VERTICAL:     ("up", "down"),
    HORIZONTAL:   ("left", "right"),
    BOTTOM_LEFT:  ("down", "left"),
    BOTTOM_RIGHT: ("down", "right"),
    TOP_LEFT:     ("up", "left"),
    TOP_RIGHT:    ("up", "right"),
}


def _fold(d: int) -> int:
    # a jump of more than one cell means the neighbour is across a wrapped edge
    if d > 1:
        return -1
    if d < -1:
        return 1
    return d


def offset(src: Cell, dst: Cell) -> tuple[int, int]:
    """Unit offset from `src` to its grid neighbour `dst`, wrap-aware."""
    return _fold(dst[0] - src[0]), _fold(dst[1] - src[1])


def body_shape(prev: Cell, current: Cell, nxt: Cell) -> str:
    """Shape for `current`, given its head-side `prev` and tail-side `nxt`."""
    return BODY_SHAPES.get((offset(current, prev), offset(current, nxt)), HORIZONTAL)


def head_key(direction: Direction) -> str:
    return direction.name


def tail_key(before_tail: Cell, tail: Cell) -> str:
    """Way the tail tip points: away from the segment before it."""
    facing: Optional[Direction] = Direction.from_delta(*offset(before_tail, tail))
    return facing.name if facing else Direction.RIGHT.name


def segment_shapes(cells: list[Cell], heading: Direction) -> list[tuple[str, str]]:
    """
    ("head" | "body" | "tail", shape-or-direction) for every cell, head first.
    A one-cell snake is just a head.
    """
    shapes = [("head", head_key(heading))]
    for i in range(1, len(cells) - 1):
        shapes.append(("body", body_shape(cells[i - 1], cells[i], cells[i + 1])))
    if len(cells) > 1:
        shapes.append(("tail", tail_key(cells[-2], cells[-1])))
    return shapes
