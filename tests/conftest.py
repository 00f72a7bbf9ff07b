"""Shared fixtures for the gridsnake test suite."""

import random

import pytest

from gridsnake.entities import Direction, GameState, Snake
from gridsnake.food import FoodPlacer
from gridsnake.grid import Grid


class FixedPlacer:
    """Food placer that hands out a scripted sequence of cells."""

    def __init__(self, *cells):
        self.cells = list(cells)
        self.calls = []

    def place(self, occupied):
        self.calls.append(set(occupied))
        return self.cells.pop(0) if self.cells else None


class RecordingStore:
    """In-memory key-value store that counts writes."""

    def __init__(self, initial=None):
        self.data = dict(initial or {})
        self.writes = []

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.writes.append((key, value))
        self.data[key] = value


def make_state(cells, direction=Direction.RIGHT, food=None, step_ms=100):
    return GameState(Snake(cells), direction, food=food, step_ms=step_ms)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def small_grid():
    """4x4 cells, one pixel each."""
    return Grid(4, 4, 1)


@pytest.fixture
def placer(small_grid, rng):
    return FoodPlacer(small_grid, rng)
