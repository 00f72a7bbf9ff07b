"""Tests for engine.py - one simulation tick."""

import pytest

from gridsnake.engine import NO_TICK, next_step_ms, tick
from gridsnake.entities import Direction
from gridsnake.grid import Grid

from conftest import FixedPlacer, make_state


class TestMovement:
    """Moving without eating translates the snake by one cell."""

    def test_moves_one_cell_and_keeps_length(self, small_grid, placer):
        state = make_state([(1, 1), (0, 1)], food=(3, 3))
        result = tick(state, small_grid, placer)
        assert state.snake.cells() == ((2, 1), (1, 1))
        assert result.advanced and not result.ate
        assert result.head == (2, 1)
        assert state.score == 0

    def test_wraps_left_edge(self):
        grid = Grid(1400, 800, 25)
        state = make_state([(0, 0), (1, 0)], direction=Direction.LEFT, food=(10, 10))
        tick(state, grid, FixedPlacer())
        assert state.snake.head == (55, 0)
        assert grid.to_pixels(state.snake.head) == (1375, 0)

    def test_wraps_bottom_edge(self, small_grid, placer):
        state = make_state([(1, 3), (1, 2)], direction=Direction.DOWN, food=(3, 0))
        tick(state, small_grid, placer)
        assert state.snake.head == (1, 0)

    def test_counts_ticks(self, small_grid, placer):
        state = make_state([(1, 1)], food=(3, 3))
        tick(state, small_grid, placer)
        tick(state, small_grid, placer)
        assert state.ticks == 2


class TestSteering:
    """Buffered turns are applied unless they reverse the snake."""

    def test_buffered_turn_applied(self, small_grid, placer):
        state = make_state([(1, 1), (0, 1)], food=(3, 3))
        tick(state, small_grid, placer, Direction.DOWN)
        assert state.direction == Direction.DOWN
        assert state.snake.head == (1, 2)

    def test_reversal_is_ignored(self, small_grid, placer):
        state = make_state([(1, 1), (0, 1)], food=(3, 3))
        result = tick(state, small_grid, placer, Direction.LEFT)
        assert state.direction == Direction.RIGHT
        assert state.snake.head == (2, 1)
        assert not result.collided

    def test_head_never_moves_onto_neck(self, small_grid, placer):
        for direction, cells in [
            (Direction.RIGHT, [(1, 1), (0, 1)]),
            (Direction.LEFT, [(1, 1), (2, 1)]),
            (Direction.UP, [(1, 1), (1, 2)]),
            (Direction.DOWN, [(1, 1), (1, 0)]),
        ]:
            state = make_state(cells, direction=direction, food=(3, 3))
            neck = state.snake.body[1]
            opposite = Direction.from_delta(-direction.x, -direction.y)
            tick(state, small_grid, placer, opposite)
            assert state.snake.head != neck


class TestEating:

    def test_scenario_eat_on_4x4(self, small_grid, placer):
        """Head lands on food: grow by one, score +1, new food off the snake."""
        state = make_state([(2, 2), (1, 2), (0, 2)], food=(3, 2))
        result = tick(state, small_grid, placer)
        assert state.snake.cells() == ((3, 2), (2, 2), (1, 2), (0, 2))
        assert state.score == 1
        assert result.ate
        assert state.food is not None
        assert state.food not in {(3, 2), (2, 2), (1, 2), (0, 2)}

    def test_placer_sees_every_snake_cell(self, small_grid):
        placer = FixedPlacer((0, 0))
        state = make_state([(2, 2), (1, 2)], food=(3, 2))
        tick(state, small_grid, placer)
        assert placer.calls == [{(3, 2), (2, 2), (1, 2)}]
        assert state.food == (0, 0)

    def test_speed_up_on_interval(self, small_grid):
        state = make_state([(1, 1), (0, 1)], food=(2, 1), step_ms=100)
        state.score = 4
        result = tick(state, small_grid, FixedPlacer((3, 3)))
        assert state.score == 5
        assert state.step_ms == 95
        assert result.sped_up

    def test_no_speed_up_off_interval(self, small_grid):
        state = make_state([(1, 1), (0, 1)], food=(2, 1), step_ms=100)
        state.score = 1
        result = tick(state, small_grid, FixedPlacer((3, 3)))
        assert state.step_ms == 100
        assert not result.sped_up

    def test_full_board_ends_run_as_cleared(self):
        grid = Grid(2, 1, 1)
        state = make_state([(0, 0)], food=(1, 0))
        result = tick(state, grid, FixedPlacer())
        assert result.ate and result.cleared and result.ended
        assert state.outcome == "cleared"
        assert state.food is None
        assert len(state.snake) == 2


class TestNextStep:

    @pytest.mark.parametrize("score,step,expected", [
        (5, 100, 95),
        (65, 40, 40),
        (10, 42, 40),
        (4, 100, 100),
        (0, 100, 100),
    ])
    def test_next_step_ms(self, score, step, expected):
        assert next_step_ms(score, step) == expected


class TestCollision:
    """Self-collision ends the run once and freezes the state."""

    def _looped_state(self):
        # head at (1,1) travelling up, body curls round to the right of it
        return make_state(
            [(1, 1), (1, 2), (2, 2), (2, 1), (3, 1), (3, 0)],
            direction=Direction.UP, food=(0, 3),
        )

    def test_turning_into_body_is_game_over(self, small_grid, placer):
        state = self._looped_state()
        before = state.snake.cells()
        result = tick(state, small_grid, placer, Direction.RIGHT)
        assert result.collided and result.ended
        assert state.outcome == "collision"
        assert state.snake.cells() == before
        assert state.score == 0

    def test_second_tick_is_noop(self, small_grid, placer):
        state = self._looped_state()
        tick(state, small_grid, placer, Direction.RIGHT)
        snake, food, score = state.snake.cells(), state.food, state.score
        result = tick(state, small_grid, placer, Direction.DOWN)
        assert result is NO_TICK
        assert (state.snake.cells(), state.food, state.score) == (snake, food, score)

    def test_tail_cell_counts_as_body(self, small_grid, placer):
        state = make_state([(1, 1), (1, 2), (2, 2), (2, 1)], direction=Direction.UP, food=(3, 3))
        result = tick(state, small_grid, placer, Direction.RIGHT)
        assert result.collided
