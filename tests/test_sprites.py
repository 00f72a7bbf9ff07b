"""Tests for sprites.py - segment shape selection."""

import pytest

from gridsnake.entities import Direction
from gridsnake.sprites import (
    BODY_SHAPES, SHAPE_SIDES, body_shape, head_key, offset, segment_shapes, tail_key,
)


class TestBodyShape:

    @pytest.mark.parametrize("prev,nxt,expected", [
        ((1, 0), (1, 2), "vertical"),
        ((0, 1), (2, 1), "horizontal"),
        ((1, 2), (0, 1), "bottomleft"),
        ((0, 1), (1, 2), "bottomleft"),
        ((1, 2), (2, 1), "bottomright"),
        ((2, 1), (1, 2), "bottomright"),
        ((1, 0), (0, 1), "topleft"),
        ((0, 1), (1, 0), "topleft"),
        ((1, 0), (2, 1), "topright"),
        ((2, 1), (1, 0), "topright"),
    ])
    def test_shape_around_center_cell(self, prev, nxt, expected):
        assert body_shape(prev, (1, 1), nxt) == expected

    def test_table_covers_all_eight_corner_orders(self):
        corners = [k for k, v in BODY_SHAPES.items() if v not in ("vertical", "horizontal")]
        assert len(corners) == 8

    def test_every_shape_has_sides(self):
        assert set(BODY_SHAPES.values()) == set(SHAPE_SIDES)

    def test_neighbour_across_wrapped_edge(self):
        # body at column 0, head wrapped round to the last column
        assert offset((0, 3), (9, 3)) == (-1, 0)
        assert body_shape((9, 3), (0, 3), (1, 3)) == "horizontal"

    def test_unknown_pair_falls_back_to_horizontal(self):
        assert body_shape((1, 1), (1, 1), (1, 1)) == "horizontal"


class TestHeadAndTail:

    def test_head_key_follows_heading(self):
        assert head_key(Direction.UP) == "up"
        assert head_key(Direction.LEFT) == "left"

    def test_tail_points_away_from_body(self):
        assert tail_key((2, 2), (1, 2)) == "left"
        assert tail_key((2, 2), (2, 3)) == "down"

    def test_segment_shapes_for_bent_snake(self):
        cells = [(2, 2), (1, 2), (1, 3)]
        assert segment_shapes(cells, Direction.RIGHT) == [
            ("head", "right"),
            ("body", "bottomright"),
            ("tail", "down"),
        ]

    def test_single_cell_snake_is_only_a_head(self):
        assert segment_shapes([(0, 0)], Direction.DOWN) == [("head", "down")]
