"""Tests for input_buffer.py - direction queue with dedup."""

import random

from gridsnake.entities import ALL_DIRS, Direction
from gridsnake.input_buffer import InputBuffer


class TestInputBuffer:

    def test_dequeue_on_empty_returns_none(self):
        assert InputBuffer().dequeue_one() is None

    def test_fifo_order(self):
        buf = InputBuffer()
        buf.enqueue(Direction.UP)
        buf.enqueue(Direction.LEFT)
        assert buf.dequeue_one() == Direction.UP
        assert buf.dequeue_one() == Direction.LEFT
        assert buf.dequeue_one() is None

    def test_repeat_of_last_entry_is_dropped(self):
        buf = InputBuffer()
        assert buf.enqueue(Direction.UP) is True
        assert buf.enqueue(Direction.UP) is False
        assert buf.enqueue(Direction.LEFT) is True
        assert buf.enqueue(Direction.LEFT) is False
        assert buf.enqueue(Direction.UP) is True
        assert list(buf) == [Direction.UP, Direction.LEFT, Direction.UP]

    def test_same_direction_allowed_again_after_drain(self):
        buf = InputBuffer()
        buf.enqueue(Direction.DOWN)
        buf.dequeue_one()
        assert buf.enqueue(Direction.DOWN) is True

    def test_never_holds_two_consecutive_equal_entries(self):
        rng = random.Random(7)
        buf = InputBuffer()
        for _ in range(500):
            buf.enqueue(rng.choice(ALL_DIRS))
            if rng.random() < 0.2:
                buf.dequeue_one()
            items = list(buf)
            assert all(a != b for a, b in zip(items, items[1:]))

    def test_clear(self):
        buf = InputBuffer()
        buf.enqueue(Direction.UP)
        buf.clear()
        assert len(buf) == 0
