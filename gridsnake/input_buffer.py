"""
input_buffer.py — Direction intents waiting for the next tick.

Input callbacks append at whatever rate events arrive; the model drains
exactly one entry per simulation tick.  A direction equal to the last
queued one is dropped so a held key cannot pile up stale turns.
"""

import threading
from collections import deque
from typing import Iterator, Optional

from .entities import Direction


class InputBuffer:
    """FIFO of pending directions with dedup-on-append."""

    def __init__(self):
        self._queue: deque[Direction] = deque()
        self._lock = threading.Lock()

    def enqueue(self, direction: Direction) -> bool:
        """Append unless it repeats the newest entry. Returns True if queued."""
        with self._lock:
            if self._queue and self._queue[-1] == direction:
                return False
            self._queue.append(direction)
            return True

    def dequeue_one(self) -> Optional[Direction]:
        """Pop the oldest entry, or None when nothing is waiting."""
        with self._lock:
            if not self._queue:
                return None
            return self._queue.popleft()

    def clear(self) -> None:
        with self._lock:
            self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Direction]:
        with self._lock:
            return iter(tuple(self._queue))
