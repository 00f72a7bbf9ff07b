"""
gestures.py — Turn a pointer drag (mouse or finger) into a direction.

Only the dominant axis counts, and only once it has travelled further
than the threshold; shorter or ambiguous drags are taps and produce nothing.
"""

from typing import Optional

from .config import SWIPE_THRESHOLD
from .entities import Direction


def detect_swipe(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD) -> Optional[Direction]:
    if abs(dx) > abs(dy):
        if abs(dx) > threshold:
            return Direction.RIGHT if dx > 0 else Direction.LEFT
    elif abs(dy) > threshold:
        return Direction.DOWN if dy > 0 else Direction.UP
    return None


class SwipeTracker:
    """Remembers where a drag started until it ends."""

    def __init__(self, threshold: float = SWIPE_THRESHOLD):
        self.threshold = threshold
        self._start: Optional[tuple[float, float]] = None

    @property
    def active(self) -> bool:
        return self._start is not None

    def begin(self, x: float, y: float) -> None:
        self._start = (x, y)

    def end(self, x: float, y: float) -> Optional[Direction]:
        if self._start is None:
            return None
        sx, sy = self._start
        self._start = None
        return detect_swipe(x - sx, y - sy, self.threshold)

    def cancel(self) -> None:
        self._start = None
