"""
clock.py — Fixed-step timing, decoupled from the render rate.

The controller feeds real elapsed milliseconds every frame.  The clock
answers "is a simulation tick due?" at most once per frame, so a slow
frame never triggers a burst of catch-up ticks.
"""

import enum

from .config import INITIAL_STEP_MS


class RunPhase(enum.Enum):
    RUNNING   = "running"
    PAUSED    = "paused"
    GAME_OVER = "over"


class GameClock:
    """
    Accumulator + phase state machine.

        RUNNING  <-- toggle_pause / resume -->  PAUSED
           \\______________ finish() ______________/
                              v
                          GAME_OVER   (terminal; a restart builds a new clock)
    """

    def __init__(self, step_ms: float = INITIAL_STEP_MS):
        if step_ms <= 0:
            raise ValueError(f"step duration must be positive, got {step_ms}")
        self.step_ms: float = step_ms
        self.accumulated: float = 0.0
        self.phase: RunPhase = RunPhase.RUNNING

    # ── Phase transitions ────────────────────────────────────────
    def pause(self) -> bool:
        if self.phase is RunPhase.RUNNING:
            self.phase = RunPhase.PAUSED
            return True
        return False

    def resume(self) -> bool:
        if self.phase is RunPhase.PAUSED:
            self.phase = RunPhase.RUNNING
            return True
        return False

    def toggle_pause(self) -> bool:
        """Flip between RUNNING and PAUSED. Returns False once the game is over."""
        return self.pause() or self.resume()

    def finish(self) -> None:
        self.phase = RunPhase.GAME_OVER

    @property
    def running(self) -> bool:
        return self.phase is RunPhase.RUNNING

    # ── Time ─────────────────────────────────────────────────────
    def advance(self, dt_ms: float) -> bool:
        """
        Add `dt_ms` of real time.  Returns True when exactly one tick is due.
        Whole steps beyond the one consumed are dropped, the fractional
        remainder is kept so cadence stays even.
        """
        if self.phase is not RunPhase.RUNNING or dt_ms <= 0:
            return False
        self.accumulated += dt_ms
        if self.accumulated < self.step_ms:
            return False
        self.accumulated -= self.step_ms
        if self.accumulated >= self.step_ms:
            self.accumulated %= self.step_ms
        return True
