"""
scores.py — Best-score bookkeeping over a tiny key-value store.

Persistence is best effort: an unreadable store means "no prior best",
and a failed write is logged and forgotten.  Neither ever interrupts play.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

from .config import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Process-local store; used by tests and when no file is configured."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)


class JsonFileStore:
    """Keeps all keys in one JSON object on disk."""

    def __init__(self, path):
        self.path = Path(path).expanduser()

    def _read(self) -> dict:
        if not self.path.is_file():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except ValueError:
            # json.JSONDecodeError is a ValueError; a corrupt file gets replaced.
            data = {}
        data[key] = str(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


class ScoreKeeper:
    """Reads the stored best at run start and writes it back when beaten."""

    def __init__(self, store: KeyValueStore, key: str = HIGH_SCORE_KEY):
        self.store = store
        self.key = key
        self.high_score: int = 0
        self.new_record: bool = False

    def load(self) -> int:
        self.new_record = False
        try:
            raw = self.store.get(self.key)
            self.high_score = max(0, int(raw)) if raw else 0
        except (OSError, ValueError) as exc:
            logger.warning("Could not read high score (%s); starting from 0", exc)
            self.high_score = 0
        return self.high_score

    def submit(self, score: int) -> bool:
        """Record a finished run's score. Returns True if it set a new best."""
        if score <= self.high_score:
            return False
        self.high_score = score
        self.new_record = True
        logger.info("New high score: %d", score)
        try:
            self.store.set(self.key, str(score))
        except OSError as exc:
            logger.warning("Could not save high score %d: %s", score, exc)
        return True
