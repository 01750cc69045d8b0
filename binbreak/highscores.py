# binbreak/highscores.py
from __future__ import annotations

import json
import logging
import os
from typing import Dict, Optional, Protocol

from .errors import StoreError
from .models import BitMode

log = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def load(self, mode: BitMode) -> int: ...

    def save(self, mode: BitMode, score: int) -> bool: ...


class HighScoreStore:
    """Best score per mode, kept in a small JSON object such as ``{"8u": 120}``.

    A missing or corrupt file reads as empty. A failed write is logged, kept in
    memory for the rest of the run and exposed through ``warning``; it never
    raises into the game.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self.warning: Optional[str] = None
        self._scores: Optional[Dict[str, int]] = None

    def _read(self) -> Dict[str, int]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            raise StoreError(f"cannot read {self.path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise StoreError(f"{self.path} does not hold a JSON object")
        out: Dict[str, int] = {}
        for k, v in raw.items():
            try:
                out[str(k)] = max(0, int(v))
            except (TypeError, ValueError, OverflowError):
                log.warning("skipping bad high score entry %r=%r", k, v)
        return out

    def _write(self, scores: Dict[str, int]) -> None:
        tmp = self.path + ".tmp"
        try:
            d = os.path.dirname(self.path)
            if d:
                os.makedirs(d, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(scores, f, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except OSError as exc:
            raise StoreError(f"cannot write {self.path}: {exc}") from exc

    def _cache(self) -> Dict[str, int]:
        if self._scores is None:
            try:
                self._scores = self._read()
            except StoreError as exc:
                log.warning("high scores unreadable, starting empty: %s", exc)
                self._scores = {}
        return self._scores

    def load(self, mode: BitMode) -> int:
        return self._cache().get(mode.key, 0)

    def save(self, mode: BitMode, score: int) -> bool:
        """Store ``score`` if it beats the current best; True when it was written."""
        scores = self._cache()
        score = int(score)
        if score <= scores.get(mode.key, 0):
            return False
        scores[mode.key] = score
        try:
            self._write(scores)
        except StoreError as exc:
            log.warning("high score kept in memory only: %s", exc)
            self.warning = "high score not saved (see log)"
            return False
        self.warning = None
        log.info("new high score %d for %s", score, mode.key)
        return True


class MemoryScoreStore:
    def __init__(self, scores: Optional[Dict[str, int]] = None) -> None:
        self.scores: Dict[str, int] = dict(scores or {})
        self.warning: Optional[str] = None

    def load(self, mode: BitMode) -> int:
        return self.scores.get(mode.key, 0)

    def save(self, mode: BitMode, score: int) -> bool:
        if score <= self.scores.get(mode.key, 0):
            return False
        self.scores[mode.key] = int(score)
        return True


__all__ = ["ScoreStore", "HighScoreStore", "MemoryScoreStore"]
