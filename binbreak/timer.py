from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .constants import BUDGET_INITIAL, BUDGET_MIN, BUDGET_PER_BIT, BUDGET_STEP
from .models import BitMode


@dataclass(frozen=True)
class DifficultyCurve:
    """Per-round time budget as a function of the current streak.

    Linear decay from ``initial_sec`` by ``step_sec`` per streak step, clamped
    at ``floor_sec``. Wider patterns get ``per_bit_sec`` extra for every bit
    above four.
    """

    initial_sec: float = BUDGET_INITIAL
    step_sec: float = BUDGET_STEP
    floor_sec: float = BUDGET_MIN
    per_bit_sec: float = BUDGET_PER_BIT
    width: int = 4

    def __post_init__(self) -> None:
        if self.step_sec > 0:
            raise ValueError("step_sec must not be positive")
        if self.floor_sec <= 0:
            raise ValueError("floor_sec must be positive")

    @classmethod
    def from_settings(cls, s: Dict[str, Any]) -> "DifficultyCurve":
        return cls(
            initial_sec=float(s.get("budget_initial", BUDGET_INITIAL)),
            step_sec=float(s.get("budget_step", BUDGET_STEP)),
            floor_sec=float(s.get("budget_min", BUDGET_MIN)),
            per_bit_sec=float(s.get("budget_per_bit", BUDGET_PER_BIT)),
        )

    def for_mode(self, mode: BitMode) -> "DifficultyCurve":
        return DifficultyCurve(self.initial_sec, self.step_sec, self.floor_sec, self.per_bit_sec, mode.width)

    def budget(self, streak: int) -> float:
        start = self.initial_sec + self.per_bit_sec * max(0, self.width - 4)
        return max(self.floor_sec, start + self.step_sec * max(0, int(streak)))


@dataclass(frozen=True)
class Tick:
    remaining: float
    timed_out: bool = False


class RoundTimer:
    def __init__(self) -> None:
        self.budget = 0.0
        self.remaining = 0.0
        self.running = False
        self._fired = False

    def start(self, seconds: float) -> None:
        self.budget = max(0.0, float(seconds))
        self.remaining = self.budget
        self.running = self.remaining > 0.0
        self._fired = False

    def stop(self) -> None:
        self.running = False

    def tick(self, elapsed: float) -> Tick:
        if not self.running:
            return Tick(self.remaining)
        self.remaining = max(0.0, self.remaining - max(0.0, float(elapsed)))
        if self.remaining <= 0.0:
            self.running = False
            if not self._fired:
                self._fired = True
                return Tick(0.0, timed_out=True)
        return Tick(self.remaining)


__all__ = ["DifficultyCurve", "Tick", "RoundTimer"]
