from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .models import Phase, Scene


@dataclass(frozen=True)
class MenuRow:
    label: str
    signed: bool
    best: int


@dataclass(frozen=True)
class View:
    """Everything a front end needs to draw one frame."""

    scene: Scene
    phase: Optional[Phase] = None
    mode_label: str = ""
    pattern: str = ""
    suffix: str = ""
    time_remaining: float = 0.0
    budget: float = 0.0
    streak: int = 0
    best_streak: int = 0
    score: int = 0
    lives: int = 0
    max_lives: int = 0
    high_score: int = 0
    entry: str = ""
    input_rejected: bool = False
    feedback: str = ""
    last_target: Optional[int] = None
    last_guess: Optional[int] = None
    last_points: int = 0
    new_high: bool = False
    store_warning: Optional[str] = None
    menu: Tuple[MenuRow, ...] = field(default_factory=tuple)
    menu_selected: int = 0

    @property
    def ratio(self) -> float:
        if self.budget <= 0.0:
            return 0.0
        return max(0.0, min(1.0, self.time_remaining / self.budget))

    @property
    def feedback_line(self) -> str:
        if self.phase not in (Phase.ROUND_WON, Phase.ROUND_LOST, Phase.GAME_OVER):
            return ""
        if self.feedback == "correct":
            return f"correct  +{self.last_points}"
        if self.feedback == "wrong":
            return f"wrong: {self.last_guess}, it was {self.last_target}"
        if self.feedback == "timeout":
            return f"time's up, it was {self.last_target}"
        return ""

    @property
    def game_over_line(self) -> str:
        if self.phase is not Phase.GAME_OVER:
            return ""
        line = f"GAME OVER  score {self.score}  best streak {self.best_streak}"
        return line + ("  NEW HIGH SCORE!" if self.new_high else "")

    @property
    def grouped_pattern(self) -> str:
        return group_nibbles(self.pattern)


def group_nibbles(pattern: str) -> str:
    head = len(pattern) % 4
    parts: List[str] = [pattern[:head]] if head else []
    parts += [pattern[i:i + 4] for i in range(head, len(pattern), 4)]
    return " ".join(parts)


__all__ = ["MenuRow", "View", "group_nibbles"]
