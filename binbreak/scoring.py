from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Dict, Tuple

from .constants import BASE_POINTS, MAX_LIVES, MAX_MULTIPLIER, STREAK_STEP
from .models import BitMode, Correct, GameState, RoundResult

if TYPE_CHECKING:
    from .highscores import ScoreStore


@dataclass(frozen=True)
class ScoringRules:
    base_points: int = BASE_POINTS
    streak_step: float = STREAK_STEP
    max_multiplier: float = MAX_MULTIPLIER
    lives: int = MAX_LIVES

    @classmethod
    def from_settings(cls, s: Dict[str, Any]) -> "ScoringRules":
        return cls(
            base_points=int(s.get("base_points", BASE_POINTS)),
            streak_step=float(s.get("streak_step", STREAK_STEP)),
            max_multiplier=float(s.get("max_multiplier", MAX_MULTIPLIER)),
            lives=int(s.get("lives", MAX_LIVES)),
        )

    def base(self, mode: BitMode) -> int:
        return self.base_points * mode.spec.weight

    def multiplier(self, streak: int) -> float:
        return min(self.max_multiplier, 1.0 + self.streak_step * max(0, streak))

    def points(self, mode: BitMode, streak: int) -> int:
        """Points for a win made while ``streak`` wins were already banked."""
        return int(round(self.base(mode) * self.multiplier(streak)))


class ScoreTracker:
    def __init__(self, rules: ScoringRules | None = None) -> None:
        self.rules = rules or ScoringRules()

    def new_state(self, mode: BitMode, high_score: int = 0) -> GameState:
        return GameState(mode=mode, lives=self.rules.lives, high_score=max(0, int(high_score)))

    def apply(self, result: RoundResult, state: GameState) -> GameState:
        if isinstance(result, Correct):
            streak = state.streak + 1
            return replace(
                state,
                streak=streak,
                best_streak=max(state.best_streak, streak),
                score=state.score + self.rules.points(state.mode, state.streak),
                rounds=state.rounds + 1,
            )
        return replace(
            state,
            streak=0,
            lives=max(0, state.lives - 1),
            rounds=state.rounds + 1,
        )

    @staticmethod
    def is_game_over(state: GameState) -> bool:
        return state.lives == 0

    @staticmethod
    def finalize(state: GameState, store: "ScoreStore") -> Tuple[int, bool]:
        """Offer the final score to the store; returns ``(score, is_new_high)``."""
        is_new = state.score > store.load(state.mode)
        if is_new:
            store.save(state.mode, state.score)
        return state.score, is_new


__all__ = ["ScoringRules", "ScoreTracker"]
