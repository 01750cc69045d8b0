from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Optional

from .challenge import ChallengeGenerator
from .constants import FEEDBACK_SEC
from .enums import Action
from .highscores import ScoreStore
from .models import (
    BitMode,
    Challenge,
    Correct,
    Incorrect,
    InputEvent,
    Phase,
    RoundResult,
    Scene,
    TimedOut,
)
from .scoring import ScoreTracker, ScoringRules
from .timer import DifficultyCurve, RoundTimer
from .view import View

log = logging.getLogger(__name__)

REJECT_FLASH_SEC = 0.3


class RoundEngine:
    """One play session in a single mode.

    The engine owns the ``GameState`` and is the only thing that replaces it.
    Per-round outcomes are ``RoundResult`` values; nothing raises out of
    ``handle`` or ``advance``.
    """

    def __init__(
        self,
        mode: BitMode,
        *,
        store: ScoreStore,
        settings: Optional[Dict[str, Any]] = None,
        generator: Optional[ChallengeGenerator] = None,
        tracker: Optional[ScoreTracker] = None,
        curve: Optional[DifficultyCurve] = None,
    ) -> None:
        s = settings or {}
        self.mode = mode
        self.store = store
        self.generator = generator or ChallengeGenerator()
        self.tracker = tracker or ScoreTracker(ScoringRules.from_settings(s))
        self.curve = (curve or DifficultyCurve.from_settings(s)).for_mode(mode)
        self.feedback_sec = float(s.get("feedback_sec", FEEDBACK_SEC))

        self.phase = Phase.AWAITING_START
        self.state = self.tracker.new_state(mode)
        self.timer = RoundTimer()
        self.challenge: Optional[Challenge] = None
        self.last_challenge: Optional[Challenge] = None
        self.entry = ""
        self.result: Optional[RoundResult] = None
        self.last_points = 0
        self.input_rejected = False
        self._reject_left = 0.0
        self._feedback_left = 0.0
        self.finalized = False
        self.is_new_high = False
        # bumped whenever a round is seeded
        self.round_serial = 0

    # ---- Lifecycle ----

    def start(self) -> None:
        if self.phase not in (Phase.AWAITING_START, Phase.GAME_OVER):
            return
        self.state = self.tracker.new_state(self.mode, high_score=self.store.load(self.mode))
        self.result = None
        self.last_points = 0
        self.finalized = False
        self.is_new_high = False
        log.info("session start: %s (best %d)", self.mode.key, self.state.high_score)
        self._new_round()

    def quit(self) -> None:
        """Leave the session; an unfinished round is dropped without scoring."""
        self.timer.stop()
        self.challenge = None
        self.entry = ""
        if self.phase is not Phase.GAME_OVER and self.state.score > 0:
            self._finalize()
        self.phase = Phase.AWAITING_START

    # ---- Transitions ----

    def _new_round(self) -> None:
        self.round_serial += 1
        self.challenge = self.generator.next(self.mode)
        self.entry = ""
        self.input_rejected = False
        budget = self.curve.budget(self.state.streak)
        self.timer.start(budget)
        self.state = replace(self.state, budget=budget, time_remaining=budget)
        self.phase = Phase.CHALLENGE_ACTIVE

    def _evaluate(self, guess: Optional[int]) -> None:
        assert self.challenge is not None
        self.phase = Phase.EVALUATING
        self.timer.stop()
        target = self.challenge.target
        if guess is None:
            result: RoundResult = TimedOut(target)
        elif guess == target:
            result = Correct(target)
        else:
            result = Incorrect(target, guess)

        before = self.state.score
        self.state = self.tracker.apply(result, self.state)
        self.last_points = self.state.score - before
        self.result = result
        self.last_challenge, self.challenge = self.challenge, None

        if isinstance(result, Correct):
            self.phase = Phase.ROUND_WON
        elif self.tracker.is_game_over(self.state):
            self._game_over()
            return
        else:
            self.phase = Phase.ROUND_LOST
        self._feedback_left = self.feedback_sec

    def _game_over(self) -> None:
        self.phase = Phase.GAME_OVER
        self._finalize()
        log.info(
            "game over: %s score=%d best_streak=%d new_high=%s",
            self.mode.key, self.state.score, self.state.best_streak, self.is_new_high,
        )

    def _finalize(self) -> None:
        if self.finalized:
            return
        self.finalized = True
        _, self.is_new_high = self.tracker.finalize(self.state, self.store)
        if self.is_new_high:
            self.state = replace(self.state, high_score=self.state.score)

    # ---- Input ----

    def handle(self, event: InputEvent) -> None:
        if self.phase is Phase.CHALLENGE_ACTIVE:
            self._handle_entry(event)
        elif self.phase in (Phase.ROUND_WON, Phase.ROUND_LOST):
            if event.action is Action.CONFIRM:
                self._new_round()
        elif self.phase is Phase.GAME_OVER:
            if event.action is Action.CONFIRM:
                self.start()

    def _digits(self) -> str:
        return self.entry.lstrip("-")

    def _reject(self) -> None:
        self.input_rejected = True
        self._reject_left = REJECT_FLASH_SEC

    def _handle_entry(self, event: InputEvent) -> None:
        if event.action is Action.CONFIRM:
            if self._digits():
                self._evaluate(int(self.entry))
            return
        if event.action is Action.BACKSPACE:
            if self._digits():
                self.entry = self.entry[:-1]
            else:
                self.entry = ""
            return
        if event.action is not Action.CHAR or not event.char:
            return

        ch = event.char
        if ch.isdigit() and len(ch) == 1 and ch.isascii():
            if len(self._digits()) >= self.mode.max_digits:
                self._reject()
                return
            self.entry += ch
            self.input_rejected = False
        elif ch == "-" and self.mode.signed:
            self.entry = self._digits() if self.entry.startswith("-") else "-" + self.entry
            self.input_rejected = False
        else:
            self._reject()

    # ---- Clock ----

    def advance(self, elapsed: float) -> None:
        if self._reject_left > 0.0:
            self._reject_left -= elapsed
            if self._reject_left <= 0.0:
                self.input_rejected = False

        if self.phase is Phase.CHALLENGE_ACTIVE:
            tick = self.timer.tick(elapsed)
            self.state = replace(self.state, time_remaining=tick.remaining)
            if tick.timed_out:
                self._evaluate(None)
        elif self.phase in (Phase.ROUND_WON, Phase.ROUND_LOST):
            self._feedback_left -= elapsed
            if self._feedback_left <= 0.0:
                self._new_round()

    # ---- View ----

    def view(self) -> View:
        st = self.state
        target = guess = None
        feedback = ""
        shown = self.challenge or self.last_challenge
        if isinstance(self.result, Correct):
            feedback, target = "correct", self.result.target
        elif isinstance(self.result, Incorrect):
            feedback, target, guess = "wrong", self.result.target, self.result.guess
        elif isinstance(self.result, TimedOut):
            feedback, target = "timeout", self.result.target
        return View(
            scene=Scene.PLAYING,
            phase=self.phase,
            mode_label=self.mode.label,
            pattern=shown.pattern if shown else "",
            suffix=self.mode.suffix,
            time_remaining=st.time_remaining,
            budget=st.budget,
            streak=st.streak,
            best_streak=st.best_streak,
            score=st.score,
            lives=st.lives,
            max_lives=self.tracker.rules.lives,
            high_score=max(st.high_score, st.score),
            entry=self.entry,
            input_rejected=self.input_rejected,
            feedback=feedback,
            last_target=target,
            last_guess=guess,
            last_points=self.last_points,
            new_high=self.is_new_high,
            store_warning=getattr(self.store, "warning", None),
        )


__all__ = ["RoundEngine"]
