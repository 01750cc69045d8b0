"""Tests for points, lives and the final high-score offer."""

from binbreak.models import BitMode, Bits, Correct, Incorrect, TimedOut
from binbreak.scoring import ScoreTracker, ScoringRules

from conftest import RecordingStore

EASY = BitMode(Bits.FOUR)
NORMAL = BitMode(Bits.EIGHT)


class TestScoringRules:

    def test_first_win_pays_base(self):
        rules = ScoringRules(base_points=10)
        assert rules.points(EASY, 0) == 10
        assert rules.points(NORMAL, 0) == 20

    def test_streak_raises_multiplier_up_to_cap(self):
        rules = ScoringRules(base_points=10, streak_step=0.5, max_multiplier=2.0)
        assert rules.points(EASY, 1) == 15
        assert rules.points(EASY, 2) == 20
        assert rules.points(EASY, 50) == 20

    def test_from_settings(self, settings):
        rules = ScoringRules.from_settings(dict(settings, lives=5, base_points=3))
        assert rules.lives == 5
        assert rules.base(EASY) == 3


class TestScoreTracker:

    def test_correct_banks_points_and_streak(self):
        tracker = ScoreTracker(ScoringRules(base_points=10, streak_step=0.25))
        st = tracker.new_state(EASY)
        st = tracker.apply(Correct(3), st)
        st = tracker.apply(Correct(5), st)
        assert st.streak == 2 and st.best_streak == 2
        assert st.score == 10 + 12  # 12.5 rounds half to even
        assert st.rounds == 2
        assert st.lives == 3

    def test_misses_cost_a_life_and_reset_streak(self):
        tracker = ScoreTracker()
        st = tracker.apply(Correct(1), tracker.new_state(EASY))
        st = tracker.apply(Incorrect(1, 2), st)
        assert st.streak == 0 and st.best_streak == 1
        assert st.lives == 2
        st = tracker.apply(TimedOut(4), st)
        assert st.lives == 1
        assert not tracker.is_game_over(st)
        st = tracker.apply(TimedOut(4), st)
        assert tracker.is_game_over(st)

    def test_lives_never_go_negative(self):
        tracker = ScoreTracker(ScoringRules(lives=1))
        st = tracker.apply(TimedOut(0), tracker.new_state(EASY))
        st = tracker.apply(TimedOut(0), st)
        assert st.lives == 0

    def test_apply_does_not_mutate(self):
        tracker = ScoreTracker()
        before = tracker.new_state(EASY)
        tracker.apply(Correct(1), before)
        assert before.score == 0 and before.streak == 0

    def test_finalize_writes_only_when_higher(self):
        tracker = ScoreTracker()
        store = RecordingStore({"4u": 50})
        low = tracker.apply(Correct(1), tracker.new_state(EASY))
        assert tracker.finalize(low, store) == (10, False)
        assert store.saves == []

        high = low
        for _ in range(5):
            high = tracker.apply(Correct(1), high)
        score, is_new = tracker.finalize(high, store)
        assert is_new and score == high.score
        assert store.saves == [("4u", high.score)]
        assert store.load(EASY) == high.score
