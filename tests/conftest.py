"""Shared fixtures: scripted challenges, a recording store and a fake front end."""

import itertools
import random

import pytest

from binbreak.challenge import ChallengeGenerator, encode_bits
from binbreak.enums import Action
from binbreak.highscores import MemoryScoreStore
from binbreak.models import Challenge, InputEvent


class FixedGenerator(ChallengeGenerator):
    """Hands out the given raw pattern values in order, then zeros."""

    def __init__(self, *raws):
        super().__init__(random.Random(0))
        self.raws = list(raws)

    def next(self, mode):
        raw = self.raws.pop(0) if self.raws else 0
        return Challenge(mode=mode, target=raw * mode.step, bits=encode_bits(raw, mode.width, mode.signed))


class RecordingStore(MemoryScoreStore):
    def __init__(self, scores=None):
        super().__init__(scores)
        self.saves = []

    def save(self, mode, score):
        self.saves.append((mode.key, score))
        return super().save(mode, score)


class FakeFrontend:
    def __init__(self, events):
        self.events = list(events)
        self.frames = []
        self.timeouts = []

    def poll(self, timeout):
        self.timeouts.append(timeout)
        if self.events:
            return self.events.pop(0)
        return InputEvent(Action.QUIT)

    def render(self, view):
        self.frames.append(view)


def key(action, char=None):
    return InputEvent(action, char)


def typed(text):
    return [InputEvent(Action.CHAR, ch) for ch in text]


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def settings():
    return {
        "budget_initial": 8.0,
        "budget_step": -0.25,
        "budget_min": 2.5,
        "budget_per_bit": 0.75,
        "base_points": 10,
        "streak_step": 0.25,
        "max_multiplier": 4.0,
        "lives": 3,
        "feedback_sec": 0.0,
        "fps": 30,
        "last_selected": 4,
    }


@pytest.fixture
def fake_clock():
    ticks = itertools.count(0.0, 0.01)
    return lambda: next(ticks)
