from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple, Union

from .enums import Action


class Bits(Enum):
    FOUR = auto()
    FOUR_SHIFT4 = auto()
    FOUR_SHIFT8 = auto()
    FOUR_SHIFT12 = auto()
    EIGHT = auto()
    TWELVE = auto()
    SIXTEEN = auto()


class Scene(Enum):
    MENU = auto()
    PLAYING = auto()
    EXIT = auto()


class Phase(Enum):
    AWAITING_START = auto()
    CHALLENGE_ACTIVE = auto()
    EVALUATING = auto()
    ROUND_WON = auto()
    ROUND_LOST = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class BitsSpec:
    width: int
    shift: int
    label: str
    weight: int


BITS_TABLE: Dict[Bits, BitsSpec] = {
    Bits.FOUR:         BitsSpec(4, 0,  "easy       (4 bits)",       1),
    Bits.FOUR_SHIFT4:  BitsSpec(4, 4,  "easy+16    (4 bits*16)",    1),
    Bits.FOUR_SHIFT8:  BitsSpec(4, 8,  "easy+256   (4 bits*256)",   1),
    Bits.FOUR_SHIFT12: BitsSpec(4, 12, "easy+4096  (4 bits*4096)",  1),
    Bits.EIGHT:        BitsSpec(8, 0,  "normal     (8 bits)",       2),
    Bits.TWELVE:       BitsSpec(12, 0, "master     (12 bits)",      3),
    Bits.SIXTEEN:      BitsSpec(16, 0, "insane     (16 bits)",      4),
}

# menu order
MENU_BITS: List[Bits] = list(BITS_TABLE.keys())


@dataclass(frozen=True)
class BitMode:
    bits: Bits
    signed: bool = False

    @property
    def spec(self) -> BitsSpec:
        return BITS_TABLE[self.bits]

    @property
    def width(self) -> int:
        return self.spec.width

    @property
    def shift(self) -> int:
        return self.spec.shift

    @property
    def step(self) -> int:
        return 1 << self.shift

    @property
    def raw_min(self) -> int:
        return -(1 << (self.width - 1)) if self.signed else 0

    @property
    def raw_max(self) -> int:
        return (1 << (self.width - 1)) - 1 if self.signed else (1 << self.width) - 1

    @property
    def min_value(self) -> int:
        return self.raw_min * self.step

    @property
    def max_value(self) -> int:
        return self.raw_max * self.step

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value and value % self.step == 0

    @property
    def max_digits(self) -> int:
        return max(len(str(abs(self.min_value))), len(str(self.max_value)))

    @property
    def key(self) -> str:
        """Stable high-score key, e.g. ``8u`` or ``4x16s``."""
        base = str(self.width) if not self.shift else f"{self.width}x{self.step}"
        return base + ("s" if self.signed else "u")

    @property
    def label(self) -> str:
        name = self.spec.label.split("(")[0].strip()
        return f"{name} {self.key[:-1]} {'signed' if self.signed else 'unsigned'}"

    @property
    def suffix(self) -> str:
        return f"*{self.step}" if self.shift else ""

    @classmethod
    def from_key(cls, key: str) -> Optional["BitMode"]:
        for bits in Bits:
            for signed in (False, True):
                mode = cls(bits, signed)
                if mode.key == key:
                    return mode
        return None


ALL_MODES: List[BitMode] = [BitMode(b, s) for b in MENU_BITS for s in (False, True)]


@dataclass(frozen=True)
class Challenge:
    mode: BitMode
    target: int
    bits: Tuple[int, ...]

    @property
    def pattern(self) -> str:
        return "".join(str(b) for b in self.bits)


@dataclass(frozen=True)
class Correct:
    target: int


@dataclass(frozen=True)
class Incorrect:
    target: int
    guess: int


@dataclass(frozen=True)
class TimedOut:
    target: int


RoundResult = Union[Correct, Incorrect, TimedOut]


@dataclass(frozen=True)
class GameState:
    mode: BitMode
    lives: int
    streak: int = 0
    best_streak: int = 0
    score: int = 0
    rounds: int = 0
    budget: float = 0.0
    time_remaining: float = 0.0
    high_score: int = 0


@dataclass(frozen=True)
class InputEvent:
    action: Action
    char: Optional[str] = None


@dataclass
class MenuItem:
    label: str
    bits: Bits
    signed: bool = False

    @property
    def mode(self) -> BitMode:
        return BitMode(self.bits, self.signed)


__all__ = [
    "Bits",
    "BitsSpec",
    "BITS_TABLE",
    "MENU_BITS",
    "ALL_MODES",
    "Scene",
    "Phase",
    "BitMode",
    "Challenge",
    "Correct",
    "Incorrect",
    "TimedOut",
    "RoundResult",
    "GameState",
    "InputEvent",
    "MenuItem",
]
