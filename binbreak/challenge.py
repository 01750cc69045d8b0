from __future__ import annotations

import random
from typing import Optional, Sequence, Tuple

from .models import BitMode, Challenge


def encode_bits(value: int, width: int, signed: bool) -> Tuple[int, ...]:
    """Fixed-width bits of ``value``, most significant first.

    Signed values use two's complement. Raises ``ValueError`` when the value
    does not fit in ``width`` bits.
    """
    if signed:
        lo, hi = -(1 << (width - 1)), (1 << (width - 1)) - 1
    else:
        lo, hi = 0, (1 << width) - 1
    if not lo <= value <= hi:
        raise ValueError(f"{value} does not fit in {width} {'signed' if signed else 'unsigned'} bits")
    raw = value & ((1 << width) - 1)
    return tuple((raw >> i) & 1 for i in range(width - 1, -1, -1))


def decode_bits(bits: Sequence[int], signed: bool) -> int:
    raw = 0
    for b in bits:
        raw = (raw << 1) | (1 if b else 0)
    if signed and bits and bits[0]:
        raw -= 1 << len(bits)
    return raw


class ChallengeGenerator:
    """Draws targets uniformly over a mode's legal values."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        # module-level random unless a seeded instance is supplied
        self.rng = rng if rng is not None else random

    def next(self, mode: BitMode) -> Challenge:
        raw = self.rng.randint(mode.raw_min, mode.raw_max)
        return Challenge(mode=mode, target=raw * mode.step, bits=encode_bits(raw, mode.width, mode.signed))


__all__ = ["encode_bits", "decode_bits", "ChallengeGenerator"]
