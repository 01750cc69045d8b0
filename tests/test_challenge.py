"""Tests for the bit codec and the challenge generator."""

import random
from collections import Counter

import pytest

from binbreak.challenge import ChallengeGenerator, decode_bits, encode_bits
from binbreak.models import ALL_MODES, BitMode, Bits


class TestCodec:

    def test_unsigned_eleven(self):
        assert encode_bits(11, 4, False) == (1, 0, 1, 1)

    def test_signed_minus_three_is_twos_complement(self):
        assert encode_bits(-3, 4, True) == (1, 1, 0, 1)
        assert decode_bits((1, 1, 0, 1), True) == -3

    def test_same_bits_decode_differently_by_signedness(self):
        bits = (1, 0, 0, 0, 0, 0, 0, 0)
        assert decode_bits(bits, False) == 128
        assert decode_bits(bits, True) == -128

    @pytest.mark.parametrize("mode", ALL_MODES, ids=lambda m: m.key)
    def test_every_value_round_trips(self, mode):
        for raw in range(mode.raw_min, mode.raw_max + 1):
            bits = encode_bits(raw, mode.width, mode.signed)
            assert len(bits) == mode.width
            assert decode_bits(bits, mode.signed) == raw
            assert mode.contains(raw * mode.step)

    @pytest.mark.parametrize("value,width,signed", [(16, 4, False), (-1, 4, False), (8, 4, True), (-9, 4, True)])
    def test_out_of_range_is_rejected(self, value, width, signed):
        with pytest.raises(ValueError):
            encode_bits(value, width, signed)


class TestChallengeGenerator:

    @pytest.mark.parametrize("mode", ALL_MODES, ids=lambda m: m.key)
    def test_targets_stay_in_range_and_match_their_bits(self, mode):
        gen = ChallengeGenerator(random.Random(1234))
        for _ in range(1000):
            ch = gen.next(mode)
            assert mode.contains(ch.target)
            assert len(ch.bits) == mode.width
            assert decode_bits(ch.bits, mode.signed) * mode.step == ch.target

    def test_draws_cover_the_whole_four_bit_range(self):
        gen = ChallengeGenerator(random.Random(7))
        mode = BitMode(Bits.FOUR, signed=True)
        counts = Counter(gen.next(mode).target for _ in range(4000))
        assert set(counts) == set(range(-8, 8))
        # roughly uniform: 250 expected per value
        assert min(counts.values()) > 150
        assert max(counts.values()) < 350

    def test_shifted_mode_pattern_is_the_nibble(self):
        gen = ChallengeGenerator(random.Random(3))
        ch = gen.next(BitMode(Bits.FOUR_SHIFT8))
        assert ch.target % 256 == 0
        assert ch.pattern == format(ch.target // 256, "04b")

    def test_uses_module_random_by_default(self):
        random.seed(99)
        first = ChallengeGenerator().next(BitMode(Bits.SIXTEEN)).target
        random.seed(99)
        assert ChallengeGenerator().next(BitMode(Bits.SIXTEEN)).target == first
