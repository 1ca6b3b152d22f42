"""Tests for the deterministic random source."""

import pytest

from py_regions.core.lcg_prng import LcgPRNG
from py_regions.core.random_source import RandomSource


class TestLcgPRNG:
    """Test the linear congruential stream."""

    def test_fractional_seed_stream(self):
        """Test that a seed in [0, 1) is scaled to 32 bits."""
        prng = LcgPRNG(0.123456789)
        assert prng.random() == 634329386 / 2**32
        assert prng.random() == 554956417 / 2**32
        assert prng.random() == 4047691244 / 2**32

    def test_integer_seed_stream(self):
        """Test that integer seeds are used directly."""
        prng = LcgPRNG(42)
        assert prng.random() == 1083814273 / 2**32
        assert prng.random() == 378494188 / 2**32

    def test_negative_seed_uses_absolute_value(self):
        """Test that negative seeds behave like their absolute value."""
        a = LcgPRNG(-42)
        b = LcgPRNG(42)
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    def test_non_finite_seed(self):
        """Test that NaN and infinity fall back to state 0."""
        assert LcgPRNG(float("inf")).state == 0
        assert LcgPRNG(float("nan")).state == 0

    def test_values_in_unit_interval(self):
        """Test that draws stay in [0, 1)."""
        prng = LcgPRNG(7)
        for _ in range(1000):
            value = prng.random()
            assert 0 <= value < 1

    def test_call_count(self):
        """Test that draws are counted."""
        prng = LcgPRNG(1)
        for _ in range(5):
            prng.random()
        assert prng.call_count == 5


class TestRandomSource:
    """Test the random source wrapper."""

    def test_same_seed_same_sequence(self):
        """Test that equal seeds give equal streams."""
        a = RandomSource(0.5)
        b = RandomSource(0.5)
        assert [a.next_int(0, 100) for _ in range(50)] == [b.next_int(0, 100) for _ in range(50)]

    def test_different_seeds(self):
        """Test that different seeds give different streams."""
        a = RandomSource(0.1)
        b = RandomSource(0.2)
        assert [a.next_uniform() for _ in range(10)] != [b.next_uniform() for _ in range(10)]

    def test_next_int_bounds(self):
        """Test that integers stay in [low, high)."""
        source = RandomSource(3)
        values = [source.next_int(5, 12) for _ in range(2000)]
        assert min(values) == 5
        assert max(values) == 11

    def test_next_int_matches_uniform(self):
        """Test that next_int scales one uniform draw."""
        a = RandomSource(0.75)
        b = RandomSource(0.75)
        for _ in range(20):
            assert a.next_int(0, 37) == int(b.next_uniform() * 37)

    def test_reseed_restarts_stream(self):
        """Test that reseeding replays the stream."""
        source = RandomSource(0.3)
        first = [source.next_uniform() for _ in range(5)]
        source.next_uniform()
        source.seed(0.3)
        assert [source.next_uniform() for _ in range(5)] == first
        assert source.call_count == 5
        assert source.current_seed == 0.3

    def test_default_seed(self):
        """Test that the configured default seed is used."""
        assert RandomSource().next_uniform() == 634329386 / 2**32

    def test_choice(self):
        """Test choosing from a sequence."""
        source = RandomSource(9)
        items = ["a", "b", "c"]
        for _ in range(20):
            assert source.choice(items) in items

    def test_choice_empty(self):
        """Test that choosing from nothing fails."""
        with pytest.raises(IndexError):
            RandomSource(9).choice([])
