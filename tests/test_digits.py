"""
Unit tests for direct digit classification.

These functions are the reference the level-expanding counter is
checked against, so they are tested against hand-worked examples.
"""

import pytest
import numpy as np
from bouncy_numbers.digits import (
    digits_of,
    is_increasing,
    is_decreasing,
    is_bouncy,
    classify,
    bouncy_mask,
    count_bouncy,
    first_over_brute,
)
from bouncy_numbers.config import (
    FIRST_BOUNCY,
    REFERENCE_BOUNCY_BELOW_1000,
    REFERENCE_FIRST_OVER_50,
    REFERENCE_FIRST_OVER_90,
)


class TestDigitsOf:
    """Tests for digits_of."""

    def test_multi_digit(self):
        assert digits_of(1587000) == [1, 5, 8, 7, 0, 0, 0]

    def test_zero(self):
        assert digits_of(0) == [0]

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            digits_of(-1)


class TestClassify:
    """Tests for the scalar classification functions."""

    def test_increasing_example(self):
        """134468 never decreases."""
        assert is_increasing(134468)
        assert not is_decreasing(134468)
        assert classify(134468) == "increasing"

    def test_decreasing_example(self):
        """664210 never increases."""
        assert is_decreasing(664210)
        assert not is_increasing(664210)
        assert classify(664210) == "decreasing"

    def test_bouncy_example(self):
        """155349 goes up and down."""
        assert is_bouncy(155349)
        assert classify(155349) == "bouncy"

    @pytest.mark.parametrize("n", [0, 5, 9, 11, 111, 7777])
    def test_constant(self, n):
        """Single digits and repdigits are both increasing and decreasing."""
        assert is_increasing(n)
        assert is_decreasing(n)
        assert not is_bouncy(n)
        assert classify(n) == "constant"

    def test_first_bouncy(self):
        """101 is the smallest bouncy number."""
        assert is_bouncy(FIRST_BOUNCY)
        assert not any(is_bouncy(n) for n in range(FIRST_BOUNCY))

    def test_trailing_zeros_decrease(self):
        assert classify(100) == "decreasing"
        assert classify(1587000) == "bouncy"


class TestBouncyMask:
    """Tests for the vectorized classification."""

    def test_matches_scalar(self):
        """Vectorized mask agrees with is_bouncy on every number up to 5000."""
        mask = bouncy_mask(5000)
        expected = np.array([is_bouncy(n) for n in range(5001)])
        np.testing.assert_array_equal(mask, expected)

    def test_shape(self):
        assert bouncy_mask(0).shape == (1,)
        assert not bouncy_mask(0)[0]

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            bouncy_mask(-1)


class TestCountBouncy:
    """Tests for count_bouncy."""

    def test_below_1000(self):
        """There are 525 bouncy numbers up to 1000."""
        assert count_bouncy(1000) == REFERENCE_BOUNCY_BELOW_1000

    def test_below_first_bouncy(self):
        assert count_bouncy(100) == 0
        assert count_bouncy(101) == 1

    def test_nonpositive(self):
        assert count_bouncy(0) == 0
        assert count_bouncy(-5) == 0


class TestFirstOverBrute:
    """Tests for the brute-force crossing search."""

    def test_fifty_percent(self):
        assert first_over_brute(0.5, 1000) == REFERENCE_FIRST_OVER_50

    def test_ninety_percent(self):
        assert first_over_brute(0.9, 30000) == REFERENCE_FIRST_OVER_90

    def test_beyond_limit(self):
        """Returns None when the crossing lies past the limit."""
        assert first_over_brute(0.9, 1000) is None

    def test_crossing_is_half(self):
        """At 538 exactly half of 1..538 are bouncy."""
        assert count_bouncy(538) * 2 == 538

    def test_invalid_threshold(self):
        with pytest.raises(ValueError):
            first_over_brute(1.0, 1000)
