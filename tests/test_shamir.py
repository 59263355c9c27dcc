"""
Tests for Shamir secret sharing.
"""

import random

import pytest

from feltseq.field import FieldElement, elements
from feltseq.params import ShamirParams
from feltseq.shamir import split_secret, lagrange_interpolation, recover_secret


class TestSplitAndRecover:
    """Threshold reconstruction over the Goldilocks field."""

    @pytest.mark.parametrize("secret", [10, 54354325, 43253243242])
    def test_threshold_recovers(self, secret):
        shares = split_secret(secret, rng=random.Random(secret))
        # Any 3 points give the correct y intercept
        assert recover_secret(shares[0:3]) == secret
        assert recover_secret(shares[2:5]) == secret
        # More than the threshold also works
        assert recover_secret(shares[0:4]) == secret

    def test_below_threshold_does_not_recover(self):
        secret = FieldElement(10)
        shares = split_secret(secret, rng=random.Random(1))
        assert recover_secret(shares[0:2]) != secret

    def test_share_layout(self):
        params = ShamirParams(threshold=4, num_shares=7)
        shares = split_secret(99, params, random.Random(2))
        assert [x for x, _ in shares] == elements(range(1, 8))
        assert recover_secret(shares[3:7]) == 99

    def test_threshold_one_is_constant(self):
        shares = split_secret(5, ShamirParams(threshold=1, num_shares=3), random.Random(3))
        assert all(y == 5 for _, y in shares)


class TestLagrangeInterpolation:
    """Interpolation edge cases."""

    def test_line(self):
        # y = 2x + 1
        points = [(FieldElement(1), FieldElement(3)), (FieldElement(2), FieldElement(5))]
        assert lagrange_interpolation(0, points) == 1
        assert lagrange_interpolation(10, points) == 21

    def test_duplicate_x(self):
        points = [(FieldElement(1), FieldElement(3)), (FieldElement(1), FieldElement(4))]
        with pytest.raises(ValueError):
            lagrange_interpolation(0, points)

    def test_empty(self):
        with pytest.raises(ValueError):
            lagrange_interpolation(0, [])


class TestShamirParams:
    """Parameter validation."""

    def test_defaults(self):
        params = ShamirParams()
        assert params.threshold == 3
        assert params.num_shares == 5
        assert params.degree == 2

    @pytest.mark.parametrize("threshold,num_shares", [(0, 5), (4, 3)])
    def test_invalid(self, threshold, num_shares):
        with pytest.raises(ValueError):
            ShamirParams(threshold=threshold, num_shares=num_shares)
