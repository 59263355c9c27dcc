"""
Tests for Goldilocks field arithmetic and vector helpers.
"""

import random

import pytest

from feltseq.field import FieldElement, GOLDILOCKS_PRIME, ONE, ZERO, elements
from feltseq import vectors


P = GOLDILOCKS_PRIME


class TestFieldElement:
    """Arithmetic in F_p."""

    def test_reduction(self):
        assert FieldElement(P).is_zero()
        assert FieldElement(P + 5) == 5
        assert FieldElement(-1).value == P - 1

    def test_add_sub_wraparound(self):
        a = FieldElement(P - 1)
        assert a + ONE == ZERO
        assert ZERO - ONE == a

    def test_mul_div(self):
        a = FieldElement(123456789)
        b = FieldElement(987654321)
        assert (a * b) / b == a
        assert a * a.inverse() == ONE

    def test_int_coercion(self):
        a = FieldElement(10)
        assert a + 1 == 11
        assert 1 + a == 11
        assert 1 - a == FieldElement(-9)
        assert 3 * a == 30
        assert 20 / a == 2

    def test_negation(self):
        assert -ZERO == ZERO
        assert -FieldElement(3) + FieldElement(3) == ZERO

    def test_pow(self):
        a = FieldElement(7)
        assert a ** 0 == ONE
        assert a ** 3 == 343
        assert a ** -1 == a.inverse()
        # Fermat
        assert a ** (P - 1) == ONE

    def test_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            ZERO.inverse()
        with pytest.raises(ZeroDivisionError):
            ONE / ZERO
        with pytest.raises(ZeroDivisionError):
            5 / ZERO

    def test_equality_and_hash(self):
        assert FieldElement(5) == FieldElement(P + 5)
        assert hash(FieldElement(5)) == hash(FieldElement(P + 5))
        assert FieldElement(5) != FieldElement(6)
        assert FieldElement(5) != "5"

    def test_signed_representative(self):
        assert FieldElement(-1).to_signed() == -1
        assert FieldElement(42).to_signed() == 42

    def test_random_is_reproducible(self):
        a = [FieldElement.random(random.Random(9)) for _ in range(3)]
        b = [FieldElement.random(random.Random(9)) for _ in range(3)]
        assert a == b
        assert all(0 <= x.value < P for x in a)

    def test_elements(self):
        xs = elements([1, FieldElement(2), -1])
        assert all(isinstance(x, FieldElement) for x in xs)
        assert xs == [1, 2, P - 1]


class TestVectors:
    """List helpers used by the recurrence engine."""

    def test_dot(self):
        assert vectors.dot(elements([1, 2, 3]), elements([4, 5, 6])) == 32
        assert vectors.dot([], []) == ZERO

    def test_negate_and_scale(self):
        assert vectors.negate(elements([1, 0])) == elements([-1, 0])
        assert vectors.scale(elements([1, 2]), FieldElement(3)) == elements([3, 6])

    def test_shift(self):
        assert vectors.shift(elements([5]), 2) == elements([0, 0, 5])
        assert vectors.shift(elements([5]), 0) == elements([5])
        with pytest.raises(ValueError):
            vectors.shift(elements([5]), -1)

    def test_pad_never_truncates(self):
        assert vectors.pad(elements([1]), 3) == elements([1, 0, 0])
        assert vectors.pad(elements([1, 2, 3]), 1) == elements([1, 2, 3])

    def test_add_zero_extends(self):
        assert vectors.add(elements([1, 2, 3]), elements([1])) == elements([2, 2, 3])
        assert vectors.add(elements([1]), elements([0, 0, 7])) == elements([1, 0, 7])

    def test_inputs_untouched(self):
        a = elements([1, 2])
        vectors.pad(a, 5)
        vectors.shift(a, 2)
        vectors.add(a, elements([1, 1, 1]))
        assert a == elements([1, 2])

    def test_evaluate(self):
        # 3 + 2x + x^2 at x = 4
        assert vectors.evaluate(elements([3, 2, 1]), FieldElement(4)) == 27
        assert vectors.evaluate([], FieldElement(4)) == ZERO
