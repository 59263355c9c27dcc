"""
Field Vector Helpers

Small list-of-FieldElement operations shared by the recurrence engine and
the secret-sharing code. Every helper returns a fresh list and leaves its
inputs untouched.
"""

from typing import List, Sequence

from .field import FieldElement, ZERO


def dot(coeffs: Sequence[FieldElement], values: Sequence[FieldElement]) -> FieldElement:
    """Sum of pairwise products (ZERO for empty input)."""
    result = ZERO
    for a, b in zip(coeffs, values):
        result = result + a * b
    return result


def negate(vector: Sequence[FieldElement]) -> List[FieldElement]:
    return [-v for v in vector]


def scale(vector: Sequence[FieldElement], scalar: FieldElement) -> List[FieldElement]:
    return [v * scalar for v in vector]


def shift(vector: Sequence[FieldElement], count: int) -> List[FieldElement]:
    """Prepend ``count`` zeros, i.e. multiply the polynomial by x^count."""
    if count < 0:
        raise ValueError(f"Cannot shift by negative amount {count}")
    return [ZERO] * count + list(vector)


def pad(vector: Sequence[FieldElement], length: int) -> List[FieldElement]:
    """Append trailing zeros up to ``length``. Never truncates."""
    result = list(vector)
    if len(result) < length:
        result.extend([ZERO] * (length - len(result)))
    return result


def add(a: Sequence[FieldElement], b: Sequence[FieldElement]) -> List[FieldElement]:
    """Element-wise sum, zero-extending the shorter vector."""
    n = max(len(a), len(b))
    return [x + y for x, y in zip(pad(a, n), pad(b, n))]


def evaluate(coeffs: Sequence[FieldElement], x: FieldElement) -> FieldElement:
    """
    Evaluate coeffs[0] + coeffs[1]*x + ... at x using Horner's method.
    """
    result = ZERO
    for c in reversed(coeffs):
        result = result * x + c
    return result
