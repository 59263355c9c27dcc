"""
Shamir Secret Sharing

The secret is the constant term of a random polynomial of degree
threshold - 1; shares are its evaluations at x = 1..num_shares. Any
threshold shares determine the polynomial, and Lagrange interpolation at
x = 0 gives the secret back.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import logging
import random

from .field import FieldElement, Operand, ONE, ZERO
from .params import ShamirParams
from . import vectors

logger = logging.getLogger(__name__)


Share = Tuple[FieldElement, FieldElement]


def split_secret(
    secret: Operand,
    params: ShamirParams = ShamirParams(),
    rng: Optional[random.Random] = None
) -> List[Share]:
    """Split ``secret`` into ``params.num_shares`` points."""
    secret = secret if isinstance(secret, FieldElement) else FieldElement(secret)
    coeffs = [secret] + [FieldElement.random(rng) for _ in range(params.degree)]

    shares = []
    for x in range(1, params.num_shares + 1):
        x = FieldElement(x)
        shares.append((x, vectors.evaluate(coeffs, x)))

    logger.debug("split secret into %d shares (threshold %d)", params.num_shares, params.threshold)
    return shares


def lagrange_interpolation(x: Operand, points: Sequence[Share]) -> FieldElement:
    """
    Evaluate the interpolating polynomial through ``points`` at ``x``.

    Given points [(x_0, y_0), ..., (x_n, y_n)], compute P(x) where
    P is the unique polynomial of degree <= n passing through all points.
    """
    if not points:
        raise ValueError("Cannot interpolate through zero points")
    xs = [p[0] for p in points]
    if len(set(xs)) != len(xs):
        raise ValueError("Interpolation points must have distinct x-coordinates")

    x = x if isinstance(x, FieldElement) else FieldElement(x)
    result = ZERO

    for i, (xi, yi) in enumerate(points):
        numerator = ONE
        denominator = ONE
        for j, (xj, _) in enumerate(points):
            if i != j:
                numerator = numerator * (x - xj)
                denominator = denominator * (xi - xj)
        result = result + yi * (numerator / denominator)

    return result


def recover_secret(points: Sequence[Share]) -> FieldElement:
    """Secret (constant term) from a set of shares."""
    return lagrange_interpolation(ZERO, points)
