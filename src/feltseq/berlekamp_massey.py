"""
Berlekamp-Massey

Recovers the shortest linear recurrence generating a sequence of field
elements:

    s[i] = c[0]*s[i-1] + c[1]*s[i-2] + ... + c[L-1]*s[i-L]

and the matching monic minimal characteristic polynomial

    x^L - c[0]*x^(L-1) - ... - c[L-1]

The engine makes a single left-to-right pass. At each index it measures the
discrepancy between the observed element and the current candidate's
prediction; a nonzero discrepancy is cancelled by adding a scaled, shifted
copy of the candidate that last failed (the history snapshot). The snapshot
is only replaced when the new failure leaves a larger gap between index and
candidate length, which keeps the final candidate minimal.

Example:
    >>> from feltseq.berlekamp_massey import recover, characteristic_polynomial
    >>> c = recover([0, 1, 1, 2, 3, 5, 8, 13])
    >>> [int(v) for v in c]
    [1, 1]
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence
import logging
import random

from .field import FieldElement, Operand, ONE, ZERO, elements
from . import vectors

logger = logging.getLogger(__name__)


class RecoveryError(ArithmeticError):
    """Base class for recurrence recovery failures."""


class SingularCorrectionError(RecoveryError, ZeroDivisionError):
    """The history snapshot evaluates to zero at its failure index."""


class IndexUnderflowError(RecoveryError, IndexError):
    """A candidate reached back past the start of the sequence."""


class BerlekampMassey:
    """
    Online recurrence recovery.

    Feed elements one at a time with ``add``; ``coefficients`` is always the
    shortest recurrence consistent with everything fed so far (once enough
    terms are seen to pin it down).
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng
        self.reset()

    def reset(self):
        self.seq: List[FieldElement] = []
        # current candidate
        self.c: List[FieldElement] = []
        # candidate that last failed, and where
        self.old_c: List[FieldElement] = []
        self.failure_index: Optional[int] = None

    @property
    def coefficients(self) -> List[FieldElement]:
        return list(self.c)

    def __len__(self) -> int:
        return len(self.seq)

    def discrepancy(self, i: int) -> FieldElement:
        """Observed s[i] minus the current candidate's prediction of it."""
        if len(self.c) > i:
            raise IndexUnderflowError(
                f"Candidate of length {len(self.c)} cannot predict index {i}"
            )
        window = [self.seq[i - j - 1] for j in range(len(self.c))]
        return self.seq[i] - vectors.dot(self.c, window)

    def add(self, a: Operand) -> bool:
        """
        Feed the next element. Returns True if the current candidate
        already predicted it.
        """
        a = a if isinstance(a, FieldElement) else FieldElement(a)
        i = len(self.seq)
        self.seq.append(a)

        delta = self.discrepancy(i)
        if delta == ZERO:
            return True

        if self.failure_index is None:
            # First failure fixes the minimum order worth trying. The seed
            # values are arbitrary; later corrections overwrite them.
            self.c = [FieldElement.random(self.rng) for _ in range(i + 1)]
            self.failure_index = i
            logger.debug("bootstrap at index %d with order %d", i, i + 1)
            return False

        index = self.failure_index

        # 1 - old_c[0]*x - old_c[1]*x^2 - ...
        d = [ONE] + vectors.negate(self.old_c)
        if len(d) - 1 > index:
            raise IndexUnderflowError(
                f"History of length {len(self.old_c)} cannot be evaluated at index {index}"
            )
        df1 = vectors.dot(d, [self.seq[index - j] for j in range(len(d))])
        if df1 == ZERO:
            raise SingularCorrectionError(
                f"History snapshot from index {index} has zero discrepancy; "
                f"cannot correct index {i}"
            )

        d = vectors.scale(d, delta / df1)
        d = vectors.shift(d, i - index - 1)

        temp = self.c
        # Compare before mutating: both gaps refer to the pre-merge state
        replace_history = i - len(temp) > index - len(self.old_c)

        self.c = vectors.add(temp, d)

        if replace_history:
            self.old_c = temp
            self.failure_index = i
            logger.debug("history moved to index %d (order %d)", i, len(temp))

        logger.debug("corrected index %d against %d; order now %d", i, index, len(self.c))
        return False

    def extend(self, seq: Iterable[Operand]) -> 'BerlekampMassey':
        for a in seq:
            self.add(a)
        return self

    def characteristic_polynomial(self) -> List[FieldElement]:
        return characteristic_polynomial(self.c)

    @staticmethod
    def for_sequence(seq: Iterable[Operand], rng: Optional[random.Random] = None) -> 'BerlekampMassey':
        return BerlekampMassey(rng).extend(seq)


def recover(series: Iterable[Operand], rng: Optional[random.Random] = None) -> List[FieldElement]:
    """
    Shortest coefficient vector c with s[i] = sum_j c[j] * s[i-j-1]
    for every i >= len(c).

    An all-zero (or empty) series gives []. Series shorter than twice the
    true order give an under-determined (possibly partly random) vector.

    Raises:
        SingularCorrectionError: a correction step would divide by zero.
        IndexUnderflowError: a candidate outgrew the elements seen so far.
    """
    return BerlekampMassey.for_sequence(series, rng).coefficients


def characteristic_polynomial(c: Sequence[FieldElement]) -> List[FieldElement]:
    """Monic polynomial [1, -c[0], ..., -c[L-1]], highest degree first."""
    return [ONE] + vectors.negate(c)


def linear_complexity(series: Iterable[Operand], rng: Optional[random.Random] = None) -> int:
    """Order of the shortest recurrence generating ``series``."""
    return len(recover(series, rng))


def is_generated_by(series: Iterable[Operand], c: Sequence[Operand]) -> bool:
    """True if the recurrence ``c`` reproduces every term past the first len(c)."""
    s = elements(series)
    c = elements(c)
    for i in range(len(c), len(s)):
        window = [s[i - j - 1] for j in range(len(c))]
        if s[i] != vectors.dot(c, window):
            return False
    return True


def extend(series: Iterable[Operand], c: Sequence[Operand], count: int) -> List[FieldElement]:
    """Next ``count`` terms of ``series`` under the recurrence ``c``."""
    s = elements(series)
    c = elements(c)
    if len(s) < len(c):
        raise ValueError(f"Need at least {len(c)} terms to run an order-{len(c)} recurrence, got {len(s)}")
    out = []
    for _ in range(count):
        window = [s[len(s) - j - 1] for j in range(len(c))]
        nxt = vectors.dot(c, window)
        s.append(nxt)
        out.append(nxt)
    return out
