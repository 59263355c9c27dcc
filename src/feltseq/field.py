"""
Goldilocks Prime Field Arithmetic

Field: F_p where p = 2^64 - 2^32 + 1

Every sequence, share and trace cell in feltseq is an element of this field.
Plain Python ints are accepted wherever an element is expected and are
reduced mod p, so negative integers map to their additive inverses
(FieldElement(-1) == p - 1).
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Union
import random


# Goldilocks prime: p = 2^64 - 2^32 + 1
GOLDILOCKS_PRIME = (1 << 64) - (1 << 32) + 1


Operand = Union['FieldElement', int]


class FieldElement:
    """
    Element of the Goldilocks prime field.

    Instances are immutable: every operation returns a new element.
    """

    __slots__ = ('value',)

    def __init__(self, value: int):
        """Create field element from integer (reduced mod p)."""
        self.value = value % GOLDILOCKS_PRIME

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    @staticmethod
    def _coerce(other: Operand) -> FieldElement:
        if isinstance(other, FieldElement):
            return other
        if isinstance(other, int):
            return FieldElement(other)
        return NotImplemented

    def __add__(self, other: Operand) -> FieldElement:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return FieldElement(self.value + other.value)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> FieldElement:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return FieldElement(self.value - other.value)

    def __rsub__(self, other: Operand) -> FieldElement:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return FieldElement(other.value - self.value)

    def __mul__(self, other: Operand) -> FieldElement:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return FieldElement(self.value * other.value)

    __rmul__ = __mul__

    def __neg__(self) -> FieldElement:
        return FieldElement(GOLDILOCKS_PRIME - self.value if self.value else 0)

    def __truediv__(self, other: Operand) -> FieldElement:
        """Division in F_p (multiplication by inverse)."""
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self * other.inverse()

    def __rtruediv__(self, other: Operand) -> FieldElement:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other * self.inverse()

    def __pow__(self, exp: int) -> FieldElement:
        if exp < 0:
            return self.inverse() ** (-exp)
        return FieldElement(pow(self.value, exp, GOLDILOCKS_PRIME))

    def inverse(self) -> FieldElement:
        """
        Multiplicative inverse using Fermat's little theorem.

        a^-1 = a^(p-2) mod p
        """
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert zero")
        return FieldElement(pow(self.value, GOLDILOCKS_PRIME - 2, GOLDILOCKS_PRIME))

    # =========================================================================
    # Comparison Operations
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == (other % GOLDILOCKS_PRIME)
        return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"FieldElement({self.value})"

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_signed(self) -> int:
        """Representative in (-p/2, p/2], so p - 1 reads back as -1."""
        if self.value > GOLDILOCKS_PRIME // 2:
            return self.value - GOLDILOCKS_PRIME
        return self.value

    # =========================================================================
    # Predicates
    # =========================================================================

    def is_zero(self) -> bool:
        return self.value == 0

    # =========================================================================
    # Class Methods
    # =========================================================================

    @classmethod
    def zero(cls) -> FieldElement:
        """Additive identity."""
        return cls(0)

    @classmethod
    def one(cls) -> FieldElement:
        """Multiplicative identity."""
        return cls(1)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> FieldElement:
        """Uniform random element drawn from ``rng`` (module RNG if omitted)."""
        source = rng if rng is not None else random
        return cls(source.randrange(GOLDILOCKS_PRIME))


ZERO = FieldElement.zero()
ONE = FieldElement.one()


def elements(values: Iterable[Operand]) -> List[FieldElement]:
    """Convert ints (or elements) to a list of field elements."""
    return [v if isinstance(v, FieldElement) else FieldElement(v) for v in values]
