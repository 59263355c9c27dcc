"""
feltseq: Linear Recurrences over the Goldilocks Field

Berlekamp-Massey recovery of the shortest linear recurrence generating a
sequence of field elements, plus the small field toolkit around it.

Usage:
    from feltseq import recover, characteristic_polynomial

    c = recover([0, 1, 1, 2, 3, 5, 8, 13])       # [1, 1]
    characteristic_polynomial(c)                  # [1, -1, -1]  (x^2 - x - 1)

    # Deterministic bootstrap seed
    from feltseq import RecoveryParams
    c = recover(series, RecoveryParams(seed=0).make_rng())
"""

# Field arithmetic
from .field import FieldElement, GOLDILOCKS_PRIME, ZERO, ONE, elements

# Parameters
from .params import RecoveryParams, ShamirParams

# Recurrence recovery
from .berlekamp_massey import (
    BerlekampMassey,
    recover,
    characteristic_polynomial,
    linear_complexity,
    is_generated_by,
    extend,
    RecoveryError,
    SingularCorrectionError,
    IndexUnderflowError,
)

# Secret sharing
from .shamir import split_secret, lagrange_interpolation, recover_secret

# Grocery list AIR
from .air import ExecutionTrace, Assertion, GroceryAir, build_trace, get_pub_inputs, verify

__all__ = [
    # Field
    'FieldElement',
    'GOLDILOCKS_PRIME',
    'ZERO',
    'ONE',
    'elements',

    # Parameters
    'RecoveryParams',
    'ShamirParams',

    # Berlekamp-Massey
    'BerlekampMassey',
    'recover',
    'characteristic_polynomial',
    'linear_complexity',
    'is_generated_by',
    'extend',
    'RecoveryError',
    'SingularCorrectionError',
    'IndexUnderflowError',

    # Shamir
    'split_secret',
    'lagrange_interpolation',
    'recover_secret',

    # AIR
    'ExecutionTrace',
    'Assertion',
    'GroceryAir',
    'build_trace',
    'get_pub_inputs',
    'verify',
]

# Version
__version__ = '0.1.0'
