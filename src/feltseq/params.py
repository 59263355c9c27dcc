"""
Parameters

Immutable parameter objects for the recurrence engine and secret sharing.
"""

from dataclasses import dataclass
from typing import Optional
import random


@dataclass(frozen=True)
class RecoveryParams:
    """
    Parameters for Berlekamp-Massey recovery.

    The engine seeds its first candidate with random field elements.
    Fixing ``seed`` makes the intermediate states reproducible; the
    recovered recurrence does not depend on it.
    """

    seed: Optional[int] = None
    """Seed for the bootstrap RNG. None draws from OS entropy."""

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


@dataclass(frozen=True)
class ShamirParams:
    """
    Parameters for threshold secret sharing.

    Any ``threshold`` of the ``num_shares`` shares reconstruct the secret.
    """

    threshold: int = 3
    """Number of shares required for reconstruction (polynomial degree + 1)."""

    num_shares: int = 5
    """Number of shares handed out, at x = 1..num_shares."""

    def __post_init__(self):
        if self.threshold < 1:
            raise ValueError(f"Threshold must be at least 1, got {self.threshold}")
        if self.num_shares < self.threshold:
            raise ValueError(
                f"Need at least {self.threshold} shares, got {self.num_shares}"
            )

    @property
    def degree(self) -> int:
        """Degree of the sharing polynomial."""
        return self.threshold - 1
