"""Probabilistic primality testing for field moduli.

The test itself is ``gmpy2.is_prime`` (trial division followed by
Miller-Rabin).  How many Miller-Rabin rounds to run is a caller choice,
carried by a ``PrimalityPolicy``.
"""

from __future__ import annotations

import logging
import math

import gmpy2
from pydantic import BaseModel, Field

from primefield.config import DEFAULT_PRIMALITY_ROUNDS

logger = logging.getLogger(__name__)


class PrimalityPolicy(BaseModel):
    """How much certainty a primality verdict must carry."""

    model_config = {"frozen": True}

    rounds: int = Field(default=DEFAULT_PRIMALITY_ROUNDS, ge=1)

    @property
    def error_bound(self) -> float:
        """Upper bound on the chance that a composite is reported prime."""
        return 4.0 ** -self.rounds

    @classmethod
    def for_error_bound(cls, bound: float) -> PrimalityPolicy:
        """Return the cheapest policy whose error bound is at most *bound*."""
        if not 0.0 < bound < 1.0:
            raise ValueError(f"error bound must lie in (0, 1), got {bound}")
        rounds = max(1, math.ceil(-math.log2(bound) / 2))
        # float rounding can leave rounds off by one either way
        while rounds > 1 and 4.0 ** -(rounds - 1) <= bound:
            rounds -= 1
        while 4.0 ** -rounds > bound:
            rounds += 1
        return cls(rounds=rounds)


def is_probable_prime(n: int, policy: PrimalityPolicy | None = None) -> bool:
    """Return True if *n* passes the primality test configured by *policy*."""
    if policy is None:
        policy = PrimalityPolicy()
    if n < 2:
        logger.debug("rejecting %d: below 2", n)
        return False
    if not gmpy2.is_prime(n, policy.rounds):
        logger.debug("rejecting %d: composite", n)
        return False
    return True
