"""Tests for the configurable primality test."""

import pydantic
import pytest

from primefield.config import DEFAULT_PRIMALITY_ROUNDS, SECP256K1_P
from primefield.crypto.primality import PrimalityPolicy, is_probable_prime


SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 97, 7919]
# includes Carmichael numbers 561, 1105, 1729
COMPOSITES = [4, 6, 9, 15, 21, 25, 91, 561, 1105, 1729, 7917, 2**64 + 1]


@pytest.mark.parametrize("n", SMALL_PRIMES)
def test_small_primes(n):
    assert is_probable_prime(n)


@pytest.mark.parametrize("n", COMPOSITES)
def test_composites(n):
    assert not is_probable_prime(n)


@pytest.mark.parametrize("n", [-13, -1, 0, 1])
def test_below_two(n):
    assert not is_probable_prime(n)


def test_large_primes():
    assert is_probable_prime(2**127 - 1)
    assert is_probable_prime(SECP256K1_P)
    assert not is_probable_prime(SECP256K1_P + 1)
    assert not is_probable_prime(SECP256K1_P * (2**127 - 1))


@pytest.mark.parametrize("rounds", [1, 5, 64])
def test_policy_rounds_reject_composites(rounds):
    policy = PrimalityPolicy(rounds=rounds)
    assert is_probable_prime(SECP256K1_P, policy)
    assert not is_probable_prime(561, policy)
    assert not is_probable_prime((2**61 - 1) * (2**89 - 1), policy)


class TestPolicy:
    def test_default_rounds(self):
        assert PrimalityPolicy().rounds == DEFAULT_PRIMALITY_ROUNDS

    def test_rounds_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            PrimalityPolicy(rounds=0)

    def test_frozen(self):
        policy = PrimalityPolicy(rounds=3)
        with pytest.raises(pydantic.ValidationError):
            policy.rounds = 4

    def test_error_bound(self):
        assert PrimalityPolicy(rounds=1).error_bound == 0.25
        assert PrimalityPolicy(rounds=40).error_bound == 2.0**-80

    def test_for_error_bound(self):
        assert PrimalityPolicy.for_error_bound(2.0**-80).rounds == 40
        assert PrimalityPolicy.for_error_bound(0.25).rounds == 1
        assert PrimalityPolicy.for_error_bound(0.2).rounds == 2
        assert PrimalityPolicy.for_error_bound(0.9).rounds == 1
        assert PrimalityPolicy.for_error_bound(1e-30).rounds == 50

    @pytest.mark.parametrize("bound", [0.0, 1.0, -0.5, 2.0])
    def test_for_error_bound_rejects(self, bound):
        with pytest.raises(ValueError, match="error bound"):
            PrimalityPolicy.for_error_bound(bound)
