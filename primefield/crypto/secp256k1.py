"""The base field of secp256k1, the elliptic curve used by Bitcoin.

The curve y^2 = x^3 + 7 is defined over F_P with P = 2^256 - 2^32 - 977.
Since P = 3 (mod 4), square roots can be taken with a single
exponentiation, which is what point decompression needs.
"""

from __future__ import annotations

from primefield.config import SECP256K1_P
from primefield.crypto.field import FieldElement, InvalidElement, power

P: int = SECP256K1_P


class S256Field(FieldElement):
    """An element of F_P for the secp256k1 prime."""

    __slots__ = ()

    def __init__(self, value: int) -> None:
        super().__init__(value, P)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self.value:064x})"

    def sqrt(self) -> S256Field:
        return sqrt(self)


def sqrt(a: FieldElement) -> FieldElement:
    """Return a square root of *a* in F_P.

    Raises InvalidElement if *a* is not a quadratic residue.
    """
    if a.modulus != P:
        raise InvalidElement(f"sqrt is only defined here for F_{P}, got F_{a.modulus}")
    root = power(a, (P + 1) // 4)
    if root * root != a:
        raise InvalidElement(f"0x{a.value:x} has no square root in F_P")
    return root
