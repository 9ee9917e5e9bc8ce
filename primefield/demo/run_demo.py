#!/usr/bin/env python3
"""primefield walk-through.

Usage:
    python -m primefield.demo.run_demo

The script:
1. Builds two elements of F_13 and runs the four arithmetic operations.
2. Checks Fermat's little theorem in F_19.
3. Shows the exponent reduction for huge and negative exponents.
4. Takes a square root in the secp256k1 field (the generator's y).
5. Triggers each error kind and prints the message.
"""

from __future__ import annotations

from primefield.config import SECP256K1_G_X, SECP256K1_G_Y
from primefield.crypto.field import (
    DivisionByZero,
    FieldElement,
    FieldError,
    FieldMismatch,
    InvalidElement,
    InvalidModulus,
)
from primefield.crypto.secp256k1 import S256Field


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def main() -> None:
    # ---- 1. Arithmetic ----
    banner("1) Arithmetic in F_13")
    a = FieldElement(7, 13)
    b = FieldElement(12, 13)
    print(f"   a = {a!r}, b = {b!r}")
    print(f"   a + b = {a + b}")
    print(f"   a - b = {a - b}")
    print(f"   a * b = {a * b}")
    q = a / b
    print(f"   a / b = {q}  (check: (a / b) * b = {q * b})")

    # ---- 2. Fermat ----
    banner("2) Fermat's little theorem in F_19")
    for v in range(1, 19):
        x = FieldElement(v, 19)
        assert x ** 18 == FieldElement(1, 19)
    print("   x^18 = 1 for every nonzero x")

    # ---- 3. Exponent reduction ----
    banner("3) Exponent reduction")
    x = FieldElement(2, 19)
    print(f"   2^(10^30) = {x ** 10**30}")
    print(f"   2^-1      = {x ** -1}  (2 * 2^-1 = {x * x ** -1})")

    # ---- 4. secp256k1 ----
    banner("4) secp256k1 field")
    gx = S256Field(SECP256K1_G_X)
    y_squared = gx ** 3 + S256Field(7)
    y = y_squared.sqrt()
    if y.value % 2 != SECP256K1_G_Y % 2:
        y = -y
    print(f"   G.y recovered from G.x: {y == S256Field(SECP256K1_G_Y)}")

    # ---- 5. Errors ----
    banner("5) Error kinds")
    attempts = [
        ("value out of range", lambda: FieldElement(13, 13), InvalidElement),
        ("composite modulus", lambda: FieldElement(2, 6), InvalidModulus),
        ("mixed fields", lambda: FieldElement(1, 13) + FieldElement(1, 17), FieldMismatch),
        ("divide by zero", lambda: a / FieldElement(0, 13), DivisionByZero),
    ]
    for label, attempt, expected in attempts:
        try:
            attempt()
        except FieldError as e:
            assert isinstance(e, expected)
            print(f"   {label}: {type(e).__name__}: {e}")
        else:
            raise AssertionError(f"{label} did not raise {expected.__name__}")


if __name__ == "__main__":
    main()
