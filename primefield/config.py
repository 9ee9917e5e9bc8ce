"""Global configuration for primefield."""

import os

# ---------- Primality testing ----------
# Miller-Rabin rounds used when a caller does not pass a PrimalityPolicy.
# Each round bounds the false-positive rate by 1/4, so 40 rounds give <= 2**-80.
DEFAULT_PRIMALITY_ROUNDS = int(os.environ.get("PRIMEFIELD_PRIMALITY_ROUNDS", "40"))

# ---------- secp256k1 ----------
# Prime modulus of the base field of the Bitcoin curve.
SECP256K1_P = 2**256 - 2**32 - 977

# Generator coordinates, handy for checking the curve equation y^2 = x^3 + 7.
SECP256K1_G_X = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
SECP256K1_G_Y = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
