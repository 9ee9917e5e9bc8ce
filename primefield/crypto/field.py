"""Prime-field arithmetic F_p.

A ``FieldElement`` is a value in [0, p) together with the prime p of the
field it belongs to.  There is no separate field object: two elements are
in the same field iff their moduli are equal.

API
---
FieldElement(value, modulus, policy=None)   validated construction
reduce(value, modulus, policy=None)         construction from any integer
equals / not_equals / same_field
add / sub / mul / div / power               the field operations
neg / inv / scale                           derived helpers

The operators ``+ - * / ** == != -x`` and ``k * x`` are thin wrappers over
the named functions.
"""

from __future__ import annotations

import operator

from primefield.crypto.primality import PrimalityPolicy, is_probable_prime


class FieldError(Exception):
    """Base class for all field arithmetic errors."""


class InvalidElement(FieldError, ValueError):
    """Raised when a value is not in [0, modulus)."""


class InvalidModulus(FieldError, ValueError):
    """Raised when a modulus is not a positive prime."""


class FieldMismatch(FieldError, TypeError):
    """Raised when a binary operation mixes elements of different fields."""

    def __init__(self, op: str, left_modulus: int, right_modulus: int) -> None:
        self.left_modulus = left_modulus
        self.right_modulus = right_modulus
        super().__init__(
            f"Cannot {op} elements of different fields: "
            f"F_{left_modulus} and F_{right_modulus}"
        )


class DivisionByZero(FieldError, ZeroDivisionError):
    """Raised when dividing by, or inverting, the zero element."""


class FieldElement:
    """An immutable element of the prime field F_modulus."""

    __slots__ = ("value", "modulus")

    value: int
    modulus: int

    def __init__(
        self, value: int, modulus: int, policy: PrimalityPolicy | None = None
    ) -> None:
        try:
            modulus = operator.index(modulus)
        except TypeError as e:
            raise InvalidModulus(
                f"modulus must be an integer, got {type(modulus).__name__}"
            ) from e
        try:
            value = operator.index(value)
        except TypeError as e:
            raise InvalidElement(
                f"value must be an integer, got {type(value).__name__}"
            ) from e

        if not is_probable_prime(modulus, policy):
            raise InvalidModulus(f"{modulus} is not a prime modulus")
        if value < 0 or value >= modulus:
            raise InvalidElement(f"{value} not in field range 0 to {modulus - 1}")

        object.__setattr__(self, "value", value)
        object.__setattr__(self, "modulus", modulus)

    @classmethod
    def _from_reduced(cls, value: int, modulus: int) -> FieldElement:
        # Operands were validated already and value is reduced mod modulus.
        element = object.__new__(cls)
        object.__setattr__(element, "value", value)
        object.__setattr__(element, "modulus", modulus)
        return element

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (_restore, (type(self), self.value, self.modulus))

    def is_zero(self) -> bool:
        return self.value == 0

    # ---- operators ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return equals(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return not_equals(self, other)

    def __hash__(self) -> int:
        return hash((self.value, self.modulus))

    def __add__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return mul(self, other)

    def __rmul__(self, coefficient: int) -> FieldElement:
        if isinstance(coefficient, bool) or not isinstance(coefficient, int):
            return NotImplemented
        return scale(self, coefficient)

    def __truediv__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return div(self, other)

    def __pow__(self, exponent: int) -> FieldElement:
        if not isinstance(exponent, int):
            return NotImplemented
        return power(self, exponent)

    def __neg__(self) -> FieldElement:
        return neg(self)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}_{self.modulus}({self.value})"

    def __str__(self) -> str:
        return str(self.value)


def _restore(cls, value: int, modulus: int) -> FieldElement:
    return cls._from_reduced(value, modulus)


def reduce(
    value: int, modulus: int, policy: PrimalityPolicy | None = None
) -> FieldElement:
    """Reduce an arbitrary integer into F_modulus."""
    try:
        value = operator.index(value)
        modulus = operator.index(modulus)
    except TypeError as e:
        raise InvalidElement("value and modulus must be integers") from e
    if modulus < 2:
        raise InvalidModulus(f"{modulus} is not a prime modulus")
    return FieldElement(value % modulus, modulus, policy)


# ---- comparison ----


def equals(a: FieldElement, b: FieldElement) -> bool:
    """True iff *a* and *b* carry the same value in the same field."""
    return a.value == b.value and a.modulus == b.modulus


def not_equals(a: FieldElement, b: FieldElement) -> bool:
    return not equals(a, b)


def same_field(a: FieldElement, b: FieldElement) -> bool:
    return a.modulus == b.modulus


def _check_operands(op: str, a: FieldElement, b: FieldElement) -> None:
    if not isinstance(a, FieldElement) or not isinstance(b, FieldElement):
        raise TypeError(
            f"Cannot {op} {type(a).__name__} and {type(b).__name__}: "
            "both operands must be FieldElements"
        )
    if not same_field(a, b):
        raise FieldMismatch(op, a.modulus, b.modulus)


def _check_element(op: str, a: FieldElement) -> None:
    if not isinstance(a, FieldElement):
        raise TypeError(f"Cannot {op} {type(a).__name__}: not a FieldElement")


# ---- arithmetic ----


def add(a: FieldElement, b: FieldElement) -> FieldElement:
    """Field addition."""
    _check_operands("add", a, b)
    p = a.modulus
    return a._from_reduced((a.value + b.value) % p, p)


def sub(a: FieldElement, b: FieldElement) -> FieldElement:
    """Field subtraction.

    The modulus is added before subtracting so the intermediate value
    never goes negative: in F_13, 3 - 10 = (3 + 13 - 10) % 13 = 6.
    """
    _check_operands("subtract", a, b)
    p = a.modulus
    return a._from_reduced((a.value + p - b.value) % p, p)


def mul(a: FieldElement, b: FieldElement) -> FieldElement:
    """Field multiplication."""
    _check_operands("multiply", a, b)
    p = a.modulus
    return a._from_reduced((a.value * b.value) % p, p)


def div(a: FieldElement, b: FieldElement) -> FieldElement:
    """Field division: a * b^(p-2), by Fermat's little theorem."""
    _check_operands("divide", a, b)
    p = a.modulus
    if b.value == 0:
        raise DivisionByZero(f"Cannot divide by zero in F_{p}")
    inverse = pow(b.value, p - 2, p)
    return a._from_reduced((a.value * inverse) % p, p)


def power(a: FieldElement, exponent: int) -> FieldElement:
    """Raise *a* to an arbitrary integer *exponent*.

    For nonzero a, a^(p-1) = 1, so the exponent is reduced mod (p-1)
    first; this also maps negative exponents into [0, p-1).

    The zero element is handled separately: 0^e = 0 for e > 0,
    0^0 = 1 (as with the builtin pow), and a negative exponent raises
    DivisionByZero since it means inverting zero.
    """
    _check_element("exponentiate", a)
    exponent = operator.index(exponent)
    p = a.modulus
    if a.value == 0:
        if exponent < 0:
            raise DivisionByZero(f"Cannot raise zero to a negative power in F_{p}")
        return a._from_reduced(0 if exponent > 0 else 1, p)
    n = exponent % (p - 1)
    return a._from_reduced(pow(a.value, n, p), p)


def neg(a: FieldElement) -> FieldElement:
    """Additive inverse."""
    _check_element("negate", a)
    p = a.modulus
    return a._from_reduced((p - a.value) % p, p)


def inv(a: FieldElement) -> FieldElement:
    """Multiplicative inverse via Fermat's little theorem (p is prime)."""
    _check_element("invert", a)
    p = a.modulus
    if a.value == 0:
        raise DivisionByZero(f"Cannot invert zero in F_{p}")
    return a._from_reduced(pow(a.value, p - 2, p), p)


def scale(a: FieldElement, coefficient: int) -> FieldElement:
    """Multiply *a* by a plain integer coefficient."""
    _check_element("scale", a)
    coefficient = operator.index(coefficient)
    p = a.modulus
    return a._from_reduced((coefficient % p) * a.value % p, p)
