"""Arithmetic in the prime field underlying the secp256k1 curve."""

from __future__ import annotations

PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
"""The secp256k1 field modulus, p = 2**256 - 2**32 - 977."""


class FieldElement:
    """An integer modulo the secp256k1 prime, held in the range [0, p)."""

    __slots__ = ("_num",)

    def __init__(self, num: int) -> None:
        if not isinstance(num, int) or isinstance(num, bool):
            raise TypeError(f"FieldElement value must be an int, not {type(num).__name__}")
        if num < 0 or num >= PRIME:
            raise ValueError(f"Number {num} not in the field range 0 to {PRIME - 1}")
        self._num = num

    @classmethod
    def _reduced(cls, num: int) -> FieldElement:
        element = object.__new__(cls)
        element._num = num % PRIME
        return element

    @property
    def num(self) -> int:
        """The integer value of the element."""
        return self._num

    @property
    def prime(self) -> int:
        """The field modulus."""
        return PRIME

    @classmethod
    def zero(cls) -> FieldElement:
        """The additive identity."""
        return cls(0)

    @classmethod
    def one(cls) -> FieldElement:
        """The multiplicative identity."""
        return cls(1)

    def inverse(self) -> FieldElement:
        """Multiplicative inverse via Fermat's little theorem."""
        if self._num == 0:
            raise ZeroDivisionError("Division by zero: no multiplicative inverse exists")
        return self._reduced(pow(self._num, PRIME - 2, PRIME))

    def pow(self, exponent: int) -> FieldElement:
        """Raise to an integer power, reducing the exponent modulo p - 1."""
        order = PRIME - 1
        if exponent < 0:
            return self.inverse().pow((-exponent) % order)
        return self._reduced(pow(self._num, exponent % order, PRIME))

    def negate(self) -> FieldElement:
        """Additive inverse, p - a mod p."""
        return self._reduced(-self._num)

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        total = self._num + other._num
        if total >= PRIME:
            total -= PRIME
        return self._reduced(total)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        diff = self._num - other._num
        if diff < 0:
            diff += PRIME
        return self._reduced(diff)

    def __mul__(self, other: object) -> FieldElement:
        if isinstance(other, FieldElement):
            return self._reduced(self._num * other._num)
        if isinstance(other, int) and not isinstance(other, bool):
            return self._reduced(self._num * other)
        return NotImplemented

    def __rmul__(self, other: object) -> FieldElement:
        if isinstance(other, int) and not isinstance(other, bool):
            return self._reduced(other * self._num)
        return NotImplemented

    def __truediv__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self * other.inverse()

    def __neg__(self) -> FieldElement:
        return self.negate()

    def __pow__(self, exponent: int) -> FieldElement:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._num == other._num

    def __hash__(self) -> int:
        return hash((FieldElement, self._num))

    def __str__(self) -> str:
        return f"FieldElement_0x{self._num:064x}_(mod 0x{PRIME:064x})"

    def __repr__(self) -> str:
        return f"FieldElement(0x{self._num:064x})"