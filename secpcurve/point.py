"""Points on the secp256k1 curve y^2 = x^3 + 7."""

from __future__ import annotations

from secpcurve.field import FieldElement

SECP256K1_B = FieldElement(7)
"""The constant b of the curve equation."""

SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
"""The order of the generator point."""

_TWO = FieldElement(2)
_THREE = FieldElement(3)


class Point:
    """A point on secp256k1; x and y are both None for the point at infinity."""

    __slots__ = ("x", "y")

    def __init__(self, x: FieldElement | None, y: FieldElement | None) -> None:
        if x is None and y is None:
            self.x = None
            self.y = None
            return
        if x is None or y is None:
            raise ValueError(
                "Invalid point: both coordinates must be given or both must be None"
            )
        if y**2 != x**3 + SECP256K1_B:
            raise ValueError(f"Point ({x}, {y}) is not on the secp256k1 curve")
        self.x = x
        self.y = y

    @classmethod
    def _unchecked(cls, x: FieldElement, y: FieldElement) -> Point:
        point = object.__new__(cls)
        point.x = x
        point.y = y
        return point

    @classmethod
    def infinity(cls) -> Point:
        """The identity of the group."""
        return cls(None, None)

    def is_infinity(self) -> bool:
        """Whether this is the point at infinity."""
        return self.x is None

    def _double(self) -> Point:
        if self.is_infinity() or self.y == FieldElement.zero():
            return Point.infinity()
        x, y = self.x, self.y
        s = (_THREE * x**2) / (_TWO * y)
        x3 = s**2 - (x + x)
        y3 = s * (x - x3) - y
        return Point._unchecked(x3, y3)

    def _add_distinct(self, other: Point) -> Point:
        x1, y1, x2, y2 = self.x, self.y, other.x, other.y
        s = (y2 - y1) / (x2 - x1)
        x3 = s**2 - x1 - x2
        y3 = s * (x1 - x3) - y1
        return Point._unchecked(x3, y3)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        if self.is_infinity():
            return other
        if other.is_infinity():
            return self
        if self.x == other.x:
            if self.y == other.y:
                return self._double()
            return Point.infinity()
        return self._add_distinct(other)

    def __mul__(self, scalar: object) -> Point:
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        k = scalar % SECP256K1_N
        result = Point.infinity()
        current = self
        while k:
            if k & 1:
                result = result + current
            current = current + current
            k >>= 1
        return result

    def __rmul__(self, scalar: object) -> Point:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((Point, self.x, self.y))

    def __str__(self) -> str:
        if self.is_infinity():
            return "Point(Infinity)"
        return f"Point(x=0x{self.x.num:064x}, y=0x{self.y.num:064x})"

    def __repr__(self) -> str:
        return str(self)


G = Point(
    FieldElement(0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798),
    FieldElement(0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8),
)
"""The secp256k1 generator point."""