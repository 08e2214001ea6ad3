# secpcurve

Arithmetic on the secp256k1 elliptic curve, the curve used by Bitcoin:
`y^2 = x^3 + 7` over the prime field `p = 2^256 - 2^32 - 977`.

This package is for study and experiment. It is not constant-time.
Do not use it to protect real keys.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Field elements

`secpcurve.field.FieldElement` holds an integer in the range `0 .. p-1`.
The modulus is available as `secpcurve.field.PRIME`. If the constructor gets a
value outside the range, it raises `ValueError`. If it gets something that is
not an `int`, it raises `TypeError`.

```python
from secpcurve.field import FieldElement

a = FieldElement(10)
b = FieldElement(2)

a.num          # 10
a.prime        # the field modulus

a + b          # addition mod p
a - b          # subtraction mod p
a * b          # multiplication mod p
3 * a, a * 3   # an integer times an element, reduced mod p
a / b          # division by way of the multiplicative inverse
a ** 5         # same as a.pow(5); exponent reduced mod p-1, negative exponents invert
-a             # additive inverse, same as a.negate()
a.inverse()    # multiplicative inverse

FieldElement.zero(), FieldElement.one()

print(FieldElement(255))
# FieldElement_0x00...ff_(mod 0xffff...fc2f)
```

`inverse()` raises `ZeroDivisionError` for zero, and so does dividing by zero.
Elements compare by value and can be hashed.

## Curve points

`secpcurve.point.Point` is a point on secp256k1. If you pass two coordinates,
the constructor checks the curve equation and raises `ValueError` when the
point is not on the curve. If you pass `None` for both coordinates, you get the
point at infinity. If you pass `None` for only one of them, it raises
`ValueError`.

The module also provides the generator `G`, the group order `SECP256K1_N` and
the curve constant `SECP256K1_B`.

```python
from secpcurve.point import G, SECP256K1_N, Point

G.x, G.y               # coordinates as FieldElement; both None at infinity

two_g = G + G          # point doubling
three_g = G + two_g    # point addition
k_g = 12345 * G        # scalar multiplication; the scalar is reduced mod SECP256K1_N
SECP256K1_N * G        # the point at infinity
-1 * G == (SECP256K1_N - 1) * G   # True

inf = Point.infinity()
inf.is_infinity()      # True
G + inf == G           # True

print(G)
# Point(x=0x79be..., y=0x483a...)
print(inf)
# Point(Infinity)
```

## Command line

```
secpcurve
```

This prints the field element 255, the point at infinity and the generator
point. It takes no options apart from `--help`.

## What the package does not do

It provides field and curve arithmetic only. It has no key generation, no
signing or verification, and no encoding of keys or points to bytes.