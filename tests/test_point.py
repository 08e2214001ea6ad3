import pytest

from secpcurve.field import FieldElement
from secpcurve.point import G, SECP256K1_N, Point


def point_from_hex(x_hex, y_hex):
    return Point(FieldElement(int(x_hex, 16)), FieldElement(int(y_hex, 16)))


G_HEX = (
    "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798",
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8",
)
TWO_G = (
    "c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5",
    "1ae168fea63dc339a3c58419466ceaeef7f632653266d0e1236431a950cfe52a",
)
THREE_G = (
    "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9",
    "388f7b0f632de8140fe337e62a37f3566500a99934c2231b6cb9fd7584b8e672",
)
FOUR_G = (
    "e493dbf1c10d80f3581e4904930b1404cc6c13900ee0758474fa94abe8c4cd13",
    "51ed993ea0d455b75642e2098ea51448d967ae33bfbdfe40cfe97bdc47739922",
)


@pytest.fixture
def two_g():
    return point_from_hex(*TWO_G)


@pytest.fixture
def three_g():
    return point_from_hex(*THREE_G)


# Creation


def test_valid_point():
    assert Point(G.x, G.y) == G


def test_invalid_point():
    with pytest.raises(ValueError, match="is not on the secp256k1 curve"):
        Point(FieldElement(1), FieldElement(2))


def test_infinity_point():
    p = Point(None, None)
    assert p.is_infinity()
    assert p == Point.infinity()


def test_invalid_point_mixed_none():
    x = FieldElement(1)
    with pytest.raises(ValueError):
        Point(x, None)
    with pytest.raises(ValueError):
        Point(None, x)


# Display


def test_display_valid_point():
    correct = (
        "Point(x=0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798, "
        "y=0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8)"
    )
    generator = Point(FieldElement(int(G_HEX[0], 16)), FieldElement(int(G_HEX[1], 16)))
    assert str(generator) == correct
    assert str(G) == correct


def test_display_infinity_point():
    assert str(Point(None, None)) == "Point(Infinity)"


# Addition


def test_point_addition_distinct_points(two_g, three_g):
    total = G + two_g
    assert not total.is_infinity()
    assert total == three_g


def test_point_doubling_generator(two_g):
    assert G + G == two_g


def test_point_doubling_y_zero():
    try:
        p = Point(FieldElement(1), FieldElement.zero())
    except ValueError:
        p = Point.infinity()
    assert p + p == Point.infinity()


def test_point_addition_inverse():
    neg_p = Point(G.x, -G.y)
    assert G + neg_p == Point.infinity()


def test_point_addition_commutative(two_g):
    assert G + two_g == two_g + G


def test_add_to_infinity():
    infinity = Point(None, None)
    assert G + infinity == G
    assert infinity + G == G
    assert infinity + infinity == infinity


def test_add_associativity(two_g):
    four_g = point_from_hex(*FOUR_G)
    assert (G + G) + two_g == four_g
    assert G + (G + two_g) == four_g


# Scalar multiplication


def test_scalar_mul_zero():
    assert G * 0 == Point.infinity()


def test_scalar_mul_one():
    generator = Point(G.x, G.y)
    assert generator * 1 == G
    assert 1 * generator == G


def test_scalar_mul_two(two_g):
    assert G * 2 == two_g
    assert 2 * G == two_g


def test_scalar_mul_three(three_g):
    assert G * 3 == three_g


def test_scalar_mul_n():
    assert G * SECP256K1_N == Point.infinity()


def test_scalar_mul_large_k(two_g):
    assert G * (SECP256K1_N + 2) == two_g


def test_scalar_mul_negative():
    generator = Point(G.x, G.y)
    assert generator * -1 == generator * (SECP256K1_N - 1)


def test_scalar_mul_negative_is_negation():
    assert G * -1 == Point(G.x, -G.y)


def test_scalar_mul_infinity():
    assert Point(None, None) * 42 == Point.infinity()


def test_hash_consistent(two_g):
    assert hash(G + G) == hash(two_g)
    assert len({G + G, two_g, G}) == 2