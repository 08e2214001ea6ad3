"""Command that prints a sample field element and curve points."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from secpcurve.field import FieldElement
from secpcurve.point import Point

_GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8


def main(argv: Sequence[str] | None = None) -> int:
    """Print a field element, the point at infinity and the generator point."""
    parser = argparse.ArgumentParser(
        prog="secpcurve",
        description="Show sample secp256k1 field elements and points.",
    )
    parser.parse_args(argv)

    print(FieldElement(255))
    print(Point(None, None))
    print(Point(FieldElement(_GX), FieldElement(_GY)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())