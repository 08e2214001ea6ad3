"""Finite-field and elliptic-curve arithmetic for secp256k1, with a small demo command."""

__version__ = "0.1.0"
__all__ = ["field", "point", "cli"]