"""Bit fields, bounded integer sets, a prime sieve, and dynamic vectors and square matrices."""

__version__ = "0.1.0"
__all__ = ["bitfield", "intset", "sieve", "matrix", "matrix_demo"]