"""Small demonstration of matrix addition on upper-triangular matrices."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from setfield.matrix import DynamicMatrix


def build_demo(size: int = 5) -> tuple[DynamicMatrix, DynamicMatrix, DynamicMatrix]:
    """Return ``(a, b, a + b)`` for upper-triangular ``a`` and ``b = 100 * a``."""
    a = DynamicMatrix(size)
    b = DynamicMatrix(size)
    for i in range(size):
        for j in range(i, size):
            a[i][j] = i * 10 + j
            b[i][j] = (i * 10 + j) * 100
    return a, b, a + b


def main(argv: Sequence[str] | None = None) -> int:
    """Print the two demo matrices and their sum."""
    parser = argparse.ArgumentParser(
        prog="setfield-matrix-demo",
        description="Show the sum of two upper-triangular matrices.",
    )
    parser.add_argument("--size", type=int, default=5, help="matrix size (default 5)")
    args = parser.parse_args(argv)

    try:
        a, b, c = build_demo(args.size)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("Тестирование класс работы с матрицами")
    print("Matrix a = ")
    print(a)
    print("Matrix b = ")
    print(b)
    print("Matrix c = a + b")
    print(c)
    return 0


if __name__ == "__main__":
    sys.exit(main())