"""Sieve of Eratosthenes on top of the bit field and the integer set."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from setfield.bitfield import BitField
from setfield.intset import IntSet

_PER_LINE = 10


def sieve_bitfield(n: int) -> BitField:
    """Return a field of length ``n + 1`` whose set bits are the primes up to ``n``."""
    field = BitField(n + 1)
    for m in range(2, n + 1):
        field.set_bit(m)
    m = 2
    while m * m <= n:
        if field.get_bit(m):
            for k in range(2 * m, n + 1, m):
                if field.get_bit(k):
                    field.clear_bit(k)
        m += 1
    return field


def sieve_set(n: int) -> IntSet:
    """Return the set of primes up to ``n`` drawn from the universe ``0..n``."""
    numbers = IntSet(n + 1)
    for m in range(2, n + 1):
        numbers.add(m)
    m = 2
    while m * m <= n:
        if m in numbers:
            for k in range(2 * m, n + 1, m):
                if k in numbers:
                    numbers.discard(k)
        m += 1
    return numbers


def primes_up_to(n: int, use_set: bool = False) -> list[int]:
    """Return the primes not greater than ``n`` in ascending order."""
    if use_set:
        return list(sieve_set(n))
    field = sieve_bitfield(n)
    return [m for m in range(2, n + 1) if field.get_bit(m)]


def format_primes(primes: Iterable[int]) -> str:
    """Lay out numbers three wide, ten to a line, ending with a newline."""
    parts = []
    for position, prime in enumerate(primes, start=1):
        parts.append(f"{prime:3d} ")
        if position % _PER_LINE == 0:
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="setfield-sieve",
        description="Find prime numbers with the sieve of Eratosthenes.",
    )
    parser.add_argument("limit", nargs="?", type=int, help="upper bound of the numbers")
    parser.add_argument(
        "--set",
        dest="use_set",
        action="store_true",
        help="sieve with the integer set instead of the bit field",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sieve and print the surviving numbers and the primes."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.use_set:
        print("Тестирование программ поддержки множества")
        print("              Решето Эратосфена")
    else:
        print("Тестирование программ поддержки битового поля")
        print("             Решето Эратосфена")

    n = args.limit
    if n is None:
        try:
            n = int(input("Введите верхнюю границу целых значений - "))
        except (ValueError, EOFError):
            print("error: an integer upper bound is required", file=sys.stderr)
            return 1

    try:
        sieved = sieve_set(n) if args.use_set else sieve_bitfield(n)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.use_set:
        primes = list(sieved)
    else:
        primes = [m for m in range(2, n + 1) if sieved.get_bit(m)]

    print()
    print("Печать множества некратных чисел")
    print(sieved)
    print()
    print("Печать простых чисел")
    sys.stdout.write(format_primes(primes))
    print(f"В первых {n} числах {len(primes)} простых")
    return 0


if __name__ == "__main__":
    sys.exit(main())