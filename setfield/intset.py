"""Set of small non-negative integers backed by a bit field."""

from __future__ import annotations

from collections.abc import Iterator

from setfield.bitfield import BitField


class IntSet:
    """A subset of the universe ``{0, 1, ..., max_power - 1}``.

    Membership is kept in a :class:`BitField` whose bit ``i`` is set when
    ``i`` belongs to the set.
    """

    __slots__ = ("_max_power", "_bits")

    def __init__(self, max_power: int) -> None:
        self._bits = BitField(max_power)
        self._max_power = max_power

    @classmethod
    def from_bitfield(cls, bitfield: BitField) -> IntSet:
        """Build a set whose universe size and members come from ``bitfield``."""
        result = cls(len(bitfield))
        result._bits = bitfield.copy()
        return result

    @classmethod
    def from_bit_string(cls, text: str) -> IntSet:
        """Build a set from '0'/'1' flags, element 0 first; whitespace is ignored."""
        return cls.from_bitfield(BitField.from_bit_string(text))

    def to_bitfield(self) -> BitField:
        """Return the characteristic bit field as an independent copy."""
        return self._bits.copy()

    @property
    def max_power(self) -> int:
        """Size of the universe the set is drawn from."""
        return self._max_power

    def _check_element(self, elem: int) -> None:
        if not 0 <= elem < self._max_power:
            raise IndexError(
                f"element {elem} is out of range for a universe of size {self._max_power}"
            )

    def add(self, elem: int) -> None:
        """Include ``elem`` in the set."""
        self._check_element(elem)
        self._bits.set_bit(elem)

    def discard(self, elem: int) -> None:
        """Remove ``elem`` from the set if present.

        Raises IndexError when ``elem`` lies outside the universe.
        """
        self._check_element(elem)
        self._bits.clear_bit(elem)

    def __contains__(self, elem: object) -> bool:
        if not isinstance(elem, int) or not 0 <= elem < self._max_power:
            return False
        return bool(self._bits.get_bit(elem))

    def __iter__(self) -> Iterator[int]:
        return (i for i in range(self._max_power) if self._bits.get_bit(i))

    def copy(self) -> IntSet:
        """Return an independent copy of this set."""
        return IntSet.from_bitfield(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self._max_power == other._max_power and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: IntSet | int) -> IntSet:
        """Union with another set, or with a single element of the universe."""
        if isinstance(other, IntSet):
            return IntSet.from_bitfield(self._bits | other._bits)
        if isinstance(other, int):
            result = self.copy()
            result.add(other)
            return result
        return NotImplemented

    def __sub__(self, elem: int) -> IntSet:
        """Difference with a single element of the universe."""
        if not isinstance(elem, int):
            return NotImplemented
        result = self.copy()
        result.discard(elem)
        return result

    def __mul__(self, other: IntSet) -> IntSet:
        """Intersection."""
        if not isinstance(other, IntSet):
            return NotImplemented
        return IntSet.from_bitfield(self._bits & other._bits)

    def __invert__(self) -> IntSet:
        """Complement within the universe."""
        return IntSet.from_bitfield(~self._bits)

    def __str__(self) -> str:
        return "{ " + "".join(f"{i} " for i in self) + "}"

    def __repr__(self) -> str:
        return f"IntSet.from_bit_string({self._bits.to_bit_string()!r})"