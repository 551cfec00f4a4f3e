"""Fixed-length bit field with word-oriented storage semantics."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

WORD_BITS = 32
_WORD_MASK = (1 << WORD_BITS) - 1


class BitField:
    """A mutable sequence of ``length`` bits, numbered from 0.

    Bits are grouped into 32-bit unsigned words, bit 0 being the lowest
    bit of the first word.
    """

    __slots__ = ("_length", "_bits")

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError(f"bit field length must not be negative, got {length}")
        self._length = length
        self._bits = 0

    def __len__(self) -> int:
        return self._length

    def _check_index(self, n: int) -> None:
        if not 0 <= n < self._length:
            raise IndexError(f"bit {n} is out of range for a field of length {self._length}")

    def _full_mask(self) -> int:
        return (1 << self._length) - 1

    @property
    def _word_count(self) -> int:
        return (self._length + WORD_BITS - 1) // WORD_BITS

    def set_bit(self, n: int) -> None:
        """Set bit ``n`` to one."""
        self._check_index(n)
        self._bits |= 1 << n

    def clear_bit(self, n: int) -> None:
        """Set bit ``n`` to zero."""
        self._check_index(n)
        self._bits &= ~(1 << n)

    def get_bit(self, n: int) -> int:
        """Return 1 if bit ``n`` is set, otherwise 0."""
        self._check_index(n)
        return (self._bits >> n) & 1

    def copy(self) -> BitField:
        """Return an independent copy of this field."""
        result = BitField(self._length)
        result._bits = self._bits
        return result

    def _iter_words(self) -> Iterator[int]:
        bits = self._bits
        for _ in range(self._word_count):
            yield bits & _WORD_MASK
            bits >>= WORD_BITS

    def words(self) -> list[int]:
        """Return the storage words, lowest bits first."""
        return list(self._iter_words())

    def load_words(self, words: Iterable[int]) -> None:
        """Replace the contents with the given storage words.

        Exactly as many words as the field occupies are consumed; bits
        beyond the field length are dropped.
        """
        count = self._word_count
        taken = []
        for word in words:
            if len(taken) == count:
                break
            if not 0 <= word <= _WORD_MASK:
                raise ValueError(f"word {word} does not fit in {WORD_BITS} bits")
            taken.append(word)
        if len(taken) < count:
            raise ValueError(f"expected {count} words, got {len(taken)}")
        value = 0
        for position, word in enumerate(taken):
            value |= word << (position * WORD_BITS)
        self._bits = value & self._full_mask()

    def to_bit_string(self) -> str:
        """Return the bits as a string of '0'/'1', bit 0 first."""
        return "".join("1" if (self._bits >> i) & 1 else "0" for i in range(self._length))

    @classmethod
    def from_bit_string(cls, text: str) -> BitField:
        """Build a field from '0'/'1' characters, bit 0 first; whitespace is ignored."""
        digits = "".join(text.split())
        bad = set(digits) - {"0", "1"}
        if bad:
            raise ValueError(f"invalid bit characters: {''.join(sorted(bad))!r}")
        result = cls(len(digits))
        result._bits = sum(1 << i for i, ch in enumerate(digits) if ch == "1")
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitField):
            return NotImplemented
        return self._length == other._length and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __or__(self, other: BitField) -> BitField:
        if not isinstance(other, BitField):
            return NotImplemented
        result = BitField(max(self._length, other._length))
        result._bits = self._bits | other._bits
        return result

    def __and__(self, other: BitField) -> BitField:
        if not isinstance(other, BitField):
            return NotImplemented
        result = BitField(max(self._length, other._length))
        result._bits = self._bits & other._bits
        return result

    def __invert__(self) -> BitField:
        result = BitField(self._length)
        result._bits = ~self._bits & self._full_mask()
        return result

    def __str__(self) -> str:
        return self.to_bit_string()

    def __repr__(self) -> str:
        return f"BitField.from_bit_string({self.to_bit_string()!r})"