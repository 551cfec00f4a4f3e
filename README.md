# setfield

Small building blocks for bits, sets of small integers and square matrices.
The package needs nothing beyond the standard library.

## Modules

- `setfield.bitfield.BitField` is a fixed-length bit field. Its bits are
  numbered from 0 and stored in 32-bit words, with bit 0 as the lowest bit of
  the first word.
  - `set_bit`, `clear_bit` and `get_bit` give access to one bit. `get_bit`
    returns 0 or 1. An index outside `0 .. len - 1` raises `IndexError`.
  - `|`, `&` and `~` build new fields. The result of `|` and `&` has the
    length of the longer operand. Two fields are equal only when they have
    the same length and the same bits.
  - `words()` and `load_words()` convert to and from the list of storage
    words. `to_bit_string()` and `BitField.from_bit_string()` convert to and
    from a string of `0`/`1` characters, with bit 0 first. `str()` gives the
    bit string.
  - A negative length raises `ValueError`.
- `setfield.intset.IntSet` is a subset of `0 .. max_power - 1` built on a
  `BitField`.
  - `add` and `discard` change the set in place. An element outside the
    universe raises `IndexError`. `in` tests membership and never raises.
  - Iterating a set yields its members in ascending order.
  - `+` with a set gives the union, and `+` with an int inserts the element.
    `-` with an int removes the element. `*` gives the intersection, and `~`
    gives the complement within the universe. The result of a union or an
    intersection takes the larger of the two universes.
  - `from_bitfield`, `from_bit_string` and `to_bitfield` convert between sets
    and bit fields. `str()` gives a form such as `{ 1 3 }`.
- `setfield.sieve` runs the sieve of Eratosthenes.
  - `sieve_bitfield(n)` returns the result as a `BitField`, and
    `sieve_set(n)` returns it as an `IntSet`.
  - `primes_up_to(n, use_set=False)` returns the primes as a list.
  - `format_primes` lays numbers out three characters wide, ten to a line.
- `setfield.matrix` provides `DynamicVector` and `DynamicMatrix`.
  - Indexing is bounds-checked. A negative index or an index that is too
    large raises `IndexError`.
  - A size of zero or less raises `ValueError`. So does a size above
    `MAX_VECTOR_SIZE` for a vector or above `MAX_MATRIX_SIZE` for a matrix.
  - Vectors support `+` and `-` with a vector or a scalar. `*` with a scalar
    scales the vector, and `*` with a vector gives the dot product.
  - Matrices support `+` and `-`. They support `*` with a matrix, a vector or
    a scalar. Operands of different sizes raise `ValueError`.
  - `m[i]` returns row `i` as a live `DynamicVector`, so `m[i][j] = x` sets
    an element.
- `setfield.matrix_demo.build_demo(size=5)` returns `(a, b, a + b)`. Here `a`
  is upper-triangular with `a[i][j] = 10 * i + j`, and `b = 100 * a`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from setfield.bitfield import BitField
from setfield.intset import IntSet

bits = BitField(8)
bits.set_bit(3)
print((~bits).to_bit_string())   # 11101111

evens = IntSet(10)
for n in range(0, 10, 2):
    evens.add(n)
print(3 in evens, list(evens))   # False [0, 2, 4, 6, 8]
print(~evens)                    # { 1 3 5 7 9 }
```

```python
from setfield.sieve import primes_up_to

print(primes_up_to(30))          # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
```

```python
from setfield.matrix import DynamicMatrix, DynamicVector

m = DynamicMatrix(2)
m[0][0] = 1
m[1][1] = 2
v = DynamicVector.from_values([3, 4])
print(m * v)                     # 3 8
```

## Commands

`setfield-sieve` prints the sieved bit string (or set, with `--set`), then
the primes and how many there are. You can pass the upper bound as an
argument. If you leave it out, the command asks for it:

```
setfield-sieve 100
setfield-sieve --set 100
```

`setfield-matrix-demo` prints the demonstration matrices `a`, `b` and
`a + b`. `--size` sets the matrix size, which is 5 by default:

```
setfield-matrix-demo
setfield-matrix-demo --size 3
```

## Limits

- Matrices are square only.
- Nothing is read from or saved to files. The only text formats are the bit
  strings, the word lists and the printed forms described above.