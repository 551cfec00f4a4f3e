"""Square matrices and vectors of fixed size with bounds-checked access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Number
from typing import Any

MAX_VECTOR_SIZE = 100_000_000
MAX_MATRIX_SIZE = 10_000


def _check_vector_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"vector size should be greater than zero, got {size}")
    if size > MAX_VECTOR_SIZE:
        raise ValueError(f"vector size {size} exceeds the limit of {MAX_VECTOR_SIZE}")


class DynamicVector:
    """A vector of ``size`` elements, all zero initially.

    Indices run from 0 to ``size - 1``; negative indices are rejected.
    """

    __slots__ = ("_items",)

    def __init__(self, size: int = 1) -> None:
        _check_vector_size(size)
        self._items: list[Any] = [0] * size

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> DynamicVector:
        """Build a vector holding ``values`` in order."""
        items = list(values)
        _check_vector_size(len(items))
        result = cls.__new__(cls)
        result._items = items
        return result

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError(f"vector index must be an integer, got {type(index).__name__}")
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} is out of range for a vector of size {len(self._items)}")

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def copy(self) -> DynamicVector:
        """Return an independent copy of this vector."""
        return DynamicVector.from_values(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def _check_same_size(self, other: DynamicVector) -> None:
        if len(self._items) != len(other._items):
            raise ValueError(
                f"vector sizes differ: {len(self._items)} and {len(other._items)}"
            )

    def __add__(self, other: DynamicVector | Number) -> DynamicVector:
        """Element-wise sum with a vector of the same size, or with a scalar."""
        if isinstance(other, DynamicVector):
            self._check_same_size(other)
            return DynamicVector.from_values(a + b for a, b in zip(self._items, other._items))
        if isinstance(other, Number):
            return DynamicVector.from_values(a + other for a in self._items)
        return NotImplemented

    def __sub__(self, other: DynamicVector | Number) -> DynamicVector:
        """Element-wise difference with a vector of the same size, or with a scalar."""
        if isinstance(other, DynamicVector):
            self._check_same_size(other)
            return DynamicVector.from_values(a - b for a, b in zip(self._items, other._items))
        if isinstance(other, Number):
            return DynamicVector.from_values(a - other for a in self._items)
        return NotImplemented

    def __mul__(self, other: DynamicVector | Number) -> Any:
        """Dot product with a vector of the same size, or scaling by a scalar."""
        if isinstance(other, DynamicVector):
            self._check_same_size(other)
            return sum((a * b for a, b in zip(self._items, other._items)), 0)
        if isinstance(other, Number):
            return DynamicVector.from_values(a * other for a in self._items)
        return NotImplemented

    def __str__(self) -> str:
        return "".join(f"{item} " for item in self._items)

    def __repr__(self) -> str:
        return f"DynamicVector.from_values({self._items!r})"


class DynamicMatrix:
    """A square ``size`` x ``size`` matrix of zeros, indexed row first."""

    __slots__ = ("_rows",)

    def __init__(self, size: int = 1) -> None:
        _check_vector_size(size)
        if size > MAX_MATRIX_SIZE:
            raise ValueError(f"matrix size {size} exceeds the limit of {MAX_MATRIX_SIZE}")
        self._rows = [DynamicVector(size) for _ in range(size)]

    @classmethod
    def _from_rows(cls, rows: list[DynamicVector]) -> DynamicMatrix:
        result = cls.__new__(cls)
        result._rows = rows
        return result

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> DynamicVector:
        """Return row ``index``; changes to it change the matrix."""
        if not isinstance(index, int):
            raise TypeError(f"matrix index must be an integer, got {type(index).__name__}")
        if not 0 <= index < len(self._rows):
            raise IndexError(f"row {index} is out of range for a matrix of size {len(self._rows)}")
        return self._rows[index]

    def copy(self) -> DynamicMatrix:
        """Return an independent copy of this matrix."""
        return DynamicMatrix._from_rows([row.copy() for row in self._rows])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicMatrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def _check_same_size(self, size: int) -> None:
        if len(self._rows) != size:
            raise ValueError(f"sizes differ: {len(self._rows)} and {size}")

    def __add__(self, other: DynamicMatrix) -> DynamicMatrix:
        if not isinstance(other, DynamicMatrix):
            return NotImplemented
        self._check_same_size(len(other))
        return DynamicMatrix._from_rows([a + b for a, b in zip(self._rows, other._rows)])

    def __sub__(self, other: DynamicMatrix) -> DynamicMatrix:
        if not isinstance(other, DynamicMatrix):
            return NotImplemented
        self._check_same_size(len(other))
        return DynamicMatrix._from_rows([a - b for a, b in zip(self._rows, other._rows)])

    def __mul__(self, other: DynamicMatrix | DynamicVector | Number) -> Any:
        """Product with a matrix or a vector of the same size, or with a scalar."""
        if isinstance(other, DynamicMatrix):
            self._check_same_size(len(other))
            columns = list(zip(*(list(row) for row in other._rows)))
            return DynamicMatrix._from_rows(
                [
                    DynamicVector.from_values(
                        sum((a * b for a, b in zip(row, column)), 0) for column in columns
                    )
                    for row in self._rows
                ]
            )
        if isinstance(other, DynamicVector):
            self._check_same_size(len(other))
            return DynamicVector.from_values(row * other for row in self._rows)
        if isinstance(other, Number):
            return DynamicMatrix._from_rows([row * other for row in self._rows])
        return NotImplemented

    def __str__(self) -> str:
        return "".join(f"{row}\n" for row in self._rows)

    def __repr__(self) -> str:
        return f"<DynamicMatrix {[list(row) for row in self._rows]!r}>"