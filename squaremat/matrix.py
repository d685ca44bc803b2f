"""Square matrices of floats with element-wise and linear-algebra operators.

Ordering and equality compare matrices by the sum of their elements, so
matrices of different sizes can be compared with each other.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator

_SIZE_MISMATCH = "The sizes of the two matrix should be the same"
_ROW_INDEX_ERROR = "The index must be bewteen 0 to rows -1"
_COL_INDEX_ERROR = "The index must be bewteen 0 to cols -1"


class Row:
    """A writable view of one row of a matrix.

    Assigning through the view changes the matrix it came from.
    """

    __slots__ = ("_values",)

    def __init__(self, values: list[float]) -> None:
        self._values = values

    def _check(self, index: int) -> None:
        if not isinstance(index, numbers.Integral):
            raise TypeError("row index must be an integer")
        if index < 0 or index >= len(self._values):
            raise IndexError(_COL_INDEX_ERROR)

    def __getitem__(self, index: int) -> float:
        self._check(index)
        return self._values[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._check(index)
        self._values[index] = float(value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"Row({self._values!r})"


def _determinant(rows: list[list[float]]) -> float:
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    det = 0.0
    for k, pivot in enumerate(rows[0]):
        minor = [row[:k] + row[k + 1:] for row in rows[1:]]
        term = _determinant(minor) * pivot
        if k % 2 == 0:
            det += term
        else:
            det -= term
    return det


class SquareMat:
    """An n-by-n matrix of floats."""

    __hash__ = None  # mutable, and equality is by element sum

    def __init__(self, n: int, init_value: float = 0.0) -> None:
        if not isinstance(n, numbers.Integral):
            raise TypeError("the size of the matrix must be an integer")
        if n <= 0:
            raise ValueError("the size of the matrix must be positive")
        value = float(init_value)
        self._rows: list[list[float]] = [[value] * n for _ in range(n)]

    @classmethod
    def _from_rows(cls, rows: list[list[float]]) -> SquareMat:
        mat = cls.__new__(cls)
        mat._rows = rows
        return mat

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self._rows)

    def copy(self) -> SquareMat:
        """Return an independent copy of this matrix."""
        return self._from_rows([list(row) for row in self._rows])

    def assign(self, other: SquareMat) -> SquareMat:
        """Overwrite this matrix with the contents of ``other``, resizing if needed."""
        if other is self:
            return self
        if self.size == other.size:
            for mine, theirs in zip(self._rows, other._rows):
                mine[:] = theirs
        else:
            self._rows = [list(row) for row in other._rows]
        return self

    def _check_same_size(self, other: SquareMat) -> None:
        if self.size != other.size:
            raise ValueError(_SIZE_MISMATCH)

    def _map(self, func) -> SquareMat:
        return self._from_rows([[func(v) for v in row] for row in self._rows])

    def _combine(self, other: SquareMat, func) -> SquareMat:
        self._check_same_size(other)
        return self._from_rows(
            [[func(a, b) for a, b in zip(mine, theirs)]
             for mine, theirs in zip(self._rows, other._rows)]
        )

    def _sum(self) -> float:
        return sum(sum(row) for row in self._rows)

    def __add__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._combine(other, lambda a, b: a - b)

    def __neg__(self) -> SquareMat:
        return self._map(lambda v: -v)

    def __mul__(self, other):
        """Matrix product with another matrix, or scaling by a number."""
        if isinstance(other, SquareMat):
            self._check_same_size(other)
            columns = list(zip(*other._rows))
            return self._from_rows(
                [[sum(a * b for a, b in zip(row, col)) for col in columns]
                 for row in self._rows]
            )
        if isinstance(other, numbers.Real):
            return self._map(lambda v: v * other)
        return NotImplemented

    def __rmul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return self._map(lambda v: v * scalar)
        return NotImplemented

    def __mod__(self, other):
        """Element-wise product with a matrix, or C-style remainder by an integer."""
        if isinstance(other, SquareMat):
            return self._combine(other, lambda a, b: a * b)
        if isinstance(other, numbers.Integral):
            return self._map(lambda v: math.fmod(v, other))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self._map(lambda v: v / scalar)

    def __pow__(self, exponent):
        """Raise the matrix to a non-negative integer power."""
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        if exponent < 0:
            raise ValueError("the scalar must be bigger or equal to 0")
        if exponent == 0:
            n = self.size
            return self._from_rows(
                [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
            )
        result = self.copy()
        for _ in range(exponent - 1):
            result = result * self
        return result

    def __xor__(self, exponent):
        return self.__pow__(exponent)

    def increment(self) -> SquareMat:
        """Add one to every element in place and return this matrix."""
        for row in self._rows:
            row[:] = [v + 1 for v in row]
        return self

    def decrement(self) -> SquareMat:
        """Subtract one from every element in place and return this matrix."""
        for row in self._rows:
            row[:] = [v - 1 for v in row]
        return self

    def transpose(self) -> SquareMat:
        """Return the transposed matrix."""
        return self._from_rows([list(col) for col in zip(*self._rows)])

    def __invert__(self) -> SquareMat:
        return self.transpose()

    def __getitem__(self, index: int) -> Row:
        if not isinstance(index, numbers.Integral):
            raise TypeError("matrix index must be an integer")
        if index < 0 or index >= self.size:
            raise IndexError(_ROW_INDEX_ERROR)
        return Row(self._rows[index])

    def __eq__(self, other) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._sum() == other._sum()

    def __ne__(self, other) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self == other

    def __lt__(self, other) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._sum() < other._sum()

    def __le__(self, other) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self <= other

    def __ge__(self, other) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self > other or self == other

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return _determinant(self._rows)

    def __iadd__(self, other):
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    def __isub__(self, other):
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    def __imul__(self, other):
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    def __imod__(self, other):
        result = self.__mod__(other)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    def __itruediv__(self, scalar):
        result = self.__truediv__(scalar)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    def __str__(self) -> str:
        return "".join(
            "".join(f"{v:g} " for v in row) + "\n" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"SquareMat(n={self.size}, rows={self._rows!r})"