"""Dense matrix of arbitrary dimension, stored column-major."""

from __future__ import annotations

import copy as _copy
from collections.abc import Iterable, Sequence
from numbers import Real


class Matrix:
    """A dense matrix of floats whose elements are stored column by column."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, nb_rows: int = 0, nb_cols: int = 0) -> None:
        if nb_rows < 0 or nb_cols < 0:
            raise ValueError("Matrix dimensions cannot be negative")
        self._nb_rows = nb_rows
        self._nb_cols = nb_cols
        self._data: list[float] = [0.0] * (nb_rows * nb_cols)

    @classmethod
    def from_columns(cls, columns: Sequence[Iterable[float]]) -> Matrix:
        """Build a matrix whose columns are the given vectors, in order."""
        values = [
            list(col._data) if isinstance(col, Matrix) else [float(v) for v in col]
            for col in columns
        ]
        if not values:
            return Matrix(0, 0)
        nb_rows = len(values[0])
        if any(len(col) != nb_rows for col in values):
            raise ValueError("All columns must have the same number of elements")
        result = Matrix(nb_rows, len(values))
        result._data = [float(v) for col in values for v in col]
        return result

    # ---- dimensions ----

    def nb_rows(self) -> int:
        """Number of rows."""
        return self._nb_rows

    def nb_cols(self) -> int:
        """Number of columns."""
        return self._nb_cols

    def size(self) -> int:
        """Number of elements (rows times columns)."""
        return len(self._data)

    def resize(self, nb_rows: int, nb_cols: int) -> None:
        """Change the dimensions; element positions are not preserved."""
        if nb_rows < 0 or nb_cols < 0:
            raise ValueError("Matrix dimensions cannot be negative")
        self._nb_rows = nb_rows
        self._nb_cols = nb_cols
        wanted = nb_rows * nb_cols
        if wanted <= len(self._data):
            del self._data[wanted:]
        else:
            self._data.extend([0.0] * (wanted - len(self._data)))

    # ---- content ----

    def sum(self) -> float:
        """Sum of all elements."""
        return float(sum(self._data))

    def set_zeros(self) -> None:
        """Set every element to zero."""
        self._data = [0.0] * len(self._data)

    def set_ones(self) -> None:
        """Set every element to one."""
        self._data = [1.0] * len(self._data)

    def set_identity(self) -> None:
        """Set ones on the diagonal and zeros elsewhere."""
        rows = self._nb_rows
        self._data = [
            1.0 if col == row else 0.0
            for col in range(self._nb_cols)
            for row in range(rows)
        ]

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        result = Matrix(self._nb_cols, self._nb_rows)
        result._data = [
            self._data[col * self._nb_rows + row]
            for row in range(self._nb_rows)
            for col in range(self._nb_cols)
        ]
        return result

    def to_rows(self, transpose: bool = False) -> list[list[float]]:
        """Return the elements as a list of rows, optionally of the transpose."""
        source = self.transpose() if transpose else self
        rows, cols = source._nb_rows, source._nb_cols
        return [
            [source._data[col * rows + row] for col in range(cols)]
            for row in range(rows)
        ]

    def copy(self) -> Matrix:
        """Return an independent copy of the same type."""
        result = _copy.copy(self)
        result._data = list(self._data)
        return result

    # ---- element access ----

    def _offset(self, key: object) -> int:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("Matrix elements are indexed by (row, col)")
        row, col = key
        if not (0 <= row < self.nb_rows() and 0 <= col < self.nb_cols()):
            raise IndexError(
                "Element outside of the matrix bounds.\n"
                f"Elements ask = {row}x{col}\n"
                f"Matrix dimension = {self.nb_rows()}x{self.nb_cols()}"
            )
        return col * self._nb_rows + row

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._data[self._offset(key)] = float(value)

    # ---- arithmetic ----

    def _check_same_shape(self, other: Matrix) -> None:
        if self.nb_rows() != other.nb_rows() or self.nb_cols() != other.nb_cols():
            raise ValueError(
                "Dimensions of matrices don't agree: \n"
                f"First matrix dimensions = {self.nb_rows()}x{self.nb_cols()}\n"
                f"Second matrix dimensions = {other.nb_rows()}x{other.nb_cols()}"
            )

    def __iadd__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            self._check_same_shape(other)
            self._data = [a + b for a, b in zip(self._data, other._data)]
        elif isinstance(other, Real):
            self._data = [a + other for a in self._data]
        else:
            return NotImplemented
        return self

    def __add__(self, other: Matrix | float) -> Matrix:
        if not isinstance(other, (Matrix, Real)):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __radd__(self, other: float) -> Matrix:
        if not isinstance(other, Real):
            return NotImplemented
        return self + other

    def __isub__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            self._check_same_shape(other)
            self._data = [a - b for a, b in zip(self._data, other._data)]
        elif isinstance(other, Real):
            self._data = [a - other for a in self._data]
        else:
            return NotImplemented
        return self

    def __sub__(self, other: Matrix | float) -> Matrix:
        if not isinstance(other, (Matrix, Real)):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __rsub__(self, other: float) -> Matrix:
        if not isinstance(other, Real):
            return NotImplemented
        return self * -1.0 + other

    def __imul__(self, other: float) -> Matrix:
        if not isinstance(other, Real):
            return NotImplemented
        self._data = [a * other for a in self._data]
        return self

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Real):
            result = self.copy()
            result *= other
            return result
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.nb_cols() != other.nb_rows():
            raise ValueError(
                "Dimensions of matrices don't agree: \n"
                f"First matrix dimensions = {self.nb_rows()}x{self.nb_cols()}\n"
                f"Second matrix dimensions = {other.nb_rows()}x{other.nb_cols()}"
            )
        rows, inner, cols = self._nb_rows, self._nb_cols, other._nb_cols
        result = Matrix(rows, cols)
        result._data = [
            sum(
                self._data[k * rows + i] * other._data[j * inner + k]
                for k in range(inner)
            )
            for j in range(cols)
            for i in range(rows)
        ]
        return result

    def __rmul__(self, other: float) -> Matrix:
        if not isinstance(other, Real):
            return NotImplemented
        return self * other

    def __truediv__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * (1.0 / scalar)

    def __itruediv__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        self *= 1.0 / scalar
        return self

    # ---- comparison and display ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.nb_rows() == other.nb_rows()
            and self.nb_cols() == other.nb_cols()
            and self._data == other._data
        )

    def __str__(self) -> str:
        lines = [
            ", ".join(f"{value:g}" for value in row) for row in self.to_rows()
        ]
        return "[" + "\n ".join(lines) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_rows()!r})"