"""Fixed-size square matrices of dimension 3 and 6."""

from __future__ import annotations

from .matrix import Matrix
from .vector import Vector3d, Vector6d


class Matrix33(Matrix):
    """A 3x3 matrix; built from nine elements given row by row."""

    def __init__(self, *args: float) -> None:
        super().__init__(3, 3)
        if not args:
            return
        if len(args) != 9:
            raise TypeError("Matrix33 takes either no element or nine elements")
        rows = [args[0:3], args[3:6], args[6:9]]
        self._data = [float(rows[r][c]) for c in range(3) for r in range(3)]

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Matrix33:
        """Build a Matrix33 from a 3x3 matrix."""
        if matrix.nb_rows() != 3 or matrix.nb_cols() != 3:
            raise ValueError("Size of the matrix must be 3x3 to be cast as a Matrix33")
        result = cls()
        result._data = [float(v) for v in matrix._data]
        return result

    def resize(self, nb_rows: int, nb_cols: int) -> None:
        """A Matrix33 has a fixed size and cannot be resized."""
        raise TypeError("Matrix33 cannot be resized")

    def __mul__(self, other):
        d = self._data
        if isinstance(other, Vector3d):
            o = other._data
            return Vector3d(
                d[0] * o[0] + d[3] * o[1] + d[6] * o[2],
                d[1] * o[0] + d[4] * o[1] + d[7] * o[2],
                d[2] * o[0] + d[5] * o[1] + d[8] * o[2],
            )
        if isinstance(other, Matrix33):
            o = other._data
            result = Matrix33()
            result._data = [
                sum(d[k * 3 + i] * o[j * 3 + k] for k in range(3))
                for j in range(3)
                for i in range(3)
            ]
            return result
        return super().__mul__(other)


class Matrix66(Matrix):
    """A 6x6 matrix."""

    def __init__(self) -> None:
        super().__init__(6, 6)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Matrix66:
        """Build a Matrix66 from a 6x6 matrix."""
        if matrix.nb_rows() != 6 or matrix.nb_cols() != 6:
            raise ValueError("Size of the matrix must be 6x6 to be cast as a Matrix66")
        result = cls()
        result._data = [float(v) for v in matrix._data]
        return result

    def resize(self, nb_rows: int, nb_cols: int) -> None:
        """A Matrix66 has a fixed size and cannot be resized."""
        raise TypeError("Matrix66 cannot be resized")

    def __mul__(self, other):
        if isinstance(other, Vector6d):
            d, o = self._data, other._data
            return Vector6d(
                *(sum(d[k * 6 + i] * o[k] for k in range(6)) for i in range(6))
            )
        return super().__mul__(other)