"""Fixed-size 4x4 matrix used for homogeneous transformations."""

from __future__ import annotations

from .matrix import Matrix
from .vector import Vector3d


class Matrix44(Matrix):
    """A 4x4 matrix; built from sixteen elements given row by row."""

    def __init__(self, *args: float) -> None:
        super().__init__(4, 4)
        if args:
            self.set(*args)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Matrix44:
        """Build a Matrix44 from a 4x4 matrix."""
        if matrix.nb_rows() != 4 or matrix.nb_cols() != 4:
            raise ValueError("Size of the matrix must be 4x4 to be cast as a Matrix44")
        result = cls()
        result._data = [float(v) for v in matrix._data]
        return result

    def resize(self, nb_rows: int, nb_cols: int) -> None:
        """A Matrix44 has a fixed size and cannot be resized."""
        raise TypeError("Matrix44 cannot be resized")

    def set(self, *args: float) -> None:
        """Set all sixteen elements at once, given row by row."""
        if len(args) != 16:
            raise TypeError("Matrix44 takes either no element or sixteen elements")
        rows = [args[r * 4 : r * 4 + 4] for r in range(4)]
        self._data = [float(rows[r][c]) for c in range(4) for r in range(4)]

    def __mul__(self, other):
        d = self._data
        if isinstance(other, Vector3d):
            o = other._data
            return Vector3d(
                d[0] * o[0] + d[4] * o[1] + d[8] * o[2] + d[12],
                d[1] * o[0] + d[5] * o[1] + d[9] * o[2] + d[13],
                d[2] * o[0] + d[6] * o[1] + d[10] * o[2] + d[14],
            )
        if isinstance(other, Matrix44):
            o = other._data
            result = Matrix44()
            result._data = [
                sum(d[k * 4 + i] * o[j * 4 + k] for k in range(4))
                for j in range(4)
                for i in range(4)
            ]
            return result
        return super().__mul__(other)