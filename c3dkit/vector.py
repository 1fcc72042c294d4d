"""Fixed-size column vectors of three and six elements."""

from __future__ import annotations

import math

from .matrix import Matrix


class Vector3d(Matrix):
    """A 3x1 column vector with x, y and z components."""

    _LENGTH = 3

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__(3, 1)
        self.set(x, y, z)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Vector3d:
        """Build a vector from a 3x1 matrix."""
        if matrix.nb_rows() != 3 or matrix.nb_cols() != 1:
            raise ValueError("Size of the matrix must be 3x1 to be cast as a Vector3d")
        result = cls()
        result._data = [float(v) for v in matrix._data]
        return result

    def resize(self, nb_rows: int, nb_cols: int) -> None:
        """A Vector3d has a fixed size and cannot be resized."""
        raise TypeError("Vector3d cannot be resized")

    def set(self, x: float, y: float, z: float) -> None:
        """Set the three components at once."""
        self._data = [float(x), float(y), float(z)]

    @property
    def x(self) -> float:
        """The X component."""
        return self._data[0]

    @x.setter
    def x(self, value: float) -> None:
        self._data[0] = float(value)

    @property
    def y(self) -> float:
        """The Y component."""
        return self._data[1]

    @y.setter
    def y(self, value: float) -> None:
        self._data[1] = float(value)

    @property
    def z(self) -> float:
        """The Z component."""
        return self._data[2]

    @z.setter
    def z(self, value: float) -> None:
        self._data[2] = float(value)

    def is_valid(self) -> bool:
        """False if any component is NaN."""
        return not any(math.isnan(v) for v in self._data)

    def dot(self, other: Vector3d) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3d) -> Vector3d:
        """Cross product with another vector."""
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> None:
        """Scale the vector in place to unit length."""
        length = self.norm()
        self._data = [v / length for v in self._data]

    def __getitem__(self, key):
        if isinstance(key, int) and not isinstance(key, bool):
            if not 0 <= key < self._LENGTH:
                raise IndexError("Maximal index for a vector3d is 2")
            return self._data[key]
        return super().__getitem__(key)

    def __setitem__(self, key, value) -> None:
        if isinstance(key, int) and not isinstance(key, bool):
            if not 0 <= key < self._LENGTH:
                raise IndexError("Maximal index for a vector3d is 2")
            self._data[key] = float(value)
            return
        super().__setitem__(key, value)

    def __str__(self) -> str:
        return f"Vector = [{self.x:g}, {self.y:g}, {self.z:g}]"


class Vector6d(Matrix):
    """A 6x1 column vector."""

    _LENGTH = 6

    def __init__(
        self,
        e0: float = 0.0,
        e1: float = 0.0,
        e2: float = 0.0,
        e3: float = 0.0,
        e4: float = 0.0,
        e5: float = 0.0,
    ) -> None:
        super().__init__(6, 1)
        self._data = [float(e) for e in (e0, e1, e2, e3, e4, e5)]

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Vector6d:
        """Build a vector from a 6x1 matrix."""
        if matrix.nb_rows() != 6 or matrix.nb_cols() != 1:
            raise ValueError("Size of the matrix must be 6x1 to be cast as a Vector6d")
        result = cls()
        result._data = [float(v) for v in matrix._data]
        return result

    def resize(self, nb_rows: int, nb_cols: int) -> None:
        """A Vector6d has a fixed size and cannot be resized."""
        raise TypeError("Vector6d cannot be resized")

    def __getitem__(self, key):
        if isinstance(key, int) and not isinstance(key, bool):
            if not 0 <= key < self._LENGTH:
                raise IndexError("Maximal index for a Vector6d is 5")
            return self._data[key]
        return super().__getitem__(key)

    def __setitem__(self, key, value) -> None:
        if isinstance(key, int) and not isinstance(key, bool):
            if not 0 <= key < self._LENGTH:
                raise IndexError("Maximal index for a Vector6d is 5")
            self._data[key] = float(value)
            return
        super().__setitem__(key, value)

    def __str__(self) -> str:
        return "Vector = [" + ", ".join(f"{v:g}" for v in self._data) + "]"