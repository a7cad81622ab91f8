# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Plain coordinate storage consumed by the rotation classes.

These classes hold numbers and nothing else: component properties, a bulk ``set``, a NaN check and a numpy view.
They carry no invariants and are only ever read from (as sources) or written to through ``set`` (as destinations)
by the rotation routines.
"""

from typing import Iterator

import numpy as np

from orientations._typing import ARRAY_LIKE, DOUBLE_ARRAY


__all__ = ["Tuple2D", "Tuple3D", "Point3D", "Vector3D", "Vector4D", "Matrix3D"]


class _Storage:
    """
    Common behavior for the fixed size storage classes.
    """

    _size: int = 0

    def __init__(self, *components: float):
        self._data: DOUBLE_ARRAY = np.zeros(self._size, dtype=np.float64)

        if components:
            self._data[:] = components

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return bool((self._data == other._data).all())

    def __repr__(self) -> str:
        return '{}({})'.format(self.__class__.__name__, ', '.join(repr(float(c)) for c in self._data))

    def contains_nan(self) -> bool:
        """
        Returns ``True`` if any component is NaN.
        """
        return bool(np.isnan(self._data).any())

    def set_to_zero(self) -> None:
        self._data[:] = 0

    def epsilon_equals(self, other: '_Storage', epsilon: float) -> bool:
        """
        Component-wise comparison: ``True`` when every ``|self_i - other_i| <= epsilon``.
        """
        return bool((np.abs(self._data - np.asarray(other, dtype=np.float64)) <= epsilon).all())


class Tuple2D(_Storage):
    """
    A mutable pair of coordinates.
    """

    _size = 2

    def __init__(self, x: float = 0.0, y: float = 0.0):
        super().__init__(x, y)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, val: float):
        self._data[0] = val

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, val: float):
        self._data[1] = val

    def set(self, x: float, y: float) -> None:
        self._data[:] = (x, y)


class Tuple3D(_Storage):
    """
    A mutable triple of coordinates.
    """

    _size = 3

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, val: float):
        self._data[0] = val

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, val: float):
        self._data[1] = val

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, val: float):
        self._data[2] = val

    def set(self, x: float, y: float, z: float) -> None:
        self._data[:] = (x, y, z)

    def norm(self) -> float:
        return float(np.linalg.norm(self._data))


class Point3D(Tuple3D):
    """
    A location in 3D space.
    """


class Vector3D(Tuple3D):
    """
    A free vector in 3D space.  Rotation vectors are stored in this type.
    """


class Vector4D(_Storage):
    """
    A 4D vector ``(x, y, z, s)``.

    When rotated, only ``(x, y, z)`` changes; ``s`` is a weight carried through untouched.  This is distinct from a
    quaternion even though both hold four numbers.
    """

    _size = 4

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, s: float = 0.0):
        super().__init__(x, y, z, s)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, val: float):
        self._data[0] = val

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, val: float):
        self._data[1] = val

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, val: float):
        self._data[2] = val

    @property
    def s(self) -> float:
        return float(self._data[3])

    @s.setter
    def s(self, val: float):
        self._data[3] = val

    def norm_squared(self) -> float:
        return float((self._data * self._data).sum())

    def set(self, x: float, y: float, z: float, s: float) -> None:
        self._data[:] = (x, y, z, s)


class Matrix3D(_Storage):
    """
    A generic 3x3 matrix with no structure assumed (e.g. an inertia tensor).
    """

    _size = 9

    def __init__(self, matrix: ARRAY_LIKE | None = None):
        super().__init__()

        self._data = self._data.reshape(3, 3)

        if matrix is not None:
            self.set(matrix)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.ravel().tolist())

    def __repr__(self) -> str:
        return '{}({!r})'.format(self.__class__.__name__, self._data.tolist())

    def get_element(self, row: int, column: int) -> float:
        return float(self._data[row, column])

    def set(self, matrix: ARRAY_LIKE) -> None:
        matrix = np.asanyarray(matrix, dtype=np.float64)

        if matrix.size != 9:
            raise ValueError('A 3x3 matrix requires 9 coefficients')

        self._data[:] = matrix.reshape(3, 3)
