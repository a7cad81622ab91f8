# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Shared type aliases and the read-only/mutable capability protocols.

The read-only protocols expose getters only and are what every operation in this package accepts as input.
The ``*Basics`` protocols add setters and are what operations accept as a destination.  Nothing typed with a
read-only protocol is ever written to.
"""

from typing import Union, Protocol, runtime_checkable

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = np.typing.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]
F_SCALAR_OR_ARRAY = Union[float, DOUBLE_ARRAY]


@runtime_checkable
class Tuple2DReadOnly(Protocol):

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


@runtime_checkable
class Tuple2DBasics(Tuple2DReadOnly, Protocol):

    def set(self, x: float, y: float) -> None: ...


@runtime_checkable
class Tuple3DReadOnly(Protocol):

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def z(self) -> float: ...


@runtime_checkable
class Tuple3DBasics(Tuple3DReadOnly, Protocol):

    def set(self, x: float, y: float, z: float) -> None: ...


@runtime_checkable
class Tuple4DReadOnly(Protocol):

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def z(self) -> float: ...

    @property
    def s(self) -> float: ...

    def norm_squared(self) -> float: ...


@runtime_checkable
class Tuple4DBasics(Tuple4DReadOnly, Protocol):

    def set(self, x: float, y: float, z: float, s: float) -> None: ...


@runtime_checkable
class Matrix3DReadOnly(Protocol):

    def __array__(self, dtype=None, copy=None) -> np.ndarray: ...

    def get_element(self, row: int, column: int) -> float: ...


@runtime_checkable
class Matrix3DBasics(Matrix3DReadOnly, Protocol):

    def set(self, matrix: ARRAY_LIKE) -> None: ...


QuaternionReadOnly = Tuple4DReadOnly
"""
A quaternion is consumed through the same accessors as any 4D tuple (``x``, ``y``, ``z``, ``s``, ``norm_squared``).
"""
