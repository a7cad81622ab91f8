# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the :class:`Orientation3D` abstract base class, the capability set shared by every rotation
representation in this package.

Every operation reads its inputs through the read-only accessors and only ever writes into the object passed as the
``destination`` (or into the receiver for the explicitly in place operations such as :meth:`~Orientation3D.invert`).
The one argument forms of :meth:`~Orientation3D.transform` and :meth:`~Orientation3D.inverse_transform` use the
source as the destination, which is safe because the full result is always computed before anything is written.
"""

from abc import ABCMeta, abstractmethod

from typing import Any, Union

import numpy as np

from orientations._typing import (ARRAY_LIKE, DOUBLE_ARRAY, Matrix3DBasics, Matrix3DReadOnly, QuaternionReadOnly,
                                  Tuple2DBasics, Tuple2DReadOnly, Tuple3DBasics, Tuple3DReadOnly, Tuple4DBasics,
                                  Tuple4DReadOnly)

from orientations.rotations.core.comparisons import epsilon_equals
from orientations.rotations.core.conversions import rotmat_to_quaternion


__all__ = ["Orientation3D", "QuaternionBackedOrientation", "ROTATABLE", "ROTATABLE_DESTINATION", "QUATERNION_INPUT",
           "MATRIX_INPUT",
           "VECTOR_INPUT"]


ROTATABLE = Union['Orientation3D', Matrix3DReadOnly, Tuple4DReadOnly, Tuple3DReadOnly, Tuple2DReadOnly]
"""
Anything a rotation can be applied to.  A source is only ever read.
"""

ROTATABLE_DESTINATION = Union['Orientation3D', Matrix3DBasics, Tuple4DBasics, Tuple3DBasics, Tuple2DBasics]
"""
Anything the result of a rotation can be written into.
"""

QUATERNION_INPUT = Union['Orientation3D', QuaternionReadOnly, ARRAY_LIKE]
"""
A rotation object, a 4D tuple read as ``[x, y, z, s]``, or a length 4 array.
"""

MATRIX_INPUT = Union['Orientation3D', Matrix3DReadOnly, ARRAY_LIKE]
"""
A rotation object, a generic 3x3 matrix object, or a 3x3 array.
"""

VECTOR_INPUT = Union[Tuple3DReadOnly, ARRAY_LIKE]
"""
A 3D tuple or a length 3 array.
"""


def _tuple_3d_components(value: Tuple3DReadOnly) -> DOUBLE_ARRAY:
    """
    Reads ``(x, y, z)`` from a 3D tuple, refusing 4D tuples and rotations which also expose ``x``, ``y`` and ``z``.
    """

    if isinstance(value, (Tuple4DReadOnly, Orientation3D)) or not isinstance(value, Tuple3DReadOnly):
        raise TypeError('Expected a 3D tuple, not an object of type {}'.format(type(value).__name__))

    return np.array([value.x, value.y, value.z], dtype=np.float64)


class Orientation3D(metaclass=ABCMeta):
    """
    The abstract capability set of a 3D orientation.

    :class:`.Quaternion` and :class:`.RotationMatrix` implement every method directly on top of the functions in
    :mod:`orientations.rotations.core`.  :class:`.AxisAngle` and :class:`.YawPitchRoll` are views that route
    everything through their quaternion (see :class:`QuaternionBackedOrientation`).
    """

    @abstractmethod
    def transform(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None = None,
                  check_if_planar: bool = True) -> None:
        """
        Applies this rotation to ``source`` and stores the result in ``destination``.

        ``source`` may be another rotation, a generic 3x3 matrix, a 4D vector, a 3D tuple, or a 2D tuple.  When
        ``destination`` is ``None`` the source is overwritten.

        :param source: The object to rotate.  Never modified unless it is also the destination.
        :param destination: The object to store the result into
        :param check_if_planar: For 2D tuples, assert that this is a rotation about z only
        :raises TypeError: If the source is of a kind that cannot be rotated
        :raises NotPlanarRotationError: If a 2D tuple is rotated by an out of plane rotation and ``check_if_planar``
        """

    @abstractmethod
    def inverse_transform(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None = None,
                          check_if_planar: bool = True) -> None:
        """
        Applies the inverse of this rotation to ``source`` and stores the result in ``destination``.

        The inverse is never formed by a matrix inversion; see :meth:`transform` for the arguments.
        """

    @abstractmethod
    def add_transform(self, source: Tuple3DReadOnly, destination: Tuple3DBasics) -> None:
        """
        Rotates the 3D tuple ``source`` and adds the result to ``destination``.

        The rotated tuple is computed before ``destination`` is read, so ``source`` may be ``destination``, in which
        case it becomes :math:`\\mathbf{v}+\\mathbf{T}\\mathbf{v}`.

        :param source: The tuple to rotate.  Never modified unless it is also the destination.
        :param destination: The tuple the rotated source is added to
        :raises TypeError: If either argument is not a 3D tuple
        """

    @abstractmethod
    def get_quaternion(self, destination: Tuple4DBasics | None = None) -> Tuple4DBasics:
        """
        Returns this rotation as a :class:`.Quaternion`, written into ``destination`` if it is given.
        """

    @abstractmethod
    def get_rotation_matrix(self, destination: Matrix3DBasics | None = None) -> Matrix3DBasics:
        """
        Returns this rotation as a :class:`.RotationMatrix`, written into ``destination`` if it is given.
        """

    @abstractmethod
    def get_axis_angle(self, destination: 'Orientation3D | None' = None) -> 'Orientation3D':
        """
        Returns this rotation as an :class:`.AxisAngle`, written into ``destination`` if it is given.
        """

    @abstractmethod
    def get_rotation_vector(self, destination: Tuple3DBasics | None = None) -> Tuple3DBasics:
        """
        Returns this rotation as a rotation vector (a :class:`.Vector3D` unless ``destination`` is given).
        """

    @abstractmethod
    def get_yaw_pitch_roll(self, destination: 'Orientation3D | None' = None) -> 'Orientation3D':
        """
        Returns this rotation as a :class:`.YawPitchRoll`, written into ``destination`` if it is given.
        """

    @abstractmethod
    def set_from_quaternion(self, quaternion: QUATERNION_INPUT) -> None:
        """
        Overwrites this rotation with the rotation represented by the ``[x, y, z, s]`` quaternion.

        :param quaternion: A quaternion object or a length 4 array
        """

    @abstractmethod
    def set_from_rotation_matrix(self, matrix: MATRIX_INPUT) -> None:
        """
        Overwrites this rotation with the rotation represented by the 3x3 rotation matrix.

        :param matrix: A matrix object or a 3x3 array
        """

    @abstractmethod
    def distance(self, other: 'Orientation3D') -> float:
        """
        The angle in radians, in :math:`[0, \\pi]`, of the rotation taking this orientation to ``other``.
        """

    @abstractmethod
    def geometrically_equals(self, other: 'Orientation3D', epsilon: float) -> bool:
        """
        ``True`` if ``other`` represents the same rotation to within ``epsilon`` radians.

        This is insensitive to the representation; in particular ``q`` and ``-q`` are equal.
        """

    @abstractmethod
    def epsilon_equals(self, other: Any, epsilon: float) -> bool:
        """
        ``True`` if every stored number of ``other`` is within ``epsilon`` of the corresponding number of this
        representation.
        """

    @abstractmethod
    def set_to_zero(self) -> None:
        """
        Sets this to the identity rotation.
        """

    @abstractmethod
    def invert(self) -> None:
        """
        Replaces this rotation with its inverse in place.
        """


class QuaternionBackedOrientation(Orientation3D, metaclass=ABCMeta):
    """
    Implements the capability set for representations that are only ever a view of a quaternion.

    Subclasses provide :meth:`get_quaternion` and :meth:`set_from_quaternion`; everything else converts to a
    quaternion, does the work there, and (for in place operations) converts back.
    """

    def transform(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None = None,
                  check_if_planar: bool = True) -> None:
        self.get_quaternion().transform(source, destination, check_if_planar)

    def inverse_transform(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None = None,
                          check_if_planar: bool = True) -> None:
        self.get_quaternion().inverse_transform(source, destination, check_if_planar)

    def add_transform(self, source: Tuple3DReadOnly, destination: Tuple3DBasics) -> None:
        self.get_quaternion().add_transform(source, destination)

    def get_rotation_matrix(self, destination: Matrix3DBasics | None = None) -> Matrix3DBasics:
        return self.get_quaternion().get_rotation_matrix(destination)

    def get_axis_angle(self, destination: 'Orientation3D | None' = None) -> 'Orientation3D':
        return self.get_quaternion().get_axis_angle(destination)

    def get_rotation_vector(self, destination: Tuple3DBasics | None = None) -> Tuple3DBasics:
        return self.get_quaternion().get_rotation_vector(destination)

    def get_yaw_pitch_roll(self, destination: 'Orientation3D | None' = None) -> 'Orientation3D':
        return self.get_quaternion().get_yaw_pitch_roll(destination)

    def set_from_rotation_matrix(self, matrix: MATRIX_INPUT) -> None:
        self.set_from_quaternion(rotmat_to_quaternion(np.asarray(matrix, dtype=np.float64)))

    def get_angle(self) -> float:
        """
        The rotation angle in radians.
        """
        return self.get_quaternion().get_angle()

    def distance(self, other: Orientation3D) -> float:
        return self.get_quaternion().distance(other)

    def geometrically_equals(self, other: Orientation3D, epsilon: float) -> bool:
        return self.get_quaternion().geometrically_equals(other, epsilon)

    def epsilon_equals(self, other: Any, epsilon: float) -> bool:
        if not isinstance(other, self.__class__):
            return False

        return epsilon_equals(self._components(), other._components(), epsilon)

    def invert(self) -> None:
        quaternion = self.get_quaternion()
        quaternion.invert()
        self.set_from_quaternion(quaternion)

    def __eq__(self, other) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented

        return bool((self._components() == other._components()).all())

    @abstractmethod
    def _components(self) -> DOUBLE_ARRAY:
        """
        The stored numbers, in order, used for the literal comparisons.
        """
