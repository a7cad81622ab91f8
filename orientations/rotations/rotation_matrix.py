# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`RotationMatrix` class, the second hub representation of a rotation.

Unlike :class:`.Quaternion`, a rotation matrix repairs itself: every time it is used to rotate something it is first
re-orthonormalized in place (:meth:`RotationMatrix.normalize`), because products of many matrices accumulate
rounding error faster than a quaternion does.  A matrix that cannot be repaired raises
:class:`.InvalidRotationError`.
"""

import copy
import logging

from typing import Any

import numpy as np

from orientations._typing import (ARRAY_LIKE, DOUBLE_ARRAY, Matrix3DBasics, Matrix3DReadOnly, Tuple2DReadOnly,
                                  Tuple3DBasics, Tuple3DReadOnly, Tuple4DBasics, Tuple4DReadOnly)
from orientations.tuples import Vector3D
from orientations.utilities.mixin_classes import UserOptionConfigured

from orientations.rotations.axis_angle import AxisAngle
from orientations.rotations.core import comparisons, normalization
from orientations.rotations.core._helpers import _as_matrix_array, _as_quaternion_array, _as_vector_array
from orientations.rotations.core.conversions import (axis_angle_to_rotmat, quaternion_to_rotmat,
                                                     rotmat_to_axis_angle, rotmat_to_quaternion, rotmat_to_rotvec,
                                                     rotmat_to_yaw_pitch_roll, rotvec_to_rotmat,
                                                     yaw_pitch_roll_to_rotmat)
from orientations.rotations.core.quaternion_math import quaternion_multiplication
from orientations.rotations.core.transforms import (inverse_rotate_matrix, rotate_matrix, rotmat_inverse_rotate_vectors,
                                                    rotmat_rotate_vectors)
from orientations.rotations.orientation import (MATRIX_INPUT, QUATERNION_INPUT, ROTATABLE, ROTATABLE_DESTINATION,
                                                VECTOR_INPUT, Orientation3D, _tuple_3d_components)
from orientations.rotations.quaternion import Quaternion, _to_quaternion_array
from orientations.rotations.tolerances import EPS_ROTATION_MATRIX, RotationOptions
from orientations.rotations.yaw_pitch_roll import YawPitchRoll


__all__ = ["RotationMatrix"]


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting the repairs made by the self healing normalization.
"""


def _to_matrix_array(rotation: MATRIX_INPUT) -> DOUBLE_ARRAY:
    """
    Returns the 3x3 array for any rotation object or matrix like input.
    """

    if isinstance(rotation, Orientation3D) and not isinstance(rotation, RotationMatrix):
        rotation = rotation.get_rotation_matrix()

    return _as_matrix_array(rotation)


class RotationMatrix(UserOptionConfigured[RotationOptions], RotationOptions, Orientation3D):
    """
    A 3x3 rotation matrix :math:`\\mathbf{T}` stored row major, so that :math:`\\mathbf{y}_B=\\mathbf{T}\\mathbf{y}_A`
    rotates a vector from frame :math:`A` to frame :math:`B`.

    The coefficients are stored exactly as given; nothing is checked when the matrix is set.  The matrix is
    re-orthonormalized in place right before it is used to rotate anything, so small drift is repaired silently (and
    logged at the DEBUG level) while a degenerate matrix raises :class:`.InvalidRotationError` at the point of use.

    The inverse rotation is never computed with a matrix inverse, only with the transpose.
    """

    def __init__(self, matrix: ARRAY_LIKE | None = None, options: RotationOptions | None = None):
        """
        :param matrix: The 9 coefficients of the rotation matrix.  Defaults to the identity.
        :param options: The tolerances to use for this instance
        """

        super().__init__(RotationOptions, options=options)

        self._data: DOUBLE_ARRAY = np.eye(3)

        if matrix is not None:
            self.set(matrix)

    def get_element(self, row: int, column: int) -> float:
        return float(self._data[row, column])

    def set(self, matrix: ARRAY_LIKE) -> None:
        """
        Overwrites all 9 coefficients.  The matrix is not checked or repaired here.

        :param matrix: A matrix object or anything with 9 coefficients in row major order
        """

        self._data[:] = _as_matrix_array(matrix)

    def set_to_zero(self) -> None:
        self._data[:] = np.eye(3)

    def set_from_quaternion(self, quaternion: QUATERNION_INPUT) -> None:
        self._data[:] = quaternion_to_rotmat(_as_quaternion_array(quaternion))

    def set_from_rotation_matrix(self, matrix: MATRIX_INPUT) -> None:
        self.set(matrix)

    def set_from_axis_angle(self, axis: VECTOR_INPUT, angle: float) -> None:
        """
        Sets this matrix from a rotation axis (normalized here) and an angle in radians.
        """

        self._data[:] = axis_angle_to_rotmat(_as_vector_array(axis), angle)

    def set_from_rotation_vector(self, vector: VECTOR_INPUT) -> None:
        """
        Sets this matrix from a rotation vector (a 3D tuple or a length 3 array).
        """

        self._data[:] = rotvec_to_rotmat(_as_vector_array(vector))

    def set_from_yaw_pitch_roll(self, yaw: float, pitch: float, roll: float) -> None:
        """
        Sets this matrix to :math:`\\mathbf{R}_z(\\psi)\\mathbf{R}_y(\\theta)\\mathbf{R}_x(\\phi)`.
        """

        self._data[:] = yaw_pitch_roll_to_rotmat((yaw, pitch, roll))

    def normalize(self) -> None:
        """
        Re-orthonormalizes this matrix in place with Gram-Schmidt on its columns.

        This is called automatically before every transform.  Applying it to a matrix that is already orthonormal
        changes nothing beyond rounding.

        :raises InvalidRotationError: If the matrix is degenerate, contains NaN, or is a reflection
        """

        repaired = normalization.orthonormalize(self._data)

        drift = np.abs(repaired - self._data).max()

        if drift > EPS_ROTATION_MATRIX:
            _LOGGER.debug(f'rotation matrix repaired, largest coefficient change {drift:.3e}')

        self._data[:] = repaired

    def is_rotation_matrix(self, epsilon: float = EPS_ROTATION_MATRIX) -> bool:
        """
        Tests (without repairing) whether this matrix is orthonormal with a determinant of +1.
        """

        return normalization.is_rotation_matrix(self._data, epsilon)

    def determinant(self) -> float:
        return float(np.linalg.det(self._data))

    def is_orientation_2d(self, epsilon: float | None = None) -> bool:
        """
        Tests whether this is a rotation about the z axis only.

        :param epsilon: The tolerance on the out of plane coefficients.  Defaults to :attr:`planar_tolerance`.
        """

        return normalization.is_rotmat_planar(self._data, self.planar_tolerance if epsilon is None else epsilon)

    def check_if_orientation_2d(self, epsilon: float | None = None) -> None:
        """
        Asserts that this is a rotation about the z axis only.

        :raises NotPlanarRotationError: If any out of plane coefficient is off by more than epsilon
        """

        normalization.check_if_rotmat_planar(self._data, self.planar_tolerance if epsilon is None else epsilon)

    def get_angle(self) -> float:
        """
        The rotation angle in radians, in :math:`[0, \\pi]`.
        """

        return rotmat_to_axis_angle(self._data)[1]

    def get_yaw(self) -> float:
        return rotmat_to_yaw_pitch_roll(self._data, self.gimbal_lock_tolerance)[0]

    def get_pitch(self) -> float:
        return rotmat_to_yaw_pitch_roll(self._data, self.gimbal_lock_tolerance)[1]

    def get_roll(self) -> float:
        return rotmat_to_yaw_pitch_roll(self._data, self.gimbal_lock_tolerance)[2]

    def get_quaternion(self, destination: Tuple4DBasics | None = None) -> Tuple4DBasics:
        if destination is None:
            destination = Quaternion()

        destination.set(*rotmat_to_quaternion(self._data))

        return destination

    def get_rotation_matrix(self, destination: Matrix3DBasics | None = None) -> Matrix3DBasics:
        if destination is None:
            destination = RotationMatrix()

        destination.set(self._data)

        return destination

    def get_axis_angle(self, destination: 'AxisAngle | None' = None) -> 'AxisAngle':
        if destination is None:
            destination = AxisAngle()

        destination.set(*rotmat_to_axis_angle(self._data))

        return destination

    def get_rotation_vector(self, destination: Tuple3DBasics | None = None) -> Tuple3DBasics:
        if destination is None:
            destination = Vector3D()

        destination.set(*rotmat_to_rotvec(self._data))

        return destination

    def get_yaw_pitch_roll(self, destination: 'YawPitchRoll | None' = None) -> 'YawPitchRoll':
        if destination is None:
            destination = YawPitchRoll()

        destination.set(*rotmat_to_yaw_pitch_roll(self._data, self.gimbal_lock_tolerance))

        return destination

    def invert(self) -> None:
        """
        Inverts this rotation in place by transposing it.
        """

        self._data[:] = self._data.T.copy()

    def multiply(self, other: MATRIX_INPUT) -> None:
        """
        Sets this matrix to :math:`\\mathbf{T}_{self}\\mathbf{T}_{other}` (``other`` is applied first).
        """

        self._data[:] = self._data @ _to_matrix_array(other)

    def pre_multiply(self, other: MATRIX_INPUT) -> None:
        """
        Sets this matrix to :math:`\\mathbf{T}_{other}\\mathbf{T}_{self}` (``other`` is applied last).
        """

        self._data[:] = _to_matrix_array(other) @ self._data

    def transform(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None = None,
                  check_if_planar: bool = True) -> None:
        """
        Rotates ``source`` by this matrix and stores the result in ``destination`` (``source`` if not given).

        The matrix is re-orthonormalized first.

        =====================  ==============================================================================
        source                 result
        =====================  ==============================================================================
        RotationMatrix         :math:`\\mathbf{T}\\mathbf{M}`
        other rotations        :math:`\\mathbf{q}(\\mathbf{T})\\otimes\\mathbf{q}_{source}`
        generic 3x3 matrix     :math:`\\mathbf{T}\\mathbf{M}\\mathbf{T}^T`
        4D vector              ``(x, y, z)`` rotated, ``s`` unchanged
        3D tuple               :math:`\\mathbf{T}\\mathbf{v}`
        2D tuple               ``(x, y, 0)`` rotated; the rotation must be about z if ``check_if_planar``
        =====================  ==============================================================================

        :raises InvalidRotationError: If the matrix cannot be repaired
        """

        self._apply(source, destination, check_if_planar, inverse=False)

    def inverse_transform(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None = None,
                          check_if_planar: bool = True) -> None:
        """
        Rotates ``source`` by the transpose of this matrix.  See :meth:`transform`.
        """

        self._apply(source, destination, check_if_planar, inverse=True)

    def add_transform(self, source: Tuple3DReadOnly, destination: Tuple3DBasics) -> None:
        """
        Rotates the 3D tuple ``source`` by this matrix and adds the result to ``destination``.

        The matrix is re-orthonormalized first.  ``source`` may be ``destination``.

        :raises TypeError: If either argument is not a 3D tuple
        :raises InvalidRotationError: If the matrix cannot be repaired
        """

        self.normalize()

        rotated = rotmat_rotate_vectors(self._data, _tuple_3d_components(source))

        destination.set(*(_tuple_3d_components(destination) + rotated))

    def _apply(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None, check_if_planar: bool,
               inverse: bool) -> None:
        """
        Repairs this matrix, computes the rotated source in full, then writes it into the destination.
        """

        self.normalize()

        if destination is None:
            destination = source

        # the transpose is a view; nothing is inverted or copied
        matrix = self._data.T if inverse else self._data

        if isinstance(source, RotationMatrix):
            destination.set_from_rotation_matrix(matrix @ np.asarray(source))

        elif isinstance(source, Orientation3D):
            destination.set_from_quaternion(quaternion_multiplication(rotmat_to_quaternion(matrix),
                                                                      _to_quaternion_array(source)))

        elif isinstance(source, Matrix3DReadOnly):
            if inverse:
                destination.set(inverse_rotate_matrix(self._data, np.asarray(source)))
            else:
                destination.set(rotate_matrix(self._data, np.asarray(source)))

        elif isinstance(source, Tuple4DReadOnly):
            weight = source.s
            rotated = self._rotate(inverse, [source.x, source.y, source.z])

            destination.set(*rotated, weight)

        elif isinstance(source, Tuple3DReadOnly):
            destination.set(*self._rotate(inverse, [source.x, source.y, source.z]))

        elif isinstance(source, Tuple2DReadOnly):
            if check_if_planar:
                self.check_if_orientation_2d()

            rotated = self._rotate(inverse, [source.x, source.y, 0.0])

            destination.set(rotated[0], rotated[1])

        else:
            raise TypeError('A rotation matrix cannot rotate an object of type {}'.format(type(source).__name__))

    def _rotate(self, inverse: bool, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        if inverse:
            return rotmat_inverse_rotate_vectors(self._data, vector)
        return rotmat_rotate_vectors(self._data, vector)

    def distance(self, other: MATRIX_INPUT) -> float:
        return comparisons.rotmat_distance_precise(self._data, _to_matrix_array(other))

    def geometrically_equals(self, other: MATRIX_INPUT, epsilon: float) -> bool:
        return comparisons.rotmat_geometrically_equals(self._data, _to_matrix_array(other), epsilon)

    def epsilon_equals(self, other: Any, epsilon: float) -> bool:
        if not isinstance(other, Matrix3DReadOnly):
            return False

        return comparisons.epsilon_equals(self._data, _as_matrix_array(other), epsilon)

    def copy(self) -> 'RotationMatrix':
        """
        Returns a deep copy of self.
        """

        return copy.deepcopy(self)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RotationMatrix):
            return NotImplemented

        return bool((self._data == other._data).all())

    __hash__ = None

    def __repr__(self) -> str:
        return 'RotationMatrix({!r})'.format(self._data.tolist())

    def __str__(self) -> str:
        return str(self._data)
