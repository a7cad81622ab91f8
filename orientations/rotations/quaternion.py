"""
This module provides the :class:`Quaternion` class, one of the two hub representations of a rotation.

The quaternion is stored as ``[x, y, z, s]`` (vector part first, scalar part last).  It is never renormalized
implicitly: a quaternion that has drifted from unit length still rotates, just incorrectly.  Use
:meth:`Quaternion.check_if_unitary` to assert the invariant and :meth:`Quaternion.normalize` to restore it.
"""

import copy

from typing import Any

import numpy as np

from orientations._typing import (ARRAY_LIKE, DOUBLE_ARRAY, Matrix3DBasics, Matrix3DReadOnly, Tuple2DReadOnly,
                                  Tuple3DBasics, Tuple3DReadOnly, Tuple4DBasics, Tuple4DReadOnly)
from orientations.tuples import Vector3D
from orientations.utilities.mixin_classes import UserOptionConfigured

from orientations.rotations.core import comparisons, normalization
from orientations.rotations.core._helpers import (_as_matrix_array, _as_quaternion_array, _as_vector_array,
                                                  _trim_angle_minus_pi_to_pi)
from orientations.rotations.core.conversions import (axis_angle_to_quaternion, quaternion_to_axis_angle,
                                                     quaternion_to_rotmat, quaternion_to_rotvec,
                                                     quaternion_to_yaw_pitch_roll, rotmat_to_quaternion,
                                                     rotvec_to_quaternion, yaw_pitch_roll_to_quaternion)
from orientations.rotations.core.quaternion_math import (quaternion_conjugate, quaternion_dot,
                                                         quaternion_multiplication, quaternion_normalize, slerp)
from orientations.rotations.core.transforms import inverse_rotate_matrix, quaternion_rotate_vectors, rotate_matrix
from orientations.rotations.orientation import (MATRIX_INPUT, QUATERNION_INPUT, ROTATABLE, ROTATABLE_DESTINATION,
                                                VECTOR_INPUT, Orientation3D, _tuple_3d_components)
from orientations.rotations.tolerances import RotationOptions


__all__ = ["Quaternion"]


def _to_quaternion_array(rotation: QUATERNION_INPUT) -> DOUBLE_ARRAY:
    """
    Returns the ``[x, y, z, s]`` array for any rotation object or quaternion like input.
    """

    if isinstance(rotation, Orientation3D) and not isinstance(rotation, Quaternion):
        rotation = rotation.get_quaternion()

    return _as_quaternion_array(rotation)


class Quaternion(UserOptionConfigured[RotationOptions], RotationOptions, Orientation3D):
    """
    A rotation quaternion :math:`\\mathbf{q}=[q_x, q_y, q_z, q_s]^T`.

    The class provides:

    * accessors for the components and a bulk :meth:`set`,
    * conversion into every other representation (``get_*``) and from them (``set_from_*``),
    * application of the rotation to points, vectors, 4D vectors, generic matrices, 2D tuples and other rotations
      (:meth:`transform` and :meth:`inverse_transform`),
    * epsilon and geometric comparisons.

    The rotation matrix equivalent of the quaternion is cached the first time it is needed and the cache is
    invalidated whenever the quaternion changes.

    The composition operator ``*`` is overloaded so that::

        >>> from orientations.rotations import Quaternion
        >>> from numpy import pi
        >>> rotation_a2b = Quaternion()
        >>> rotation_a2b.set_from_rotation_vector([pi, 0, 0])
        >>> rotation_b2c = Quaternion()
        >>> rotation_b2c.set_from_rotation_vector([0, pi/2, 0])
        >>> rotation_a2c = rotation_b2c*rotation_a2b

    The tolerances used by the validity checks come from :class:`.RotationOptions` and can be changed per instance.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, s: float = 1.0,
                 options: RotationOptions | None = None):
        """
        :param x: The x component of the vector part
        :param y: The y component of the vector part
        :param z: The z component of the vector part
        :param s: The scalar part
        :param options: The tolerances to use for this instance
        """

        super().__init__(RotationOptions, options=options)

        self._data: DOUBLE_ARRAY = np.array([x, y, z, s], dtype=np.float64)

        self._matrix: DOUBLE_ARRAY | None = None
        self._mupdate: bool = True

    @classmethod
    def from_array(cls, data: ARRAY_LIKE, options: RotationOptions | None = None) -> 'Quaternion':
        """
        Creates a quaternion from a length 4 ``[x, y, z, s]`` array.

        :param data: The quaternion components
        :param options: The tolerances to use for the new instance
        :return: The new quaternion
        """

        return cls(*_as_quaternion_array(data), options=options)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def s(self) -> float:
        return float(self._data[3])

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The rotation matrix equivalent of this quaternion as a read only numpy array.

        The matrix is computed on first access and cached until the quaternion changes.
        """

        if self._mupdate:
            self._matrix = quaternion_to_rotmat(self._data)
            self._matrix.flags.writeable = False
            self._mupdate = False

        assert self._matrix is not None, "the matrix attribute is somehow None but _mupdate is set to false"
        return self._matrix

    def set(self, x: float, y: float, z: float, s: float) -> None:
        """
        Overwrites all four components.  The result is not normalized.
        """

        self._data[:] = (x, y, z, s)
        self._mupdate = True

    def set_to_zero(self) -> None:
        self.set(0.0, 0.0, 0.0, 1.0)

    def set_from_quaternion(self, quaternion: QUATERNION_INPUT) -> None:
        self.set(*_as_quaternion_array(quaternion))

    def set_from_rotation_matrix(self, matrix: MATRIX_INPUT) -> None:
        self.set(*rotmat_to_quaternion(_as_matrix_array(matrix)))

    def set_from_axis_angle(self, axis: VECTOR_INPUT, angle: float) -> None:
        """
        Sets this quaternion from a rotation axis (normalized here) and an angle in radians.
        """

        self.set(*axis_angle_to_quaternion(_as_vector_array(axis), angle))

    def set_from_rotation_vector(self, vector: VECTOR_INPUT) -> None:
        """
        Sets this quaternion from a rotation vector (a 3D tuple or a length 3 array).
        """

        self.set(*rotvec_to_quaternion(_as_vector_array(vector)))

    def set_from_yaw_pitch_roll(self, yaw: float, pitch: float, roll: float) -> None:
        """
        Sets this quaternion from yaw, pitch and roll angles in radians (ZYX sequence).
        """

        self.set(*yaw_pitch_roll_to_quaternion((yaw, pitch, roll)))

    def norm_squared(self) -> float:
        return float(self._data @ self._data)

    def norm(self) -> float:
        return float(np.linalg.norm(self._data))

    def is_unitary(self, epsilon: float | None = None) -> bool:
        """
        Tests whether this is a unit quaternion.

        :param epsilon: The tolerance on the norm.  Defaults to :attr:`unitary_tolerance`.
        """

        return normalization.is_unitary(self._data, self.unitary_tolerance if epsilon is None else epsilon)

    def check_if_unitary(self, epsilon: float | None = None) -> None:
        """
        Asserts that this is a unit quaternion.

        :param epsilon: The tolerance on the norm.  Defaults to :attr:`unitary_tolerance`.
        :raises NotUnitQuaternionError: If the norm is not 1 within epsilon
        """

        normalization.check_if_unitary(self._data, self.unitary_tolerance if epsilon is None else epsilon)

    def is_orientation_2d(self, epsilon: float | None = None) -> bool:
        """
        Tests whether this is a rotation about the z axis only.

        :param epsilon: The tolerance on the x and y components.  Defaults to :attr:`planar_tolerance`.
        """

        return normalization.is_quaternion_planar(self._data, self.planar_tolerance if epsilon is None else epsilon)

    def check_if_orientation_2d(self, epsilon: float | None = None) -> None:
        """
        Asserts that this is a rotation about the z axis only.

        :raises NotPlanarRotationError: If the x or y component is larger than epsilon
        """

        normalization.check_if_quaternion_planar(self._data,
                                                 self.planar_tolerance if epsilon is None else epsilon)

    def get_angle(self) -> float:
        """
        The rotation angle in radians, in :math:`(-\\pi, \\pi]`, about the axis returned by :meth:`get_axis_angle`.
        """

        return quaternion_to_axis_angle(self._data)[1]

    def get_yaw(self) -> float:
        return quaternion_to_yaw_pitch_roll(self._data, self.gimbal_lock_tolerance)[0]

    def get_pitch(self) -> float:
        return quaternion_to_yaw_pitch_roll(self._data, self.gimbal_lock_tolerance)[1]

    def get_roll(self) -> float:
        return quaternion_to_yaw_pitch_roll(self._data, self.gimbal_lock_tolerance)[2]

    def get_quaternion(self, destination: Tuple4DBasics | None = None) -> Tuple4DBasics:
        if destination is None:
            destination = Quaternion()

        destination.set(*self._data)

        return destination

    def get_rotation_matrix(self, destination: Matrix3DBasics | None = None) -> Matrix3DBasics:
        from orientations.rotations.rotation_matrix import RotationMatrix

        if destination is None:
            destination = RotationMatrix()

        destination.set(self.matrix)

        return destination

    def get_axis_angle(self, destination: 'AxisAngle | None' = None) -> 'AxisAngle':
        from orientations.rotations.axis_angle import AxisAngle

        if destination is None:
            destination = AxisAngle()

        destination.set(*quaternion_to_axis_angle(self._data))

        return destination

    def get_rotation_vector(self, destination: Tuple3DBasics | None = None) -> Tuple3DBasics:
        if destination is None:
            destination = Vector3D()

        destination.set(*quaternion_to_rotvec(self._data))

        return destination

    def get_yaw_pitch_roll(self, destination: 'YawPitchRoll | None' = None) -> 'YawPitchRoll':
        from orientations.rotations.yaw_pitch_roll import YawPitchRoll

        if destination is None:
            destination = YawPitchRoll()

        destination.set(*quaternion_to_yaw_pitch_roll(self._data, self.gimbal_lock_tolerance))

        return destination

    def conjugate(self) -> None:
        """
        Negates the vector part in place.
        """

        self.set(*quaternion_conjugate(self._data))

    def invert(self) -> None:
        """
        Inverts this rotation in place.  For a unit quaternion the inverse is the conjugate.
        """

        self.conjugate()

    def normalize(self) -> None:
        """
        Scales this quaternion to unit length in place.

        This is the only way a quaternion is ever renormalized; nothing calls it implicitly.

        :raises NotUnitQuaternionError: If the quaternion has zero length
        """

        self.set(*quaternion_normalize(self._data))

    def dot(self, other: QUATERNION_INPUT) -> float:
        """
        The 4D dot product with another quaternion.
        """

        return float(quaternion_dot(self._data, _as_quaternion_array(other)))

    def multiply(self, other: QUATERNION_INPUT) -> None:
        """
        Sets this quaternion to :math:`\\mathbf{q}_{self}\\otimes\\mathbf{q}_{other}` (``other`` is applied first).
        """

        self.set(*quaternion_multiplication(self._data, _to_quaternion_array(other)))

    def pre_multiply(self, other: QUATERNION_INPUT) -> None:
        """
        Sets this quaternion to :math:`\\mathbf{q}_{other}\\otimes\\mathbf{q}_{self}` (``other`` is applied last).
        """

        self.set(*quaternion_multiplication(_to_quaternion_array(other), self._data))

    def interpolate(self, quaternion0: QUATERNION_INPUT, quaternion1: QUATERNION_INPUT, fraction: float) -> None:
        """
        Sets this quaternion to the spherical linear interpolation between two rotations along the shortest path.

        :param quaternion0: The rotation at ``fraction=0``
        :param quaternion1: The rotation at ``fraction=1``
        :param fraction: How far between the two rotations to go
        """

        self.set(*slerp(_to_quaternion_array(quaternion0), _to_quaternion_array(quaternion1), fraction))

    def transform(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None = None,
                  check_if_planar: bool = True) -> None:
        """
        Rotates ``source`` by this quaternion and stores the result in ``destination`` (``source`` if not given).

        =====================  ==============================================================================
        source                 result
        =====================  ==============================================================================
        RotationMatrix         :math:`\\mathbf{T}(\\mathbf{q})\\mathbf{M}`
        other rotations        :math:`\\mathbf{q}\\otimes\\mathbf{q}_{source}`
        generic 3x3 matrix     :math:`\\mathbf{T}\\mathbf{M}\\mathbf{T}^T`
        4D vector              ``(x, y, z)`` rotated, ``s`` unchanged
        3D tuple               the rotated tuple (sandwich product, no matrix is formed)
        2D tuple               ``(x, y, 0)`` rotated; the rotation must be about z if ``check_if_planar``
        =====================  ==============================================================================

        The quaternion is used as is; it is not checked for unit length.
        """

        self._apply(source, destination, check_if_planar, inverse=False)

    def inverse_transform(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None = None,
                          check_if_planar: bool = True) -> None:
        """
        Rotates ``source`` by the conjugate of this quaternion.  See :meth:`transform`.
        """

        self._apply(source, destination, check_if_planar, inverse=True)

    def add_transform(self, source: Tuple3DReadOnly, destination: Tuple3DBasics) -> None:
        """
        Rotates the 3D tuple ``source`` by this quaternion and adds the result to ``destination``.

        ``source`` may be ``destination``.

        :raises TypeError: If either argument is not a 3D tuple
        """

        rotated = quaternion_rotate_vectors(self._data, _tuple_3d_components(source))

        destination.set(*(_tuple_3d_components(destination) + rotated))

    def _apply(self, source: ROTATABLE, destination: ROTATABLE_DESTINATION | None, check_if_planar: bool,
               inverse: bool) -> None:
        """
        Computes the rotated source in full, then writes it into the destination.
        """

        from orientations.rotations.rotation_matrix import RotationMatrix

        if destination is None:
            destination = source

        quaternion = quaternion_conjugate(self._data) if inverse else self._data

        if isinstance(source, RotationMatrix):
            matrix = self.matrix.T if inverse else self.matrix

            destination.set_from_rotation_matrix(matrix @ np.asarray(source))

        elif isinstance(source, Orientation3D):
            destination.set_from_quaternion(quaternion_multiplication(quaternion, _to_quaternion_array(source)))

        elif isinstance(source, Matrix3DReadOnly):
            if inverse:
                destination.set(inverse_rotate_matrix(self.matrix, np.asarray(source)))
            else:
                destination.set(rotate_matrix(self.matrix, np.asarray(source)))

        elif isinstance(source, Tuple4DReadOnly):
            weight = source.s
            rotated = quaternion_rotate_vectors(quaternion, [source.x, source.y, source.z])

            destination.set(*rotated, weight)

        elif isinstance(source, Tuple3DReadOnly):
            destination.set(*quaternion_rotate_vectors(quaternion, [source.x, source.y, source.z]))

        elif isinstance(source, Tuple2DReadOnly):
            if check_if_planar:
                self.check_if_orientation_2d()

            rotated = quaternion_rotate_vectors(quaternion, [source.x, source.y, 0.0])

            destination.set(rotated[0], rotated[1])

        else:
            raise TypeError('A quaternion cannot rotate an object of type {}'.format(type(source).__name__))

    def distance(self, other: QUATERNION_INPUT) -> float:
        other = _to_quaternion_array(other)

        return float(abs(_trim_angle_minus_pi_to_pi(comparisons.quaternion_distance_precise(self._data, other))))

    def geometrically_equals(self, other: QUATERNION_INPUT, epsilon: float) -> bool:
        return comparisons.quaternion_geometrically_equals(self._data, _to_quaternion_array(other), epsilon)

    def epsilon_equals(self, other: Any, epsilon: float) -> bool:
        if not isinstance(other, Tuple4DReadOnly):
            return False

        return comparisons.epsilon_equals(self._data, _as_quaternion_array(other), epsilon)

    def copy(self) -> 'Quaternion':
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __eq__(self, other) -> bool:

        if not isinstance(other, Quaternion):
            return NotImplemented

        # check that the components are the same
        return bool((self._data == other._data).all())

    __hash__ = None

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':

        # use quaternion multiplication
        if isinstance(other, Quaternion):

            return Quaternion.from_array(quaternion_multiplication(self._data, other._data))

        else:

            return NotImplemented

    def __repr__(self) -> str:
        return 'Quaternion(x={!r}, y={!r}, z={!r}, s={!r})'.format(self.x, self.y, self.z, self.s)

    def __str__(self) -> str:
        return str(self._data)
