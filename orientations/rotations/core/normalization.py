# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Validity checks and repair for the two hub representations.

Rotation matrices and quaternions are treated differently on purpose:

* a rotation matrix drifts away from orthonormality as products accumulate rounding error, so the
  :class:`.RotationMatrix` class re-runs :func:`orthonormalize` on itself before every use as an operator;
* a quaternion drifts slowly and renormalizing it is cheap, so it is never repaired here.  :func:`is_unitary` and
  :func:`check_if_unitary` only test it, and it is up to the owner to call
  :func:`~orientations.rotations.core.quaternion_math.quaternion_normalize`.
"""

import numpy as np

from orientations._typing import ARRAY_LIKE, DOUBLE_ARRAY
from orientations.exceptions import InvalidRotationError, NotUnitQuaternionError, NotPlanarRotationError

from orientations.rotations.core._helpers import _check_matrix_array_and_shape, _check_quaternion_array_and_shape
from orientations.rotations.tolerances import (EPS_UNITARY, EPS_PLANAR, EPS_ORTHONORMALIZE, EPS_DEPENDENT_COLUMNS,
                                               EPS_ROTATION_MATRIX)


__all__ = ["orthonormalize", "is_rotation_matrix", "is_unitary", "check_if_unitary",
           "is_quaternion_planar", "check_if_quaternion_planar", "is_rotmat_planar", "check_if_rotmat_planar"]


def orthonormalize(matrix: ARRAY_LIKE, epsilon: float = EPS_ORTHONORMALIZE,
                   dependence_tolerance: float = EPS_DEPENDENT_COLUMNS) -> DOUBLE_ARRAY:
    r"""
    Re-derives a proper rotation matrix from a (possibly drifted) 3x3 matrix using Gram-Schmidt on its columns.

    .. math::
        \mathbf{c}_0' = \frac{\mathbf{c}_0}{\left\|\mathbf{c}_0\right\|}\\
        \mathbf{c}_1' \propto \mathbf{c}_1 - (\mathbf{c}_0'^T\mathbf{c}_1)\mathbf{c}_0'\\
        \mathbf{c}_2' \propto \mathbf{c}_2 - (\mathbf{c}_0'^T\mathbf{c}_2)\mathbf{c}_0'
        - (\mathbf{c}_1'^T\mathbf{c}_2)\mathbf{c}_1'

    Applying this to a matrix that is already orthonormal returns it unchanged up to rounding.

    :param matrix: The 3x3 matrix to orthonormalize.  Not modified.
    :param epsilon: The smallest column length accepted while orthogonalizing
    :param dependence_tolerance: The smallest fraction of its original length a column may keep once the previous
                                 columns are projected out of it
    :return: The orthonormalized matrix as a new array
    :raises InvalidRotationError: If the matrix contains NaN/inf, has (nearly) linearly dependent columns, or
                                  orthonormalizes to a reflection
    """

    work = _check_matrix_array_and_shape(matrix)

    if work.ndim != 2:
        raise ValueError('orthonormalize works on a single 3x3 matrix')

    if not np.isfinite(work).all():
        raise InvalidRotationError('The matrix contains non-finite coefficients and cannot be orthonormalized')

    columns = []
    for column in work.T:

        original_length = np.linalg.norm(column)

        # remove the components along the already accepted columns
        for accepted in columns:
            column = column - (accepted @ column) * accepted

        length = np.linalg.norm(column)

        # the relative test catches nearly dependent columns regardless of the scale of the matrix
        if length < epsilon or length < dependence_tolerance * original_length:
            raise InvalidRotationError('The matrix columns are linearly dependent.  It cannot be orthonormalized')

        columns.append(column / length)

    # the triple product is the determinant of the orthonormal result (+1 or -1)
    if columns[0] @ np.cross(columns[1], columns[2]) < 0:
        raise InvalidRotationError('The matrix is a reflection (negative determinant), not a rotation')

    return np.column_stack(columns)


def is_rotation_matrix(matrix: ARRAY_LIKE, epsilon: float = EPS_ROTATION_MATRIX) -> bool:
    """
    Tests whether the matrix is orthonormal with a determinant of +1 to within epsilon.

    :param matrix: The 3x3 matrix to test.  Not modified.
    :param epsilon: The tolerance on each coefficient of :math:`\\mathbf{T}^T\\mathbf{T}-\\mathbf{I}` and on the
                    determinant
    :return: ``True`` if the matrix is a rotation matrix
    """

    matrix = _check_matrix_array_and_shape(matrix)

    if not np.isfinite(matrix).all():
        return False

    gram = matrix.T @ matrix

    return bool(np.abs(gram - np.eye(3)).max() < epsilon and abs(np.linalg.det(matrix) - 1) < epsilon)


def is_unitary(quaternion: ARRAY_LIKE, epsilon: float = EPS_UNITARY) -> bool:
    """
    Tests whether the quaternion has a norm of 1 +/- epsilon.  The quaternion is not modified.

    :param quaternion: The ``[x, y, z, s]`` quaternion to test
    :param epsilon: the tolerance on the norm
    :return: ``True`` if the quaternion is a proper unit quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return bool(abs(np.linalg.norm(quaternion) - 1.0) < epsilon)


def check_if_unitary(quaternion: ARRAY_LIKE, epsilon: float = EPS_UNITARY) -> None:
    """
    Asserts that the quaternion has a norm of 1 +/- epsilon.

    :param quaternion: The ``[x, y, z, s]`` quaternion to check
    :param epsilon: the tolerance on the norm
    :raises NotUnitQuaternionError: if the quaternion is not a unit quaternion
    """

    if not is_unitary(quaternion, epsilon):
        raise NotUnitQuaternionError('This quaternion is not a unit-quaternion: {}'.format(np.asarray(quaternion)))


def is_quaternion_planar(quaternion: ARRAY_LIKE, epsilon: float = EPS_PLANAR) -> bool:
    """
    Tests whether the quaternion is a rotation about the z axis only, that is both the x and y components are
    smaller than epsilon in magnitude.

    :param quaternion: The ``[x, y, z, s]`` quaternion to test
    :param epsilon: the tolerance on the x and y components
    :return: ``True`` if the quaternion can be used to rotate 2D geometry
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return bool(abs(quaternion[0]) < epsilon and abs(quaternion[1]) < epsilon)


def check_if_quaternion_planar(quaternion: ARRAY_LIKE, epsilon: float = EPS_PLANAR) -> None:
    """
    Asserts that the quaternion is a rotation about the z axis only.

    :raises NotPlanarRotationError: if the quaternion has out-of-plane components
    """

    if not is_quaternion_planar(quaternion, epsilon):
        raise NotPlanarRotationError('The quaternion does not represent a rotation in the XY plane: '
                                     '{}'.format(np.asarray(quaternion)))


def is_rotmat_planar(matrix: ARRAY_LIKE, epsilon: float = EPS_PLANAR) -> bool:
    """
    Tests whether the rotation matrix is a rotation about the z axis only.

    This requires the coefficients coupling z with x and y to be zero and the z,z coefficient to be 1.

    :param matrix: The 3x3 rotation matrix to test
    :param epsilon: the tolerance on the coefficients
    :return: ``True`` if the matrix can be used to rotate 2D geometry
    """

    matrix = _check_matrix_array_and_shape(matrix)

    out_of_plane = np.abs([matrix[0, 2], matrix[1, 2], matrix[2, 0], matrix[2, 1], matrix[2, 2] - 1])

    return bool((out_of_plane < epsilon).all())


def check_if_rotmat_planar(matrix: ARRAY_LIKE, epsilon: float = EPS_PLANAR) -> None:
    """
    Asserts that the rotation matrix is a rotation about the z axis only.

    :raises NotPlanarRotationError: if the matrix has out-of-plane components
    """

    if not is_rotmat_planar(matrix, epsilon):
        raise NotPlanarRotationError('The rotation matrix does not represent a rotation in the XY plane')
