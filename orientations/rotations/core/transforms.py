# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core routines for applying a rotation to vectors and matrices.

Inverse rotations never invert a matrix: the inverse of a rotation quaternion is its conjugate and the inverse of a
rotation matrix is its transpose (a numpy view, nothing is copied).  None of these routines check or repair the
rotation they are given; that is the job of the representation classes.
"""

import numpy as np

from orientations._typing import ARRAY_LIKE, DOUBLE_ARRAY

from orientations.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                                  _check_vector_array_and_shape)
from orientations.rotations.core.quaternion_math import quaternion_conjugate


__all__ = ["quaternion_rotate_vectors", "quaternion_inverse_rotate_vectors",
           "rotmat_rotate_vectors", "rotmat_inverse_rotate_vectors",
           "rotate_matrix", "inverse_rotate_matrix"]


def quaternion_rotate_vectors(quaternion: ARRAY_LIKE, vectors: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates vector(s) by a quaternion without forming the rotation matrix.

    The sandwich product :math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^{-1}` is expanded into

    .. math::
        \mathbf{t} = 2\mathbf{q}_v\times\mathbf{v}\\
        \mathbf{v}' = \mathbf{v} + q_s\mathbf{t} + \mathbf{q}_v\times\mathbf{t}

    which takes 15 multiplications per vector.

    .. warning::
        The quaternion is assumed to be unit length and is not checked.  A non-unit quaternion gives a wrong (but
        finite) result.

    :param quaternion: The ``[x, y, z, s]`` rotation quaternion
    :param vectors: The vector(s) to rotate as a length 3 array or as the columns of a 3xn array
    :return: The rotated vector(s) as a new array
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)
    vectors = _check_vector_array_and_shape(vectors)

    q_vector = quaternion[:3].reshape((3,) + (1,) * (vectors.ndim - 1))

    t = 2 * np.cross(q_vector, vectors, axis=0)

    return vectors + quaternion[-1] * t + np.cross(q_vector, t, axis=0)


def quaternion_inverse_rotate_vectors(quaternion: ARRAY_LIKE, vectors: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates vector(s) by the inverse of a quaternion, :math:`\mathbf{q}^{-1}\otimes\mathbf{v}\otimes\mathbf{q}`,
    using the conjugate of the quaternion.

    :param quaternion: The ``[x, y, z, s]`` rotation quaternion
    :param vectors: The vector(s) to rotate as a length 3 array or as the columns of a 3xn array
    :return: The rotated vector(s) as a new array
    """

    return quaternion_rotate_vectors(quaternion_conjugate(quaternion), vectors)


def rotmat_rotate_vectors(matrix: ARRAY_LIKE, vectors: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates vector(s) by a rotation matrix, :math:`\mathbf{T}\mathbf{v}`.

    :param matrix: The 3x3 rotation matrix
    :param vectors: The vector(s) to rotate as a length 3 array or as the columns of a 3xn array
    :return: The rotated vector(s) as a new array
    """

    return _check_matrix_array_and_shape(matrix) @ _check_vector_array_and_shape(vectors)


def rotmat_inverse_rotate_vectors(matrix: ARRAY_LIKE, vectors: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates vector(s) by the inverse of a rotation matrix, :math:`\mathbf{T}^T\mathbf{v}`.

    :param matrix: The 3x3 rotation matrix
    :param vectors: The vector(s) to rotate as a length 3 array or as the columns of a 3xn array
    :return: The rotated vector(s) as a new array
    """

    return _check_matrix_array_and_shape(matrix).T @ _check_vector_array_and_shape(vectors)


def rotate_matrix(rotation: ARRAY_LIKE, matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Expresses a general 3x3 matrix (an inertia tensor for instance) in the rotated frame with the similarity transform
    :math:`\mathbf{T}\mathbf{M}\mathbf{T}^T`.

    :param rotation: The 3x3 rotation matrix
    :param matrix: The 3x3 matrix to rotate
    :return: The rotated matrix as a new array
    """

    rotation = _check_matrix_array_and_shape(rotation)

    return rotation @ _check_matrix_array_and_shape(matrix) @ rotation.T


def inverse_rotate_matrix(rotation: ARRAY_LIKE, matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    The inverse of :func:`rotate_matrix`, :math:`\mathbf{T}^T\mathbf{M}\mathbf{T}`.

    :param rotation: The 3x3 rotation matrix
    :param matrix: The 3x3 matrix to rotate
    :return: The rotated matrix as a new array
    """

    rotation = _check_matrix_array_and_shape(rotation)

    return rotation.T @ _check_matrix_array_and_shape(matrix) @ rotation
