# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Algebra on rotation quaternions stored as ``[x, y, z, s]`` (vector part first, scalar part last).

Every routine here accepts a single quaternion or a 4xn array of quaternions stored as columns.
"""

import numpy as np

from orientations._typing import ARRAY_LIKE, DOUBLE_ARRAY, F_SCALAR_OR_ARRAY
from orientations.exceptions import NotUnitQuaternionError

from orientations.rotations.core._helpers import _check_quaternion_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_conjugate", "quaternion_multiplication",
           "quaternion_multiplication_conjugate_left", "quaternion_dot", "quaternion_norm", "nlerp", "slerp"]


def quaternion_norm(quaternion: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Returns the Euclidean norm of the quaternion(s).

    :param quaternion: the quaternion(s)
    :return: the norm(s)
    """

    return np.linalg.norm(_check_quaternion_array_and_shape(quaternion), axis=0)


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Scales the quaternion(s) to unit length.

    Nothing in this package calls this implicitly.  A quaternion that has drifted away from unit length must be
    renormalized by its owner.  The sign of the quaternion is kept as is.

    :param quaternion: the quaternion(s) to normalize
    :return: The normalized quaternion(s) as a new array
    :raises NotUnitQuaternionError: if a quaternion has zero (or non-finite) length and so has no direction
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    norm = np.linalg.norm(work_quaternion, axis=0, keepdims=True)

    if (~np.isfinite(norm)).any() or (norm == 0).any():
        raise NotUnitQuaternionError('A quaternion with zero or non-finite length cannot be normalized')

    work_quaternion /= norm

    return work_quaternion


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns the conjugate of the quaternion(s), which is the inverse of a unit quaternion.

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]\\
        \mathbf{q}^{-1}=\left[\begin{array}{c}-\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    This is the only way the inverse of a rotation quaternion is ever formed in this package.

    :param quaternion: The rotation quaternion(s) to be inverted
    :return: The conjugate quaternion(s) as a new array
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton quaternion product :math:`\mathbf{q}_1\otimes\mathbf{q}_2`.

    The product composes rotations such that
    ``q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)``:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    :param quaternion_1_in: The left quaternion(s)
    :param quaternion_2_in: The right quaternion(s)
    :return: The product as a new array
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    return np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2, axis=0),
                           [qs1 * qs2 - (qv1 * qv2).sum(axis=0)]], axis=0)


def quaternion_multiplication_conjugate_left(quaternion_1_in: ARRAY_LIKE,
                                             quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes :math:`\mathbf{q}_1^{-1}\otimes\mathbf{q}_2` using the conjugate of the first quaternion.

    :param quaternion_1_in: The quaternion(s) whose inverse is applied
    :param quaternion_2_in: The right quaternion(s)
    :return: The product as a new array
    """

    return quaternion_multiplication(quaternion_conjugate(quaternion_1_in), quaternion_2_in)


def quaternion_dot(quaternion_1_in: ARRAY_LIKE, quaternion_2_in: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    The 4D dot product of the quaternion(s).

    :param quaternion_1_in: The first quaternion(s)
    :param quaternion_2_in: The second quaternion(s)
    :return: The dot product(s)
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    return (quaternion_1 * quaternion_2).sum(axis=0)


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE, fraction: float) -> DOUBLE_ARRAY:
    r"""
    This function performs normalized linear interpolation of rotation quaternions.

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)+\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)+\mathbf{q}_1p\right\|}

    .. warning::
        NLERP does not interpolate at a constant angular rate and should only be used over short intervals.  Use
        :func:`slerp` otherwise.

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param fraction: the fractional percent :math:`p\in[0, 1]` between the two quaternions
    :return: The interpolated quaternion(s)
    """

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    return quaternion_normalize(q0 * (1 - fraction) + q1 * fraction)


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE, fraction: float) -> DOUBLE_ARRAY:
    r"""
    This function performs spherical linear interpolation of two rotation quaternions along the shortest path.

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\mathbf{q}_0\text{cos}(p\omega)+
        \text{sin}(p\omega)\frac{\mathbf{q}_1-\mathbf{q}_0\text{cos}(\omega)}
        {\left\|\mathbf{q}_1-\mathbf{q}_0\text{cos}(\omega)\right\|}

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param fraction: the fractional percent :math:`p\in[0, 1]` between the two quaternions
    :return: The interpolated quaternion
    """

    q0 = quaternion_normalize(quaternion0)
    q1 = quaternion_normalize(quaternion1)

    cos_angle = float(np.inner(q0, q1))

    if cos_angle < 0:
        # take the short way around
        q1 *= -1
        cos_angle *= -1

    if cos_angle > 0.9995:
        # if the quaternions are really close revert to nlerp
        return nlerp(q0, q1, fraction)

    angle = np.arccos(min(cos_angle, 1.0)) * fraction

    # form an orthonormal basis
    qb = q1 - q0 * cos_angle
    qb /= np.linalg.norm(qb)

    return quaternion_normalize(q0 * np.cos(angle) + qb * np.sin(angle))
