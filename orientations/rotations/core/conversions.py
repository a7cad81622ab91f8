# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains core routines for converting between the rotation representations described in
:mod:`orientations.rotations`.  All routines are implemented purely on numpy arrays (or array like objects), never
modify their inputs, and return new arrays.

The quaternion is used as the intermediate representation whenever no direct formula is given.  Yaw-pitch-roll
angles always follow the ZYX sequence :math:`\\mathbf{T}=\\mathbf{R}_z(\\psi)\\mathbf{R}_y(\\theta)\\mathbf{R}_x(\\phi)`.
"""

import logging

from typing import Sequence

import numpy as np

from orientations._typing import ARRAY_LIKE, F_SCALAR_OR_ARRAY, DOUBLE_ARRAY, SCALAR_OR_ARRAY

from orientations.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                                  _check_vector_array_and_shape, _trim_angle_minus_pi_to_pi)
from orientations.rotations.core.elementals import rot_x, rot_y, rot_z, skew
from orientations.rotations.tolerances import EPS_GIMBAL_LOCK, EPS_SMALL_ANGLE


__all__ = ['quaternion_to_rotvec', 'quaternion_to_axis_angle', 'quaternion_to_rotmat', 'quaternion_to_yaw_pitch_roll',
           'rotvec_to_quaternion', 'rotvec_to_rotmat',
           'axis_angle_to_quaternion', 'axis_angle_to_rotmat',
           'rotmat_to_quaternion', 'rotmat_to_rotvec', 'rotmat_to_axis_angle', 'rotmat_to_yaw_pitch_roll',
           'yaw_pitch_roll_to_quaternion', 'yaw_pitch_roll_to_rotmat']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate conversions (gimbal lock, undefined axes).
"""


def _vector_norm_and_angle(quaternion: DOUBLE_ARRAY) -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
    """
    Returns the norm of the vector part and the rotation angle :math:`2\\text{atan2}(\\|\\mathbf{q}_v\\|, q_s)`.
    """

    vector_norm = np.linalg.norm(quaternion[:3], axis=0)

    return vector_norm, 2 * np.arctan2(vector_norm, quaternion[-1])


def quaternion_to_rotvec(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into a rotation vector.

    The rotation vector is formed by:

    .. math::
        \theta = 2\text{atan2}(\left\|\mathbf{q}_v\right\|, q_s) \\
        \mathbf{v} = \theta\frac{\mathbf{q}_v}{\left\|\mathbf{q}_v\right\|}

    The half angle is extracted with ``atan2`` rather than ``acos`` so that it stays accurate for small angles and does
    not require a perfectly unit quaternion.  When :math:`\left\|\mathbf{q}_v\right\|` is below
    :data:`.EPS_SMALL_ANGLE` the axis is undefined and the zero rotation vector is returned.

    This function is vectorized; multiple quaternions can be given as the columns of a 4xn array.

    :param quaternion: the rotation quaternion(s) to be converted to the rotation vector(s)
    :return: The rotation vector(s) corresponding to the input rotation quaternion(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    vector_norm, theta = _vector_norm_and_angle(quaternion)

    small_angle_check = vector_norm < EPS_SMALL_ANGLE

    # avoid dividing by zero where the axis is undefined; those columns are zeroed anyway
    scale = np.where(small_angle_check, 0.0, theta / np.where(small_angle_check, 1.0, vector_norm))

    return quaternion[:3] * scale


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE) -> tuple[DOUBLE_ARRAY, F_SCALAR_OR_ARRAY]:
    r"""
    This function converts a rotation quaternion into a unit rotation axis and a rotation angle.

    .. math::
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\left\|\mathbf{q}_v\right\|} \\
        \theta = 2\text{atan2}(\left\|\mathbf{q}_v\right\|, q_s)

    The angle is reported in :math:`(-\pi, \pi]`; an angle above :math:`\pi` is replaced by the equivalent
    :math:`\theta-2\pi` about the same axis.  For the identity rotation (vector part norm below
    :data:`.EPS_SMALL_ANGLE`) the axis is reported as :math:`[1, 0, 0]` with an angle of 0.

    :param quaternion: the rotation quaternion(s) to be converted
    :return: the rotation axis(es) and the rotation angle(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    vector_norm, theta = _vector_norm_and_angle(quaternion)

    small_angle_check = vector_norm < EPS_SMALL_ANGLE

    if np.any(small_angle_check):
        _LOGGER.debug('identity rotation encountered, the rotation axis defaults to x')

    default_axis = np.array([1.0, 0.0, 0.0]).reshape((3,) + (1,) * (quaternion.ndim - 1))

    axis = np.where(small_angle_check, default_axis,
                    quaternion[:3] / np.where(small_angle_check, 1.0, vector_norm))

    theta = np.where(small_angle_check, 0.0, theta)
    theta = np.where(theta > np.pi, theta - 2 * np.pi, theta)

    if quaternion.ndim == 1:
        return axis, float(theta)

    return axis, theta


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix.

    .. math::
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    where :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`.skew`).

    This function is vectorized; multiple quaternions given as the columns of a 4xn array produce an nx3x3 stack of
    matrices.

    :param quaternion: The rotation quaternion(s) to be converted to the rotation matrix(ces)
    :return: the rotation matrix(ces) corresponding to the input quaternion(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    # extract the scalar and vector portion of the quaternion(s)
    qs = quaternion[-1].reshape(-1, 1, 1)
    qv = quaternion[:3].reshape(3, -1)

    rotation_matrix = ((qs ** 2 - (qv * qv).sum(axis=0).reshape(-1, 1, 1)) * np.eye(3) +
                       2 * np.einsum('ij,jk->jik', qv, qv.T) +
                       2 * qs * skew(qv).reshape(-1, 3, 3))

    if quaternion.ndim == 1:
        return rotation_matrix[0]

    return rotation_matrix


def quaternion_to_yaw_pitch_roll(quaternion: ARRAY_LIKE,
                                 gimbal_lock_tolerance: float = EPS_GIMBAL_LOCK) -> tuple[F_SCALAR_OR_ARRAY,
                                                                                         F_SCALAR_OR_ARRAY,
                                                                                         F_SCALAR_OR_ARRAY]:
    r"""
    This function converts a rotation quaternion into yaw, pitch and roll angles (ZYX sequence).

    Away from gimbal lock the closed forms are

    .. math::
        \psi = \text{atan2}(2(q_xq_y+q_sq_z), q_s^2+q_x^2-q_y^2-q_z^2)\\
        \theta = \text{asin}(2(q_sq_y-q_xq_z))\\
        \phi = \text{atan2}(2(q_yq_z+q_sq_x), q_s^2-q_x^2-q_y^2+q_z^2)

    Gimbal lock is detected on the pitch argument :math:`2(q_sq_y-q_xq_z)` itself (it is within
    ``gimbal_lock_tolerance`` of +/-1) rather than by comparing the pitch angle to :math:`\pm\pi/2`, which is
    ill-conditioned.  At gimbal lock yaw and roll are not separable, so roll is fixed to 0, pitch is
    :math:`\pm\pi/2` and yaw receives the combined rotation :math:`2\text{atan2}(q_z, q_s)` (which is
    :math:`\psi-\phi` for positive pitch and :math:`\psi+\phi` for negative pitch).

    :param quaternion: The quaternion(s) to be converted
    :param gimbal_lock_tolerance: The tolerance used to detect gimbal lock
    :return: The yaw, pitch, and roll angles in radians
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    qx, qy, qz, qs = quaternion

    norm_squared = (quaternion * quaternion).sum(axis=0)

    sin_pitch = 2 * (qs * qy - qx * qz) / norm_squared

    locked = np.abs(sin_pitch) > 1 - gimbal_lock_tolerance

    if np.any(locked):
        _LOGGER.debug('gimbal lock detected, roll is set to 0 and the combined rotation is reported as yaw')

    pitch = np.where(locked, np.copysign(np.pi / 2, sin_pitch), np.arcsin(np.clip(sin_pitch, -1, 1)))

    yaw = np.where(locked, _trim_angle_minus_pi_to_pi(2 * np.arctan2(qz, qs)),
                   np.arctan2(2 * (qx * qy + qs * qz), qs * qs + qx * qx - qy * qy - qz * qz))

    roll = np.where(locked, 0.0, np.arctan2(2 * (qy * qz + qs * qx), qs * qs - qx * qx - qy * qy + qz * qz))

    if quaternion.ndim == 1:
        return float(yaw), float(pitch), float(roll)

    return yaw, pitch, roll


def rotvec_to_quaternion(rot_vec: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation vector into a rotation quaternion.

    .. math::
        \theta = \left\|\mathbf{v}\right\| \\
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\frac{\mathbf{v}}{\theta} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    Rotation vectors shorter than :data:`.EPS_SMALL_ANGLE` are converted to the identity quaternion [0, 0, 0, 1].

    This function is vectorized; multiple rotation vectors can be given as the columns of a 3xn array.

    :param rot_vec: The rotation vector(s) to convert to a rotation quaternion
    :return: the rotation quaternion(s) corresponding to the input rotation vector(s)
    """

    rot_vec = _check_vector_array_and_shape(rot_vec)

    # get the rotation angle(s)
    theta = np.linalg.norm(rot_vec, axis=0)

    small_angle_check = theta < EPS_SMALL_ANGLE

    # form the vector portion of the quaternion
    q_vec = rot_vec * np.where(small_angle_check, 0.0, np.sin(theta / 2) / np.where(small_angle_check, 1.0, theta))

    # form the scalar portion of the quaternion
    q_scal = np.where(small_angle_check, 1.0, np.cos(theta / 2))

    return np.concatenate([q_vec, np.reshape(q_scal, (1,) + np.shape(q_scal))], axis=0)


def rotvec_to_rotmat(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts a rotation vector to a rotation matrix through the quaternion.

    :param vector:  The rotation vector(s) to convert to a rotation matrix
    :return: The rotation matrix(ces) corresponding to the rotation vector(s)
    """

    return quaternion_to_rotmat(rotvec_to_quaternion(vector))


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle into a rotation quaternion.

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\frac{\mathbf{x}}{\|\mathbf{x}\|} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    The axis is normalized here so a slightly non-unit axis still gives a unit quaternion.  An axis shorter than
    :data:`.EPS_SMALL_ANGLE` gives the identity quaternion.

    :param axis: The rotation axis(es), 3 or 3xn
    :param angle: The rotation angle(s) in radians
    :return: the rotation quaternion(s)
    """

    axis = _check_vector_array_and_shape(axis)
    angle = np.asarray(angle, dtype=np.float64)

    axis_norm = np.linalg.norm(axis, axis=0)

    degenerate = axis_norm < EPS_SMALL_ANGLE

    q_vec = axis * np.where(degenerate, 0.0, np.sin(angle / 2) / np.where(degenerate, 1.0, axis_norm))
    q_scal = np.where(degenerate, 1.0, np.cos(angle / 2))

    return np.concatenate([q_vec, np.reshape(q_scal, (1,) + np.shape(q_scal))], axis=0)


def axis_angle_to_rotmat(axis: ARRAY_LIKE, angle: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    """
    This function converts a rotation axis and angle into a rotation matrix through the quaternion.

    :param axis: The rotation axis(es)
    :param angle: The rotation angle(s) in radians
    :return: The rotation matrix(ces)
    """

    return quaternion_to_rotmat(axis_angle_to_quaternion(axis, angle))


def _shepperd(matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    Extracts the quaternion of a single rotation matrix from the largest of the trace and the diagonal.
    """

    m00, m01, m02 = matrix[0]
    m10, m11, m12 = matrix[1]
    m20, m21, m22 = matrix[2]

    trace = m00 + m11 + m22

    branch = int(np.argmax([m00, m11, m22, trace]))

    if branch == 3:
        qs = 0.5 * np.sqrt(max(1 + trace, 0.0))
        denominator = 4 * qs
        quaternion = np.array([(m21 - m12) / denominator, (m02 - m20) / denominator, (m10 - m01) / denominator, qs])

    elif branch == 0:
        qx = 0.5 * np.sqrt(max(1 + m00 - m11 - m22, 0.0))
        denominator = 4 * qx
        quaternion = np.array([qx, (m01 + m10) / denominator, (m02 + m20) / denominator, (m21 - m12) / denominator])

    elif branch == 1:
        qy = 0.5 * np.sqrt(max(1 - m00 + m11 - m22, 0.0))
        denominator = 4 * qy
        quaternion = np.array([(m01 + m10) / denominator, qy, (m12 + m21) / denominator, (m02 - m20) / denominator])

    else:
        qz = 0.5 * np.sqrt(max(1 - m00 - m11 + m22, 0.0))
        denominator = 4 * qz
        quaternion = np.array([(m02 + m20) / denominator, (m12 + m21) / denominator, qz, (m10 - m01) / denominator])

    # report the representation with a non-negative scalar part
    if quaternion[-1] < 0:
        quaternion *= -1

    return quaternion


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    A single formula such as :math:`q_s=\frac{1}{2}\sqrt{1+\text{Tr}(\mathbf{T})}` followed by a division by
    :math:`q_s` loses all precision as the rotation angle approaches :math:`\pi` (:math:`q_s\rightarrow 0`).  Instead
    the largest of :math:`\text{Tr}(\mathbf{T})`, :math:`t_{00}`, :math:`t_{11}`, and :math:`t_{22}` selects which
    quaternion component is computed from the square root, and the remaining components are computed by dividing by
    that (large) component.  For example, when the trace is largest:

    .. math::
        q_s = \frac{1}{2}\sqrt{1+\text{Tr}(\mathbf{T})}\\
        \mathbf{q}_v = \frac{1}{4q_s}\left[\begin{array}{c}t_{21}-t_{12}\\
        t_{02}-t_{20}\\t_{10}-t_{01}\end{array}\right]

    The returned quaternion always has a non-negative scalar part.

    This function is vectorized; an nx3x3 stack of matrices produces a 4xn array of quaternions.

    :param rotation_matrix: The rotation matrix(ces) to convert to a rotation quaternion
    :return: the rotation quaternion(s) corresponding to the input rotation matrix(ces)
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    if rotation_matrix.ndim == 2:
        return _shepperd(rotation_matrix)

    stacked = rotation_matrix.reshape(-1, 3, 3)

    return np.column_stack([_shepperd(matrix) for matrix in stacked])


def rotmat_to_rotvec(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Converts a rotation matrix to a rotation vector through the quaternion.

    :param matrix: The matrix(ces) to convert
    :return: The rotation vector(s)
    """

    return quaternion_to_rotvec(rotmat_to_quaternion(matrix))


def rotmat_to_axis_angle(matrix: ARRAY_LIKE) -> tuple[DOUBLE_ARRAY, F_SCALAR_OR_ARRAY]:
    """
    Converts a rotation matrix to a rotation axis and angle through the quaternion.

    :param matrix: The matrix(ces) to convert
    :return: The rotation axis(es) and angle(s)
    """

    return quaternion_to_axis_angle(rotmat_to_quaternion(matrix))


def rotmat_to_yaw_pitch_roll(matrix: ARRAY_LIKE,
                             gimbal_lock_tolerance: float = EPS_GIMBAL_LOCK) -> tuple[F_SCALAR_OR_ARRAY,
                                                                                     F_SCALAR_OR_ARRAY,
                                                                                     F_SCALAR_OR_ARRAY]:
    r"""
    This function converts a rotation matrix into yaw, pitch and roll angles (ZYX sequence).

    .. math::
        \psi = \text{atan2}(t_{10}, t_{00})\\
        \theta = -\text{asin}(t_{20})\\
        \phi = \text{atan2}(t_{21}, t_{22})

    When :math:`|t_{20}|` is within ``gimbal_lock_tolerance`` of 1 the same convention as
    :func:`quaternion_to_yaw_pitch_roll` applies: roll is 0 and yaw is :math:`\text{atan2}(-t_{01}, t_{11})`.

    :param matrix: The rotation matrix(ces) to convert
    :param gimbal_lock_tolerance: The tolerance used to detect gimbal lock
    :return: The yaw, pitch, and roll angles in radians
    """

    matrix = _check_matrix_array_and_shape(matrix)

    sin_pitch = -matrix[..., 2, 0]

    locked = np.abs(sin_pitch) > 1 - gimbal_lock_tolerance

    if np.any(locked):
        _LOGGER.debug('gimbal lock detected, roll is set to 0 and the combined rotation is reported as yaw')

    pitch = np.where(locked, np.copysign(np.pi / 2, sin_pitch), np.arcsin(np.clip(sin_pitch, -1, 1)))

    yaw = np.where(locked, np.arctan2(-matrix[..., 0, 1], matrix[..., 1, 1]),
                   np.arctan2(matrix[..., 1, 0], matrix[..., 0, 0]))

    roll = np.where(locked, 0.0, np.arctan2(matrix[..., 2, 1], matrix[..., 2, 2]))

    if matrix.ndim == 2:
        return float(yaw), float(pitch), float(roll)

    return yaw, pitch, roll


def yaw_pitch_roll_to_quaternion(angles: Sequence[SCALAR_OR_ARRAY] | DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function converts yaw, pitch and roll angles (ZYX sequence) into a rotation quaternion.

    .. math::
        \mathbf{q} = \mathbf{q}_z(\psi)\otimes\mathbf{q}_y(\theta)\otimes\mathbf{q}_x(\phi)

    expanded into closed form.

    :param angles: The yaw, pitch and roll angles (each may be an array)
    :return: The rotation quaternion(s)
    """

    yaw, pitch, roll = (np.asarray(angle, dtype=np.float64) for angle in angles)

    cy, sy = np.cos(yaw / 2), np.sin(yaw / 2)
    cp, sp = np.cos(pitch / 2), np.sin(pitch / 2)
    cr, sr = np.cos(roll / 2), np.sin(roll / 2)

    return np.array([cy * cp * sr - sy * sp * cr,
                     sy * cp * sr + cy * sp * cr,
                     sy * cp * cr - cy * sp * sr,
                     cy * cp * cr + sy * sp * sr])


def yaw_pitch_roll_to_rotmat(angles: Sequence[SCALAR_OR_ARRAY] | DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function converts yaw, pitch and roll angles (ZYX sequence) into a rotation matrix.

    .. math::
        \mathbf{T}=\mathbf{R}_z(\psi)\mathbf{R}_y(\theta)\mathbf{R}_x(\phi)

    using :func:`.rot_z`, :func:`.rot_y`, and :func:`.rot_x`.

    :param angles: The yaw, pitch and roll angles (each may be an array)
    :return: The rotation matrix(ces)
    """

    yaw, pitch, roll = angles

    return rot_z(yaw) @ rot_y(pitch) @ rot_x(roll)
