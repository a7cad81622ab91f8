# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from orientations._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, DOUBLE_ARRAY
from orientations.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["rot_x", "rot_y", "rot_z", "skew"]


def _elemental(theta: SCALAR_OR_ARRAY, axis: int) -> DOUBLE_ARRAY:
    """
    Builds the right handed rotation matrix(ces) about coordinate axis ``axis`` (0, 1, or 2).

    Each angle gets its own matrix stacked down the first axis; a single angle returns a single 3x3 matrix.
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).ravel()

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    # the two axes that mix, in right handed order
    first, second = (axis + 1) % 3, (axis + 2) % 3

    out = np.zeros((theta.size, 3, 3))
    out[:, axis, axis] = 1
    out[:, first, first] = ctheta
    out[:, second, second] = ctheta
    out[:, first, second] = -stheta
    out[:, second, first] = stheta

    return out.squeeze(axis=0) if theta.size == 1 else out


def rot_x(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function returns the right handed rotation about the x axis by angle theta (the roll rotation).

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle(s) in radians
    :return: The rotation matrix(ces)
    """

    return _elemental(theta, 0)


def rot_y(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function returns the right handed rotation about the y axis by angle theta (the pitch rotation).

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle(s) in radians
    :return: The rotation matrix(ces)
    """

    return _elemental(theta, 1)


def rot_z(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function returns the right handed rotation about the z axis by angle theta (the yaw rotation).

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angle(s) in radians
    :return: The rotation matrix(ces)
    """

    return _elemental(theta, 2)


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns the skew symmetric cross product matrix for vector such that
    :math:`\mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b}`.

    Multiple vectors may be given as the columns of a 3xn array, in which case an nx3x3 stack is returned.

    :param vector: The vector(s) to compute a skew symmetric matrix for
    :return: The skew symmetric cross product matrix(ces)
    """

    vector = _check_vector_array_and_shape(vector)

    zeros = np.zeros(vector.shape[1:])

    return np.array([zeros, -vector[2], vector[1],
                     vector[2], zeros, -vector[0],
                     -vector[1], vector[0], zeros]).T.reshape(-1, 3, 3).squeeze()
