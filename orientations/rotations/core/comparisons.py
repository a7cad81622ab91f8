# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Distances between rotations and the two notions of equality.

* epsilon equality is a literal comparison of the numbers of a representation.  ``q`` and ``-q`` are not epsilon
  equal even though they are the same rotation.
* geometric equality compares the angle of the rotation that takes one orientation to the other.  It is
  insensitive to the sign of a quaternion.

The geometric comparison picks between two distance computations by itself.  For loose tolerances the ``acos`` of
the dot product is plenty and cheap.  For tolerances at or below :data:`.GEOMETRICALLY_EQUALS_THRESHOLD` the
``acos`` is too poorly conditioned near 0, so the angle of the difference rotation is extracted with ``atan2``.
"""

from typing import Callable

import numpy as np

from orientations._typing import ARRAY_LIKE

from orientations.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                                  _trim_angle_minus_pi_to_pi)
from orientations.rotations.core.conversions import rotmat_to_quaternion
from orientations.rotations.core.quaternion_math import quaternion_dot, quaternion_multiplication_conjugate_left
from orientations.rotations.tolerances import GEOMETRICALLY_EQUALS_THRESHOLD


__all__ = ["epsilon_equals", "quaternion_distance", "quaternion_distance_precise", "rotmat_distance",
           "rotmat_distance_precise", "geometrically_equals", "quaternion_geometrically_equals",
           "rotmat_geometrically_equals"]


def epsilon_equals(first: ARRAY_LIKE, second: ARRAY_LIKE, epsilon: float) -> bool:
    """
    Component-wise comparison of two representations of the same kind.

    :param first: the first set of components
    :param second: the second set of components
    :param epsilon: the largest absolute difference allowed for each component
    :return: ``True`` if every ``|first_i - second_i| <= epsilon``
    """

    first = np.asanyarray(first, dtype=np.float64)
    second = np.asanyarray(second, dtype=np.float64)

    if first.shape != second.shape:
        raise ValueError('Only representations with the same number of components can be compared')

    return bool((np.abs(first - second) <= epsilon).all())


def quaternion_distance(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> float:
    r"""
    The angle between two rotation quaternions from their dot product:

    .. math::
        d = 2\text{cos}^{-1}(\text{clamp}(\mathbf{q}_1^T\mathbf{q}_2, -1, 1))

    The clamp keeps rounding from pushing the argument out of the domain of ``acos``.  The result is in
    :math:`[0, 2\pi]`; opposite quaternions give :math:`2\pi`.

    :param quaternion_1: The first quaternion
    :param quaternion_2: The second quaternion
    :return: the angle in radians
    """

    dot = float(np.clip(quaternion_dot(quaternion_1, quaternion_2), -1.0, 1.0))

    return 2.0 * np.arccos(dot)


def quaternion_distance_precise(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> float:
    r"""
    The angle between two rotation quaternions computed from the difference rotation
    :math:`\Delta\mathbf{q}=\mathbf{q}_1^{-1}\otimes\mathbf{q}_2`:

    .. math::
        d = 2\text{atan2}(\left\|\Delta\mathbf{q}_v\right\|, \Delta q_s)

    This is accurate for nearly identical rotations where :func:`quaternion_distance` is not, at the cost of a
    quaternion product.  The result is in :math:`[0, 2\pi]`.

    :param quaternion_1: The first quaternion
    :param quaternion_2: The second quaternion
    :return: the angle in radians
    """

    difference = quaternion_multiplication_conjugate_left(_check_quaternion_array_and_shape(quaternion_1),
                                                          _check_quaternion_array_and_shape(quaternion_2))

    return 2.0 * np.arctan2(np.linalg.norm(difference[:3]), difference[-1])


def rotmat_distance(matrix_1: ARRAY_LIKE, matrix_2: ARRAY_LIKE) -> float:
    r"""
    The angle of the rotation :math:`\mathbf{T}_1^T\mathbf{T}_2` from its trace:

    .. math::
        d = \text{cos}^{-1}\left(\text{clamp}\left(\frac{\text{Tr}(\mathbf{T}_1^T\mathbf{T}_2)-1}{2}, -1, 1\right)\right)

    :param matrix_1: The first rotation matrix
    :param matrix_2: The second rotation matrix
    :return: the angle in radians, in :math:`[0, \pi]`
    """

    matrix_1 = _check_matrix_array_and_shape(matrix_1)
    matrix_2 = _check_matrix_array_and_shape(matrix_2)

    # trace(A^T B) is the sum of the element-wise product
    cos_angle = ((matrix_1 * matrix_2).sum() - 1.0) / 2.0

    return float(np.arccos(np.clip(cos_angle, -1.0, 1.0)))


def rotmat_distance_precise(matrix_1: ARRAY_LIKE, matrix_2: ARRAY_LIKE) -> float:
    r"""
    The angle of the rotation :math:`\mathbf{T}_1^T\mathbf{T}_2` extracted through its quaternion with ``atan2``.

    :param matrix_1: The first rotation matrix
    :param matrix_2: The second rotation matrix
    :return: the angle in radians, in :math:`[0, \pi]`
    """

    matrix_1 = _check_matrix_array_and_shape(matrix_1)
    matrix_2 = _check_matrix_array_and_shape(matrix_2)

    difference = rotmat_to_quaternion(matrix_1.T @ matrix_2)

    return float(2.0 * np.arctan2(np.linalg.norm(difference[:3]), difference[-1]))


def geometrically_equals(first, second, epsilon: float,
                         distance: Callable[..., float], distance_precise: Callable[..., float]) -> bool:
    """
    Shared logic of the geometric comparisons.

    ``epsilon >= pi`` is always true since no two rotations are further apart than pi.  Otherwise the fast
    ``distance`` is used for tolerances above :data:`.GEOMETRICALLY_EQUALS_THRESHOLD` and ``distance_precise`` for the
    rest, and the angle is wrapped to :math:`[-\\pi, \\pi]` before comparing its magnitude so that a :math:`2\\pi`
    distance (opposite quaternions) counts as zero.

    :param first: the first rotation (in whatever form ``distance`` accepts)
    :param second: the second rotation (in whatever form ``distance`` accepts)
    :param epsilon: the largest angle (radians) between the rotations for them to be considered equal
    :param distance: the cheap distance function
    :param distance_precise: the accurate distance function
    :return: ``True`` if the rotations are within ``epsilon`` of each other
    """

    if epsilon >= np.pi:
        return True

    if epsilon > GEOMETRICALLY_EQUALS_THRESHOLD:
        angle = distance(first, second)
    else:
        angle = distance_precise(first, second)

    return bool(abs(_trim_angle_minus_pi_to_pi(angle)) <= epsilon)


def quaternion_geometrically_equals(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE, epsilon: float) -> bool:
    """
    Tests whether two quaternions represent the same rotation to within ``epsilon`` radians.

    ``q`` and ``-q`` always compare equal.

    :param quaternion_1: The first quaternion
    :param quaternion_2: The second quaternion
    :param epsilon: the tolerance in radians
    :return: ``True`` if the quaternions represent the same rotation
    """

    return geometrically_equals(quaternion_1, quaternion_2, epsilon,
                                quaternion_distance, quaternion_distance_precise)


def rotmat_geometrically_equals(matrix_1: ARRAY_LIKE, matrix_2: ARRAY_LIKE, epsilon: float) -> bool:
    """
    Tests whether two rotation matrices represent the same rotation to within ``epsilon`` radians.

    :param matrix_1: The first rotation matrix
    :param matrix_2: The second rotation matrix
    :param epsilon: the tolerance in radians
    :return: ``True`` if the matrices represent the same rotation
    """

    return geometrically_equals(matrix_1, matrix_2, epsilon, rotmat_distance, rotmat_distance_precise)
