import orientations.rotations.core
import orientations.rotations.tolerances
import orientations.rotations.orientation
import orientations.rotations.quaternion
import orientations.rotations.axis_angle
import orientations.rotations.yaw_pitch_roll
import orientations.rotations.rotation_matrix

from orientations.rotations.core import *
from orientations.rotations.tolerances import (EPS_UNITARY, GEOMETRICALLY_EQUALS_THRESHOLD, EPS_PLANAR,
                                               EPS_GIMBAL_LOCK, EPS_SMALL_ANGLE, EPS_ORTHONORMALIZE,
                                               EPS_DEPENDENT_COLUMNS, EPS_ROTATION_MATRIX, RotationOptions)
from orientations.rotations.orientation import Orientation3D
from orientations.rotations.quaternion import Quaternion
from orientations.rotations.axis_angle import AxisAngle
from orientations.rotations.yaw_pitch_roll import YawPitchRoll
from orientations.rotations.rotation_matrix import RotationMatrix

__all__ = ['epsilon_equals', 'quaternion_distance', 'quaternion_distance_precise', 'rotmat_distance',
           'rotmat_distance_precise', 'quaternion_geometrically_equals', 'rotmat_geometrically_equals',
           'quaternion_to_rotvec', 'quaternion_to_axis_angle', 'quaternion_to_rotmat', 'quaternion_to_yaw_pitch_roll',
           'rotvec_to_quaternion', 'rotvec_to_rotmat', 'axis_angle_to_quaternion', 'axis_angle_to_rotmat',
           'rotmat_to_quaternion', 'rotmat_to_rotvec', 'rotmat_to_axis_angle', 'rotmat_to_yaw_pitch_roll',
           'yaw_pitch_roll_to_quaternion', 'yaw_pitch_roll_to_rotmat',
           'rot_x', 'rot_y', 'rot_z', 'skew',
           'orthonormalize', 'is_rotation_matrix', 'is_unitary', 'check_if_unitary', 'is_quaternion_planar',
           'check_if_quaternion_planar', 'is_rotmat_planar', 'check_if_rotmat_planar',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_multiplication',
           'quaternion_multiplication_conjugate_left', 'quaternion_dot', 'quaternion_norm', 'nlerp', 'slerp',
           'quaternion_rotate_vectors', 'quaternion_inverse_rotate_vectors', 'rotmat_rotate_vectors',
           'rotmat_inverse_rotate_vectors', 'rotate_matrix', 'inverse_rotate_matrix',
           'EPS_UNITARY', 'GEOMETRICALLY_EQUALS_THRESHOLD', 'EPS_PLANAR', 'EPS_GIMBAL_LOCK', 'EPS_SMALL_ANGLE',
           'EPS_ORTHONORMALIZE', 'EPS_DEPENDENT_COLUMNS', 'EPS_ROTATION_MATRIX', 'RotationOptions',
           'Orientation3D', 'Quaternion', 'AxisAngle', 'YawPitchRoll', 'RotationMatrix']


r"""
This package defines the rotation representations of :mod:`orientations`, the routines for converting between them,
and the routines for applying them.

The representations and their formats are:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is the unit rotation axis and :math:`\theta` is the rotation angle.
                   :math:`\mathbf{q}` and :math:`-\mathbf{q}` are the same rotation.  Unit length is checked on
                   request only, never enforced.
rotation matrix    A :math:`3\times 3` orthonormal matrix with a determinant of +1 such that
                   :math:`\mathbf{T}_B^A\mathbf{y}_A` rotates the vector :math:`\mathbf{y}_A` from frame :math:`A`
                   to :math:`B`.  The matrix is re-orthonormalized before every use.
axis-angle         A unit rotation axis :math:`\hat{\mathbf{x}}` and an angle :math:`\theta\in(-\pi, \pi]`.  The
                   identity is reported as an angle of 0 about :math:`[1, 0, 0]`.
rotation vector    A 3 element vector :math:`\mathbf{v}=\theta\hat{\mathbf{x}}`.  The identity is the zero vector.
yaw-pitch-roll     The ZYX angles :math:`(\psi, \theta, \phi)` with
                   :math:`\mathbf{T}=\mathbf{R}_z(\psi)\mathbf{R}_y(\theta)\mathbf{R}_x(\phi)`.  At gimbal lock
                   (:math:`\theta=\pm\pi/2`) roll is reported as 0 and yaw holds the combined rotation.
=================  =====================================================================================================

:class:`.Quaternion` and :class:`.RotationMatrix` are the hub representations and implement every operation of the
:class:`.Orientation3D` capability set directly.  :class:`.AxisAngle` and :class:`.YawPitchRoll` route everything
through their quaternion.  Rotation vectors are plain :class:`.Vector3D` instances.

Two notions of equality are provided.  ``epsilon_equals`` compares the stored numbers.  ``geometrically_equals``
compares the angle between the rotations, so that :math:`\mathbf{q}` and :math:`-\mathbf{q}` are equal.
"""
