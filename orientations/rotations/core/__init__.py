"""
This package contains the numerical core of the rotation routines: pure functions on numpy arrays for converting,
applying, repairing, and comparing rotations.  It has no dependencies on the representation classes to avoid circular
imports; the classes in :mod:`orientations.rotations` are thin adapters over these functions.
"""

import orientations.rotations.core.comparisons
import orientations.rotations.core.conversions
import orientations.rotations.core.elementals
import orientations.rotations.core.normalization
import orientations.rotations.core.quaternion_math
import orientations.rotations.core.transforms

from orientations.rotations.core.comparisons import (epsilon_equals, quaternion_distance, quaternion_distance_precise,
                                                     rotmat_distance, rotmat_distance_precise,
                                                     quaternion_geometrically_equals, rotmat_geometrically_equals)

from orientations.rotations.core.conversions import (quaternion_to_rotvec, quaternion_to_axis_angle,
                                                     quaternion_to_rotmat, quaternion_to_yaw_pitch_roll,
                                                     rotvec_to_quaternion, rotvec_to_rotmat,
                                                     axis_angle_to_quaternion, axis_angle_to_rotmat,
                                                     rotmat_to_quaternion, rotmat_to_rotvec, rotmat_to_axis_angle,
                                                     rotmat_to_yaw_pitch_roll,
                                                     yaw_pitch_roll_to_quaternion, yaw_pitch_roll_to_rotmat)

from orientations.rotations.core.elementals import rot_x, rot_y, rot_z, skew

from orientations.rotations.core.normalization import (orthonormalize, is_rotation_matrix, is_unitary,
                                                       check_if_unitary, is_quaternion_planar,
                                                       check_if_quaternion_planar, is_rotmat_planar,
                                                       check_if_rotmat_planar)

from orientations.rotations.core.quaternion_math import (quaternion_normalize, quaternion_conjugate,
                                                         quaternion_multiplication,
                                                         quaternion_multiplication_conjugate_left, quaternion_dot,
                                                         quaternion_norm, nlerp, slerp)

from orientations.rotations.core.transforms import (quaternion_rotate_vectors, quaternion_inverse_rotate_vectors,
                                                    rotmat_rotate_vectors, rotmat_inverse_rotate_vectors,
                                                    rotate_matrix, inverse_rotate_matrix)

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
           'rotmat_inverse_rotate_vectors', 'rotate_matrix', 'inverse_rotate_matrix']
