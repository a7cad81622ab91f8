# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Numeric tolerances used throughout the rotation routines and the :class:`RotationOptions` configuration class.
"""

from dataclasses import dataclass

from orientations.utilities.options import UserOptions


__all__ = ["EPS_UNITARY", "GEOMETRICALLY_EQUALS_THRESHOLD", "EPS_PLANAR", "EPS_GIMBAL_LOCK", "EPS_SMALL_ANGLE",
           "EPS_ORTHONORMALIZE", "EPS_DEPENDENT_COLUMNS", "EPS_ROTATION_MATRIX", "RotationOptions"]


EPS_UNITARY: float = 1.0e-7
"""
Default tolerance on ``|norm - 1|`` for a quaternion to be considered a unit quaternion.
"""

GEOMETRICALLY_EQUALS_THRESHOLD: float = 0.005
"""
Requested tolerances (radians) at or below this value use the precise distance instead of the ``acos`` distance.
"""

EPS_PLANAR: float = 1.0e-7
"""
Tolerance on the out-of-plane components of a rotation that is required to be a pure rotation about z.
"""

EPS_GIMBAL_LOCK: float = 1.0e-12
"""
Gimbal lock is declared when the sine of the pitch angle is within this distance of +/-1.
"""

EPS_SMALL_ANGLE: float = 1.0e-12
"""
Below this norm the vector part of a quaternion is treated as zero (identity rotation, no defined axis).
"""

EPS_ORTHONORMALIZE: float = 1.0e-10
"""
Columns shorter than this during Gram-Schmidt mean the matrix cannot be made a rotation matrix.
"""

EPS_DEPENDENT_COLUMNS: float = 1.0e-6
"""
A column that keeps less than this fraction of its length once the previous columns are projected out is treated as
linearly dependent on them.
"""

EPS_ROTATION_MATRIX: float = 1.0e-7
"""
Default tolerance for testing whether a matrix is already a rotation matrix.
"""


@dataclass
class RotationOptions(UserOptions):
    """
    Per instance tolerances for the :class:`.Quaternion` and :class:`.RotationMatrix` classes.

    These are applied as attributes of the instance when it is created and can be restored with
    ``reset_settings``.
    """

    unitary_tolerance: float = EPS_UNITARY
    """
    The tolerance used by ``is_unitary``/``check_if_unitary`` when no epsilon is given.
    """

    planar_tolerance: float = EPS_PLANAR
    """
    The tolerance used when a transform is restricted to the XY plane.
    """

    gimbal_lock_tolerance: float = EPS_GIMBAL_LOCK
    """
    The tolerance used to detect gimbal lock when extracting yaw-pitch-roll angles.
    """
