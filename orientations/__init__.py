"""
orientations: interoperable 3D rotation representations.

Quaternions, rotation matrices, axis-angle pairs, rotation vectors, and yaw-pitch-roll angles, the conversions between
them, their application to points, vectors and matrices, and rotation aware comparisons.  See
:mod:`orientations.rotations` for details.
"""

import orientations.exceptions
import orientations.tuples
import orientations.rotations

from orientations.exceptions import InvalidRotationError, NotUnitQuaternionError, NotPlanarRotationError
from orientations.tuples import Tuple2D, Tuple3D, Point3D, Vector3D, Vector4D, Matrix3D
from orientations.rotations import (Orientation3D, Quaternion, RotationMatrix, AxisAngle, YawPitchRoll,
                                    RotationOptions)

__version__ = '1.0.0'

__all__ = ['InvalidRotationError', 'NotUnitQuaternionError', 'NotPlanarRotationError',
           'Tuple2D', 'Tuple3D', 'Point3D', 'Vector3D', 'Vector4D', 'Matrix3D',
           'Orientation3D', 'Quaternion', 'RotationMatrix', 'AxisAngle', 'YawPitchRoll', 'RotationOptions']
