# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Errors raised by the rotation routines.

All of them derive from :class:`ValueError` so code that already guards the rotation routines with
``except ValueError`` keeps working.
"""

__all__ = ["InvalidRotationError", "NotUnitQuaternionError", "NotPlanarRotationError"]


class InvalidRotationError(ValueError):
    """
    Raised when a matrix cannot be orthonormalized into a proper rotation matrix.

    This happens when the columns are (nearly) linearly dependent, when the matrix contains NaN, or when the
    orthonormalized result is a reflection (determinant of -1).
    """


class NotUnitQuaternionError(ValueError):
    """
    Raised by the explicit unit-norm assertions on a quaternion.

    Quaternions are never checked implicitly before being used as a rotation, so this is only raised when the
    check is requested.
    """


class NotPlanarRotationError(ValueError):
    """
    Raised when a rotation restricted to the XY plane is required but the rotation has out-of-plane components.
    """
