# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`YawPitchRoll` rotation view.

The angles follow the ZYX sequence

.. math::
    \\mathbf{T}=\\mathbf{R}_z(\\psi)\\mathbf{R}_y(\\theta)\\mathbf{R}_x(\\phi)

where :math:`\\psi` is yaw, :math:`\\theta` is pitch and :math:`\\phi` is roll.  At :math:`\\theta=\\pm\\pi/2` (gimbal
lock) yaw and roll rotate about the same axis and cannot be separated; conversions into this representation then
report a roll of 0 and put the combined rotation into yaw.
"""

import numpy as np

from orientations._typing import DOUBLE_ARRAY, Tuple4DBasics
from orientations.utilities.mixin_classes import AttributePrinting

from orientations.rotations.core.conversions import quaternion_to_yaw_pitch_roll, yaw_pitch_roll_to_quaternion
from orientations.rotations.orientation import QUATERNION_INPUT, QuaternionBackedOrientation
from orientations.rotations.quaternion import Quaternion, _to_quaternion_array
from orientations.rotations.tolerances import EPS_GIMBAL_LOCK


__all__ = ["YawPitchRoll"]


class YawPitchRoll(AttributePrinting, QuaternionBackedOrientation):
    """
    A rotation expressed as yaw, pitch and roll angles in radians (ZYX sequence).

    This is a view only: all rotation work is done on the equivalent quaternion.
    """

    def __init__(self, yaw: float = 0.0, pitch: float = 0.0, roll: float = 0.0):
        self.yaw: float = float(yaw)
        self.pitch: float = float(pitch)
        self.roll: float = float(roll)

    def set(self, yaw: float, pitch: float, roll: float) -> None:
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.roll = float(roll)

    def set_to_zero(self) -> None:
        self.set(0.0, 0.0, 0.0)

    def set_from_quaternion(self, quaternion: QUATERNION_INPUT) -> None:
        self.set(*quaternion_to_yaw_pitch_roll(_to_quaternion_array(quaternion), EPS_GIMBAL_LOCK))

    def get_quaternion(self, destination: Tuple4DBasics | None = None) -> Tuple4DBasics:
        if destination is None:
            destination = Quaternion()

        destination.set(*yaw_pitch_roll_to_quaternion((self.yaw, self.pitch, self.roll)))

        return destination

    def get_yaw_pitch_roll(self, destination: 'YawPitchRoll | None' = None) -> 'YawPitchRoll':
        if destination is None:
            destination = YawPitchRoll()

        destination.set(self.yaw, self.pitch, self.roll)

        return destination

    def _components(self) -> DOUBLE_ARRAY:
        return np.array([self.yaw, self.pitch, self.roll])
