# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`AxisAngle` rotation view.
"""

import numpy as np

from orientations._typing import DOUBLE_ARRAY, Tuple4DBasics
from orientations.utilities.mixin_classes import AttributePrinting

from orientations.rotations.core._helpers import _as_vector_array
from orientations.rotations.core.conversions import axis_angle_to_quaternion, quaternion_to_axis_angle
from orientations.rotations.orientation import QUATERNION_INPUT, VECTOR_INPUT, QuaternionBackedOrientation
from orientations.rotations.quaternion import Quaternion, _to_quaternion_array


__all__ = ["AxisAngle"]


class AxisAngle(AttributePrinting, QuaternionBackedOrientation):
    """
    A rotation of :attr:`angle` radians about the unit vector :attr:`axis`.

    Conversions into this representation always produce a unit axis and an angle in :math:`(-\\pi, \\pi]`; the
    identity rotation is reported as an angle of 0 about :math:`[1, 0, 0]`.  Values set directly are stored as given.
    All rotation work is done on the equivalent quaternion.
    """

    def __init__(self, axis: VECTOR_INPUT = (1.0, 0.0, 0.0), angle: float = 0.0):
        """
        :param axis: The rotation axis as a 3D tuple or a length 3 array
        :param angle: The rotation angle in radians
        """

        self._axis: DOUBLE_ARRAY = _as_vector_array(axis)
        self.angle: float = float(angle)

    @property
    def axis(self) -> DOUBLE_ARRAY:
        """
        The rotation axis as a copy of the stored array.
        """

        return self._axis.copy()

    def set(self, axis: VECTOR_INPUT, angle: float) -> None:
        self._axis = _as_vector_array(axis)
        self.angle = float(angle)

    def set_to_zero(self) -> None:
        self.set((1.0, 0.0, 0.0), 0.0)

    def set_from_quaternion(self, quaternion: QUATERNION_INPUT) -> None:
        self.set(*quaternion_to_axis_angle(_to_quaternion_array(quaternion)))

    def get_quaternion(self, destination: Tuple4DBasics | None = None) -> Tuple4DBasics:
        if destination is None:
            destination = Quaternion()

        destination.set(*axis_angle_to_quaternion(self._axis, self.angle))

        return destination

    def get_axis_angle(self, destination: 'AxisAngle | None' = None) -> 'AxisAngle':
        if destination is None:
            destination = AxisAngle()

        destination.set(self._axis, self.angle)

        return destination

    def get_angle(self) -> float:
        return self.angle

    def invert(self) -> None:
        self.angle = -self.angle

    def _components(self) -> DOUBLE_ARRAY:
        return np.append(self._axis, self.angle)
