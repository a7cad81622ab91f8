import copy

import numpy as np

from orientations._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE,
                           return_copy: bool = False,
                           first_axis_length: int | None = None,
                           second_last_axis_length: int | None = None,
                           last_axis_length: int | None = None) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if first_axis_length is not None and in_shape[0] != first_axis_length:
        raise ValueError(f'The length of the first axis must be {first_axis_length}')

    if second_last_axis_length is not None:
        if len(in_shape) < 2 or in_shape[-2] != second_last_axis_length:
            raise ValueError(f'The length of the second to last axis must be {second_last_axis_length}')

    if last_axis_length is not None and in_shape[-1] != last_axis_length:
        raise ValueError(f'The length of the last axis must be {last_axis_length}')

    if return_copy:
        input = copy.deepcopy(input)

    # ensure the value is an array and break mutability
    return np.asanyarray(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, return_copy, first_axis_length=4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, return_copy, first_axis_length=3)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, return_copy, second_last_axis_length=3, last_axis_length=3)


def _trim_angle_minus_pi_to_pi(angle):
    """
    Wraps angle(s) into [-pi, pi].
    """

    return angle - 2 * np.pi * np.floor((angle + np.pi) / (2 * np.pi))


def _as_quaternion_array(quaternion) -> DOUBLE_ARRAY:
    """
    Reads ``[x, y, z, s]`` from a quaternion like object (anything with ``x``, ``y``, ``z``, and ``s``) or from a
    length 4 array.  Always returns a new array.
    """

    if all(hasattr(quaternion, name) for name in ('x', 'y', 'z', 's')):
        return np.array([quaternion.x, quaternion.y, quaternion.z, quaternion.s], dtype=np.float64)

    quaternion = np.array(quaternion, dtype=np.float64).ravel()

    if quaternion.size != 4:
        raise ValueError('The quaternion must be length 4')

    return quaternion


def _as_vector_array(vector) -> DOUBLE_ARRAY:
    """
    Reads ``[x, y, z]`` from a 3D tuple like object or from a length 3 array.  Always returns a new array.
    """

    if all(hasattr(vector, name) for name in ('x', 'y', 'z')):
        return np.array([vector.x, vector.y, vector.z], dtype=np.float64)

    vector = np.array(vector, dtype=np.float64).ravel()

    if vector.size != 3:
        raise ValueError('The vector must be length 3')

    return vector


def _as_matrix_array(matrix) -> DOUBLE_ARRAY:
    """
    Reads a 3x3 matrix from a matrix object (through ``__array__``) or from anything with 9 coefficients.  Always
    returns a new array.
    """

    matrix = np.array(matrix, dtype=np.float64)

    if matrix.size != 9:
        raise ValueError('The matrix must have 9 coefficients')

    return matrix.reshape(3, 3)
