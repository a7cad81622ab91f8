from dataclasses import dataclass
from typing import get_args, get_type_hints
from unittest import TestCase

import numpy as np

from orientations import rotations as at
from orientations._typing import (Matrix3DBasics, Matrix3DReadOnly, QuaternionReadOnly, Tuple2DBasics, Tuple2DReadOnly,
                                  Tuple3DBasics, Tuple3DReadOnly, Tuple4DBasics, Tuple4DReadOnly)
from orientations.tuples import Tuple2D, Tuple3D, Point3D, Vector3D, Vector4D, Matrix3D
from orientations.utilities.options import UserOptions
from orientations.utilities.mixin_classes import AttributePrinting, UserOptionConfigured


class TestTuples(TestCase):

    def test_tuple2d(self):

        point = Tuple2D(1, 2)

        self.assertEqual((point.x, point.y), (1, 2))
        self.assertEqual(len(point), 2)

        point.x = 3
        point.set(point.x, 4)

        self.assertEqual(list(point), [3, 4])
        self.assertEqual(repr(point), 'Tuple2D(3.0, 4.0)')

    def test_tuple3d(self):

        point = Point3D(1, 2, 2)

        self.assertEqual(point.norm(), 3)
        self.assertIsInstance(point, Tuple3D)
        self.assertNotEqual(point, Vector3D(1, 2, 2))

        point.z = np.nan

        self.assertTrue(point.contains_nan())

        point.set_to_zero()

        self.assertEqual(point, Point3D())
        self.assertFalse(point.contains_nan())

    def test_vector4d(self):

        vector = Vector4D(1, 2, 3, 4)

        self.assertEqual(vector.s, 4)
        self.assertEqual(vector.norm_squared(), 30)

        vector.set(0, 0, 0, 1)

        np.testing.assert_array_equal(vector, [0, 0, 0, 1])

        vector.x = 5
        vector.y = 6
        vector.z = 7
        vector.s = -1

        self.assertEqual(list(vector), [5, 6, 7, -1])

    def test_matrix3d(self):

        matrix = Matrix3D()

        np.testing.assert_array_equal(matrix, np.zeros((3, 3)))

        matrix.set(np.arange(9))

        self.assertEqual(matrix.get_element(2, 1), 7)
        self.assertEqual(list(matrix), list(range(9)))

        with self.assertRaises(ValueError):
            matrix.set([1, 2, 3])

    def test_array_is_a_copy(self):

        vector = Vector3D(1, 2, 3)

        exported = np.asarray(vector)
        exported[0] = 10

        self.assertEqual(vector.x, 1)

        np.testing.assert_array_equal(np.asarray(vector, dtype=np.float32), np.array([1, 2, 3], dtype=np.float32))

    def test_epsilon_equals(self):

        self.assertTrue(Vector3D(1, 2, 3).epsilon_equals(Vector3D(1, 2, 3 + 1e-9), 1e-8))
        self.assertFalse(Vector3D(1, 2, 3).epsilon_equals(Vector3D(1, 2, 3.1), 1e-8))

        self.assertTrue(Vector3D(1, 2, 3).epsilon_equals([1, 2, 3], 0))


class TestCapabilityProtocols(TestCase):

    def test_storage_satisfies_protocols(self):

        for value, protocols in [(Tuple2D(), [Tuple2DReadOnly, Tuple2DBasics]),
                                 (Point3D(), [Tuple3DReadOnly, Tuple3DBasics]),
                                 (Vector4D(), [Tuple4DReadOnly, Tuple4DBasics]),
                                 (Matrix3D(), [Matrix3DReadOnly, Matrix3DBasics]),
                                 (at.Quaternion(), [QuaternionReadOnly, Tuple4DBasics]),
                                 (at.RotationMatrix(), [Matrix3DReadOnly, Matrix3DBasics])]:

            for protocol in protocols:

                with self.subTest(value=type(value).__name__, protocol=protocol.__name__):

                    self.assertIsInstance(value, protocol)

        self.assertNotIsInstance(Tuple2D(), Tuple3DReadOnly)

    def test_signatures(self):

        for rotation in [at.Orientation3D, at.Quaternion, at.RotationMatrix]:

            with self.subTest(rotation=rotation.__name__):

                hints = get_type_hints(rotation.transform)

                self.assertEqual(set(get_args(hints['source'])),
                                 {at.Orientation3D, Matrix3DReadOnly, Tuple4DReadOnly, Tuple3DReadOnly,
                                  Tuple2DReadOnly})
                self.assertEqual(set(get_args(hints['destination'])),
                                 {at.Orientation3D, Matrix3DBasics, Tuple4DBasics, Tuple3DBasics, Tuple2DBasics,
                                  type(None)})

                hints = get_type_hints(rotation.add_transform)

                self.assertIs(hints['source'], Tuple3DReadOnly)
                self.assertIs(hints['destination'], Tuple3DBasics)

                hints = get_type_hints(rotation.get_quaternion)

                self.assertIs(hints['return'], Tuple4DBasics)


@dataclass
class ExampleOptions(UserOptions):

    tolerance: float = 1e-7

    label: str = 'example'


class Example(UserOptionConfigured[ExampleOptions], ExampleOptions):

    def __init__(self, options: ExampleOptions | None = None):
        super().__init__(ExampleOptions, options=options)


class TestUserOptions(TestCase):

    def test_options_dict(self):

        options = ExampleOptions(tolerance=0.5)

        self.assertEqual(options.options_dict, {'tolerance': 0.5, 'label': 'example'})

        self.assertEqual(at.RotationOptions().options_dict, {'unitary_tolerance': at.EPS_UNITARY,
                                                             'planar_tolerance': at.EPS_PLANAR,
                                                             'gimbal_lock_tolerance': at.EPS_GIMBAL_LOCK})

    def test_user_option_configured(self):

        example = Example()

        self.assertEqual(example.tolerance, 1e-7)

        options = ExampleOptions(tolerance=1.0, label='other')

        example = Example(options)

        self.assertEqual((example.tolerance, example.label), (1.0, 'other'))

        example.tolerance = 2.0
        example.label = 'changed'

        example.reset_settings()

        self.assertEqual((example.tolerance, example.label), (1.0, 'other'))
        self.assertIs(example.original_options, options)

    def test_rotation_options(self):

        options = at.RotationOptions(unitary_tolerance=1e-3, planar_tolerance=1e-4, gimbal_lock_tolerance=1e-5)

        for rotation in [at.Quaternion(options=options), at.RotationMatrix(options=options)]:

            with self.subTest(rotation=type(rotation).__name__):

                self.assertEqual(rotation.unitary_tolerance, 1e-3)
                self.assertEqual(rotation.planar_tolerance, 1e-4)
                self.assertEqual(rotation.gimbal_lock_tolerance, 1e-5)

                rotation.planar_tolerance = 1

                rotation.reset_settings()

                self.assertEqual(rotation.planar_tolerance, 1e-4)


class Labelled(AttributePrinting):

    def __init__(self):
        self.name = 'name'
        self._value = 3
        self._hidden = 4

    @property
    def value(self):
        return self._value


class TestAttributePrinting(TestCase):

    def test_attribute_printing(self):

        labelled = Labelled()

        self.assertEqual(repr(labelled), "Labelled(name='name', value=3)")
        self.assertEqual(str(labelled), "Labelled(name=name, value=3)")
