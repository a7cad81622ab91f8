from unittest import TestCase

import numpy as np

from orientations import rotations as at
from orientations.exceptions import NotUnitQuaternionError, NotPlanarRotationError
from orientations.tuples import Vector3D, Vector4D


Z90 = [0, 0, np.sqrt(2)/2, np.sqrt(2)/2]


class TestQuaternion(TestCase):

    def test_creation(self):

        quaternion = at.Quaternion()

        np.testing.assert_array_equal(quaternion, [0, 0, 0, 1])

        quaternion = at.Quaternion(1, 2, 3, 4)

        self.assertEqual((quaternion.x, quaternion.y, quaternion.z, quaternion.s), (1, 2, 3, 4))

        # nothing is normalized on construction
        self.assertAlmostEqual(quaternion.norm(), np.sqrt(30))
        self.assertEqual(quaternion.norm_squared(), 30)

        quaternion = at.Quaternion.from_array(np.array([[0.], [0], [1], [0]]))

        np.testing.assert_array_equal(quaternion, [0, 0, 1, 0])

        quaternion = at.Quaternion.from_array(Vector4D(1, 2, 3, 4))

        np.testing.assert_array_equal(quaternion, [1, 2, 3, 4])

        with self.assertRaises(ValueError):
            at.Quaternion.from_array([1, 2, 3])

    def test_identity(self):

        quaternion = at.Quaternion()

        self.assertEqual(quaternion.get_angle(), 0)
        self.assertEqual(quaternion.get_yaw(), 0)
        self.assertEqual(quaternion.get_pitch(), 0)
        self.assertEqual(quaternion.get_roll(), 0)

        quaternion.set(*Z90)
        quaternion.set_to_zero()

        np.testing.assert_array_equal(quaternion, [0, 0, 0, 1])

    def test_options(self):

        quaternion = at.Quaternion(0, 0, 0, 1.005)

        self.assertEqual(quaternion.unitary_tolerance, at.EPS_UNITARY)
        self.assertFalse(quaternion.is_unitary())

        options = at.RotationOptions(unitary_tolerance=1e-2)

        quaternion = at.Quaternion(0, 0, 0, 1.005, options=options)

        self.assertEqual(quaternion.unitary_tolerance, 1e-2)
        self.assertTrue(quaternion.is_unitary())
        self.assertFalse(quaternion.is_unitary(1e-3))

        quaternion.unitary_tolerance = 1e-4

        self.assertFalse(quaternion.is_unitary())

        quaternion.reset_settings()

        self.assertEqual(quaternion.unitary_tolerance, 1e-2)
        self.assertIs(quaternion.original_options, options)

    def test_check_if_unitary(self):

        at.Quaternion(*Z90).check_if_unitary()

        with self.assertRaises(NotUnitQuaternionError):
            at.Quaternion(1, 2, 3, 4).check_if_unitary()

        at.Quaternion(1, 2, 3, 4).check_if_unitary(epsilon=10)

    def test_orientation_2d(self):

        self.assertTrue(at.Quaternion(*Z90).is_orientation_2d())
        self.assertFalse(at.Quaternion(1, 0, 0, 0).is_orientation_2d())

        at.Quaternion(*Z90).check_if_orientation_2d()

        with self.assertRaises(NotPlanarRotationError):
            at.Quaternion(0, 1, 0, 0).check_if_orientation_2d()

        quaternion = at.Quaternion(1e-3, 0, 0, 1, options=at.RotationOptions(planar_tolerance=1e-2))

        self.assertTrue(quaternion.is_orientation_2d())
        self.assertFalse(quaternion.is_orientation_2d(1e-4))

    def test_normalize(self):

        quaternion = at.Quaternion(0, 0, 0, -2)

        quaternion.normalize()

        np.testing.assert_array_equal(quaternion, [0, 0, 0, -1])

        with self.assertRaises(NotUnitQuaternionError):
            at.Quaternion(0, 0, 0, 0).normalize()

    def test_conjugate_and_invert(self):

        quaternion = at.Quaternion(1, 2, 3, 4)

        quaternion.conjugate()

        np.testing.assert_array_equal(quaternion, [-1, -2, -3, 4])

        quaternion.invert()

        np.testing.assert_array_equal(quaternion, [1, 2, 3, 4])

    def test_multiply(self):

        first = at.Quaternion.from_array(at.rotvec_to_quaternion([0.1, 0.2, 0.3]))
        second = at.Quaternion.from_array(at.rotvec_to_quaternion([-0.4, 0.5, 1]))

        product = first.copy()
        product.multiply(second)

        np.testing.assert_array_equal(product, at.quaternion_multiplication(first, second))

        product = first.copy()
        product.pre_multiply(second)

        np.testing.assert_array_equal(product, at.quaternion_multiplication(second, first))

        # other representations are accepted
        product = first.copy()
        product.multiply(at.RotationMatrix(at.rotvec_to_rotmat([-0.4, 0.5, 1])))

        self.assertTrue(product.geometrically_equals(at.quaternion_multiplication(first, second), 1e-12))

        product = first.copy()
        product.pre_multiply(at.AxisAngle([0, 0, 1], np.pi/2))

        self.assertTrue(product.geometrically_equals(at.quaternion_multiplication(Z90, first), 1e-12))

    def test_mul_operator(self):

        first = at.Quaternion.from_array(at.rotvec_to_quaternion([0.1, 0.2, 0.3]))
        second = at.Quaternion.from_array(at.rotvec_to_quaternion([-0.4, 0.5, 1]))

        product = first * second

        self.assertIsInstance(product, at.Quaternion)
        np.testing.assert_array_equal(product, at.quaternion_multiplication(first, second))

        np.testing.assert_array_equal(first, at.rotvec_to_quaternion([0.1, 0.2, 0.3]))

        with self.assertRaises(TypeError):
            first * 3

    def test_dot(self):

        self.assertEqual(at.Quaternion(1, 2, 3, 4).dot(at.Quaternion(4, 3, 2, 1)), 20)

        self.assertEqual(at.Quaternion(1, 2, 3, 4).dot([1, 1, 1, 1]), 10)

    def test_interpolate(self):

        quaternion = at.Quaternion()

        quaternion.interpolate(at.Quaternion(), at.Quaternion(0.5, 0.5, 0.5, 0.5), 0.79)

        np.testing.assert_allclose(quaternion, [0.424985851398278, 0.424985851398278, 0.424985851398278,
                                                0.676875969682661])

        quaternion.interpolate(at.Quaternion(), at.AxisAngle([0, 0, 1], np.pi/2), 0.5)

        np.testing.assert_allclose(quaternion, at.rotvec_to_quaternion([0, 0, np.pi/4]))

    def test_setters(self):

        setters = {'quaternion': lambda q: q.set_from_quaternion(Z90),
                   'quaternion object': lambda q: q.set_from_quaternion(at.Quaternion(*Z90)),
                   'rotation matrix': lambda q: q.set_from_rotation_matrix(at.rot_z(np.pi/2)),
                   'rotation matrix object': lambda q: q.set_from_rotation_matrix(at.RotationMatrix(at.rot_z(np.pi/2))),
                   'axis angle': lambda q: q.set_from_axis_angle(Vector3D(0, 0, 2), np.pi/2),
                   'rotation vector': lambda q: q.set_from_rotation_vector([0, 0, np.pi/2]),
                   'rotation vector object': lambda q: q.set_from_rotation_vector(Vector3D(0, 0, np.pi/2)),
                   'yaw pitch roll': lambda q: q.set_from_yaw_pitch_roll(np.pi/2, 0, 0)}

        for name, setter in setters.items():

            with self.subTest(name=name):

                quaternion = at.Quaternion(1, 2, 3, 4)

                setter(quaternion)

                np.testing.assert_allclose(quaternion, Z90, atol=1e-15)

    def test_getters(self):

        quaternion = at.Quaternion.from_array(at.rotvec_to_quaternion([0.3, -0.2, 0.1]))

        rotmat = quaternion.get_rotation_matrix()

        self.assertIsInstance(rotmat, at.RotationMatrix)
        np.testing.assert_allclose(rotmat, at.rotvec_to_rotmat([0.3, -0.2, 0.1]))

        axis_angle = quaternion.get_axis_angle()

        self.assertIsInstance(axis_angle, at.AxisAngle)
        np.testing.assert_allclose(axis_angle.axis * axis_angle.angle, [0.3, -0.2, 0.1])

        rotation_vector = quaternion.get_rotation_vector()

        self.assertIsInstance(rotation_vector, Vector3D)
        np.testing.assert_allclose(rotation_vector, [0.3, -0.2, 0.1])

        ypr = quaternion.get_yaw_pitch_roll()

        self.assertIsInstance(ypr, at.YawPitchRoll)
        np.testing.assert_allclose([ypr.yaw, ypr.pitch, ypr.roll],
                                   at.quaternion_to_yaw_pitch_roll(at.rotvec_to_quaternion([0.3, -0.2, 0.1])))

        copy = quaternion.get_quaternion()

        self.assertIsNot(copy, quaternion)
        self.assertEqual(copy, quaternion)

        # destinations are written into and returned
        destination = at.RotationMatrix()

        self.assertIs(quaternion.get_rotation_matrix(destination), destination)
        np.testing.assert_allclose(destination, rotmat)

        destination = Vector3D()

        self.assertIs(quaternion.get_rotation_vector(destination), destination)

        destination = at.Quaternion()

        self.assertIs(quaternion.get_quaternion(destination), destination)
        self.assertEqual(destination, quaternion)

    def test_angles(self):

        self.assertAlmostEqual(at.Quaternion(*Z90).get_angle(), np.pi/2)

        self.assertAlmostEqual(at.Quaternion(*(-np.array(Z90))).get_angle(), -np.pi/2)

        quaternion = at.Quaternion()
        quaternion.set_from_yaw_pitch_roll(0.3, -0.4, 1.2)

        self.assertAlmostEqual(quaternion.get_yaw(), 0.3)
        self.assertAlmostEqual(quaternion.get_pitch(), -0.4)
        self.assertAlmostEqual(quaternion.get_roll(), 1.2)

    def test_gimbal_lock_tolerance(self):

        options = at.RotationOptions(gimbal_lock_tolerance=1e-6)

        quaternion = at.Quaternion(options=options)
        quaternion.set_from_yaw_pitch_roll(0.3, np.pi/2 - 1e-4, 0.1)

        self.assertEqual(quaternion.get_roll(), 0)
        self.assertEqual(quaternion.get_pitch(), np.pi/2)

        quaternion = at.Quaternion()
        quaternion.set_from_yaw_pitch_roll(0.3, np.pi/2 - 1e-4, 0.1)

        self.assertAlmostEqual(quaternion.get_roll(), 0.1, places=6)

    def test_matrix_cache(self):

        quaternion = at.Quaternion(*Z90)

        self.assertTrue(quaternion._mupdate)

        matrix = quaternion.matrix

        self.assertFalse(quaternion._mupdate)
        self.assertIs(quaternion.matrix, matrix)

        np.testing.assert_allclose(matrix, at.rot_z(np.pi/2), atol=1e-15)

        with self.assertRaises(ValueError):
            matrix[0, 0] = 2

        quaternion.set(0, 0, 0, 1)

        self.assertTrue(quaternion._mupdate)
        np.testing.assert_array_equal(quaternion.matrix, np.eye(3))

    def test_distance(self):

        quaternion = at.Quaternion.from_array(at.rotvec_to_quaternion([0.3, -0.2, 0.1]))

        self.assertEqual(quaternion.distance(quaternion), 0)
        self.assertEqual(quaternion.distance(at.Quaternion(*(-np.array(quaternion)))), 0)

        self.assertAlmostEqual(at.Quaternion().distance(at.Quaternion(*Z90)), np.pi/2)

        self.assertAlmostEqual(at.Quaternion().distance(at.RotationMatrix(at.rot_x(0.5))), 0.5)

        self.assertAlmostEqual(at.Quaternion().distance(at.Quaternion(1, 0, 0, 0)), np.pi)

    def test_equality(self):

        quaternion = at.Quaternion(*Z90)
        negated = at.Quaternion(*(-np.array(Z90)))

        self.assertEqual(quaternion, at.Quaternion(*Z90))
        self.assertNotEqual(quaternion, negated)
        self.assertNotEqual(quaternion, Z90)

        self.assertTrue(quaternion.epsilon_equals(at.Quaternion(0, 0, np.sqrt(2)/2 + 1e-9, np.sqrt(2)/2), 1e-8))
        self.assertFalse(quaternion.epsilon_equals(negated, 0.1))
        self.assertTrue(quaternion.epsilon_equals(Vector4D(*Z90), 0))
        self.assertFalse(quaternion.epsilon_equals(at.RotationMatrix(at.rot_z(np.pi/2)), 1))

        self.assertTrue(quaternion.geometrically_equals(negated, 0))
        self.assertTrue(quaternion.geometrically_equals(at.RotationMatrix(at.rot_z(np.pi/2)), 1e-12))
        self.assertTrue(quaternion.geometrically_equals(at.YawPitchRoll(np.pi/2, 0, 0), 1e-12))
        self.assertFalse(quaternion.geometrically_equals(at.Quaternion(), 1))

        with self.assertRaises(TypeError):
            hash(quaternion)

    def test_copy(self):

        quaternion = at.Quaternion(*Z90, options=at.RotationOptions(unitary_tolerance=0.1))

        copy = quaternion.copy()

        self.assertEqual(copy, quaternion)
        self.assertEqual(copy.unitary_tolerance, 0.1)

        copy.set(0, 0, 0, 1)

        np.testing.assert_array_equal(quaternion, Z90)

    def test_representation(self):

        self.assertEqual(repr(at.Quaternion()), 'Quaternion(x=0.0, y=0.0, z=0.0, s=1.0)')

        self.assertEqual(str(at.Quaternion(1, 2, 3, 4)), str(np.array([1., 2, 3, 4])))
