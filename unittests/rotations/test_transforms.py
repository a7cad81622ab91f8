from unittest import TestCase

import numpy as np

from orientations import rotations as at
from orientations.exceptions import InvalidRotationError, NotPlanarRotationError
from orientations.tuples import Point3D, Vector3D, Vector4D, Tuple2D, Matrix3D


Z90 = [0, 0, np.sin(np.pi/4), np.cos(np.pi/4)]


class TestQuaternionRotateVectors(TestCase):

    def test_quaternion_rotate_vectors(self):

        np.testing.assert_allclose(at.quaternion_rotate_vectors(Z90, [1, 0, 0]), [0, 1, 0], atol=1e-12)

        np.testing.assert_allclose(at.quaternion_inverse_rotate_vectors(Z90, [1, 0, 0]), [0, -1, 0], atol=1e-12)

        vectors = np.array([[1, 0, 0, 1], [0, 1, 0, 2], [0, 0, 1, 3]])

        np.testing.assert_allclose(at.quaternion_rotate_vectors(Z90, vectors),
                                   [[0, -1, 0, -2], [1, 0, 0, 1], [0, 0, 1, 3]], atol=1e-12)

    def test_matches_rotation_matrix(self):

        rng = np.random.default_rng(5)

        quaternion = at.quaternion_normalize(rng.normal(size=4))
        vectors = rng.normal(size=(3, 10))

        rotmat = at.quaternion_to_rotmat(quaternion)

        np.testing.assert_allclose(at.quaternion_rotate_vectors(quaternion, vectors), rotmat @ vectors, atol=1e-12)

        np.testing.assert_allclose(at.quaternion_inverse_rotate_vectors(quaternion, vectors),
                                   at.rotmat_inverse_rotate_vectors(rotmat, vectors), atol=1e-12)

        np.testing.assert_allclose(at.rotmat_rotate_vectors(rotmat, vectors), rotmat @ vectors)


class TestRotateMatrix(TestCase):

    def test_rotate_matrix(self):

        inertia = np.diag([1., 2, 3])

        rotated = at.rotate_matrix(at.rot_z(np.pi/2), inertia)

        np.testing.assert_allclose(rotated, np.diag([2, 1, 3]), atol=1e-12)

        np.testing.assert_allclose(at.inverse_rotate_matrix(at.rot_z(np.pi/2), rotated), inertia, atol=1e-12)

        np.testing.assert_array_equal(inertia, np.diag([1, 2, 3]))


class TestQuaternionTransform(TestCase):

    def test_point(self):

        rotation = at.Quaternion(*Z90)

        point = Point3D(1, 0, 0)

        rotation.transform(point)

        self.assertTrue(point.epsilon_equals(Point3D(0, 1, 0), 1e-12))

        rotation.inverse_transform(point)

        self.assertTrue(point.epsilon_equals(Point3D(1, 0, 0), 1e-12))

    def test_destination(self):

        rotation = at.Quaternion(*Z90)

        source = Point3D(1, 2, 3)
        destination = Vector3D()

        rotation.transform(source, destination)

        self.assertEqual(source, Point3D(1, 2, 3))
        self.assertTrue(destination.epsilon_equals(Vector3D(-2, 1, 3), 1e-12))

    def test_vector4d(self):

        rotation = at.Quaternion(*Z90)

        vector = Vector4D(1, 0, 0, 5)

        rotation.transform(vector)

        self.assertTrue(vector.epsilon_equals(Vector4D(0, 1, 0, 5), 1e-12))
        self.assertEqual(vector.s, 5)

        rotation.inverse_transform(vector)

        self.assertTrue(vector.epsilon_equals(Vector4D(1, 0, 0, 5), 1e-12))

    def test_tuple2d(self):

        rotation = at.Quaternion(*Z90)

        point = Tuple2D(1, 0)

        rotation.transform(point)

        self.assertTrue(point.epsilon_equals(Tuple2D(0, 1), 1e-12))

        rotation.inverse_transform(point)

        self.assertTrue(point.epsilon_equals(Tuple2D(1, 0), 1e-12))

    def test_tuple2d_out_of_plane(self):

        rotation = at.Quaternion.from_array(at.rotvec_to_quaternion([np.pi/2, 0, 0]))

        point = Tuple2D(0, 1)

        with self.assertRaises(NotPlanarRotationError):
            rotation.transform(point)

        # nothing is written when the check fails
        self.assertEqual(point, Tuple2D(0, 1))

        rotation.transform(point, check_if_planar=False)

        # (0, 1, 0) goes to (0, 0, 1) and the z component is dropped
        self.assertTrue(point.epsilon_equals(Tuple2D(0, 0), 1e-12))

    def test_matrix(self):

        rotation = at.Quaternion(*Z90)

        inertia = Matrix3D(np.diag([1, 2, 3]))

        rotation.transform(inertia)

        self.assertTrue(inertia.epsilon_equals(Matrix3D(np.diag([2, 1, 3])), 1e-12))

        rotation.inverse_transform(inertia)

        self.assertTrue(inertia.epsilon_equals(Matrix3D(np.diag([1, 2, 3])), 1e-12))

    def test_quaternion(self):

        first = at.Quaternion.from_array(at.rotvec_to_quaternion([0.1, -0.2, 0.3]))
        second = at.Quaternion.from_array(at.rotvec_to_quaternion([-1, 0.5, 2]))

        expected = at.quaternion_multiplication(first, second)

        first.transform(second)

        np.testing.assert_allclose(second, expected, atol=1e-15)

        first.inverse_transform(second)

        np.testing.assert_allclose(second, at.rotvec_to_quaternion([-1, 0.5, 2]), atol=1e-12)

    def test_rotation_matrix(self):

        rotation = at.Quaternion.from_array(at.rotvec_to_quaternion([0.1, -0.2, 0.3]))

        rotmat = at.RotationMatrix(at.rotvec_to_rotmat([-1, 0.5, 2]))

        rotation.transform(rotmat)

        np.testing.assert_allclose(rotmat, at.rotvec_to_rotmat([0.1, -0.2, 0.3]) @ at.rotvec_to_rotmat([-1, 0.5, 2]),
                                   atol=1e-12)

        rotation.inverse_transform(rotmat)

        np.testing.assert_allclose(rotmat, at.rotvec_to_rotmat([-1, 0.5, 2]), atol=1e-12)

    def test_axis_angle_and_yaw_pitch_roll(self):

        rotation = at.Quaternion(*Z90)

        axis_angle = at.AxisAngle([0, 0, 1], np.pi/4)

        rotation.transform(axis_angle)

        np.testing.assert_allclose(axis_angle.axis, [0, 0, 1], atol=1e-12)
        self.assertAlmostEqual(axis_angle.angle, 3*np.pi/4)

        ypr = at.YawPitchRoll(0.1, 0.2, 0.3)

        rotation.transform(ypr)

        self.assertTrue(ypr.geometrically_equals(at.RotationMatrix(at.rot_z(np.pi/2) @
                                                                   at.yaw_pitch_roll_to_rotmat([0.1, 0.2, 0.3])),
                                                 1e-10))

    def test_mixed_destination(self):

        rotation = at.Quaternion(*Z90)

        source = at.Quaternion.from_array(at.rotvec_to_quaternion([0, 0, 0.5]))
        destination = at.RotationMatrix()

        rotation.transform(source, destination)

        np.testing.assert_allclose(destination, at.rot_z(np.pi/2 + 0.5), atol=1e-12)

        np.testing.assert_allclose(source, at.rotvec_to_quaternion([0, 0, 0.5]))

    def test_aliasing(self):

        rotation = at.Quaternion(*Z90)

        rotation.transform(rotation)

        self.assertTrue(rotation.geometrically_equals(at.Quaternion(0, 0, 1, 0), 1e-12))

        rotation.inverse_transform(rotation)

        np.testing.assert_allclose(rotation, [0, 0, 0, 1], atol=1e-15)

    def test_forward_inverse(self):

        rng = np.random.default_rng(6)

        for _ in range(10):

            rotation = at.Quaternion.from_array(at.quaternion_normalize(rng.normal(size=4)))

            vector = Vector3D(*rng.normal(size=3))
            original = np.array(vector)

            with self.subTest(rotation=rotation):

                rotation.transform(vector)
                rotation.inverse_transform(vector)

                np.testing.assert_allclose(vector, original, atol=1e-12)

    def test_not_normalized(self):

        # a quaternion is used as is; twice the unit quaternion scales the result by 5 here instead of 1
        rotation = at.Quaternion(*(2 * np.array(Z90)))

        vector = Vector3D(1, 0, 0)

        rotation.transform(vector)

        self.assertTrue(vector.epsilon_equals(Vector3D(-3, 4, 0), 1e-12))

        self.assertAlmostEqual(rotation.norm(), 2)

    def test_unsupported(self):

        rotation = at.Quaternion(*Z90)

        for source in [np.array([1., 0, 0]), 'point', [1, 0, 0]]:

            with self.subTest(source=source):

                with self.assertRaises(TypeError):
                    rotation.transform(source)

                with self.assertRaises(TypeError):
                    rotation.inverse_transform(source)


class TestRotationMatrixTransform(TestCase):

    def test_point(self):

        rotation = at.RotationMatrix(at.rot_z(np.pi/2))

        point = Point3D(1, 0, 0)

        rotation.transform(point)

        self.assertTrue(point.epsilon_equals(Point3D(0, 1, 0), 1e-12))

        rotation.inverse_transform(point)

        self.assertTrue(point.epsilon_equals(Point3D(1, 0, 0), 1e-12))

    def test_vector4d_and_tuple2d(self):

        rotation = at.RotationMatrix(at.rot_z(np.pi/2))

        vector = Vector4D(1, 0, 0, -2)

        rotation.transform(vector)

        self.assertTrue(vector.epsilon_equals(Vector4D(0, 1, 0, -2), 1e-12))

        point = Tuple2D(1, 0)

        rotation.inverse_transform(point)

        self.assertTrue(point.epsilon_equals(Tuple2D(0, -1), 1e-12))

        with self.assertRaises(NotPlanarRotationError):
            at.RotationMatrix(at.rot_y(0.1)).transform(point)

    def test_matrix(self):

        rotation = at.RotationMatrix(at.rot_z(np.pi/2))

        inertia = Matrix3D(np.diag([1, 2, 3]))
        rotated = Matrix3D()

        rotation.transform(inertia, rotated)

        self.assertTrue(rotated.epsilon_equals(Matrix3D(np.diag([2, 1, 3])), 1e-12))

        rotation.inverse_transform(rotated)

        self.assertTrue(rotated.epsilon_equals(inertia, 1e-12))

    def test_rotations(self):

        rotation = at.RotationMatrix(at.rotvec_to_rotmat([0.1, -0.2, 0.3]))

        other = at.RotationMatrix(at.rotvec_to_rotmat([-1, 0.5, 2]))

        rotation.transform(other)

        np.testing.assert_allclose(other, at.rotvec_to_rotmat([0.1, -0.2, 0.3]) @ at.rotvec_to_rotmat([-1, 0.5, 2]),
                                   atol=1e-12)

        quaternion = at.Quaternion.from_array(at.rotvec_to_quaternion([-1, 0.5, 2]))

        rotation.transform(quaternion)

        self.assertTrue(quaternion.geometrically_equals(other, 1e-10))

        rotation.inverse_transform(quaternion)

        self.assertTrue(quaternion.geometrically_equals(at.Quaternion.from_array(at.rotvec_to_quaternion([-1, 0.5, 2])),
                                                        1e-10))

    def test_aliasing(self):

        rotation = at.RotationMatrix(at.rot_x(0.25))

        rotation.transform(rotation)

        np.testing.assert_allclose(rotation, at.rot_x(0.5), atol=1e-12)

        rotation.inverse_transform(rotation)

        np.testing.assert_allclose(rotation, np.eye(3), atol=1e-12)

    def test_self_healing(self):

        drifted = at.rot_z(0.3)
        drifted[0, 1] += 1e-3

        rotation = at.RotationMatrix(drifted)

        self.assertFalse(rotation.is_rotation_matrix())

        with self.assertLogs('orientations.rotations.rotation_matrix', level='DEBUG'):
            rotation.transform(Vector3D(1, 0, 0))

        self.assertTrue(rotation.is_rotation_matrix(1e-10))

    def test_invalid(self):

        rotation = at.RotationMatrix(np.zeros((3, 3)))

        with self.assertRaises(InvalidRotationError):
            rotation.transform(Vector3D(1, 0, 0))

        rotation = at.RotationMatrix(np.diag([1, 1, -1]))

        with self.assertRaises(InvalidRotationError):
            rotation.inverse_transform(Vector3D(1, 0, 0))

    def test_unsupported(self):

        with self.assertRaises(TypeError):
            at.RotationMatrix().transform(np.eye(3))

        with self.assertRaises(TypeError):
            at.RotationMatrix().inverse_transform(None)


class TestViewTransforms(TestCase):

    def test_axis_angle(self):

        rotation = at.AxisAngle([0, 0, 1], np.pi/2)

        point = Point3D(1, 0, 0)

        rotation.transform(point)

        self.assertTrue(point.epsilon_equals(Point3D(0, 1, 0), 1e-12))

        rotation.inverse_transform(point)

        self.assertTrue(point.epsilon_equals(Point3D(1, 0, 0), 1e-12))

    def test_yaw_pitch_roll(self):

        rotation = at.YawPitchRoll(np.pi/2, 0, 0)

        vector = Vector3D(1, 0, 0)

        rotation.transform(vector)

        self.assertTrue(vector.epsilon_equals(Vector3D(0, 1, 0), 1e-12))

        with self.assertRaises(NotPlanarRotationError):
            at.YawPitchRoll(0, 0.1, 0).transform(Tuple2D(1, 0))


class TestAddTransform(TestCase):

    @staticmethod
    def _z90_rotations():
        return [at.Quaternion(*Z90), at.RotationMatrix(at.rot_z(np.pi/2)), at.AxisAngle([0, 0, 1], np.pi/2),
                at.YawPitchRoll(np.pi/2, 0, 0)]

    def test_add_transform(self):

        for rotation in self._z90_rotations():

            with self.subTest(rotation=rotation):

                source = Point3D(1, 0, 0)
                destination = Vector3D(1, 2, 3)

                rotation.add_transform(source, destination)

                self.assertTrue(destination.epsilon_equals(Vector3D(1, 3, 3), 1e-12))
                self.assertEqual(source, Point3D(1, 0, 0))

    def test_aliasing(self):

        for rotation in self._z90_rotations():

            with self.subTest(rotation=rotation):

                vector = Vector3D(1, 0, 2)

                rotation.add_transform(vector, vector)

                self.assertTrue(vector.epsilon_equals(Vector3D(1, 1, 4), 1e-12))

    def test_self_healing(self):

        drifted = at.rot_z(np.pi/2)
        drifted[0, 1] += 1e-3

        rotation = at.RotationMatrix(drifted)

        destination = Vector3D()

        with self.assertLogs('orientations.rotations.rotation_matrix', level='DEBUG'):
            rotation.add_transform(Vector3D(1, 0, 0), destination)

        self.assertTrue(rotation.is_rotation_matrix(1e-10))
        self.assertTrue(destination.epsilon_equals(Vector3D(0, 1, 0), 1e-10))

    def test_unsupported(self):

        for rotation in self._z90_rotations():

            with self.subTest(rotation=rotation):

                with self.assertRaises(TypeError):
                    rotation.add_transform(Vector4D(1, 0, 0, 1), Vector3D())

                with self.assertRaises(TypeError):
                    rotation.add_transform(Vector3D(1, 0, 0), Tuple2D())

                with self.assertRaises(TypeError):
                    rotation.add_transform(at.Quaternion(), Vector3D())

                with self.assertRaises(TypeError):
                    rotation.add_transform(Vector3D(1, 0, 0), Vector4D())
