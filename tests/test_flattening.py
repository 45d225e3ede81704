import math
import unittest

from twisty_sim.flattening import CartesianFlattener, CircularVectorComparer, compare_positions, sort_positions
from twisty_sim.planes import Plane
from twisty_sim.vectors import Vector3, X_AXIS, Y_AXIS, Z_AXIS


class TestCartesianFlattener(unittest.TestCase):
    def test_axis_aligned_frames(self):
        cases = [
            (X_AXIS, Vector3(0.0, 2.0, 3.0), (2.0, 3.0)),
            (-X_AXIS, Vector3(0.0, 2.0, 3.0), (-2.0, 3.0)),
            (Y_AXIS, Vector3(2.0, 0.0, 3.0), (-2.0, 3.0)),
            (-Y_AXIS, Vector3(2.0, 0.0, 3.0), (2.0, 3.0)),
            (Z_AXIS, Vector3(2.0, 3.0, 0.0), (3.0, -2.0)),
            (-Z_AXIS, Vector3(2.0, 3.0, 0.0), (3.0, 2.0)),
        ]
        for normal, point, expected in cases:
            with self.subTest(normal=normal):
                flat = CartesianFlattener(Plane(normal, 0.0)).convert_to_2d(point)
                self.assertEqual((flat.x, flat.y), expected)

    def test_generic_frame(self):
        flattener = CartesianFlattener(Plane(Vector3(1.0, 1.0, 0.0), 0.0))
        up = flattener.convert_to_2d(Vector3(0.0, 0.0, 1.0))
        side = flattener.convert_to_2d(Vector3(1.0, -1.0, 0.0))
        self.assertAlmostEqual(up.x, 0.0, places=12)
        self.assertAlmostEqual(up.y, 1.0, places=12)
        self.assertAlmostEqual(side.x, -math.sqrt(2.0), places=12)
        self.assertAlmostEqual(side.y, 0.0, places=12)

        # Points off the plane are projected first.
        lifted = flattener.convert_to_2d(Vector3(2.0, 2.0, 1.0))
        self.assertAlmostEqual(lifted.x, 0.0, places=12)
        self.assertAlmostEqual(lifted.y, 1.0, places=12)


class TestCircularVectorComparer(unittest.TestCase):
    def test_counter_clockwise_order(self):
        comparer = CircularVectorComparer(Plane(Z_AXIS, 0.0))
        ordered = comparer.sort([X_AXIS, Z_AXIS, -Y_AXIS, -X_AXIS, Y_AXIS])
        self.assertEqual(ordered, [Y_AXIS, -X_AXIS, -Y_AXIS, X_AXIS, Z_AXIS])

    def test_angles(self):
        comparer = CircularVectorComparer(Plane(Z_AXIS, 0.0))
        self.assertAlmostEqual(comparer.get_angle(-X_AXIS), math.pi / 2, places=12)
        self.assertAlmostEqual(comparer.get_angle(X_AXIS), 3 * math.pi / 2, places=12)
        self.assertEqual(comparer.get_angle(Vector3(1e-12, 1.0, 0.0)), 0.0)
        self.assertIsNone(comparer.get_angle(Z_AXIS * 2.0))

    def test_equal_points(self):
        comparer = CircularVectorComparer(Plane(Z_AXIS, 0.0))
        self.assertEqual(comparer.compare(X_AXIS, X_AXIS), 0)
        self.assertEqual(comparer.compare(X_AXIS, Vector3(1.0, 0.0, 5.0)), 0)
        self.assertEqual(comparer.compare(Z_AXIS, -Z_AXIS), 0)
        self.assertEqual(comparer.compare(Y_AXIS, X_AXIS), -1)
        self.assertEqual(comparer.compare(X_AXIS, Y_AXIS), 1)


class TestComparePositions(unittest.TestCase):
    def test_reading_order(self):
        points = [Vector3(0.0, 0.0, -1.0), Vector3(1.0, 0.0, 1.0), Vector3(-1.0, 0.0, 1.0), Vector3(0.0, 1.0, 1.0)]
        self.assertEqual(
            sort_positions(points),
            [Vector3(0.0, 1.0, 1.0), Vector3(-1.0, 0.0, 1.0), Vector3(1.0, 0.0, 1.0), Vector3(0.0, 0.0, -1.0)],
        )
        self.assertEqual(compare_positions(X_AXIS, Vector3(1.0, 1e-12, 0.0)), 0)


if __name__ == "__main__":
    unittest.main()
