import math
import unittest

from twisty_sim.tolerance import EPSILON, acos, align_ratio_limits, asin, cos, is_equal, is_zero, sin


class TestTolerance(unittest.TestCase):
    def test_equality_uses_absolute_epsilon(self):
        self.assertTrue(is_equal(1.0, 1.0 + EPSILON / 10))
        self.assertFalse(is_equal(1.0, 1.0 + EPSILON * 10))
        self.assertTrue(is_zero(-EPSILON / 2))
        self.assertFalse(is_zero(1e-9))

    def test_cos_is_exact_zero_on_quarter_turns(self):
        for rad in (math.pi / 2, 3 * math.pi / 2, -math.pi / 2, 5 * math.pi / 2):
            self.assertEqual(cos(rad), 0.0, msg=f"rad={rad}")

    def test_sin_is_exact_zero_on_half_turns(self):
        for rad in (0.0, math.pi, -math.pi, 2 * math.pi, 4 * math.pi):
            self.assertEqual(sin(rad), 0.0, msg=f"rad={rad}")

    def test_trig_matches_math_elsewhere(self):
        for rad in (0.3, 1.2, 2.5, -0.7, 7.1):
            self.assertAlmostEqual(cos(rad), math.cos(rad), places=12)
            self.assertAlmostEqual(sin(rad), math.sin(rad), places=12)

    def test_inverse_trig_clamps_rounding_drift(self):
        self.assertEqual(acos(1.0 + 1e-12), 0.0)
        self.assertEqual(acos(-1.0 - 1e-12), math.pi)
        self.assertEqual(asin(1.0 + 1e-12), math.pi / 2)
        self.assertEqual(align_ratio_limits(3e-11), 0.0)
        self.assertEqual(align_ratio_limits(0.5), 0.5)


if __name__ == "__main__":
    unittest.main()
