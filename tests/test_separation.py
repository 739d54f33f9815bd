"""
Unit tests for separation module.

Tests angular separation with the Vincenty formula.
"""

import math
import unittest

import numpy as np

from skycoords.api.coordinates.conversion import convert
from skycoords.api.coordinates.frames import FK5, ICRS, Frame, Galactic
from skycoords.api.coordinates.separation import angular_separation, separation


class TestAngularSeparation(unittest.TestCase):
    """Test suite for angular_separation"""

    def test_quarter_circle(self):
        """Test equator to pole"""
        self.assertAlmostEqual(float(angular_separation(0.0, 0.0, 0.0, math.pi / 2)), math.pi / 2, places=14)

    def test_small_separation_precision(self):
        """Test that tiny separations keep full precision"""
        result = float(angular_separation(1.0, 0.3, 1.0, 0.3 + 1e-12))
        self.assertAlmostEqual(result, 1e-12, delta=1e-15)

    def test_near_antipodal_precision(self):
        """Test that nearly opposite points keep full precision"""
        result = float(angular_separation(0.0, 0.0, math.pi, 1e-9))
        self.assertAlmostEqual(result, math.pi - 1e-9, delta=1e-15)

    def test_vectorised(self):
        """Test element-wise evaluation on arrays"""
        result = angular_separation(np.zeros(3), np.zeros(3), np.array([0.5, 1.0, 1.5]), np.zeros(3))
        np.testing.assert_allclose(result, [0.5, 1.0, 1.5], atol=1e-14)


class TestSeparation(unittest.TestCase):
    """Test suite for separation"""

    def test_antipodal(self):
        """Test opposite points on the equator"""
        self.assertAlmostEqual(separation(ICRS(0.0, 0.0), ICRS(math.pi, 0.0)), math.pi, places=14)

    def test_same_point(self):
        """Test that a position is zero distance from itself"""
        position = Galactic(2.3, -0.4)
        self.assertAlmostEqual(separation(position, position), 0.0, places=14)

    def test_symmetric(self):
        """Test that separation is symmetric across frames"""
        a = ICRS(1.0, 0.5)
        b = Galactic(4.0, -0.2)
        self.assertAlmostEqual(separation(a, b), separation(b, a), delta=1e-10)

    def test_bounds(self):
        """Test that results lie in [0, pi]"""
        rng = np.random.default_rng(42)
        for _ in range(50):
            lon1, lon2 = rng.uniform(-10.0, 10.0, 2)
            lat1, lat2 = rng.uniform(-math.pi / 2, math.pi / 2, 2)
            result = separation(ICRS(lon1, lat1), FK5(lon2, lat2, equinox=1950.0))
            self.assertGreaterEqual(result, 0.0)
            self.assertLessEqual(result, math.pi)

    def test_cross_frame_same_point(self):
        """Test that a position and its conversion are zero apart"""
        position = ICRS(1.0, 0.5)
        for frame in (Frame.galactic(), Frame.fk5(2000.0), Frame.fk5(1950.0)):
            with self.subTest(frame=str(frame)):
                self.assertAlmostEqual(separation(position, convert(frame, position)), 0.0, delta=1e-10)

    def test_different_equinoxes_converted(self):
        """Test that FK5 positions at different equinoxes are converted first"""
        old = FK5(1.0, 0.5, equinox=1950.0)
        new = FK5(1.0, 0.5, equinox=2050.0)
        # A century of precession moves a position by roughly a degree
        self.assertGreater(separation(old, new), math.radians(0.5))

    def test_float32(self):
        """Test single precision positions"""
        result = separation(ICRS(np.float32(0.0), np.float32(0.0)), ICRS(np.float32(math.pi), np.float32(0.0)))
        self.assertIsInstance(result, float)
        self.assertLessEqual(result, math.pi)
        self.assertAlmostEqual(result, math.pi, delta=1e-6)

    def test_nan_propagates(self):
        """Test that NaN input gives a NaN separation"""
        self.assertTrue(math.isnan(separation(ICRS(float("nan"), 0.0), ICRS(0.0, 0.0))))


if __name__ == "__main__":
    unittest.main()
