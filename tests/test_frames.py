"""
Unit tests for frames module.

Tests position value types and frame identities.
"""

import math
import unittest
from dataclasses import FrozenInstanceError

import numpy as np

from skycoords.api.coordinates.frames import FK5, ICRS, Frame, Galactic, as_frame
from skycoords.api.core.enums import FrameKind
from skycoords.api.core.exceptions import InvalidCoordinateError, UnsupportedFrameError


class TestFrame(unittest.TestCase):
    """Test suite for Frame"""

    def test_fk5_defaults_to_j2000(self):
        """Test that FK5 without an equinox means J2000"""
        self.assertEqual(Frame(FrameKind.FK5).equinox, 2000.0)
        self.assertEqual(Frame.fk5(), Frame.fk5(2000))

    def test_equinox_is_part_of_identity(self):
        """Test that FK5 frames at different equinoxes differ"""
        self.assertNotEqual(Frame.fk5(1950.0), Frame.fk5(2000.0))
        self.assertEqual(Frame.fk5(1975), Frame.fk5(1975.0))

    def test_non_fk5_rejects_equinox(self):
        """Test that only FK5 takes an equinox"""
        with self.assertRaises(ValueError):
            Frame(FrameKind.ICRS, 2000.0)

    def test_callable_builds_positions(self):
        """Test that calling a frame constructs a position in it"""
        self.assertEqual(Frame.fk5(1975.0)(1.0, 0.5), FK5(1.0, 0.5, equinox=1975.0))
        self.assertEqual(Frame.icrs()(1.0, 0.5), ICRS(1.0, 0.5))
        self.assertEqual(Frame.galactic()(1.0, 0.5), Galactic(1.0, 0.5))

    def test_position_class(self):
        """Test the position class for each frame kind"""
        self.assertIs(Frame.icrs().position_class, ICRS)
        self.assertIs(Frame.galactic().position_class, Galactic)
        self.assertIs(Frame.fk5(1950.0).position_class, FK5)

    def test_lon_in_hours(self):
        """Test which frames read textual longitudes as hour angles"""
        self.assertTrue(Frame.icrs().lon_in_hours)
        self.assertTrue(Frame.fk5(1950.0).lon_in_hours)
        self.assertFalse(Frame.galactic().lon_in_hours)

    def test_string_representation(self):
        """Test frame names"""
        self.assertEqual(str(Frame.icrs()), "ICRS")
        self.assertEqual(str(Frame.galactic()), "Galactic")
        self.assertEqual(str(Frame.fk5(1975.0)), "FK5(J1975.0)")

    def test_hashable(self):
        """Test that frames can be used as dictionary keys"""
        lookup = {Frame.fk5(1950.0): "old", Frame.icrs(): "icrs"}
        self.assertEqual(lookup[Frame.fk5(1950)], "old")


class TestAsFrame(unittest.TestCase):
    """Test suite for as_frame"""

    def test_accepts_frame(self):
        """Test that frames pass through"""
        frame = Frame.fk5(1975.0)
        self.assertIs(as_frame(frame), frame)

    def test_accepts_position_class(self):
        """Test position classes"""
        self.assertEqual(as_frame(ICRS), Frame.icrs())
        self.assertEqual(as_frame(Galactic), Frame.galactic())
        self.assertEqual(as_frame(FK5), Frame.fk5(2000.0))

    def test_accepts_position_instance(self):
        """Test that an instance gives its own frame"""
        self.assertEqual(as_frame(FK5(1.0, 0.5, equinox=1950.0)), Frame.fk5(1950.0))

    def test_accepts_kind_names(self):
        """Test frame kinds and their string values"""
        self.assertEqual(as_frame(FrameKind.GALACTIC), Frame.galactic())
        self.assertEqual(as_frame("ICRS"), Frame.icrs())

    def test_rejects_unknown(self):
        """Test that non-frames raise UnsupportedFrameError"""
        for target in (42, "ecliptic", object):
            with self.subTest(target=target), self.assertRaises(UnsupportedFrameError):
                as_frame(target)


class TestPositions(unittest.TestCase):
    """Test suite for ICRS, Galactic and FK5 positions"""

    def test_field_names(self):
        """Test frame-specific field names and generic accessors"""
        icrs = ICRS(1.0, 0.5)
        self.assertEqual((icrs.ra, icrs.dec), (1.0, 0.5))
        gal = Galactic(2.0, -0.25)
        self.assertEqual((gal.l, gal.b), (2.0, -0.25))
        self.assertEqual((gal.lon, gal.lat), (2.0, -0.25))
        self.assertEqual(gal.names, ("l", "b"))

    def test_longitude_normalization(self):
        """Test that longitude wraps into [0, 2pi)"""
        for cls in (ICRS, Galactic, FK5):
            with self.subTest(cls=cls.__name__):
                position = cls(-0.1, 0.0)
                self.assertAlmostEqual(position.lon, 2 * math.pi - 0.1, places=14)
                self.assertAlmostEqual(cls(2 * math.pi + 0.5, 0.0).lon, 0.5, places=14)

    def test_tiny_negative_longitude_wraps_to_zero(self):
        """Test that a longitude rounding up to 2pi is stored as 0"""
        for scalar in (np.float32, np.float64):
            with self.subTest(dtype=scalar.__name__):
                position = ICRS(scalar(-1e-20), scalar(0.0))
                self.assertEqual(position.ra, 0.0)
                self.assertEqual(position.dtype, scalar)
        self.assertLess(float(ICRS(np.float32(-1e-8), np.float32(0.0)).ra), 2 * math.pi)

    def test_latitude_not_clamped(self):
        """Test that out-of-range latitude is stored as given"""
        self.assertEqual(ICRS(0.0, 2.0).dec, 2.0)
        self.assertEqual(Galactic(0.0, -4.0).b, -4.0)

    def test_integers_promote_to_float64(self):
        """Test that integer input becomes double precision"""
        position = ICRS(1, 0)
        self.assertEqual(position.dtype, np.float64)
        self.assertIsInstance(position.ra, float)

    def test_float32_kept(self):
        """Test that single precision input stays single precision"""
        position = Galactic(np.float32(1.0), np.float32(0.5))
        self.assertEqual(position.dtype, np.float32)
        self.assertIsInstance(position.b, np.float32)

    def test_mixed_precision_uniform(self):
        """Test that both angles share one float type"""
        position = ICRS(np.float32(1.0), np.float64(0.5))
        self.assertEqual(type(position.ra), type(position.dec))

    def test_equality_is_exact(self):
        """Test exact field equality"""
        self.assertEqual(ICRS(1.0, 0.5), ICRS(1.0, 0.5))
        self.assertNotEqual(ICRS(1.0, 0.5), ICRS(1.0, 0.5 + 1e-15))

    def test_different_frames_not_equal(self):
        """Test that positions in different frames never compare equal"""
        self.assertNotEqual(ICRS(1.0, 0.5), FK5(1.0, 0.5))
        self.assertNotEqual(FK5(1.0, 0.5, equinox=1950.0), FK5(1.0, 0.5))

    def test_immutable(self):
        """Test that positions cannot be modified"""
        position = ICRS(1.0, 0.5)
        with self.assertRaises(FrozenInstanceError):
            position.ra = 2.0  # type: ignore[misc]

    def test_hashable(self):
        """Test that positions can be stored in sets"""
        self.assertEqual(len({ICRS(1.0, 0.5), ICRS(1.0, 0.5), Galactic(1.0, 0.5)}), 2)

    def test_frame_property(self):
        """Test the frame of each position type"""
        self.assertEqual(ICRS(0.0, 0.0).frame, Frame.icrs())
        self.assertEqual(Galactic(0.0, 0.0).frame, Frame.galactic())
        self.assertEqual(FK5(0.0, 0.0, equinox=1975.0).frame, Frame.fk5(1975.0))

    def test_nan_propagates(self):
        """Test that NaN angles are kept rather than rejected"""
        position = ICRS(float("nan"), 0.5)
        self.assertTrue(math.isnan(position.ra))
        self.assertTrue(math.isnan(ICRS(float("inf"), 0.0).ra))


class TestTextualPositions(unittest.TestCase):
    """Test suite for sexagesimal construction"""

    def test_icrs_hours_and_degrees(self):
        """Test that ICRS reads ra as hours and dec as degrees"""
        position = ICRS("12h00m00s", "+45d00m00s")
        self.assertAlmostEqual(position.ra, math.pi, places=12)
        self.assertAlmostEqual(position.dec, math.pi / 4, places=12)

    def test_colon_separated(self):
        """Test colon-separated sexagesimal text"""
        position = FK5("06:00:00", "-30:30:00", equinox=1950.0)
        self.assertAlmostEqual(position.ra, math.pi / 2, places=12)
        self.assertAlmostEqual(position.dec, math.radians(-30.5), places=12)
        self.assertEqual(position.equinox, 1950.0)

    def test_galactic_degrees(self):
        """Test that Galactic reads both angles as degrees"""
        position = Galactic("180:00:00", "-30:00:00")
        self.assertAlmostEqual(position.l, math.pi, places=12)
        self.assertAlmostEqual(position.b, -math.pi / 6, places=12)

    def test_invalid_text(self):
        """Test that malformed text raises InvalidCoordinateError"""
        with self.assertRaises(InvalidCoordinateError):
            ICRS("not an angle", "+45d")

    def test_mixed_text_and_number(self):
        """Test that a string cannot be mixed with a number"""
        with self.assertRaises(InvalidCoordinateError):
            ICRS("12h00m00s", 0.5)

    def test_string_representation(self):
        """Test sexagesimal string output"""
        text = str(ICRS("12h00m00s", "+45d00m00s"))
        self.assertIn("ICRS(ra=12h00m00", text)
        self.assertIn("dec=+45d00m00", text)
        self.assertIn("FK5(J1950.0)", str(FK5(0.0, 0.0, equinox=1950.0)))


if __name__ == "__main__":
    unittest.main()
