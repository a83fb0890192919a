import unittest
import random

from pilot.geometry import angle_difference, bearing_to, distance, normalize_angle

class TestGeometry(unittest.TestCase):
    def test_distance_symmetric(self):
        a, b = (100, -250), (3100, 3750)
        self.assertAlmostEqual(distance(a, b), 5000.0)
        self.assertEqual(distance(a, b), distance(b, a))
        self.assertEqual(distance(a, a), 0.0)

    def test_normalize_angle_range(self):
        self.assertEqual(normalize_angle(180.0), 180.0)
        self.assertEqual(normalize_angle(-180.0), 180.0)
        self.assertEqual(normalize_angle(540.0), 180.0)
        self.assertEqual(normalize_angle(190.0), -170.0)
        self.assertEqual(normalize_angle(-190.0), 170.0)
        self.assertEqual(normalize_angle(720.0), 0.0)

    def test_bearing_range_random(self):
        rng = random.Random(7)
        for _ in range(2000):
            origin = (rng.uniform(0, 16000), rng.uniform(0, 9000))
            target = (rng.uniform(0, 16000), rng.uniform(0, 9000))
            heading = rng.uniform(-720, 720)
            b = bearing_to(origin, target, heading)
            self.assertGreater(b, -180.0)
            self.assertLessEqual(b, 180.0)

    def test_bearing_cardinal(self):
        self.assertAlmostEqual(bearing_to((0, 0), (1000, 0), 0), 0.0)
        # y grows downwards on the map, so +90 is "below"
        self.assertAlmostEqual(bearing_to((0, 0), (0, 1000), 0), 90.0)
        self.assertAlmostEqual(bearing_to((0, 0), (0, 1000), 270), 180.0)
        self.assertAlmostEqual(bearing_to((0, 0), (-1000, 0), 0), 180.0)
        self.assertAlmostEqual(bearing_to((0, 0), (1000, 0), 350), 10.0)

    def test_bearing_coincident_is_zero(self):
        self.assertEqual(bearing_to((500, 500), (500, 500), 123.0), 0.0)

    def test_angle_difference(self):
        self.assertAlmostEqual(angle_difference(10, 350), 20.0)
        self.assertAlmostEqual(angle_difference(0, 180), 180.0)
        self.assertAlmostEqual(angle_difference(90, 90), 0.0)

if __name__ == '__main__':
    unittest.main()
