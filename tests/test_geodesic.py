"""
Tests for haversine distance, path distance and walking time
"""
import math
import os
import unittest
from unittest.mock import patch

import numpy as np

from campus_route.utils import (
    EARTH_RADIUS_M, RouteConfig, calculate_haversine_distance, haversine_distance_matrix,
    calculate_path_distance, estimate_walking_time, format_distance, format_time,
    is_valid_coordinate
)


class TestHaversineDistance(unittest.TestCase):

    def test_identical_points_are_zero(self):
        coord = (-0.3605, 37.0093)
        self.assertEqual(calculate_haversine_distance(coord, coord), 0)

    def test_symmetric(self):
        pairs = [
            ((-0.3605, 37.0093), (-0.3610, 37.0090)),
            ((51.5074, -0.1278), (48.8566, 2.3522)),
            ((0.0, 0.0), (0.0, 179.9)),
            ((-33.86, 151.2), (40.71, -74.0)),
        ]
        for a, b in pairs:
            self.assertEqual(calculate_haversine_distance(a, b),
                             calculate_haversine_distance(b, a))

    def test_thousandth_degree_latitude(self):
        distance = calculate_haversine_distance((0.0, 0.0), (0.001, 0.0))
        self.assertGreaterEqual(distance, 100)
        self.assertLessEqual(distance, 130)

    def test_one_degree_of_latitude(self):
        distance = calculate_haversine_distance((0.0, 0.0), (1.0, 0.0))
        self.assertAlmostEqual(distance, EARTH_RADIUS_M * math.pi / 180, places=6)
        self.assertAlmostEqual(haversine_distance_matrix([(0.0, 0.0), (1.0, 0.0)])[0][1],
                               distance, places=6)

    def test_known_city_distance(self):
        # London -> Paris is roughly 344 km
        distance = calculate_haversine_distance((51.5074, -0.1278), (48.8566, 2.3522))
        self.assertAlmostEqual(distance / 1000, 343.5, delta=2)

    def test_nan_propagates(self):
        distance = calculate_haversine_distance((float('nan'), 37.0), (-0.36, 37.0))
        self.assertTrue(math.isnan(distance))

    def test_matrix_matches_scalar(self):
        coords = [(-0.3603, 37.0093), (-0.3605, 37.0095), (-0.361, 37.009), (10.0, 20.0)]
        matrix = haversine_distance_matrix(coords)

        self.assertEqual(matrix.shape, (4, 4))
        self.assertTrue(np.all(np.diag(matrix) == 0))
        for i, a in enumerate(coords):
            for j, b in enumerate(coords):
                self.assertTrue(math.isclose(matrix[i][j],
                                             calculate_haversine_distance(a, b),
                                             rel_tol=1e-9, abs_tol=1e-6))

    def test_empty_matrix(self):
        self.assertEqual(haversine_distance_matrix([]).shape, (0, 0))


class TestPathDistance(unittest.TestCase):

    def test_short_paths_are_zero(self):
        self.assertEqual(calculate_path_distance([]), 0)
        self.assertEqual(calculate_path_distance([(1.0, 2.0)]), 0)

    def test_sum_of_segments(self):
        path = [(0.0, 0.0), (0.001, 0.0), (0.001, 0.001)]
        expected = (calculate_haversine_distance(path[0], path[1]) +
                    calculate_haversine_distance(path[1], path[2]))
        self.assertEqual(calculate_path_distance(path), expected)


class TestWalkingTime(unittest.TestCase):

    def test_reference_values(self):
        self.assertEqual(estimate_walking_time(0), 0)
        self.assertEqual(estimate_walking_time(84), 1)
        self.assertEqual(estimate_walking_time(1400), 17)

    def test_rounds_up(self):
        self.assertEqual(estimate_walking_time(85), 2)
        self.assertEqual(estimate_walking_time(1), 1)

    def test_custom_speed(self):
        # 120 m at 1 m/s is exactly two minutes
        self.assertEqual(estimate_walking_time(120, speed_ms=1.0), 2)

    def test_nan_distance(self):
        self.assertTrue(math.isnan(estimate_walking_time(float('nan'))))


class TestFormatting(unittest.TestCase):

    def test_format_distance(self):
        self.assertEqual(format_distance(0), "0 m")
        self.assertEqual(format_distance(999.4), "999 m")
        self.assertEqual(format_distance(1000), "1.00 km")
        self.assertEqual(format_distance(2346), "2.35 km")

    def test_format_time(self):
        self.assertEqual(format_time(0), "< 1 min")
        self.assertEqual(format_time(17), "17 min")
        self.assertEqual(format_time(60), "1h 0m")
        self.assertEqual(format_time(135), "2h 15m")

    def test_nan_formats_as_unavailable(self):
        self.assertEqual(format_distance(float('nan')), "n/a")
        self.assertEqual(format_time(float('nan')), "n/a")


class TestCoordinateChecks(unittest.TestCase):

    def test_is_valid_coordinate(self):
        self.assertTrue(is_valid_coordinate((-0.36, 37.0)))
        self.assertFalse(is_valid_coordinate((float('nan'), 37.0)))
        self.assertFalse(is_valid_coordinate((91.0, 0.0)))
        self.assertFalse(is_valid_coordinate((0.0, -180.5)))
        self.assertFalse(is_valid_coordinate((0.0, float('inf'))))
        self.assertFalse(is_valid_coordinate(None))


class TestRouteConfig(unittest.TestCase):

    def test_defaults(self):
        config = RouteConfig()
        self.assertEqual(config.MAX_NEIGHBOR_DISTANCE_M, 500.0)
        self.assertEqual(config.MAX_NEIGHBORS, 5)
        self.assertEqual(config.WALKING_SPEED_MS, 1.4)
        self.assertEqual(EARTH_RADIUS_M, 6371000.0)
        self.assertFalse(hasattr(config, 'EARTH_RADIUS_M'))

    def test_from_env(self):
        env = {
            'CAMPUS_ROUTE_MAX_NEIGHBORS': '3',
            'CAMPUS_ROUTE_WALKING_SPEED_MS': '1.2',
            'CAMPUS_ROUTE_CACHE_ENABLED': 'false',
            'CAMPUS_ROUTE_LOG_LEVEL': 'DEBUG',
        }
        with patch.dict(os.environ, env):
            config = RouteConfig.from_env()

        self.assertEqual(config.MAX_NEIGHBORS, 3)
        self.assertEqual(config.WALKING_SPEED_MS, 1.2)
        self.assertFalse(config.CACHE_ENABLED)
        self.assertEqual(config.LOG_LEVEL, 'DEBUG')
        self.assertEqual(config.MAX_NEIGHBOR_DISTANCE_M, 500.0)


if __name__ == "__main__":
    unittest.main()
