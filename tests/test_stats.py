import math
import unittest
from doughpack.config import Circle, PackingResult
from doughpack.packer import optimize_packing
from doughpack.stats import PackingStats, compute_stats

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


class TestComputeStats(unittest.TestCase):
    def test_from_result(self):
        result = optimize_packing([(0, 0), (12, 0), (12, 12), (0, 12)], 5.0, 2.0)
        stats = compute_stats([(0, 0), (12, 0), (12, 12), (0, 12)], result)
        self.assertAlmostEqual(stats.area, 144.0)
        self.assertEqual(stats.circle_count, 1)
        self.assertEqual(stats.radius, 5.0)
        self.assertAlmostEqual(stats.efficiency, math.pi * 25 / 144 * 100)

    def test_from_circle_list(self):
        circles = [Circle(3.0, 3.0, 2.0, "a"), Circle(7.0, 7.0, 2.0, "b")]
        stats = compute_stats(SQUARE, circles)
        self.assertEqual(stats.circle_count, 2)
        self.assertAlmostEqual(stats.circle_area, math.pi * 4)
        self.assertAlmostEqual(stats.used_area, math.pi * 8)
        self.assertAlmostEqual(stats.efficiency, math.pi * 8)

    def test_explicit_radius_wins(self):
        circles = [Circle(5.0, 5.0, 2.0, "a")]
        stats = compute_stats(SQUARE, circles, radius=1.0)
        self.assertAlmostEqual(stats.efficiency, math.pi)

    def test_empty_packing(self):
        stats = compute_stats(SQUARE, PackingResult(radius=3.0))
        self.assertAlmostEqual(stats.area, 100.0)
        self.assertEqual(stats.circle_count, 0)
        self.assertEqual(stats.efficiency, 0.0)

    def test_degenerate_polygon(self):
        self.assertEqual(compute_stats([(0, 0), (5, 5)], []), PackingStats())

    def test_zero_area_polygon(self):
        stats = compute_stats([(0, 0), (5, 0), (10, 0)], [Circle(1.0, 0.0, 1.0, "a")])
        self.assertEqual(stats.area, 0.0)
        self.assertEqual(stats.efficiency, 0.0)


if __name__ == '__main__':
    unittest.main()
