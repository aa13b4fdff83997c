"""
doughpack - Hexagonal-lattice packing of equal circles into simple polygons.

Usage:
    from doughpack import optimize_packing, compute_stats

    # Basic usage (2.0 gap between circles)
    result = optimize_packing(polygon_vertices, radius=17.5)
    for circle in result:
        print(circle.x, circle.y, circle.id)

    # Custom search grid
    config = PackingConfig(angles=(0, 10, 20, 30, 40, 50), offset_divisions=4, verbose=True)
    packer = CirclePacker(polygon_vertices, 17.5, config)
    result = packer.pack()

    # Area and coverage, computed on the caller side
    stats = compute_stats(polygon_vertices, result)
    print(f"{stats.circle_count} circles, {stats.efficiency:.1f}% used")

The search is a heuristic over a fixed grid of lattice rotations and phase
offsets. It returns the best packing found on that grid, not a proven optimum.
"""

from .config import (
    BoundingBox,
    Circle,
    PackingConfig,
    PackingResult,
    Point,
    Polygon,
    SearchProgress,
)
from .geometry import PolygonGeometry, bounding_box, distance_to_edge, is_inside, polygon_area
from .lattice import HexLattice, LatticePoint
from .packer import CirclePacker, optimize_packing
from .stats import PackingStats, compute_stats

__all__ = [
    "CirclePacker",
    "optimize_packing",
    "PackingConfig",
    "PackingResult",
    "SearchProgress",
    "Circle",
    "BoundingBox",
    "HexLattice",
    "LatticePoint",
    "PolygonGeometry",
    "is_inside",
    "distance_to_edge",
    "polygon_area",
    "bounding_box",
    "PackingStats",
    "compute_stats",
    "Point",
    "Polygon",
]

__version__ = "0.1.0"
