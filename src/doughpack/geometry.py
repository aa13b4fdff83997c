"""
Geometry utilities for lattice packing.

Contains:
- is_inside, distance_to_edge, polygon_area, bounding_box: scalar primitives
- PolygonGeometry: precomputed edges and vectorized batch variants
"""

import math
import numpy as np
from typing import Sequence

from .config import BoundingBox, Point, Polygon


def as_polygon(polygon: Sequence) -> Polygon:
    """Coerce a vertex sequence to an (n, 2) float array."""
    vertices = np.asarray(polygon, dtype=float)
    if vertices.size == 0:
        return vertices.reshape(0, 2)
    if vertices.ndim != 2 or vertices.shape[1] != 2:
        raise ValueError(f"expected a sequence of (x, y) vertices, got shape {vertices.shape}")
    return vertices


def is_inside(point: Point, polygon: Sequence) -> bool:
    """
    Ray-casting parity test.

    Points exactly on an edge or vertex get a deterministic but unspecified
    answer.
    """
    px, py = float(point[0]), float(point[1])
    vertices = as_polygon(polygon).tolist()
    inside = False
    j = len(vertices) - 1
    for i in range(len(vertices)):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if ((yi > py) != (yj > py)) and \
           (px < (xj - xi) * (py - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside


def _segment_distance(px: float, py: float, vx: float, vy: float, wx: float, wy: float) -> float:
    length_sq = (wx - vx) ** 2 + (wy - vy) ** 2
    if length_sq == 0:
        return math.sqrt((px - vx) ** 2 + (py - vy) ** 2)
    t = ((px - vx) * (wx - vx) + (py - vy) * (wy - vy)) / length_sq
    t = max(0.0, min(1.0, t))
    proj_x = vx + t * (wx - vx)
    proj_y = vy + t * (wy - vy)
    return math.sqrt((px - proj_x) ** 2 + (py - proj_y) ** 2)


def distance_to_edge(point: Point, polygon: Sequence) -> float:
    """Exact distance from a point to the nearest polygon edge."""
    px, py = float(point[0]), float(point[1])
    vertices = as_polygon(polygon).tolist()
    n = len(vertices)
    min_distance = float('inf')
    for i in range(n):
        vx, vy = vertices[i]
        wx, wy = vertices[(i + 1) % n]
        min_distance = min(min_distance, _segment_distance(px, py, vx, vy, wx, wy))
    return min_distance


def polygon_area(polygon: Sequence) -> float:
    """Shoelace area. Always non-negative, independent of winding."""
    vertices = as_polygon(polygon)
    if len(vertices) == 0:
        return 0.0
    x, y = vertices[:, 0], vertices[:, 1]
    x_next, y_next = np.roll(x, -1), np.roll(y, -1)
    return float(abs(np.sum(x * y_next - x_next * y)) / 2)


def bounding_box(polygon: Sequence) -> BoundingBox:
    vertices = as_polygon(polygon)
    if len(vertices) == 0:
        raise ValueError("bounding box of an empty polygon is undefined")
    min_x, min_y = np.min(vertices, axis=0)
    max_x, max_y = np.max(vertices, axis=0)
    return BoundingBox(float(min_x), float(min_y), float(max_x), float(max_y))


class PolygonGeometry:
    """Handles geometric calculations for a polygon boundary."""

    def __init__(self, polygon: Sequence):
        self.vertices = as_polygon(polygon)
        if len(self.vertices) == 0:
            raise ValueError("polygon has no vertices")
        self.bounds = bounding_box(self.vertices)
        self.area = polygon_area(self.vertices)
        self._precompute_edges()

    def _precompute_edges(self) -> None:
        """Precompute edge data for vectorized distance calculations."""
        self.edge_starts = self.vertices
        self.edge_ends = np.roll(self.vertices, -1, axis=0)
        self.edge_vecs = self.edge_ends - self.edge_starts
        self.edge_lengths_sq = self.edge_vecs[:, 0] ** 2 + self.edge_vecs[:, 1] ** 2

    def contains_point(self, point: Point) -> bool:
        return is_inside(point, self.vertices)

    def contains_points(self, points: np.ndarray) -> np.ndarray:
        """Vectorized even-odd rule for multiple points."""
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        x, y = points[:, 0], points[:, 1]
        inside = np.zeros(len(points), dtype=bool)

        n = len(self.vertices)
        for i in range(n):
            xi, yi = self.vertices[i]
            xj, yj = self.vertices[i - 1]
            crosses_edge = (yi > y) != (yj > y)
            # Horizontal edges never cross, so their inf/nan intercepts are masked out
            with np.errstate(divide='ignore', invalid='ignore'):
                x_intercept = (xj - xi) * (y - yi) / (yj - yi) + xi
            inside ^= crosses_edge & (x < x_intercept)

        return inside

    def distance_to_boundary(self, point: Point) -> float:
        return distance_to_edge(point, self.vertices)

    def distances_to_boundary_batch(self, points: np.ndarray) -> np.ndarray:
        """Vectorized distance calculation for multiple points."""
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        if len(points) == 0:
            return np.array([])

        px = points[:, 0][:, np.newaxis]
        py = points[:, 1][:, np.newaxis]
        vx, vy = self.edge_starts[:, 0], self.edge_starts[:, 1]
        ex, ey = self.edge_vecs[:, 0], self.edge_vecs[:, 1]

        dots = (px - vx) * ex + (py - vy) * ey
        with np.errstate(divide='ignore', invalid='ignore'):
            t = np.clip(dots / self.edge_lengths_sq, 0, 1)
            t = np.where(self.edge_lengths_sq == 0, 0, t)

        proj_x = vx + t * ex
        proj_y = vy + t * ey
        distances = np.sqrt((px - proj_x) ** 2 + (py - proj_y) ** 2)

        return np.min(distances, axis=1)
