"""
Hexagonal lattice generation.

The lattice is laid out around the centre of a polygon's bounding box and
rotated about that centre, so any rotation still covers the whole box.
"""

import math
import numpy as np
from typing import Iterator, List, NamedTuple, Tuple

from .config import BoundingBox, Offset


class LatticePoint(NamedTuple):
    row: int
    col: int
    x: float
    y: float


class HexLattice:
    """Staggered hexagonal lattice with pitch 2r + s covering a bounding box."""

    def __init__(self, bounds: BoundingBox, radius: float, spacing: float):
        self.bounds = bounds
        self.radius = radius
        self.spacing = spacing
        self.pitch = radius * 2 + spacing
        self.row_height = self.pitch * math.sqrt(3) / 2
        self.steps = math.ceil(bounds.diagonal / self.pitch) + 2

    def __len__(self) -> int:
        return (2 * self.steps + 1) ** 2

    def offsets(self, divisions: int) -> List[Offset]:
        """Phase offsets, x in the outer loop and y in the inner loop."""
        return [
            (k * self.pitch / divisions, m * self.row_height / divisions)
            for k in range(divisions)
            for m in range(divisions)
        ]

    def _rotation(self, angle: float) -> Tuple[float, float]:
        rad = angle * (math.pi / 180)
        return math.cos(rad), math.sin(rad)

    def iter_points(self, angle: float, offset_x: float = 0.0, offset_y: float = 0.0) -> Iterator[LatticePoint]:
        """Lazily yield lattice points row by row."""
        cos, sin = self._rotation(angle)
        cx, cy = self.bounds.center
        d, h = self.pitch, self.row_height

        for row in range(-self.steps, self.steps + 1):
            for col in range(-self.steps, self.steps + 1):
                hex_x = col * d + (row % 2) * (d / 2) + offset_x
                hex_y = row * h + offset_y
                yield LatticePoint(
                    row, col,
                    (hex_x * cos - hex_y * sin) + cx,
                    (hex_x * sin + hex_y * cos) + cy,
                )

    def points(self, angle: float, offset_x: float = 0.0, offset_y: float = 0.0) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        The same sequence as iter_points, as arrays.

        Returns:
            (rows, cols, xy) where xy has shape (n, 2), in row-major order.
        """
        cos, sin = self._rotation(angle)
        cx, cy = self.bounds.center
        d, h = self.pitch, self.row_height

        indices = np.arange(-self.steps, self.steps + 1)
        rows, cols = np.meshgrid(indices, indices, indexing='ij')
        rows, cols = rows.ravel(), cols.ravel()

        hex_x = cols * d + (rows % 2) * (d / 2) + offset_x
        hex_y = rows * h + offset_y
        xy = np.column_stack([
            (hex_x * cos - hex_y * sin) + cx,
            (hex_x * sin + hex_y * cos) + cy,
        ])
        return rows, cols, xy
