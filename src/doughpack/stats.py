"""
Caller-side statistics for a packing: polygon area, circle count and how
much of the polygon the circles cover.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from .config import Circle, PackingResult
from .geometry import as_polygon, polygon_area
from .packer import MIN_VERTICES


@dataclass(frozen=True)
class PackingStats:
    area: float = 0.0
    circle_count: int = 0
    radius: float = 0.0
    efficiency: float = 0.0  # percent of polygon area covered

    @property
    def circle_area(self) -> float:
        return math.pi * self.radius * self.radius

    @property
    def used_area(self) -> float:
        return self.circle_area * self.circle_count


def compute_stats(
    polygon: Sequence,
    packing: Union[PackingResult, Iterable[Circle]],
    radius: Optional[float] = None,
) -> PackingStats:
    """
    Summarize a packing.

    `radius` defaults to the result's radius, or to the first circle's when
    a bare circle list is passed. Polygons with fewer than three vertices
    report all zeros.
    """
    vertices = as_polygon(polygon)
    if len(vertices) < MIN_VERTICES:
        return PackingStats()

    if isinstance(packing, PackingResult):
        circles = packing.circles
        if radius is None:
            radius = packing.radius
    else:
        circles = tuple(packing)
        if radius is None:
            radius = circles[0].radius if circles else 0.0

    area = polygon_area(vertices)
    used = math.pi * radius * radius * len(circles)
    return PackingStats(
        area=area,
        circle_count=len(circles),
        radius=radius,
        efficiency=(used / area) * 100 if area > 0 else 0.0,
    )
