import math
import numpy as np
from dataclasses import replace
from typing import Iterator, List, Optional, Sequence

from .config import Circle, Offset, PackingConfig, PackingResult, SearchProgress
from .geometry import PolygonGeometry, as_polygon
from .lattice import HexLattice

MIN_VERTICES = 3


class CirclePacker:
    """
    Packs equal circles into a simple polygon by sweeping a hexagonal lattice
    over a fixed grid of rotations and phase offsets.

    This is a best-effort heuristic: the returned packing is the largest one
    found on the sampled grid, not a proven optimum.
    """

    def __init__(self, polygon: Sequence, radius: float, config: Optional[PackingConfig] = None):
        self.config = config or PackingConfig()
        self.radius = float(radius)
        self._validate()

        self.vertices = as_polygon(polygon)
        self.geometry: Optional[PolygonGeometry] = None
        if len(self.vertices) >= MIN_VERTICES:
            self.geometry = PolygonGeometry(self.vertices)

        self.progress = SearchProgress()

    def _validate(self) -> None:
        radius, spacing = self.radius, self.config.spacing
        if not math.isfinite(radius) or radius <= 0:
            raise ValueError(f"radius must be a positive number, got {radius!r}")
        if not math.isfinite(spacing) or spacing < 0:
            raise ValueError(f"spacing must be a non-negative number, got {spacing!r}")
        if len(self.config.angles) == 0:
            raise ValueError("at least one lattice angle is required")
        divisions = self.config.offset_divisions
        if not isinstance(divisions, int) or isinstance(divisions, bool) or divisions < 1:
            raise ValueError(f"offset_divisions must be an integer >= 1, got {divisions!r}")

    def _empty_result(self) -> PackingResult:
        return PackingResult(radius=self.radius, spacing=self.config.spacing)

    # =========================================================================
    # Lattice Evaluation
    # =========================================================================

    def _evaluate(self, lattice: HexLattice, angle: float, offset: Offset) -> List[Circle]:
        """Circles from one lattice configuration that fit inside the polygon."""
        rows, cols, points = lattice.points(angle, *offset)

        # Coarse filter against the bounding box grown by one radius
        box = self.geometry.bounds.expanded(self.radius)
        x, y = points[:, 0], points[:, 1]
        in_box = (x >= box.min_x) & (x <= box.max_x) & (y >= box.min_y) & (y <= box.max_y)
        candidates = np.flatnonzero(in_box)

        inside = self.geometry.contains_points(points[candidates])
        candidates = candidates[inside]

        clearance = self.geometry.distances_to_boundary_batch(points[candidates])
        accepted = candidates[clearance >= self.radius]

        return [
            Circle(float(points[i, 0]), float(points[i, 1]), self.radius,
                   f"{angle:g}-{rows[i]}-{cols[i]}")
            for i in accepted
        ]

    def _pack_lattice(self) -> PackingResult:
        lattice = HexLattice(self.geometry.bounds, self.radius, self.config.spacing)
        offsets = lattice.offsets(self.config.offset_divisions)
        self.progress = SearchProgress(total_combinations=len(self.config.angles) * len(offsets))

        if self.config.verbose:
            print(f"Lattice: pitch {lattice.pitch:.3f}, {len(lattice)} points x "
                  f"{self.progress.total_combinations} combinations")

        best: List[Circle] = []
        best_angle: Optional[float] = None
        best_offset: Optional[Offset] = None

        for angle in self.config.angles:
            for offset in offsets:
                circles = self._evaluate(lattice, angle, offset)
                self.progress.combinations_tried += 1

                # Strictly greater, so ties keep the first configuration found
                if len(circles) > len(best):
                    best, best_angle, best_offset = circles, angle, offset
                    self.progress.best_count = len(best)
                    self.progress.best_angle = angle
                    self.progress.best_offset = offset

                if self.config.verbose:
                    print(self.progress)

        if self.config.verbose:
            print(f"Done! {self.progress}")

        return PackingResult(
            circles=tuple(best),
            radius=self.radius,
            spacing=self.config.spacing,
            angle=best_angle,
            offset=best_offset,
        )

    # =========================================================================
    # Main Entry Points
    # =========================================================================

    def pack(self) -> PackingResult:
        """
        Run the full rotation/offset sweep.

        A polygon with fewer than three vertices, or one too small for a single
        circle, gives an empty result rather than an error.
        """
        if self.geometry is None:
            if self.config.verbose:
                print(f"Polygon has {len(self.vertices)} vertices, nothing to pack")
            return self._empty_result()
        return self._pack_lattice()

    def generate(self) -> Iterator[Circle]:
        """
        Yield the circles of the best configuration in generation order.

        The whole sweep runs before the first circle is yielded, since the
        winner is only known once every configuration has been tried.
        """
        yield from self.pack()


def optimize_packing(
    polygon: Sequence,
    radius: float,
    spacing: Optional[float] = None,
    config: Optional[PackingConfig] = None,
) -> PackingResult:
    """
    Pack circles of `radius` into `polygon` with at least `spacing` between them.

    Args:
        polygon: Vertex sequence, implicitly closed, either winding.
        radius: Circle radius, must be positive.
        spacing: Gap between circle surfaces. Overrides config.spacing when
            given; the default config uses 2.0.
        config: Search grid and output options.

    Returns:
        The largest PackingResult found on the search grid.

    Raises:
        ValueError: If radius or spacing is invalid.
    """
    config = config or PackingConfig()
    if spacing is not None:
        config = replace(config, spacing=spacing)
    return CirclePacker(polygon, radius, config).pack()
