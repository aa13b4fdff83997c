"""
Configuration and type definitions for lattice packing.
"""

import math
import numpy as np
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Optional, Sequence, Tuple

# Type aliases
Polygon = np.ndarray
Point = np.ndarray
Offset = Tuple[float, float]

DEFAULT_ANGLES: Tuple[float, ...] = (0.0, 15.0, 30.0, 45.0, 60.0)
DEFAULT_SPACING = 2.0


class BoundingBox(NamedTuple):
    """Axis-aligned bounds of a polygon's vertices."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    @property
    def diagonal(self) -> float:
        return math.sqrt(self.width * self.width + self.height * self.height)

    def expanded(self, margin: float) -> "BoundingBox":
        return BoundingBox(
            self.min_x - margin, self.min_y - margin,
            self.max_x + margin, self.max_y + margin,
        )


@dataclass(frozen=True)
class Circle:
    """
    A placed circle. `id` is "<angle>-<row>-<col>" for the lattice point that
    produced it. Rows use Python modulo for the half-pitch stagger, so odd
    negative rows sit at +pitch/2; the centres match a truncating-modulo
    layout but negative row labels can differ from one.
    """
    x: float
    y: float
    radius: float
    id: str

    @property
    def center(self) -> Point:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class PackingResult:
    """
    The best circle set found for one optimizer call.

    Circles are kept in generation order (row, then column) of the winning
    lattice configuration, not sorted spatially. `angle` and `offset` describe
    that configuration and are None when nothing fits.
    """
    circles: Tuple[Circle, ...] = ()
    radius: float = 0.0
    spacing: float = 0.0
    angle: Optional[float] = None
    offset: Optional[Offset] = None

    @property
    def count(self) -> int:
        return len(self.circles)

    def __len__(self) -> int:
        return len(self.circles)

    def __iter__(self) -> Iterator[Circle]:
        return iter(self.circles)

    def __bool__(self) -> bool:
        return bool(self.circles)

    def as_array(self) -> np.ndarray:
        """Centers as an (n, 2) array."""
        if not self.circles:
            return np.empty((0, 2))
        return np.array([[c.x, c.y] for c in self.circles])


@dataclass
class PackingConfig:
    """
    Configuration parameters for the lattice search.

    Basic parameters:
        spacing: Minimum gap between neighbouring circle surfaces

    Search grid:
        angles: Lattice rotations tried, in degrees
        offset_divisions: Phase samples per lattice axis. N gives offsets
            k*pitch/N along x and m*row_height/N along y, so the default of
            2 tries (0, 0), (0, h/2), (d/2, 0) and (d/2, h/2)

    The defaults reproduce the reference search grid.
    """
    # Basic parameters
    spacing: float = DEFAULT_SPACING

    # Search grid
    angles: Sequence[float] = field(default_factory=lambda: DEFAULT_ANGLES)
    offset_divisions: int = 2

    # Output
    verbose: bool = False


@dataclass
class SearchProgress:
    """Tracks the state of the rotation/offset sweep."""
    combinations_tried: int = 0
    total_combinations: int = 0
    best_count: int = 0
    best_angle: Optional[float] = None
    best_offset: Optional[Offset] = None

    @property
    def progress_ratio(self) -> float:
        """Fraction of the sweep done (0.0 = just started, 1.0 = done)."""
        return self.combinations_tried / self.total_combinations if self.total_combinations > 0 else 0

    def __str__(self) -> str:
        best = f" @ {self.best_angle:g} deg" if self.best_angle is not None else ""
        return (f"Tried: {self.combinations_tried}/{self.total_combinations} "
                f"({self.progress_ratio:.0%}) | Best: {self.best_count}{best}")
