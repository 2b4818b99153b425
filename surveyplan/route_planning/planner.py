"""Mini README: Coverage grid planning for nadir photogrammetry surveys.

Structure:
    * GridParameters - validated camera and overlap configuration.
    * GridLayout - footprint, step sizes and grid extent derived for a region.
    * derive_layout - closed-form computation of a ``GridLayout``.
    * turn_arc - generator of half-circle waypoints joining two columns.
    * CoverageGridPlanner - builds the serpentine trajectory.

The camera model assumes a 3:2 sensor with the focal length normalised by the
long side. Flight altitude keeps a 10% margin below the maximum stand-off
distance. Columns run along the y axis and alternate direction; consecutive
columns are joined by a half-circle turn sampled at the same density as the
scan rows.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from ..errors import ConfigurationError
from ..geometry import AxisAlignedBoundingBox, CameraPose, Trajectory, nadir_orientation
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ALTITUDE_MARGIN = 0.9
SENSOR_ASPECT = 2.0 / 3.0


@dataclass(frozen=True, slots=True)
class GridParameters:
    """Camera and overlap configuration for one planning run."""

    focal_length: float = 0.86
    max_distance: float = 80.0
    forward_overlap: float = 80.0
    side_overlap: float = 60.0

    def __post_init__(self) -> None:
        for name in ("focal_length", "max_distance", "forward_overlap", "side_overlap"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigurationError(f"{name} must be a finite number")
        if self.focal_length <= 0:
            raise ConfigurationError(f"Focal length must be positive, got {self.focal_length}")
        if self.max_distance <= 0:
            raise ConfigurationError(f"Maximum distance must be positive, got {self.max_distance}")
        for name in ("forward_overlap", "side_overlap"):
            value = getattr(self, name)
            if not 0.0 <= value < 100.0:
                raise ConfigurationError(
                    f"{name.replace('_', ' ').capitalize()} must be in [0, 100), got {value}"
                )


@dataclass(frozen=True, slots=True)
class GridLayout:
    """Quantities derived from the parameters and the region bounds."""

    altitude: float
    hfov: float
    vfov: float
    footprint_width: float
    footprint_height: float
    velocity: float
    spacing: float
    cols: int
    rows: int
    arc_samples: int
    center: Tuple[float, float]

    def column_x(self, column: int) -> float:
        return self.center[0] + self.spacing * (column - self.cols // 2)

    def row_y(self, column: int, row: int) -> float:
        """Return the y coordinate of ``row`` within ``column``."""

        direction = 1 if column % 2 == 0 else -1
        return self.center[1] + direction * self.velocity * (row - self.rows // 2)

    @property
    def waypoint_count(self) -> int:
        return self.cols * self.rows + (self.cols - 1) * self.arc_samples


def derive_layout(bounds: AxisAlignedBoundingBox, parameters: GridParameters) -> GridLayout:
    """Compute footprint, step sizes and grid extent for ``bounds``."""

    altitude = parameters.max_distance * ALTITUDE_MARGIN
    hfov = 2.0 * math.atan2(1.0, 2.0 * parameters.focal_length)
    vfov = 2.0 * math.atan2(SENSOR_ASPECT, 2.0 * parameters.focal_length)
    width = 2.0 * altitude * math.tan(hfov / 2.0)
    height = 2.0 * altitude * math.tan(vfov / 2.0)

    velocity = height * (1.0 - parameters.forward_overlap / 100.0)
    spacing = width * (1.0 - parameters.side_overlap / 100.0)
    if velocity <= 0 or spacing <= 0:
        raise ConfigurationError("Overlap leaves no positive step between waypoints")

    cols = math.ceil(bounds.width / spacing) + 1
    rows = math.ceil(bounds.height / velocity) + 2
    arc_samples = math.floor((math.pi * spacing / 2.0) / velocity)
    return GridLayout(
        altitude=altitude,
        hfov=hfov,
        vfov=vfov,
        footprint_width=width,
        footprint_height=height,
        velocity=velocity,
        spacing=spacing,
        cols=cols,
        rows=rows,
        arc_samples=arc_samples,
        center=bounds.center,
    )


def turn_arc(layout: GridLayout, column: int) -> Iterator[Tuple[float, float]]:
    """Yield the turn waypoints between ``column`` and ``column + 1``.

    The half circle starts on the column's axis at the level of the next
    column's first row and sweeps angles ``k * pi / n`` for ``k < n``; the
    sample at ``pi`` is the next column's first waypoint. With an odd row
    count the ``k = 0`` sample sits on the column's last row.
    """

    samples = layout.arc_samples
    if samples <= 0:
        return
    radius = layout.spacing / 2.0
    step = math.pi / samples
    direction = 1 if column % 2 == 0 else -1
    x = layout.column_x(column)
    base_y = layout.center[1] + direction * (layout.rows // 2) * layout.velocity
    for k in range(samples):
        angle = step * k
        yield (
            x + radius - radius * math.cos(angle),
            base_y + direction * radius * math.sin(angle),
        )


class CoverageGridPlanner:
    """Generate serpentine nadir surveys covering an axis-aligned region."""

    def __init__(self, parameters: GridParameters) -> None:
        self.parameters = parameters
        LOGGER.debug("Initialised CoverageGridPlanner with %s", parameters)

    def layout(self, bounds: AxisAlignedBoundingBox) -> GridLayout:
        return derive_layout(bounds, self.parameters)

    def plan(self, bounds: AxisAlignedBoundingBox) -> Trajectory:
        """Create a boustrophedon trajectory covering ``bounds``."""

        layout = self.layout(bounds)
        LOGGER.info(
            "Grid layout: altitude=%.2f velocity=%.3f spacing=%.3f cols=%s rows=%s arc=%s",
            layout.altitude,
            layout.velocity,
            layout.spacing,
            layout.cols,
            layout.rows,
            layout.arc_samples,
        )
        points: List[Tuple[float, float]] = []
        for column in range(layout.cols):
            x = layout.column_x(column)
            points.extend((x, layout.row_y(column, row)) for row in range(layout.rows))
            if column < layout.cols - 1:
                points.extend(turn_arc(layout, column))

        orientation = nadir_orientation()
        poses = [
            CameraPose(
                orientation=orientation,
                position=np.array([x, y, layout.altitude]),
                focal_length=self.parameters.focal_length,
            )
            for x, y in points
        ]
        LOGGER.debug("Generated %s waypoints", len(poses))
        return Trajectory(poses=poses, description="Coverage grid survey")
