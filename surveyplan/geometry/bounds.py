"""Mini README: Axis-aligned bounding boxes for survey regions.

Structure:
    * AxisAlignedBoundingBox - min/max corners with extent helpers.
    * calculate_aabb - compute the box enclosing a vertex array.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True, slots=True)
class AxisAlignedBoundingBox:
    """Region to survey, expressed by its minimum and maximum corners."""

    minimum: Tuple[float, float, float]
    maximum: Tuple[float, float, float]

    @property
    def width(self) -> float:
        """Extent along the world x axis."""

        return self.maximum[0] - self.minimum[0]

    @property
    def height(self) -> float:
        """Extent along the world y axis."""

        return self.maximum[1] - self.minimum[1]

    @property
    def center(self) -> Tuple[float, float]:
        """Horizontal centre of the box."""

        return (
            self.minimum[0] + self.width / 2.0,
            self.minimum[1] + self.height / 2.0,
        )


def calculate_aabb(vertices: np.ndarray) -> AxisAlignedBoundingBox:
    """Return the bounding box of an ``(N, 3)`` vertex array."""

    vertices = np.asarray(vertices, dtype=float)
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError("Vertices must be of shape (N, 3)")
    if vertices.shape[0] == 0:
        raise ValueError("Cannot compute bounds of an empty vertex set")
    lower = vertices.min(axis=0)
    upper = vertices.max(axis=0)
    return AxisAlignedBoundingBox(
        minimum=tuple(float(value) for value in lower),
        maximum=tuple(float(value) for value in upper),
    )
