"""Mini README: Proxy mesh loading.

Structure:
    * load_proxy_vertices - vertex coordinates of a PLY mesh.
    * load_proxy_bounds - bounding box of those vertices.

Only the vertex element matters to the grid planner; faces and any extra
vertex properties are ignored. ASCII and binary PLY files are both read
through ``plyfile``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from plyfile import PlyData, PlyParseError

from ..errors import MeshLoadError
from ..geometry import AxisAlignedBoundingBox, calculate_aabb
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def load_proxy_vertices(source: Union[str, Path]) -> np.ndarray:
    """Return the ``(N, 3)`` vertex positions stored in a PLY mesh."""

    source = Path(source)
    try:
        mesh = PlyData.read(str(source))
    except (OSError, ValueError, PlyParseError) as error:
        raise MeshLoadError(f"Could not load mesh {source}: {error}") from error

    try:
        vertex = mesh["vertex"]
    except KeyError as error:
        raise MeshLoadError(f"Mesh {source} has no vertex element") from error
    names = {prop.name for prop in vertex.properties}
    missing = {"x", "y", "z"} - names
    if missing:
        raise MeshLoadError(f"Mesh {source} vertices lack properties {sorted(missing)}")
    if vertex.count == 0:
        raise MeshLoadError(f"Mesh {source} has no vertices")

    vertices = np.column_stack([np.asarray(vertex[axis], dtype=float) for axis in "xyz"])
    if not np.all(np.isfinite(vertices)):
        raise MeshLoadError(f"Mesh {source} contains non-finite vertices")
    LOGGER.debug("Loaded %s vertices from %s", len(vertices), source)
    return vertices


def load_proxy_bounds(source: Union[str, Path]) -> AxisAlignedBoundingBox:
    """Return the bounding box of a proxy mesh."""

    bounds = calculate_aabb(load_proxy_vertices(source))
    LOGGER.info("Proxy mesh bounds: min=%s max=%s", bounds.minimum, bounds.maximum)
    return bounds
