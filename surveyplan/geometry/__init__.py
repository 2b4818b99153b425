"""Mini README: Geometry primitives shared by the planners.

Exports camera poses, trajectories and bounding boxes. Both the grid planner
and the tour optimizer exchange data exclusively through these types.
"""

from .bounds import AxisAlignedBoundingBox, calculate_aabb
from .pose import NADIR_ORIENTATION, CameraPose, Trajectory, nadir_orientation

__all__ = [
    "AxisAlignedBoundingBox",
    "CameraPose",
    "NADIR_ORIENTATION",
    "Trajectory",
    "calculate_aabb",
    "nadir_orientation",
]
