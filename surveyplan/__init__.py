"""Mini README: Core package initializer for Surveyplan.

Surveyplan plans camera trajectories for aerial 3D-reconstruction surveys:
``route_planning`` builds serpentine coverage grids, ``tour_optimization``
shortens the flight order of any trajectory, and ``persistence`` reads proxy
meshes and trajectory files. Only the logger factory is re-exported here so
importing the package stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
