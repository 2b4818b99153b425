"""Mini README: File collaborators for the planners.

Exposes the trajectory record store and the proxy mesh loader. Neither
planner imports this package; the CLI wires files to the core.
"""

from .mesh_loader import load_proxy_bounds, load_proxy_vertices
from .trajectory_store import load_trajectory, save_trajectory

__all__ = [
    "load_proxy_bounds",
    "load_proxy_vertices",
    "load_trajectory",
    "save_trajectory",
]
