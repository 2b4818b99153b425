"""Mini README: Route planning subsystem for survey trajectory design.

Exports the coverage grid planner and its parameter/layout types so scripts
and the CLI can derive a serpentine nadir survey from a region's bounds.
"""

from .planner import CoverageGridPlanner, GridLayout, GridParameters, derive_layout, turn_arc

__all__ = [
    "CoverageGridPlanner",
    "GridLayout",
    "GridParameters",
    "derive_layout",
    "turn_arc",
]
