"""Mini README: Tour optimization subsystem.

Re-exports the optimizer facade together with the strategy abstractions.
The package is divided into ``base`` for the strategy interface,
``registry`` for lookup and plugin discovery, ``strategies`` for the bundled
heuristics and ``optimizer`` for the functions callers use.
"""

from .base import TourStrategy
from .registry import REGISTRY, StrategyRegistry
from . import strategies  # noqa: F401  # ensure built-in strategies register on import
from .optimizer import nearest_neighbours, optimize, shorten_trajectory, tour_length

__all__ = [
    "REGISTRY",
    "StrategyRegistry",
    "TourStrategy",
    "nearest_neighbours",
    "optimize",
    "shorten_trajectory",
    "tour_length",
]
