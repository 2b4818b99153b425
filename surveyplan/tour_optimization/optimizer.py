"""Mini README: Tour optimizer facade.

Structure:
    * tour_length - summed consecutive distance of an ordering.
    * nearest_neighbours - k-nearest candidate lists via a KD-tree.
    * optimize - shorten an ordering with a registered strategy.
    * shorten_trajectory - reorder a trajectory's waypoints.

``optimize`` is the stable entry point: positions and an initial order go in,
a permutation comes out whose open path length never exceeds the input's.
The concrete heuristic is looked up in the strategy registry so it can be
replaced without touching callers.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

import numpy as np
from scipy.spatial import cKDTree

from .base import TourStrategy
from .registry import REGISTRY
from ..geometry import Trajectory
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_NEIGHBOURS = 64


def tour_length(positions: np.ndarray, order: Sequence[int]) -> float:
    """Return the summed Euclidean distance between consecutive waypoints."""

    if len(order) < 2:
        return 0.0
    ordered = np.asarray(positions, dtype=float)[list(order)]
    return float(np.linalg.norm(np.diff(ordered, axis=0), axis=1).sum())


def nearest_neighbours(positions: np.ndarray, k: int) -> np.ndarray:
    """Return the ``k`` nearest other waypoints of each waypoint, closest first."""

    positions = np.asarray(positions, dtype=float)
    count = positions.shape[0]
    k = min(k, count - 1)
    if k < 1:
        return np.empty((count, 0), dtype=int)
    _, indices = cKDTree(positions).query(positions, k=k + 1)
    # Coincident points can push a waypoint out of its own first column.
    rows = [[int(j) for j in row if j != i][:k] for i, row in enumerate(indices)]
    return np.array(rows, dtype=int)


def _resolve_strategy(strategy: Union[str, TourStrategy], max_passes: int) -> TourStrategy:
    if isinstance(strategy, TourStrategy):
        return strategy
    return REGISTRY.create(strategy, max_passes=max_passes)


def optimize(
    positions: np.ndarray,
    order: Optional[Sequence[int]] = None,
    *,
    neighbours: int = DEFAULT_NEIGHBOURS,
    strategy: Union[str, TourStrategy] = "local-search",
    max_passes: int = 1000,
) -> List[int]:
    """Return a permutation of ``order`` with a path no longer than the input."""

    positions = np.asarray(positions, dtype=float)
    if positions.ndim != 2 or positions.shape[1] != 3:
        raise ValueError("Positions must be of shape (N, 3)")
    count = positions.shape[0]
    initial = list(range(count)) if order is None else [int(index) for index in order]
    if sorted(initial) != list(range(count)):
        raise ValueError("Order must be a permutation of 0..N-1")
    if count <= 1:
        return initial
    if not np.all(np.isfinite(positions)):
        raise ValueError("Positions must be finite")
    if neighbours < 1:
        raise ValueError("neighbours must be at least 1")

    solver = _resolve_strategy(strategy, max_passes)
    before = tour_length(positions, initial)
    LOGGER.info(
        "Optimizing tour of %s waypoints with '%s' (k=%s)...",
        count,
        solver.strategy_name,
        neighbours,
    )
    candidates = nearest_neighbours(positions, neighbours).tolist()
    points = [tuple(point) for point in positions.tolist()]
    result = solver.improve(points, list(initial), candidates)

    if sorted(result) != list(range(count)):
        raise RuntimeError(f"Strategy '{solver.strategy_name}' returned an invalid permutation")
    after = tour_length(positions, result)
    if after > before:
        LOGGER.warning(
            "Strategy '%s' lengthened the path (%.3f > %.3f); keeping the input order",
            solver.strategy_name,
            after,
            before,
        )
        return initial
    LOGGER.info("Tour length reduced from %.3f to %.3f", before, after)
    return result


def shorten_trajectory(trajectory: Trajectory, **options: object) -> Trajectory:
    """Return a reordered copy of ``trajectory`` with a shorter flight path."""

    order = optimize(trajectory.positions(), **options)
    return trajectory.reordered(order)
