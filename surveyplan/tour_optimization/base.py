"""Mini README: Abstract base class for tour shortening strategies.

Structure:
    * TourStrategy - interface every path-shortening heuristic implements.

A strategy receives waypoint coordinates, a starting order and per-waypoint
candidate lists, and returns a permutation that is never longer than the one
it was given. Callers depend only on this contract, so heuristics can be
swapped through the registry without touching the CLI or the optimizer facade.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

Point = Tuple[float, float, float]


class TourStrategy(ABC):
    """Base interface for monotonic path-shortening heuristics."""

    strategy_name: str = "generic"

    def __init__(self, *, max_passes: int = 1000, epsilon: float = 1e-9) -> None:
        if max_passes < 1:
            raise ValueError("max_passes must be at least 1")
        self.max_passes = max_passes
        self.epsilon = epsilon
        LOGGER.debug(
            "Initialising %s strategy with max_passes=%s", self.strategy_name, max_passes
        )

    @abstractmethod
    def improve(
        self,
        points: Sequence[Point],
        order: List[int],
        candidates: Sequence[Sequence[int]],
    ) -> List[int]:
        """Return a permutation of ``order`` whose open path is not longer."""

    def metadata(self) -> Dict[str, str]:
        return {
            "strategy": self.strategy_name,
            "max_passes": str(self.max_passes),
        }
