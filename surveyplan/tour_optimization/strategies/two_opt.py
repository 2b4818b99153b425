"""Mini README: Neighbour-list 2-opt strategy.

Structure:
    * TwoOptStrategy - repeats 2-opt passes until none improves the path.
"""

from __future__ import annotations

from typing import List, Sequence

from .moves import two_opt_pass
from ..base import Point, TourStrategy
from ..registry import REGISTRY
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class TwoOptStrategy(TourStrategy):
    """Local search using segment reversals only."""

    strategy_name = "two-opt"

    def improve(
        self,
        points: Sequence[Point],
        order: List[int],
        candidates: Sequence[Sequence[int]],
    ) -> List[int]:
        tour = list(order)
        for iteration in range(1, self.max_passes + 1):
            if not two_opt_pass(points, tour, candidates, self.epsilon):
                LOGGER.debug("2-opt converged after %s passes", iteration)
                break
        else:
            LOGGER.info("2-opt stopped at the pass budget of %s", self.max_passes)
        return tour


REGISTRY.register(TwoOptStrategy)
