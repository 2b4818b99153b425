"""Mini README: Combined 2-opt and Or-opt local search.

Structure:
    * LocalSearchStrategy - alternates reversal and relocation passes.

Each pass first applies every improving 2-opt reversal found through the
candidate lists, then relocates segments of one to ``max_segment`` waypoints
(optionally reversed). Search stops after a pass where neither move type
changed the path or once ``max_passes`` is spent.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from .moves import or_opt_pass, two_opt_pass
from ..base import Point, TourStrategy
from ..registry import REGISTRY
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class LocalSearchStrategy(TourStrategy):
    """Default strategy used by the shorten command."""

    strategy_name = "local-search"

    def __init__(self, *, max_passes: int = 1000, epsilon: float = 1e-9, max_segment: int = 3) -> None:
        super().__init__(max_passes=max_passes, epsilon=epsilon)
        if max_segment < 1:
            raise ValueError("max_segment must be at least 1")
        self.max_segment = max_segment

    def improve(
        self,
        points: Sequence[Point],
        order: List[int],
        candidates: Sequence[Sequence[int]],
    ) -> List[int]:
        tour = list(order)
        for iteration in range(1, self.max_passes + 1):
            reversed_any = two_opt_pass(points, tour, candidates, self.epsilon)
            relocated_any = or_opt_pass(points, tour, candidates, self.epsilon, self.max_segment)
            if not (reversed_any or relocated_any):
                LOGGER.debug("Local search converged after %s passes", iteration)
                break
        else:
            LOGGER.info("Local search stopped at the pass budget of %s", self.max_passes)
        return tour

    def metadata(self) -> Dict[str, str]:
        details = super().metadata()
        details["max_segment"] = str(self.max_segment)
        return details


REGISTRY.register(LocalSearchStrategy)
